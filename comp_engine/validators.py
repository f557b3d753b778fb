"""
Input Validation for the Commission Statement Engine

Checks the structure of a raw statement payload before it is parsed.
Raises ValueError with clear messages for any structural problem.

Numeric values are not judged here: a non-positive quota, negative floors or
overlapping tiers all resolve to defined results inside the calculators.
Infinite and NaN values are rejected as non-numeric.
"""

import math

from .models import parse_close_date

PLAN_TYPES = ['tiered', 'flat', 'sdr']


def _is_number(value) -> bool:
    if isinstance(value, bool):
        return False
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return False
    # json.loads turns 1e400 into inf and accepts NaN
    return math.isfinite(number)


class InputValidator:
    """Validates a statement payload according to its expected shape."""

    def validate(self, data: dict) -> None:
        """
        Run all validations. Raises ValueError if any check fails.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Statement payload must be an object, got: {type(data).__name__}")

        self._validate_statement(data.get("statement"))
        self._validate_tiers(data.get("tiers"))
        self._validate_deals(data.get("deals"))

    def _validate_statement(self, statement) -> None:
        """Validate statement-level fields."""
        if not isinstance(statement, dict):
            raise ValueError("statement section is required")

        if statement.get("quota") is None:
            raise ValueError("quota is required")

        for key in (
            "quota", "bookings", "adjustments", "base_rate_percent", "opportunity_count", "per_opportunity_rate"
        ):
            value = statement.get(key)
            if value is not None and not _is_number(value):
                raise ValueError(f"{key} must be numeric, got: {value!r}")

        plan_type = statement.get("plan_type") or "tiered"
        if plan_type not in PLAN_TYPES:
            raise ValueError(f"Invalid plan_type: {plan_type}. Must be one of {PLAN_TYPES}")

    def _validate_tiers(self, tiers) -> None:
        """Validate tier entries are objects with numeric bounds."""
        if tiers is None:
            return
        if not isinstance(tiers, list):
            raise ValueError("tiers must be a list")

        for i, tier in enumerate(tiers):
            if not isinstance(tier, dict):
                raise ValueError(f"Tier {i} must be an object, got: {tier!r}")
            for key in ("floor_percent", "ceiling_percent", "rate_percent"):
                value = tier.get(key)
                if value is not None and not _is_number(value):
                    raise ValueError(f"Tier {i} {key} must be numeric, got: {value!r}")

    def _validate_deals(self, deals) -> None:
        """Validate deal entries carry an id and a parseable close date."""
        if deals is None:
            return
        if not isinstance(deals, list):
            raise ValueError("deals must be a list")

        for i, deal in enumerate(deals):
            if not isinstance(deal, dict):
                raise ValueError(f"Deal {i} must be an object, got: {deal!r}")
            if deal.get("id") in (None, ""):
                raise ValueError(f"Deal {i} is missing id")

            amount = deal.get("amount")
            if amount is not None and not _is_number(amount):
                raise ValueError(f"Deal {deal['id']} amount must be numeric, got: {amount!r}")

            close_date = deal.get("close_date")
            if not close_date:
                raise ValueError(f"Deal {deal['id']} is missing close_date")
            try:
                parse_close_date(close_date)
            except ValueError:
                raise ValueError(f"Deal {deal['id']} has invalid close_date: {close_date!r}")

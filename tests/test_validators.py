"""
Unit Tests for Input Validator

Only payload structure is checked; numeric oddities pass through.
"""

import pytest

from comp_engine.validators import InputValidator


@pytest.fixture
def validator():
    return InputValidator()


def _payload(**overrides):
    data = {
        "statement": {"quota": 100000},
        "tiers": [{"name": "Base", "floor_percent": 0, "rate_percent": 10}],
        "deals": [{"id": "006A", "amount": 1000, "close_date": "2026-01-01"}],
    }
    data.update(overrides)
    return data


class TestStructuralChecks:
    """Payload shape problems raise ValueError."""

    def test_valid_payload(self, validator):
        validator.validate(_payload())

    def test_tiers_and_deals_optional(self, validator):
        validator.validate({"statement": {"quota": 100000}})

    def test_payload_must_be_object(self, validator):
        with pytest.raises(ValueError, match="must be an object"):
            validator.validate([])

    def test_non_numeric_bookings(self, validator):
        with pytest.raises(ValueError, match="bookings must be numeric"):
            validator.validate(_payload(statement={"quota": 1, "bookings": "many"}))

    def test_boolean_is_not_numeric(self, validator):
        with pytest.raises(ValueError, match="quota must be numeric"):
            validator.validate(_payload(statement={"quota": True}))

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan"), "Infinity", 10 ** 400])
    def test_non_finite_quota(self, validator, value):
        with pytest.raises(ValueError, match="quota must be numeric"):
            validator.validate(_payload(statement={"quota": value}))

    def test_non_finite_deal_amount(self, validator):
        with pytest.raises(ValueError, match="amount must be numeric"):
            validator.validate(_payload(deals=[{"id": "006A", "amount": float("inf"), "close_date": "2026-01-01"}]))

    def test_unknown_plan_type(self, validator):
        with pytest.raises(ValueError, match="Invalid plan_type"):
            validator.validate(_payload(statement={"quota": 1, "plan_type": "spiff"}))

    def test_tiers_must_be_list(self, validator):
        with pytest.raises(ValueError, match="tiers must be a list"):
            validator.validate(_payload(tiers={"name": "Base"}))

    def test_tier_rate_must_be_numeric(self, validator):
        with pytest.raises(ValueError, match="Tier 0 rate_percent must be numeric"):
            validator.validate(_payload(tiers=[{"name": "Base", "rate_percent": "ten"}]))

    def test_deals_must_be_list(self, validator):
        with pytest.raises(ValueError, match="deals must be a list"):
            validator.validate(_payload(deals="006A"))

    def test_deal_requires_id(self, validator):
        with pytest.raises(ValueError, match="Deal 0 is missing id"):
            validator.validate(_payload(deals=[{"amount": 1, "close_date": "2026-01-01"}]))

    def test_deal_requires_close_date(self, validator):
        with pytest.raises(ValueError, match="missing close_date"):
            validator.validate(_payload(deals=[{"id": "006A", "amount": 1}]))

    def test_deal_close_date_must_parse(self, validator):
        with pytest.raises(ValueError, match="invalid close_date"):
            validator.validate(_payload(deals=[{"id": "006A", "amount": 1, "close_date": "last tuesday"}]))


class TestNumericValuesPassThrough:
    """Degenerate numbers are resolved by the calculators, not rejected."""

    def test_negative_quota(self, validator):
        validator.validate(_payload(statement={"quota": -100}))

    def test_overlapping_and_negative_tiers(self, validator):
        validator.validate(
            _payload(
                tiers=[
                    {"name": "A", "floor_percent": -10, "ceiling_percent": 120, "rate_percent": 10},
                    {"name": "B", "floor_percent": 100, "rate_percent": -5},
                ]
            )
        )

    @pytest.mark.parametrize("deal_id", [0, "0"])
    def test_zero_deal_id_is_present(self, validator, deal_id):
        validator.validate(_payload(deals=[{"id": deal_id, "amount": 1, "close_date": "2026-01-01"}]))

    def test_empty_deal_id_is_missing(self, validator):
        with pytest.raises(ValueError, match="Deal 0 is missing id"):
            validator.validate(_payload(deals=[{"id": "", "amount": 1, "close_date": "2026-01-01"}]))

    def test_missing_deal_amount(self, validator):
        validator.validate(_payload(deals=[{"id": "006A", "close_date": "2026-01-01"}]))

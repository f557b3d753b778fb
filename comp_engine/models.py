"""
Domain Models for the Commission Statement Engine

These dataclasses provide type-safe representations of all business entities.
Monetary values and percentages are plain floats; an unbounded tier ceiling is
None at the dict boundary and math.inf inside the calculators.
"""

import math
from dataclasses import dataclass, field
from datetime import date, datetime

# =============================================================================
# INPUT MODELS
# =============================================================================


def _to_float(value, default: float = 0.0) -> float:
    """Coerce an optional numeric field, falling back to the default when missing."""
    if value is None:
        return default
    return float(value)


def _fmt_bound(value: float) -> str:
    # 100.0 -> "100", 1000000.0 -> "1000000", 33.3333333 -> "33.3333333"
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass(frozen=True)
class Tier:
    """A single tier in an accelerator commission schedule."""

    name: str
    floor_percent: float = 0.0
    ceiling_percent: float | None = None  # None = uncapped
    rate_percent: float = 0.0

    @property
    def floor(self) -> float:
        return self.floor_percent

    @property
    def ceiling(self) -> float:
        """Ceiling as a comparable number (infinite when uncapped)."""
        return math.inf if self.ceiling_percent is None else self.ceiling_percent

    @property
    def rate(self) -> float:
        """Commission rate as a fraction (10 -> 0.10)."""
        return self.rate_percent / 100

    @property
    def is_uncapped(self) -> bool:
        return self.ceiling_percent is None

    @property
    def label(self) -> str:
        """Tier name, or a generated range label when the tier is unnamed."""
        if self.name:
            return self.name
        upper = "Uncapped" if self.is_uncapped else f"{_fmt_bound(self.ceiling_percent)}%"
        return f"{_fmt_bound(self.floor_percent)}% - {upper}"

    @classmethod
    def from_dict(cls, data: dict) -> "Tier":
        ceiling = data.get("ceiling_percent")
        return cls(
            name=data.get("name") or "",
            floor_percent=_to_float(data.get("floor_percent")),
            # A zero ceiling has always meant "no ceiling" upstream
            ceiling_percent=float(ceiling) if ceiling else None,
            rate_percent=_to_float(data.get("rate_percent")),
        )


@dataclass(frozen=True)
class Deal:
    """A closed deal credited to the rep for the statement period."""

    id: str
    name: str
    amount: float
    close_date: date

    @classmethod
    def from_dict(cls, data: dict) -> "Deal":
        return cls(
            id=str(data["id"]),
            name=data.get("name") or "",
            amount=_to_float(data.get("amount")),
            close_date=parse_close_date(data["close_date"]),
        )


def parse_close_date(value) -> date:
    """Parse an ISO close date. Datetime strings are truncated to the date part."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


@dataclass
class StatementInput:
    """Complete input for one rep's commission statement."""

    quota: float
    tiers: list[Tier] = field(default_factory=list)
    deals: list[Deal] = field(default_factory=list)
    bookings: float | None = None  # None = sum of deal amounts
    adjustments: float = 0.0
    rep_name: str = ""
    period: str = ""
    plan_type: str = "tiered"  # 'tiered', 'flat' or 'sdr'
    base_rate_percent: float = 0.0
    opportunity_count: int = 0
    per_opportunity_rate: float = 0.0

    @property
    def total_bookings(self) -> float:
        if self.bookings is not None:
            return self.bookings
        return sum(deal.amount for deal in self.deals)

    @classmethod
    def from_dict(cls, data: dict) -> "StatementInput":
        statement = data["statement"]
        bookings = statement.get("bookings")
        return cls(
            quota=float(statement["quota"]),
            tiers=[Tier.from_dict(t) for t in data.get("tiers") or []],
            deals=[Deal.from_dict(d) for d in data.get("deals") or []],
            bookings=float(bookings) if bookings is not None else None,
            adjustments=_to_float(statement.get("adjustments")),
            rep_name=statement.get("rep_name") or "",
            period=statement.get("period") or "",
            plan_type=statement.get("plan_type") or "tiered",
            base_rate_percent=_to_float(statement.get("base_rate_percent")),
            opportunity_count=int(float(statement.get("opportunity_count") or 0)),
            per_opportunity_rate=_to_float(statement.get("per_opportunity_rate")),
        )


# =============================================================================
# OUTPUT / RESULT MODELS
# =============================================================================


@dataclass
class TierBreakdownEntry:
    """Bookings and commission earned inside a single tier."""

    tier_name: str
    bookings_in_tier: float
    rate_applied: float
    commission_amount: float


@dataclass
class CommissionCalculation:
    """Results of the aggregate commission calculation."""

    gross_commission: float = 0.0
    tier_breakdown: list[TierBreakdownEntry] = field(default_factory=list)
    attainment_percent: float = 0.0


@dataclass
class DealCommissionRecord:
    """Commission attributed to one deal at the running attainment when it closed."""

    deal_id: str
    deal_name: str
    deal_amount: float
    commission_rate: float
    commission_amount: float
    tier_applied: str
    attainment_at_deal: float
    running_bookings: float


@dataclass
class StatementSummary:
    """Gross, adjustments and net commission for the statement."""

    gross_commission: float = 0.0
    adjustments: float = 0.0
    net_commission: float = 0.0


@dataclass
class ProcessingContext:
    """
    Holds all intermediate state during statement processing.
    This is the "bag" that flows through the pipeline.
    """

    # Input (immutable during processing)
    statement: StatementInput

    # Step results (populated as we go)
    commission: CommissionCalculation = field(default_factory=CommissionCalculation)
    deal_commissions: list[DealCommissionRecord] = field(default_factory=list)
    summary: StatementSummary = field(default_factory=StatementSummary)


@dataclass
class StatementResult:
    """Final output of statement processing."""

    statement_summary: dict
    calculations: dict
    tier_breakdown: list
    deal_commissions: list

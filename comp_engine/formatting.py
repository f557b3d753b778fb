"""
Display Formatting

Currency and percent strings for statement output. Display options are passed
in explicitly through FormatConfig rather than read from locale state.
"""

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal


@dataclass(frozen=True)
class FormatConfig:
    """Display options for currency and percent strings."""

    currency_symbol: str = "$"
    percent_decimals: int = 1


DEFAULT_FORMAT = FormatConfig()


def to_money(value: float) -> float:
    """Convert to float with 2 decimal places."""
    return round(float(value), 2)


def _whole_units(amount: float) -> Decimal:
    """Round to whole currency units, halves away from zero."""
    return Decimal(str(amount)).to_integral_value(rounding=ROUND_HALF_UP)


def format_currency(amount: float, config: FormatConfig | None = None) -> str:
    """Format as whole-dollar currency: 1234.5 -> '$1,235', -80 -> '-$80'."""
    config = config or DEFAULT_FORMAT
    if not math.isfinite(amount):
        sign = "-" if amount < 0 else ""
        return f"{sign}{config.currency_symbol}{abs(amount)}"
    whole = _whole_units(amount)
    sign = "-" if whole < 0 else ""
    return f"{sign}{config.currency_symbol}{abs(whole):,f}"


def format_percent(value: float, decimals: int | None = None, config: FormatConfig | None = None) -> str:
    """Format a percentage value (already x100): 112.5 -> '112.5%'."""
    config = config or DEFAULT_FORMAT
    if decimals is None:
        decimals = config.percent_decimals
    return f"{value:.{decimals}f}%"

"""
Simple Commission Calculators

Flat-rate plans (no tiers) and SDR plans paid per sourced opportunity.
"""


def calculate_simple_commission(bookings: float, rate_percent: float) -> float:
    """Calculate percentage-based commission with no tiers."""
    return bookings * (rate_percent / 100)


def calculate_sdr_commission(opportunity_count: int, per_opportunity_rate: float) -> float:
    """Calculate SDR commission based on opportunity count."""
    return opportunity_count * per_opportunity_rate


class SimpleCommissionCalculator:
    """Calculates commission for plans without an accelerator schedule."""

    def flat(self, bookings: float, rate_percent: float) -> float:
        return calculate_simple_commission(bookings, rate_percent)

    def sdr(self, opportunity_count: int, per_opportunity_rate: float) -> float:
        return calculate_sdr_commission(opportunity_count, per_opportunity_rate)

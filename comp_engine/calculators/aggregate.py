"""
Aggregate Commission Calculator

Computes gross commission and the per-tier breakdown from a bookings total.
"""

import logging
import math

from ..models import CommissionCalculation, Tier, TierBreakdownEntry
from .tiers import normalize

logger = logging.getLogger(__name__)


class AggregateCommissionCalculator:
    """Calculates tiered (accelerator) commission on total bookings."""

    def compute(self, bookings: float, quota: float, tiers: list[Tier]) -> CommissionCalculation:
        """
        Calculate commission with tiered rates.

        Example tiers:
        - 0-100% attainment: 10% base rate
        - 100-125% attainment: 15% accelerated rate
        - 125%+ attainment: 20% super accelerator

        Each tier earns its rate on the slice of bookings between its floor and
        ceiling amounts (percent of quota). Slices are computed independently,
        so overlapping tiers count the same bookings more than once.
        """
        if quota <= 0:
            return CommissionCalculation(gross_commission=0.0, tier_breakdown=[], attainment_percent=0.0)

        attainment = bookings / quota
        total_commission = 0.0
        breakdown: list[TierBreakdownEntry] = []

        for tier in normalize(tiers):
            floor_amount = (tier.floor_percent / 100) * quota
            if tier.is_uncapped:
                ceiling_amount = math.inf
            else:
                ceiling_amount = (tier.ceiling_percent / 100) * quota

            bookings_above_floor = max(bookings - floor_amount, 0.0)
            tier_range = ceiling_amount - floor_amount
            bookings_in_tier = min(bookings_above_floor, tier_range)

            if bookings_in_tier > 0:
                tier_commission = bookings_in_tier * tier.rate
                total_commission += tier_commission
                breakdown.append(
                    TierBreakdownEntry(
                        tier_name=tier.label,
                        bookings_in_tier=bookings_in_tier,
                        rate_applied=tier.rate,
                        commission_amount=tier_commission,
                    )
                )

        logger.debug(
            "Aggregate commission %.2f over %d tier(s) at %.2f%% attainment",
            total_commission,
            len(breakdown),
            attainment * 100,
        )

        return CommissionCalculation(
            gross_commission=total_commission,
            tier_breakdown=breakdown,
            attainment_percent=attainment * 100,
        )

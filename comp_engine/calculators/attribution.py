"""
Deal Attribution Calculator

Assigns a commission rate to each closed deal from the running attainment at
the moment it closed.
"""

import logging

from ..models import Deal, DealCommissionRecord, Tier
from .tiers import find_tier_for_attainment, normalize

logger = logging.getLogger(__name__)

BASE_TIER_NAME = "Base"


class DealAttributionCalculator:
    """Calculates deal-by-deal commission with running attainment."""

    def attribute(self, deals: list[Deal], quota: float, tiers: list[Tier]) -> list[DealCommissionRecord]:
        """
        Calculate commission for each deal, in close date order.

        Order matters: a deal's rate depends on the bookings closed before it.
        Deals sharing a close date keep their input order.
        """
        if quota <= 0 or not deals:
            return []

        sorted_deals = sorted(deals, key=lambda d: d.close_date)
        schedule = normalize(tiers)

        running_bookings = 0.0
        records: list[DealCommissionRecord] = []

        for deal in sorted_deals:
            running_bookings += deal.amount
            attainment_at_deal = (running_bookings / quota) * 100

            tier = find_tier_for_attainment(attainment_at_deal, schedule)
            commission_rate = tier.rate if tier else 0.0

            records.append(
                DealCommissionRecord(
                    deal_id=deal.id,
                    deal_name=deal.name,
                    deal_amount=deal.amount,
                    commission_rate=commission_rate,
                    commission_amount=deal.amount * commission_rate,
                    tier_applied=(tier.name if tier else "") or BASE_TIER_NAME,
                    attainment_at_deal=attainment_at_deal,
                    running_bookings=running_bookings,
                )
            )

        logger.debug("Attributed %d deal(s), final running bookings %.2f", len(records), running_bookings)
        return records

"""
Tier Schedule

Orders tier definitions and resolves which tier applies at a given attainment.
"""

from typing import Iterable

from ..models import Tier


def normalize(tiers: Iterable[Tier | dict]) -> tuple[Tier, ...]:
    """
    Return the tiers sorted ascending by floor percent.

    The sort is stable (tiers sharing a floor keep their input order) and runs
    over a private copy, so the caller's collection is left untouched. Raw
    dicts are accepted and go through Tier.from_dict for defaults.
    """
    schedule = [t if isinstance(t, Tier) else Tier.from_dict(t) for t in tiers]
    return tuple(sorted(schedule, key=lambda t: t.floor))


def find_tier_for_attainment(attainment_percent: float, schedule: Iterable[Tier]) -> Tier | None:
    """
    Find the tier that applies for a given attainment percentage.

    Scans in ascending-floor order. The first tier whose [floor, ceiling)
    range contains the attainment wins outright. Otherwise the last tier whose
    floor has been reached is kept, which is the top tier once attainment is
    past every finite ceiling. Returns None when no floor has been reached.
    """
    applicable = None

    for tier in schedule:
        if tier.floor <= attainment_percent < tier.ceiling:
            applicable = tier
            break

        # Past this tier's ceiling: still the best match unless a higher tier fits
        if tier.floor <= attainment_percent:
            applicable = tier

    return applicable

"""
Calculators Package

Provides all calculation components for statement processing.
"""

from .aggregate import AggregateCommissionCalculator
from .attribution import BASE_TIER_NAME, DealAttributionCalculator
from .simple import SimpleCommissionCalculator, calculate_sdr_commission, calculate_simple_commission
from .tiers import find_tier_for_attainment, normalize

__all__ = [
    "AggregateCommissionCalculator",
    "DealAttributionCalculator",
    "SimpleCommissionCalculator",
    "BASE_TIER_NAME",
    "calculate_simple_commission",
    "calculate_sdr_commission",
    "find_tier_for_attainment",
    "normalize",
]

"""Tiered (slab) fee calculation"""

from collections.abc import Iterable

from ..data.models import PricingTier
from ..errors import InvalidValueError


def sort_tiers(tiers: Iterable[PricingTier]) -> list[PricingTier]:
    """Tiers ascending by from_units"""
    return sorted(tiers, key=lambda t: t.from_units)


def calculate_slab_fee(units: float, tiers: Iterable[PricingTier]) -> float:
    """
    Progressive fee for ``units`` across pricing tiers

    Each tier charges its own rate for the units falling inside its range;
    an unbounded tier absorbs everything above its start. Tiers are expected
    to have passed slab validation; they are sorted here regardless.

    Example: tiers [0-100 @ 100], [100-None @ 75] and 150 units give
    100 * 100 + 50 * 75 = 13750.

    Args:
        units: Unit count (>= 0)
        tiers: Pricing tiers of the module

    Returns:
        Fee amount, 0.0 for an empty tier list
    """
    if units < 0:
        raise InvalidValueError(
            f"Units must be >= 0, got {units}", field="units", value=units
        )

    ordered = sort_tiers(tiers)
    if not ordered:
        return 0.0

    total_fee = 0.0
    for tier in ordered:
        tier_start = max(tier.from_units, 0)
        if units <= tier_start:
            break

        tier_end = tier.to_units if tier.to_units is not None else units
        units_in_tier = min(units, tier_end) - tier_start

        if units_in_tier > 0:
            total_fee += units_in_tier * tier.rate_per_unit

    return total_fee

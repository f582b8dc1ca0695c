"""Slab (pricing tier) structure validation."""

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from ..data.models import PricingTier


@dataclass(frozen=True)
class SlabValidationResult:
    """Outcome of validating a tier set."""
    valid: bool
    errors: list[str] = field(default_factory=list)


def _format_units(value: float) -> str:
    if math.isinf(value):
        return "unbounded"
    return f"{value:g}"


def validate_slabs(tiers: Sequence[PricingTier]) -> SlabValidationResult:
    """
    Validate a module's tier set for use in fee calculation.

    Rules, checked on the tiers sorted by from_units:
    - the first tier starts at 0
    - each tier ends exactly where the next begins (a null end counts as
      unbounded, so only the last tier may be open-ended)
    - each bounded tier ends after it starts
    - rates are non-negative

    Args:
        tiers: Tiers in any order

    Returns:
        SlabValidationResult listing every violation found
    """
    if not tiers:
        return SlabValidationResult(valid=True, errors=[])

    errors = []
    ordered = sorted(tiers, key=lambda t: t.from_units)

    if ordered[0].from_units != 0:
        errors.append("First slab must start at 0 units")

    for position, tier in enumerate(ordered, start=1):
        if tier.to_units is not None and tier.to_units <= tier.from_units:
            errors.append(
                f"Slab {position} must end after it starts: "
                f"{_format_units(tier.from_units)} to {_format_units(tier.to_units)}"
            )

    for current, following in zip(ordered, ordered[1:]):
        current_end = current.to_units if current.to_units is not None else math.inf

        if current_end < following.from_units:
            errors.append(
                f"Gap between slabs: {_format_units(current_end)} to "
                f"{_format_units(following.from_units)}"
            )
        elif current_end > following.from_units:
            errors.append(
                f"Overlap between slabs: {_format_units(following.from_units)} to "
                f"{_format_units(current_end)}"
            )

    for position, tier in enumerate(ordered, start=1):
        if tier.rate_per_unit < 0:
            errors.append(f"Rate per unit cannot be negative (slab {position})")

    return SlabValidationResult(valid=not errors, errors=errors)

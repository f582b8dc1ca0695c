"""Manual unit overrides for interactive what-if editing"""

from dataclasses import replace
from typing import Optional

from ..data.models import Model, UnitOverride, UnitOverrides, UnitType
from ..errors import InvalidOverrideError, UnknownUnitTypeError
from ..utils.numbers import round_half_up
from .growth import growth_factor, unit_type_units


def apply_unit_override(
    model: Model,
    overrides: Optional[UnitOverrides],
    unit_type_id: str,
    period: int,
    units: float
) -> UnitOverrides:
    """
    Record a manually edited unit count and return the new override set

    The edit replaces any override for the same unit type and period and
    discards that unit type's overrides at later periods: every period after
    the edit is re-derived from the edited value using the unit type's
    configured growth. Overrides of other unit types are kept.

    Args:
        model: Model the unit type belongs to
        overrides: Current override set (None for no overrides)
        unit_type_id: Unit type being edited
        period: Period index being edited (>= 1, period 0 is fixed at zero units)
        units: New unit count (>= 0)

    Returns:
        New UnitOverrides; the input set is left untouched
    """
    if model.get_unit_type(unit_type_id) is None:
        raise UnknownUnitTypeError(
            f"Unit type {unit_type_id} does not exist in model {model.id}",
            unit_type_id=unit_type_id
        )
    if not isinstance(period, int) or period < 1:
        raise InvalidOverrideError(
            f"Overrides are only allowed from period 1 onwards, got {period}",
            unit_type_id=unit_type_id,
            period=period
        )
    if units < 0:
        raise InvalidOverrideError(
            f"Overridden units must be >= 0, got {units}",
            unit_type_id=unit_type_id,
            period=period
        )

    current = overrides or UnitOverrides.empty()
    kept = tuple(
        o for o in current
        if o.unit_type_id != unit_type_id or o.period < period
    )
    return replace(current, entries=kept + (UnitOverride(unit_type_id, period, units),))


def clear_unit_overrides(overrides: UnitOverrides, unit_type_id: Optional[str] = None) -> UnitOverrides:
    """Drop overrides for one unit type, or all of them"""
    if unit_type_id is None:
        return UnitOverrides.empty()
    return replace(
        overrides,
        entries=tuple(o for o in overrides if o.unit_type_id != unit_type_id)
    )


def resolve_units(
    unit_type: UnitType,
    period_index: int,
    overrides: Optional[UnitOverrides] = None
) -> int:
    """
    Unit count for a unit type at a period, honouring manual overrides

    Without a governing override this is the configured growth. With one at
    period p <= n, units continue compounding from the edited value:
    round(override.units * growth_factor(n - p)).
    """
    if period_index == 0 or not overrides:
        return unit_type_units(unit_type, period_index)

    governing = overrides.governing(unit_type.id, period_index)
    if governing is None:
        return unit_type_units(unit_type, period_index)

    factor = growth_factor(
        unit_type.growth_type,
        unit_type.growth_value,
        unit_type.starting_units,
        period_index - governing.period
    )
    return max(0, round_half_up(governing.units * factor))

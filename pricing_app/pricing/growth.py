"""Unit growth calculations for unit types"""

from typing import Union

from ..data.models import GrowthType, UnitType
from ..errors import InvalidValueError
from ..utils.numbers import round_half_up


def _growth_type(value: Union[str, GrowthType]) -> GrowthType:
    try:
        return GrowthType(value)
    except ValueError as e:
        raise InvalidValueError(
            f"Unsupported growth type: {value}", field="growth_type", value=value
        ) from e


def growth_factor(
    growth_type: Union[str, GrowthType],
    growth_value: float,
    starting_units: float,
    periods: int
) -> float:
    """
    Multiplier applied to a base unit count after ``periods`` periods

    percentage: (1 + growth_value / 100) ** periods
    fixed:      1 + growth_value * periods / starting_units

    The fixed form is a ratio against the configured starting units so the
    same factor can be applied to a manually overridden base. With zero
    starting units there is no ratio to take and the factor is 1.

    Args:
        growth_type: fixed or percentage
        growth_value: Increment per period (fixed) or percent per period
        starting_units: Configured starting units of the unit type
        periods: Number of periods elapsed from the base

    Returns:
        Growth multiplier
    """
    if _growth_type(growth_type) is GrowthType.PERCENTAGE:
        return (1 + growth_value / 100) ** periods

    if starting_units == 0:
        return 1.0
    return 1 + (growth_value * periods) / starting_units


def units_at_period(
    starting_units: float,
    growth_type: Union[str, GrowthType],
    growth_value: float,
    period_index: int
) -> int:
    """
    Unit count of a unit type at a projection period

    Period 0 is the ramp-up period and always carries zero units; the starting
    value seeds growth from period 1 onwards.

    Args:
        starting_units: Starting units (>= 0)
        growth_type: fixed or percentage
        growth_value: Growth value (>= 0)
        period_index: Period offset (>= 0)

    Returns:
        Non-negative integer unit count
    """
    if not isinstance(period_index, int) or period_index < 0:
        raise InvalidValueError(
            f"Period index must be a non-negative integer, got {period_index}",
            field="period_index",
            value=period_index
        )
    if starting_units < 0:
        raise InvalidValueError(
            f"Starting units must be >= 0, got {starting_units}",
            field="starting_units",
            value=starting_units
        )
    if growth_value < 0:
        raise InvalidValueError(
            f"Growth value must be >= 0, got {growth_value}",
            field="growth_value",
            value=growth_value
        )

    if period_index == 0:
        return 0

    factor = growth_factor(growth_type, growth_value, starting_units, period_index)
    return max(0, round_half_up(starting_units * factor))


def unit_type_units(unit_type: UnitType, period_index: int) -> int:
    """Unit count of ``unit_type`` at ``period_index`` from its configured growth"""
    return units_at_period(
        unit_type.starting_units,
        unit_type.growth_type,
        unit_type.growth_value,
        period_index
    )

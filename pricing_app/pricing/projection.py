"""Multi-period projection generation"""

from datetime import date, datetime
from typing import Optional, Union

from ..data.models import Model, ProjectionInterval, UnitOverrides
from ..errors import InvalidValueError
from ..models.projection import ProjectionResult
from ..utils.time import parse_interval, parse_start_date, period_date
from .aggregator import DEFAULT_IMPLEMENTATION_FEE_PERIODS, calculate_period_total


def generate_projection(
    model: Model,
    start_date: Union[str, date, datetime],
    periods: int,
    interval: Union[str, ProjectionInterval] = ProjectionInterval.MONTHLY,
    overrides: Optional[UnitOverrides] = None,
    implementation_fee_periods: int = DEFAULT_IMPLEMENTATION_FEE_PERIODS
) -> list[ProjectionResult]:
    """
    Generate a revenue projection for ``model``

    Produces exactly ``periods`` rows, indices 0..periods-1. Row i is dated
    start_date + i months (monthly) or + i years (yearly); its units are the
    sum over all unit types and its total fee is the model period total,
    implementation fee included. The model is treated as read-only and
    repeated calls with the same arguments return identical rows.

    Args:
        model: Model snapshot
        start_date: ISO-8601 date string (or date) of period 0
        periods: Number of periods (>= 1)
        interval: monthly or yearly
        overrides: Manual unit overrides for interactive recompute
        implementation_fee_periods: Number of leading periods charged the implementation fee

    Returns:
        Projection rows ordered by period index
    """
    if not isinstance(periods, int) or isinstance(periods, bool) or periods < 1:
        raise InvalidValueError(
            f"Periods must be an integer >= 1, got {periods}",
            field="periods",
            value=periods
        )

    start = parse_start_date(start_date)
    cadence = parse_interval(interval)

    results = []
    for index in range(periods):
        period_total = calculate_period_total(
            model,
            index,
            overrides=overrides,
            implementation_fee_periods=implementation_fee_periods
        )
        results.append(ProjectionResult(
            period=index,
            date=period_date(start, index, cadence),
            units=sum(period_total.unit_type_units.values()),
            total_fee=period_total.total,
            breakdown=period_total.breakdown,
            unit_type_units=period_total.unit_type_units
        ))

    return results

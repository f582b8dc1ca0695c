"""Model-level fee aggregation for a single period"""

from typing import Optional

import structlog

from ..data.models import Model, UnitOverrides
from ..errors import FeeCalculationError, InvalidValueError, UnknownUnitTypeError
from ..logging.config import log_fee_adjustment
from ..models.projection import FeeBreakdown, ModuleFee, PeriodTotal
from .modules import calculate_module_fee
from .overrides import resolve_units

logger = structlog.get_logger(__name__)

DEFAULT_IMPLEMENTATION_FEE_PERIODS = 2


def calculate_unit_type_units(
    model: Model,
    period_index: int,
    overrides: Optional[UnitOverrides] = None
) -> dict[str, int]:
    """
    Unit count of every unit type of ``model`` at ``period_index``

    Raises:
        FeeCalculationError: Growth overflowed the float range, e.g. high
            percentage growth over a long horizon
    """
    units = {}
    for unit_type in model.unit_types:
        try:
            units[unit_type.id] = resolve_units(unit_type, period_index, overrides)
        except ArithmeticError as e:
            raise FeeCalculationError(
                f"Unit growth out of range for unit type {unit_type.id} "
                f"at period {period_index}: {e}",
                period=period_index,
                context={"unit_type_id": unit_type.id}
            ) from e
    return units


def calculate_period_total(
    model: Model,
    period_index: int,
    overrides: Optional[UnitOverrides] = None,
    implementation_fee_periods: int = DEFAULT_IMPLEMENTATION_FEE_PERIODS
) -> PeriodTotal:
    """
    Total fee of ``model`` for one period

    Module fees are summed, the model minimum fee floors the sum, and the
    implementation fee is added on top (outside the floor) for the first
    ``implementation_fee_periods`` periods (indices 0 and 1 by default).

    Args:
        model: Model snapshot
        period_index: Period offset (>= 0)
        overrides: Manual unit overrides
        implementation_fee_periods: Number of leading periods charged the implementation fee

    Returns:
        PeriodTotal with breakdown and per-unit-type units
    """
    if not isinstance(period_index, int) or period_index < 0:
        raise InvalidValueError(
            f"Period index must be a non-negative integer, got {period_index}",
            field="period_index",
            value=period_index
        )

    unit_units = calculate_unit_type_units(model, period_index, overrides)

    module_fees = []
    for module in model.ordered_modules():
        if module.uses_units and module.unit_type_id not in unit_units:
            raise UnknownUnitTypeError(
                f"Module {module.module_name} references unknown unit type {module.unit_type_id}",
                unit_type_id=module.unit_type_id,
                module_id=module.id
            )
        # flat modules may carry a dangling or empty unit type reference
        units = unit_units.get(module.unit_type_id, 0)

        try:
            fee = calculate_module_fee(units, module)
        except (TypeError, ArithmeticError) as e:
            raise FeeCalculationError(
                f"Fee calculation failed for module {module.module_name}: {e}",
                module_id=module.id,
                period=period_index
            ) from e

        module_fees.append(ModuleFee(
            module_name=module.module_name,
            fee=fee,
            module_id=module.id,
            units=units
        ))

    subtotal = sum(m.fee for m in module_fees)
    minimum_applied = subtotal < model.minimum_fee
    total = model.minimum_fee if minimum_applied else subtotal

    if minimum_applied:
        log_fee_adjustment(
            logger, model.id, period_index, "minimum_fee", model.minimum_fee,
            context={"subtotal": subtotal}
        )

    implementation_fee = 0.0
    if period_index < implementation_fee_periods and model.implementation_fee > 0:
        implementation_fee = model.implementation_fee
        log_fee_adjustment(
            logger, model.id, period_index, "implementation_fee", implementation_fee
        )

    return PeriodTotal(
        period=period_index,
        total=total + implementation_fee,
        breakdown=FeeBreakdown(
            module_fees=tuple(module_fees),
            subtotal=subtotal,
            minimum_fee=model.minimum_fee,
            minimum_applied=minimum_applied,
            implementation_fee=implementation_fee
        ),
        unit_type_units=unit_units
    )

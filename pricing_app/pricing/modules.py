"""Single module fee resolution"""

from ..data.models import Module, PricingType
from ..errors import InvalidValueError, UnsupportedPricingTypeError
from .slabs import calculate_slab_fee


def calculate_module_fee(units: float, module: Module) -> float:
    """
    Fee charged by ``module`` for a period with ``units`` units

    flat:     monthly_fee, units ignored
    per_unit: units * monthly_fee
    slab:     progressive fee across the module's slabs

    A module minimum fee, when set, floors the result for every pricing type.

    Args:
        units: Unit count of the module's unit type (>= 0)
        module: Module definition

    Returns:
        Module fee
    """
    if units < 0:
        raise InvalidValueError(
            f"Units must be >= 0, got {units}", field="units", value=units
        )

    try:
        pricing_type = PricingType(module.pricing_type)
    except ValueError as e:
        raise UnsupportedPricingTypeError(
            f"Unsupported pricing type for module {module.module_name}: {module.pricing_type}",
            pricing_type=str(module.pricing_type)
        ) from e

    monthly_fee = module.monthly_fee or 0.0

    if pricing_type is PricingType.FLAT:
        fee = monthly_fee
    elif pricing_type is PricingType.PER_UNIT:
        fee = units * monthly_fee
    else:
        fee = calculate_slab_fee(units, module.slabs)

    if module.module_minimum_fee and fee < module.module_minimum_fee:
        fee = module.module_minimum_fee

    return fee

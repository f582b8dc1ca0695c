"""Pricing calculation engine for fees, unit growth and projections"""

from .aggregator import calculate_period_total, calculate_unit_type_units
from .growth import growth_factor, unit_type_units, units_at_period
from .modules import calculate_module_fee
from .overrides import apply_unit_override, clear_unit_overrides, resolve_units
from .projection import generate_projection
from .slabs import calculate_slab_fee
from .summary import summarize_projection

__all__ = [
    "growth_factor",
    "units_at_period",
    "unit_type_units",
    "calculate_slab_fee",
    "calculate_module_fee",
    "calculate_unit_type_units",
    "calculate_period_total",
    "apply_unit_override",
    "clear_unit_overrides",
    "resolve_units",
    "generate_projection",
    "summarize_projection",
]

"""
Pricing domain error classifications.

Raised when a model snapshot is structurally inconsistent in a way that would
make a computed fee meaningless. The engine fails fast on these instead of
producing a wrong number.
"""

from typing import Any, Optional, Dict


class PricingDomainError(Exception):
    """Base class for pricing rule violations."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class UnknownUnitTypeError(PricingDomainError):
    """A module or override references a unit type absent from the model."""

    def __init__(self, message: str, unit_type_id: Optional[str] = None,
                 module_id: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.unit_type_id = unit_type_id
        self.module_id = module_id


class InvalidOverrideError(PricingDomainError):
    """A manual unit override cannot be applied."""

    def __init__(self, message: str, unit_type_id: Optional[str] = None,
                 period: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.unit_type_id = unit_type_id
        self.period = period


class InvalidModelError(PricingDomainError):
    """The model failed structural validation and cannot be projected."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []


class UnsupportedPricingTypeError(PricingDomainError):
    """Pricing type is not one of flat, per_unit or slab."""

    def __init__(self, message: str, pricing_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.pricing_type = pricing_type

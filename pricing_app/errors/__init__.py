"""
Error classification system for the pricing projection engine.

This module provides a structured exception hierarchy separating bad input
data, pricing domain violations and calculation/system failures.
"""

from .data_quality import (
    DataQualityError,
    MissingDataError,
    MalformedDataError,
    InvalidValueError,
)
from .domain import (
    PricingDomainError,
    UnknownUnitTypeError,
    InvalidOverrideError,
    InvalidModelError,
    UnsupportedPricingTypeError,
)
from .system_failures import (
    SystemFailureError,
    FeeCalculationError,
    ProjectionError,
    ExportError,
    ConfigurationError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MissingDataError",
    "MalformedDataError",
    "InvalidValueError",
    # Domain Errors
    "PricingDomainError",
    "UnknownUnitTypeError",
    "InvalidOverrideError",
    "InvalidModelError",
    "UnsupportedPricingTypeError",
    # System Failures
    "SystemFailureError",
    "FeeCalculationError",
    "ProjectionError",
    "ExportError",
    "ConfigurationError",
]

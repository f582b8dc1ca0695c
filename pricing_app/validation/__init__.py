"""
Structural validation for pricing models.

Validators report every violation they find as a list instead of raising,
so an editing surface can show all problems at once.
"""

from .model_schema import validate_model
from .slabs import SlabValidationResult, validate_slabs

__all__ = ["SlabValidationResult", "validate_model", "validate_slabs"]

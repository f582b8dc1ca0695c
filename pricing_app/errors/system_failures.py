"""
System failure error classifications for unrecoverable errors.

These exceptions wrap unexpected failures inside the calculation pipeline,
export formatting or configuration loading.
"""

from typing import Any, Optional, Dict


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class FeeCalculationError(SystemFailureError):
    """Unexpected error while computing a module fee."""

    def __init__(self, message: str, module_id: Optional[str] = None,
                 period: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.module_id = module_id
        self.period = period


class ProjectionError(SystemFailureError):
    """Projection generation failed for a model."""

    def __init__(self, message: str, model_id: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.model_id = model_id


class ExportError(SystemFailureError):
    """Projection rows could not be formatted for export."""

    def __init__(self, message: str, export_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.export_format = export_format


class ConfigurationError(SystemFailureError):
    """Configuration failed to load or validate."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []

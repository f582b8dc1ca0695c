"""
Main projection engine coordinator.

Orchestrates the pricing pipeline: model document parsing, structural
validation, configuration resolution, projection generation, summaries and
export.
"""

from collections.abc import Sequence
from datetime import date, datetime
from pathlib import Path
from typing import Any, Optional, Union

import structlog

from .config.defaults import DefaultConfig, LoggingParams
from .config.loader import ConfigLoader
from .config.validation import ConfigValidator, ValidationError
from .data.models import Model, UnitOverrides
from .data.parsers import parse_model
from .errors import (
    ConfigurationError,
    FeeCalculationError,
    InvalidModelError,
    InvalidValueError,
    ProjectionError,
    UnknownUnitTypeError,
)
from .export.csv_export import projection_to_csv
from .logging.config import configure_logging, get_projection_logger, get_validation_logger
from .models.projection import ProjectionResult, ProjectionSummary
from .pricing.overrides import apply_unit_override
from .pricing.projection import generate_projection
from .pricing.summary import summarize_projection
from .validation.model_schema import validate_model

logger = structlog.get_logger(__name__)


class ProjectionEngine:
    """
    Main coordinator for pricing model projections.

    Manages the projection pipeline:
    Model document → Model → Validation → Projection rows → Summary / CSV

    The engine keeps no state between requests apart from its configuration
    loader; every call receives its model snapshot and returns new results.
    """

    def __init__(
        self,
        config_dir: Optional[Union[str, Path]] = None,
        configure_logs: bool = False
    ) -> None:
        """
        Initialize the projection engine.

        Args:
            config_dir: Directory holding models.yaml (repository config/ by default)
            configure_logs: Apply the default logging section of the configuration
        """
        self.logger = logger
        self.config_loader = ConfigLoader.create(Path(config_dir) if config_dir else None)
        self._bind_loggers()

        if configure_logs:
            self.apply_logging_config()

        self.logger.info("Projection engine initialized",
                         config_dir=str(self.config_loader.config_dir))

    def _bind_loggers(self) -> None:
        self.projection_logger = get_projection_logger(__name__)
        self.validation_logger = get_validation_logger(__name__)

    def apply_logging_config(
        self,
        model_id: Optional[str] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> LoggingParams:
        """Configure logging from the resolved logging section and return it."""
        params = self.resolve_config(model_id or "", overrides).logging
        configure_logging(level=params.level, format_json=params.format_json)
        self._bind_loggers()

        self.logger.debug("Logging configured", model_id=model_id,
                          level=params.level, format_json=params.format_json)
        return params

    def load_model(self, payload: Union[Model, dict[str, Any], str]) -> Model:
        """Return a Model from a model instance, document dict or JSON text."""
        if isinstance(payload, Model):
            return payload
        return parse_model(payload)

    def resolve_config(
        self,
        model_id: str,
        overrides: Optional[dict[str, Any]] = None
    ) -> DefaultConfig:
        """Merge defaults, per-model file overrides and call overrides."""
        merged = self.config_loader.merge_config(model_id, overrides)
        errors = ConfigValidator.validate_config(merged)
        if errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in errors]
            self.logger.error("Configuration validation failed", model_id=model_id, errors=error_msgs)
            raise ConfigurationError(
                f"Invalid configuration for model {model_id}", errors=error_msgs
            )
        return self.config_loader.to_default_config(merged)

    def validate(self, model: Union[Model, dict[str, Any], str]) -> list[ValidationError]:
        """Structural validation of a model; never raises for model problems."""
        model = self.load_model(model)
        errors = validate_model(model)

        if errors:
            self.validation_logger.warning(
                "Model validation failed",
                model_id=model.id,
                error_count=len(errors),
                errors=[e.message for e in errors]
            )
        else:
            self.validation_logger.debug("Model validation passed", model_id=model.id)

        return errors

    def generate(
        self,
        model: Union[Model, dict[str, Any], str],
        start_date: Union[str, date, datetime],
        periods: Optional[int] = None,
        interval: Optional[str] = None,
        overrides: Optional[UnitOverrides] = None,
        config_overrides: Optional[dict[str, Any]] = None
    ) -> list[ProjectionResult]:
        """
        Validate a model and generate its projection.

        Periods and interval default to the resolved configuration.

        Raises:
            UnknownUnitTypeError: A module references a missing unit type
            InvalidModelError: Any other structural validation failure
            InvalidValueError: Periods outside 1..max_periods or bad interval
            ProjectionError: Unexpected failure while computing a period
        """
        model = self.load_model(model)
        config = self.resolve_config(model.id, config_overrides)

        errors = self.validate(model)
        if errors:
            messages = [e.message for e in errors]
            unknown = [e for e in errors if e.field.endswith(".unit_type_id")]
            if unknown:
                raise UnknownUnitTypeError(
                    unknown[0].message,
                    unit_type_id=unknown[0].value,
                    context={"errors": messages}
                )
            raise InvalidModelError(
                f"Model {model.id} failed validation with {len(errors)} error(s)",
                errors=messages
            )

        periods = periods if periods is not None else config.projection.default_periods
        interval = interval or config.projection.default_interval

        if isinstance(periods, int) and periods > config.projection.max_periods:
            raise InvalidValueError(
                f"Periods must not exceed {config.projection.max_periods}, got {periods}",
                field="periods",
                value=periods
            )

        try:
            results = generate_projection(
                model,
                start_date,
                periods,
                interval,
                overrides=overrides,
                implementation_fee_periods=config.fees.implementation_fee_periods
            )
        except FeeCalculationError as e:
            self.projection_logger.error(
                "Projection failed",
                model_id=model.id,
                error=str(e),
                error_type=type(e).__name__,
                module_id=e.module_id,
                period=e.period
            )
            raise ProjectionError(
                f"Projection failed for model {model.id}: {e}",
                model_id=model.id,
                context={"module_id": e.module_id, "period": e.period}
            ) from e

        self.projection_logger.info(
            "Projection generated",
            model_id=model.id,
            periods=len(results),
            interval=getattr(interval, "value", interval),
            overrides=len(overrides) if overrides else 0,
            total_revenue=sum(r.total_fee for r in results)
        )
        return results

    def edit_units(
        self,
        model: Union[Model, dict[str, Any], str],
        overrides: Optional[UnitOverrides],
        unit_type_id: str,
        period: int,
        units: float
    ) -> UnitOverrides:
        """Apply a manual unit edit and return the new override set."""
        model = self.load_model(model)
        updated = apply_unit_override(model, overrides, unit_type_id, period, units)

        self.projection_logger.info(
            "Unit override applied",
            model_id=model.id,
            unit_type_id=unit_type_id,
            period=period,
            units=units,
            affected_modules=[m.id for m in model.modules_for_unit_type(unit_type_id)]
        )
        return updated

    def summarize(self, results: Sequence[ProjectionResult]) -> ProjectionSummary:
        return summarize_projection(results)

    def export_csv(
        self,
        results: Sequence[ProjectionResult],
        model_id: Optional[str] = None
    ) -> str:
        """Format projection rows as CSV using the export configuration."""
        export = self.resolve_config(model_id or "").export
        return projection_to_csv(
            results,
            delimiter=export.delimiter,
            include_header=export.include_header,
            decimal_places=export.decimal_places
        )

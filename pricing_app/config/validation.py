"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

VALID_INTERVALS = ("monthly", "yearly")
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_projection_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate projection parameters."""
        errors = []

        if "default_periods" in params:
            value = params["default_periods"]
            if not _is_positive_int(value):
                errors.append(ValidationError(
                    field="default_periods",
                    message="Must be a positive integer",
                    value=value
                ))

        if "max_periods" in params:
            value = params["max_periods"]
            if not _is_positive_int(value):
                errors.append(ValidationError(
                    field="max_periods",
                    message="Must be a positive integer",
                    value=value
                ))

        default_periods = params.get("default_periods")
        max_periods = params.get("max_periods")
        if (_is_positive_int(default_periods) and _is_positive_int(max_periods)
                and default_periods > max_periods):
            errors.append(ValidationError(
                field="default_periods",
                message="Must not exceed max_periods",
                value=default_periods
            ))

        if "default_interval" in params:
            value = params["default_interval"]
            if value not in VALID_INTERVALS:
                errors.append(ValidationError(
                    field="default_interval",
                    message="Must be one of: monthly, yearly",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_fee_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate fee parameters."""
        errors = []

        if "implementation_fee_periods" in params:
            value = params["implementation_fee_periods"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                errors.append(ValidationError(
                    field="implementation_fee_periods",
                    message="Must be a non-negative integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_export_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate export parameters."""
        errors = []

        if "delimiter" in params:
            value = params["delimiter"]
            if not isinstance(value, str) or len(value) != 1:
                errors.append(ValidationError(
                    field="delimiter",
                    message="Must be a single character",
                    value=value
                ))

        if "include_header" in params:
            value = params["include_header"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="include_header",
                    message="Must be a boolean",
                    value=value
                ))

        if "decimal_places" in params:
            value = params["decimal_places"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                errors.append(ValidationError(
                    field="decimal_places",
                    message="Must be a non-negative integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in VALID_LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message="Must be a standard logging level name",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "projection" in config:
            errors.extend(ConfigValidator.validate_projection_params(config["projection"]))

        if "fees" in config:
            errors.extend(ConfigValidator.validate_fee_params(config["fees"]))

        if "export" in config:
            errors.extend(ConfigValidator.validate_export_params(config["export"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors

"""
Centralized logging configuration for the pricing projection engine.

This module provides standardized logging configuration using structlog
for all components. Calculation code logs through loggers obtained here so
fee adjustments and projection requests share one structured format.
"""
import logging
import sys
from typing import Any, Optional, TextIO

import structlog
from structlog.types import FilteringBoundLogger

from ..errors import ConfigurationError


def _log_level(level: str) -> int:
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        raise ConfigurationError(f"Unknown logging level: {level}", errors=[f"level: {level}"])
    return value


def _processors(
    format_json: bool,
    include_timestamp: bool,
    include_caller: bool,
    extra_processors: Optional[list]
) -> list:
    """Processor chain ending in the JSON or console renderer."""
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    processors.extend(extra_processors or [])
    processors.append(
        structlog.processors.JSONRenderer() if format_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    return processors


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None,
    stream: Optional[TextIO] = None
) -> None:
    """
    Configure structlog for the entire application.

    May be called again to switch settings, e.g. when the engine applies a
    model's logging section. The later call replaces the root handler;
    unbound loggers from get_logger resolve their processors when used and
    pick up the new settings, loggers bound earlier keep their chain.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors, run before rendering
        stream: Output stream, stdout by default

    Raises:
        ConfigurationError: If ``level`` is not a logging level name
    """
    logging.basicConfig(
        level=_log_level(level),
        stream=stream or sys.stdout,
        format="%(message)s",
        force=True
    )

    structlog.configure(
        processors=_processors(format_json, include_timestamp, include_caller, extra_processors),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_projection_logger(name: str) -> FilteringBoundLogger:
    """Get a logger bound to the projection subsystem."""
    return get_logger(name).bind(subsystem="projection")


def get_validation_logger(name: str) -> FilteringBoundLogger:
    """Get a logger bound to the validation subsystem."""
    return get_logger(name).bind(subsystem="validation")


def log_fee_adjustment(
    logger: FilteringBoundLogger,
    model_id: str,
    period: int,
    adjustment: str,
    amount: float,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a fee adjustment (minimum floor or implementation fee) for a period.

    Args:
        logger: Structlog logger instance
        model_id: ID of the model being priced
        period: Period index the adjustment applies to
        adjustment: Adjustment name, e.g. "minimum_fee" or "implementation_fee"
        amount: Amount charged by the adjustment
        context: Additional context data
    """
    bound_logger = logger.bind(
        model_id=model_id,
        period=period,
        adjustment=adjustment,
        amount=amount,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Fee adjustment applied")

"""Default configuration parameters for the pricing projection engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProjectionParams:
    """Projection horizon parameters."""
    default_periods: int = 12                 # Periods generated when caller gives none
    default_interval: str = "monthly"         # monthly | yearly
    max_periods: int = 600                    # Upper bound accepted per request


@dataclass(frozen=True)
class FeeParams:
    """Model-level fee application parameters."""
    implementation_fee_periods: int = 2       # Implementation fee charged at indices 0..n-1


@dataclass(frozen=True)
class ExportParams:
    """CSV export parameters."""
    delimiter: str = ","
    include_header: bool = True
    decimal_places: int = 2


@dataclass(frozen=True)
class LoggingParams:
    """Logging parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    projection: ProjectionParams
    fees: FeeParams
    export: ExportParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        projection=ProjectionParams(),
        fees=FeeParams(),
        export=ExportParams(),
        logging=LoggingParams(),
    )

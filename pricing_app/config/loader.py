"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import (
    DefaultConfig,
    ExportParams,
    FeeParams,
    LoggingParams,
    ProjectionParams,
    get_default_config,
)


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_model_config(self, model_id: str) -> dict[str, Any]:
        """Load model-specific configuration overrides."""
        models_file = self.config_dir / "models.yaml"

        if not models_file.exists():
            return {}

        try:
            with open(models_file) as f:
                models_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Failed to parse {models_file}: {e}",
                context={"path": str(models_file)}
            ) from e

        return (models_config.get("models") or {}).get(model_id, {}) or {}

    def merge_config(
        self,
        model_id: str,
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-call overrides (highest priority)
        2. Model-specific overrides from models.yaml
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        model_config = self.load_model_config(model_id)
        config = self._deep_merge(config, model_config)

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def to_default_config(self, merged: dict[str, Any]) -> DefaultConfig:
        """Rebuild a DefaultConfig from a merged configuration dict."""
        try:
            return DefaultConfig(
                projection=ProjectionParams(**merged.get("projection", {})),
                fees=FeeParams(**merged.get("fees", {})),
                export=ExportParams(**merged.get("export", {})),
                logging=LoggingParams(**merged.get("logging", {})),
            )
        except TypeError as e:
            raise ConfigurationError(f"Unknown configuration key: {e}") from e

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from typing import List

import yaml

from pricing_app.config.loader import ConfigLoader
from pricing_app.config.validation import ConfigValidator, ValidationError


def validate_model_config(loader: ConfigLoader, model_id: str) -> List[ValidationError]:
    """Validate the merged configuration for a specific model."""
    config = loader.merge_config(model_id)
    return ConfigValidator.validate_config(config)


def configured_model_ids(loader: ConfigLoader) -> List[str]:
    """Model ids that carry overrides in models.yaml."""
    models_file = loader.config_dir / "models.yaml"
    if not models_file.exists():
        return []
    with open(models_file) as f:
        document = yaml.safe_load(f) or {}
    return sorted((document.get("models") or {}).keys())


def main():
    """Main validation function."""
    print("Validating pricing model configuration...")

    loader = ConfigLoader.create()
    model_ids = configured_model_ids(loader) + ["UNKNOWN-MODEL"]  # last one uses defaults

    all_valid = True

    for model_id in model_ids:
        print(f"\nValidating {model_id}...")

        errors = validate_model_config(loader, model_id)
        if errors:
            print(f"  Found {len(errors)} validation errors:")
            for error in errors:
                print(f"  - {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print(f"  {model_id} configuration is valid")

    # Per-request overrides on top of file configuration
    print("\nTesting request-level overrides...")
    test_overrides = {"projection": {"default_periods": 36}, "export": {"delimiter": ";"}}
    errors = ConfigValidator.validate_config(loader.merge_config("UNKNOWN-MODEL", test_overrides))
    if errors:
        for error in errors:
            print(f"  - {error.field}: {error.message}")
        all_valid = False
    else:
        print("  Request override validation passed")

    if all_valid:
        print("\nAll configuration validation passed!")
        sys.exit(0)
    else:
        print("\nConfiguration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()

"""Model-level structural validation."""

from collections import Counter

from ..config.validation import ValidationError
from ..data.models import Model, PricingType
from .slabs import validate_slabs


def _duplicate_ids(ids: list[str]) -> list[str]:
    return [item for item, count in Counter(ids).items() if count > 1]


def validate_model(model: Model) -> list[ValidationError]:
    """
    Check a model snapshot before it is persisted or projected.

    Reports duplicate ids, negative fees and growth settings, usage-priced
    modules without a valid unit type reference and slab modules whose tiers
    are missing or fail slab validation.

    Args:
        model: Model snapshot

    Returns:
        List of validation errors, empty when the model is usable
    """
    errors = []

    for field_name in ("minimum_fee", "implementation_fee"):
        value = getattr(model, field_name)
        if value < 0:
            errors.append(ValidationError(
                field=field_name,
                message="Must be 0 or greater",
                value=value
            ))

    for unit_type_id in _duplicate_ids([u.id for u in model.unit_types]):
        errors.append(ValidationError(
            field="unit_types",
            message=f"Duplicate unit type id: {unit_type_id}",
            value=unit_type_id
        ))

    for module_id in _duplicate_ids([m.id for m in model.modules]):
        errors.append(ValidationError(
            field="modules",
            message=f"Duplicate module id: {module_id}",
            value=module_id
        ))

    for unit_type in model.unit_types:
        if unit_type.starting_units < 0:
            errors.append(ValidationError(
                field=f"unit_types.{unit_type.id}.starting_units",
                message="Starting units must be 0 or greater",
                value=unit_type.starting_units
            ))
        if unit_type.growth_value < 0:
            errors.append(ValidationError(
                field=f"unit_types.{unit_type.id}.growth_value",
                message="Growth value must be 0 or greater",
                value=unit_type.growth_value
            ))

    unit_type_ids = set(model.unit_type_index)
    for module in model.ordered_modules():
        prefix = f"modules.{module.id}"

        if module.uses_units:
            if not module.unit_type_id:
                errors.append(ValidationError(
                    field=f"{prefix}.unit_type_id",
                    message=f"Module {module.module_name}: unit type is required",
                    value=module.unit_type_id
                ))
            elif module.unit_type_id not in unit_type_ids:
                errors.append(ValidationError(
                    field=f"{prefix}.unit_type_id",
                    message=f"Module {module.module_name}: unknown unit type {module.unit_type_id}",
                    value=module.unit_type_id
                ))

        for fee_field in ("monthly_fee", "one_time_fee", "module_minimum_fee"):
            value = getattr(module, fee_field)
            if value is not None and value < 0:
                errors.append(ValidationError(
                    field=f"{prefix}.{fee_field}",
                    message=f"Module {module.module_name}: fee must be 0 or greater",
                    value=value
                ))

        if module.pricing_type is PricingType.SLAB:
            if not module.slabs:
                errors.append(ValidationError(
                    field=f"{prefix}.slabs",
                    message=f"Module {module.module_name}: slab pricing requires at least one slab",
                    value=[]
                ))
            else:
                result = validate_slabs(module.slabs)
                for message in result.errors:
                    errors.append(ValidationError(
                        field=f"{prefix}.slabs",
                        message=f"Module {module.module_name}: {message}",
                        value=len(module.slabs)
                    ))

    return errors

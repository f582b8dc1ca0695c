"""
Parsers for converting JSON-shaped model documents to typed aggregates.

Model documents arrive from the persistence/API layer as plain dicts shaped
like the stored records (ids may appear as ``_id``). This module converts
them into the immutable structures in ``models`` with type coercion and
descriptive errors.
"""

import json
from typing import Any, Optional, Union

from ..errors import InvalidValueError, MalformedDataError, MissingDataError
from .models import (
    FeeType,
    GrowthType,
    Model,
    ModelStatus,
    Module,
    PricingTier,
    PricingType,
    UnitType,
)

# Stored documents spell the one-time fee type both ways
FEE_TYPE_ALIASES = {"one-time": FeeType.ONE_TIME.value}


def _require(payload: dict[str, Any], key: str, data_type: str) -> Any:
    value = payload.get(key)
    if value is None or value == "":
        raise MissingDataError(f"Missing required field: {data_type}.{key}", data_type=data_type)
    return value


def _document_id(payload: dict[str, Any], data_type: str, required: bool = True) -> Optional[str]:
    value = payload.get("id", payload.get("_id"))
    if value is None or value == "":
        if required:
            raise MissingDataError(f"Missing required field: {data_type}.id", data_type=data_type)
        return None
    return str(value)


def parse_number(value: Any, field: str, minimum: Optional[float] = 0.0) -> float:
    """
    Coerce a numeric field.

    Accepts ints, floats and numeric strings. Booleans are rejected.

    Raises:
        MalformedDataError: If the value is not numeric
        InvalidValueError: If the value is below ``minimum``
    """
    if isinstance(value, bool):
        raise MalformedDataError(
            f"Field {field} must be a number, got boolean",
            raw_data=repr(value),
            expected_format="number"
        )
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise MalformedDataError(
            f"Field {field} must be a number, got {value!r}",
            raw_data=repr(value),
            expected_format="number"
        ) from e

    if number != number:  # NaN
        raise MalformedDataError(f"Field {field} is NaN", raw_data=repr(value), expected_format="number")

    if minimum is not None and number < minimum:
        raise InvalidValueError(f"Field {field} must be >= {minimum:g}, got {number:g}",
                                field=field, value=number)
    return number


def _list_field(payload: dict[str, Any], key: str) -> list:
    """A list-valued model field; only an absent or null value means empty."""
    value = payload.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise MalformedDataError(f"Field model.{key} must be a list",
                                 raw_data=repr(value)[:200], expected_format="list")
    return value


def _optional_number(payload: dict[str, Any], key: str, field: str) -> Optional[float]:
    value = payload.get(key)
    if value is None or value == "":
        return None
    return parse_number(value, field)


def _parse_enum(enum_cls, value: Any, field: str, aliases: Optional[dict[str, str]] = None):
    raw = aliases.get(value, value) if aliases and isinstance(value, str) else value
    try:
        return enum_cls(raw)
    except ValueError as e:
        allowed = ", ".join(member.value for member in enum_cls)
        raise InvalidValueError(f"Field {field} must be one of: {allowed}; got {value!r}",
                                field=field, value=value) from e


def parse_unit_type(payload: dict[str, Any]) -> UnitType:
    """Parse a unit type document."""
    unit_type_id = _document_id(payload, "unit_type")
    return UnitType(
        id=unit_type_id,
        name=str(payload.get("name") or ""),
        starting_units=parse_number(payload.get("starting_units", 0), "unit_type.starting_units"),
        growth_type=_parse_enum(GrowthType, payload.get("growth_type", GrowthType.PERCENTAGE.value),
                                "unit_type.growth_type"),
        growth_value=parse_number(payload.get("growth_value", 0), "unit_type.growth_value"),
    )


def parse_pricing_tier(payload: dict[str, Any]) -> PricingTier:
    """
    Parse a slab document.

    A missing or null ``to_units`` means the tier is unbounded. Negative
    rates are kept as-is so slab validation can report them.
    """
    to_units = payload.get("to_units")
    return PricingTier(
        id=_document_id(payload, "slab", required=False),
        from_units=parse_number(_require(payload, "from_units", "slab"), "slab.from_units"),
        to_units=None if to_units is None or to_units == "" else parse_number(to_units, "slab.to_units"),
        rate_per_unit=parse_number(_require(payload, "rate_per_unit", "slab"), "slab.rate_per_unit",
                                   minimum=None),
        fee_type=_parse_enum(FeeType, payload.get("fee_type", FeeType.MONTHLY.value), "slab.fee_type",
                             aliases=FEE_TYPE_ALIASES),
    )


def parse_module(payload: dict[str, Any], position: int = 0) -> Module:
    """Parse a module document; ``position`` is the fallback display order."""
    slabs_payload = payload.get("slabs")
    if slabs_payload is None:
        slabs_payload = []
    if not isinstance(slabs_payload, list):
        raise MalformedDataError("Field module.slabs must be a list",
                                 raw_data=repr(slabs_payload), expected_format="list")

    unit_type_id = payload.get("unit_type_id")
    order = payload.get("order")
    return Module(
        id=_document_id(payload, "module"),
        module_name=str(_require(payload, "module_name", "module")),
        pricing_type=_parse_enum(PricingType, _require(payload, "pricing_type", "module"),
                                 "module.pricing_type"),
        unit_type_id=str(unit_type_id) if unit_type_id not in (None, "") else None,
        monthly_fee=_optional_number(payload, "monthly_fee", "module.monthly_fee"),
        one_time_fee=_optional_number(payload, "one_time_fee", "module.one_time_fee"),
        module_minimum_fee=_optional_number(payload, "module_minimum_fee", "module.module_minimum_fee"),
        slabs=tuple(parse_pricing_tier(slab) for slab in slabs_payload),
        order=int(parse_number(order, "module.order")) if order is not None else position,
    )


def parse_model(payload: Union[dict[str, Any], str]) -> Model:
    """
    Parse a model document into a Model aggregate.

    Args:
        payload: Model dict, or its JSON text

    Returns:
        Model with parsed unit types and modules

    Raises:
        MissingDataError: Required field absent
        MalformedDataError: Wrong shape or type
        InvalidValueError: Value outside its allowed range
    """
    if isinstance(payload, str):
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError as e:
            raise MalformedDataError(f"Failed to parse model JSON: {e}",
                                     raw_data=payload[:200], expected_format="json") from e

    if not isinstance(payload, dict):
        raise MalformedDataError("Model document must be an object",
                                 raw_data=repr(payload)[:200], expected_format="object")

    unit_types_payload = _list_field(payload, "unit_types")
    modules_payload = _list_field(payload, "modules")

    return Model(
        id=_document_id(payload, "model"),
        name=str(_require(payload, "name", "model")),
        description=str(payload.get("description") or ""),
        minimum_fee=parse_number(payload.get("minimum_fee") or 0, "model.minimum_fee"),
        implementation_fee=parse_number(payload.get("implementation_fee") or 0, "model.implementation_fee"),
        status=_parse_enum(ModelStatus, payload.get("status") or ModelStatus.ACTIVE.value, "model.status"),
        unit_types=tuple(parse_unit_type(u) for u in unit_types_payload),
        modules=tuple(parse_module(m, position) for position, m in enumerate(modules_payload)),
    )

"""Pytest configuration and shared fixtures."""

import pytest
from typing import Dict, Any

from pricing_app.data.models import (
    GrowthType,
    Model,
    Module,
    PricingTier,
    PricingType,
    UnitType,
)


@pytest.fixture
def seats_unit_type() -> UnitType:
    """Unit type growing 10% per period from 100."""
    return UnitType(
        id="ut-seats",
        name="Seats",
        starting_units=100,
        growth_type=GrowthType.PERCENTAGE,
        growth_value=10,
    )


@pytest.fixture
def two_tier_slabs() -> tuple:
    """Contiguous tiers: 0-100 at 100/unit, 100+ at 75/unit."""
    return (
        PricingTier(from_units=0, to_units=100, rate_per_unit=100),
        PricingTier(from_units=100, to_units=None, rate_per_unit=75),
    )


@pytest.fixture
def flat_model(seats_unit_type) -> Model:
    """Single flat module of 1000 with a 500 implementation fee."""
    return Model(
        id="model-flat",
        name="Flat Starter",
        minimum_fee=0,
        implementation_fee=500,
        unit_types=(seats_unit_type,),
        modules=(
            Module(
                id="mod-platform",
                module_name="Platform",
                pricing_type=PricingType.FLAT,
                unit_type_id="ut-seats",
                monthly_fee=1000,
            ),
        ),
    )


@pytest.fixture
def mixed_model(seats_unit_type, two_tier_slabs) -> Model:
    """Model with flat, per-unit and slab modules across two unit types."""
    api_calls = UnitType(
        id="ut-api",
        name="API calls",
        starting_units=1000,
        growth_type=GrowthType.FIXED,
        growth_value=500,
    )
    return Model(
        id="model-mixed",
        name="Mixed Usage",
        minimum_fee=5000,
        implementation_fee=2000,
        unit_types=(seats_unit_type, api_calls),
        modules=(
            Module(
                id="mod-support",
                module_name="Support",
                pricing_type=PricingType.FLAT,
                unit_type_id="ut-seats",
                monthly_fee=300,
                order=1,
            ),
            Module(
                id="mod-seats",
                module_name="Seat licences",
                pricing_type=PricingType.SLAB,
                unit_type_id="ut-seats",
                slabs=two_tier_slabs,
                order=2,
            ),
            Module(
                id="mod-api",
                module_name="API Access",
                pricing_type=PricingType.PER_UNIT,
                unit_type_id="ut-api",
                monthly_fee=0.5,
                module_minimum_fee=200,
                order=3,
            ),
        ),
    )


@pytest.fixture
def sample_model_document() -> Dict[str, Any]:
    """Model document as served by the REST layer."""
    return {
        "_id": "64f1c0ffee",
        "name": "Growth Plan",
        "description": "Seats plus usage",
        "minimum_fee": 1500,
        "implementation_fee": 750,
        "status": "active",
        "unit_types": [
            {
                "_id": "ut-1",
                "name": "Seats",
                "starting_units": 50,
                "growth_type": "percentage",
                "growth_value": 5,
            },
        ],
        "modules": [
            {
                "_id": "mod-1",
                "unit_type_id": "ut-1",
                "module_name": "Core",
                "pricing_type": "per_unit",
                "monthly_fee": 20,
                "module_minimum_fee": 0,
                "order": 1,
                "slabs": [],
            },
            {
                "_id": "mod-2",
                "unit_type_id": "ut-1",
                "module_name": "Analytics",
                "pricing_type": "slab",
                "order": 2,
                "slabs": [
                    {"from_units": 0, "to_units": 25, "rate_per_unit": 10, "fee_type": "monthly"},
                    {"from_units": 25, "to_units": None, "rate_per_unit": 8, "fee_type": "one-time"},
                ],
            },
        ],
    }

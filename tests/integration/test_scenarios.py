"""
End-to-end projection scenarios.

Each test drives the engine from a raw model document through validation,
projection, summary and CSV export.
"""

import pytest

from pricing_app.data.models import PricingTier
from pricing_app.engine import ProjectionEngine
from pricing_app.errors import InvalidModelError
from pricing_app.pricing.slabs import calculate_slab_fee
from pricing_app.validation import validate_slabs


@pytest.fixture
def engine():
    return ProjectionEngine()


@pytest.fixture
def starter_document():
    """One growing unit type priced by a flat module."""
    return {
        "id": "starter",
        "name": "Starter",
        "minimum_fee": 0,
        "implementation_fee": 500,
        "unit_types": [
            {"id": "ut-seats", "starting_units": 100, "growth_type": "percentage", "growth_value": 10},
        ],
        "modules": [
            {"id": "mod-flat", "module_name": "Platform", "pricing_type": "flat",
             "unit_type_id": "ut-seats", "monthly_fee": 1000},
        ],
    }


class TestProjectionScenarios:
    """Test complete projection flows"""

    def test_flat_module_with_implementation_fee(self, engine, starter_document):
        """Test flat fee with growing units and a two-period implementation fee"""
        results = engine.generate(starter_document, "2024-01-01", periods=3, interval="monthly")

        assert [(r.units, r.total_fee) for r in results] == [(0, 1500.0), (110, 1500.0), (121, 1000.0)]
        assert [r.date.isoformat() for r in results] == ["2024-01-01", "2024-02-01", "2024-03-01"]
        assert results[0].to_dict()["breakdown"] == {
            "module_fees": [{"module_name": "Platform", "fee": 1000.0}],
            "minimum_fee": 0.0,
            "implementation_fee": 500.0,
        }

    def test_progressive_slab_fee(self):
        """Test slab pricing charges each tier at its own rate"""
        tiers = [
            PricingTier(from_units=0, to_units=100, rate_per_unit=100),
            PricingTier(from_units=100, to_units=None, rate_per_unit=75),
        ]
        assert calculate_slab_fee(150, tiers) == 13750

    def test_slabs_must_start_at_zero(self):
        """Test a tier set starting above zero is invalid"""
        result = validate_slabs([PricingTier(from_units=50, to_units=None, rate_per_unit=10)])

        assert result.valid is False
        assert any("start at 0" in error for error in result.errors)

    def test_interactive_edit_flow(self, engine, starter_document):
        """Test edit, recompute, summarise and export"""
        overrides = engine.edit_units(starter_document, None, "ut-seats", 1, 200)
        overrides = engine.edit_units(starter_document, overrides, "ut-seats", 3, 50)
        results = engine.generate(starter_document, "2024-01-01", periods=5, overrides=overrides)

        assert [r.units for r in results] == [0, 200, 220, 50, 55]

        summary = engine.summarize(results)
        assert summary.periods == 5
        assert summary.total_revenue == 6000.0
        assert summary.peak_units == 220

        csv_text = engine.export_csv(results, model_id="starter")
        assert csv_text.splitlines()[-1] == "5,2024-05-01,55,1000.00,0.00,No,1000.00"

    def test_earlier_edit_drops_later_overrides(self, engine, starter_document):
        """Test re-editing an earlier period discards later edits"""
        overrides = engine.edit_units(starter_document, None, "ut-seats", 3, 50)
        overrides = engine.edit_units(starter_document, overrides, "ut-seats", 1, 200)
        results = engine.generate(starter_document, "2024-01-01", periods=4, overrides=overrides)

        assert [r.units for r in results] == [0, 200, 220, 242]

    def test_invalid_model_never_projected(self, engine, starter_document):
        """Test a slab module with a gap stops the projection"""
        starter_document["modules"].append({
            "id": "mod-slab", "module_name": "Seats", "pricing_type": "slab",
            "unit_type_id": "ut-seats",
            "slabs": [
                {"from_units": 0, "to_units": 50, "rate_per_unit": 5},
                {"from_units": 60, "to_units": None, "rate_per_unit": 4},
            ],
        })

        with pytest.raises(InvalidModelError):
            engine.generate(starter_document, "2024-01-01", periods=3)

#!/usr/bin/env python3
"""
Basic Usage Example - Pricing Model Projection Engine

This script demonstrates the basic usage of the projection engine with a
sample pricing model document. It shows how to:
- Initialize the engine
- Validate a model document
- Generate a monthly projection
- Apply a manual unit edit and recompute
- Summarise and export the result

Run: python examples/basic_usage.py
"""

from typing import Dict, Any

from pricing_app.engine import ProjectionEngine


def create_sample_model() -> Dict[str, Any]:
    """Create a sample model document with seat and API usage."""
    return {
        "id": "demo-growth",
        "name": "Growth Plan",
        "minimum_fee": 5000,
        "implementation_fee": 2000,
        "unit_types": [
            {"id": "seats", "name": "Seats", "starting_units": 100,
             "growth_type": "percentage", "growth_value": 10},
            {"id": "api", "name": "API calls (thousands)", "starting_units": 1000,
             "growth_type": "fixed", "growth_value": 500},
        ],
        "modules": [
            {"id": "support", "module_name": "Support", "pricing_type": "flat",
             "monthly_fee": 300, "order": 1},
            {"id": "licences", "module_name": "Seat licences", "pricing_type": "slab",
             "unit_type_id": "seats", "order": 2,
             "slabs": [
                 {"from_units": 0, "to_units": 100, "rate_per_unit": 100},
                 {"from_units": 100, "to_units": None, "rate_per_unit": 75},
             ]},
            {"id": "api-access", "module_name": "API Access", "pricing_type": "per_unit",
             "unit_type_id": "api", "monthly_fee": 0.5, "module_minimum_fee": 200, "order": 3},
        ],
    }


def print_projection(results) -> None:
    print(f"{'Period':>6}  {'Date':<10}  {'Units':>7}  {'Total':>12}  Minimum")
    for row in results:
        print(f"{row.period + 1:>6}  {row.date.isoformat():<10}  {row.units:>7}  "
              f"{row.total_fee:>12,.2f}  {'yes' if row.minimum_applied else ''}")


def main():
    """Run the projection walkthrough."""
    engine = ProjectionEngine()
    engine.apply_logging_config(overrides={"logging": {"level": "WARNING"}})
    model = engine.load_model(create_sample_model())

    errors = engine.validate(model)
    if errors:
        for error in errors:
            print(f"Invalid model: {error.field}: {error.message}")
        return

    print("=== Baseline projection ===")
    results = engine.generate(model, "2024-01-01", periods=6)
    print_projection(results)

    print("\n=== Seats edited to 250 in period 3 ===")
    overrides = engine.edit_units(model, None, "seats", 2, 250)
    edited = engine.generate(model, "2024-01-01", periods=6, overrides=overrides)
    print_projection(edited)

    summary = engine.summarize(edited)
    print(f"\nTotal revenue: {summary.total_revenue:,.2f}")
    print(f"Average per period: {summary.average_per_period:,.2f}")
    print(f"Implementation fees: {summary.total_implementation_fees:,.2f}")

    print("\n=== Minimum fee raised to 12,000 ===")
    stricter = model.with_fees(minimum_fee=12000)
    print_projection(engine.generate(stricter, "2024-01-01", periods=6, overrides=overrides))

    print("\n=== CSV ===")
    print(engine.export_csv(edited, model_id=model.id))


if __name__ == "__main__":
    main()

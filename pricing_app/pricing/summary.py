"""Headline figures over a generated projection"""

from collections.abc import Sequence

from ..models.projection import ProjectionResult, ProjectionSummary


def summarize_projection(results: Sequence[ProjectionResult]) -> ProjectionSummary:
    """Total and average revenue, implementation fees and peak units"""
    if not results:
        return ProjectionSummary(
            periods=0,
            total_revenue=0.0,
            average_per_period=0.0,
            total_implementation_fees=0.0,
            peak_units=0,
            minimum_applied_periods=0
        )

    total_revenue = sum(r.total_fee for r in results)
    return ProjectionSummary(
        periods=len(results),
        total_revenue=total_revenue,
        average_per_period=total_revenue / len(results),
        total_implementation_fees=sum(r.one_time_fee for r in results),
        peak_units=max(r.units for r in results),
        minimum_applied_periods=sum(1 for r in results if r.minimum_applied)
    )

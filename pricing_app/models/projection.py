"""Data models for fee calculations and projection results"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional


@dataclass(frozen=True)
class ModuleFee:
    """Fee charged by a single module in one period"""
    module_name: str
    fee: float
    module_id: Optional[str] = None
    units: float = 0


@dataclass(frozen=True)
class FeeBreakdown:
    """How a period total was assembled"""
    module_fees: tuple[ModuleFee, ...] = ()
    subtotal: float = 0.0              # sum of module fees before the floor
    minimum_fee: float = 0.0           # model minimum fee amount
    minimum_applied: bool = False
    implementation_fee: float = 0.0    # implementation fee charged this period

    def to_dict(self) -> dict[str, Any]:
        return {
            "module_fees": [
                {"module_name": m.module_name, "fee": m.fee} for m in self.module_fees
            ],
            "minimum_fee": self.minimum_fee,
            "implementation_fee": self.implementation_fee,
        }


@dataclass(frozen=True)
class PeriodTotal:
    """Aggregated fee for one period of a model"""
    period: int
    total: float
    breakdown: FeeBreakdown
    unit_type_units: dict[str, int] = field(default_factory=dict)

    @property
    def recurring_fee(self) -> float:
        """Total excluding the implementation fee"""
        return self.total - self.breakdown.implementation_fee


@dataclass(frozen=True)
class ProjectionResult:
    """One row of a revenue projection"""
    period: int
    date: date
    units: int
    total_fee: float
    breakdown: FeeBreakdown
    unit_type_units: dict[str, int] = field(default_factory=dict)

    @property
    def one_time_fee(self) -> float:
        return self.breakdown.implementation_fee

    @property
    def monthly_fee(self) -> float:
        return self.total_fee - self.breakdown.implementation_fee

    @property
    def minimum_applied(self) -> bool:
        return self.breakdown.minimum_applied

    def to_dict(self) -> dict[str, Any]:
        """JSON-shaped representation matching the stored projection rows"""
        return {
            "period": self.period,
            "date": self.date.isoformat(),
            "units": self.units,
            "total_fee": self.total_fee,
            "breakdown": self.breakdown.to_dict(),
        }


@dataclass(frozen=True)
class ProjectionSummary:
    """Headline figures across a projection"""
    periods: int
    total_revenue: float
    average_per_period: float
    total_implementation_fees: float
    peak_units: int
    minimum_applied_periods: int

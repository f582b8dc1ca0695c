"""
Canonical data models for pricing model snapshots.

This module defines immutable data structures for a pricing model and the
entities it owns. A Model is the root aggregate: it owns its unit types and
modules, and catalogue edits return a new Model instead of mutating one.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterator, Optional


class PricingType(str, Enum):
    """How a module turns a unit count into a fee."""
    FLAT = "flat"
    PER_UNIT = "per_unit"
    SLAB = "slab"


class GrowthType(str, Enum):
    """Growth law for a unit type."""
    FIXED = "fixed"
    PERCENTAGE = "percentage"


class FeeType(str, Enum):
    """Billing cadence recorded on a pricing tier."""
    MONTHLY = "monthly"
    ANNUAL = "annual"
    ONE_TIME = "one_time"


class ProjectionInterval(str, Enum):
    """Cadence between projection periods."""
    MONTHLY = "monthly"
    YEARLY = "yearly"


class ModelStatus(str, Enum):
    """Lifecycle status of a pricing model."""
    ACTIVE = "active"
    INACTIVE = "inactive"
    DRAFT = "draft"
    ARCHIVED = "archived"


@dataclass(frozen=True)
class UnitType:
    """An independently growing usage dimension (seats, API calls, ...)."""
    id: str
    starting_units: float = 0.0
    growth_type: GrowthType = GrowthType.PERCENTAGE
    growth_value: float = 0.0
    name: str = ""


@dataclass(frozen=True)
class PricingTier:
    """A unit-count range with its own per-unit rate."""
    from_units: float
    to_units: Optional[float]          # None = unbounded
    rate_per_unit: float
    fee_type: FeeType = FeeType.MONTHLY
    id: Optional[str] = None

    @property
    def is_unbounded(self) -> bool:
        return self.to_units is None


@dataclass(frozen=True)
class Module:
    """A priced component of a model, tied to one unit type."""
    id: str
    module_name: str
    pricing_type: PricingType
    unit_type_id: Optional[str] = None
    monthly_fee: Optional[float] = None       # flat amount or per-unit rate
    one_time_fee: Optional[float] = None
    module_minimum_fee: Optional[float] = None
    slabs: tuple[PricingTier, ...] = ()
    order: int = 0

    @property
    def uses_units(self) -> bool:
        """True when the fee depends on the unit count."""
        return self.pricing_type in (PricingType.PER_UNIT, PricingType.SLAB)


@dataclass(frozen=True)
class Model:
    """Root pricing model aggregate."""
    id: str
    name: str
    minimum_fee: float = 0.0
    implementation_fee: float = 0.0
    status: ModelStatus = ModelStatus.ACTIVE
    description: str = ""
    modules: tuple[Module, ...] = ()
    unit_types: tuple[UnitType, ...] = ()

    @classmethod
    def create(cls, model_id: str, name: str, description: str = "") -> "Model":
        """Create a new model with zero fees and an empty catalogue."""
        return cls(id=model_id, name=name, description=description)

    @property
    def unit_type_index(self) -> dict[str, UnitType]:
        return {unit_type.id: unit_type for unit_type in self.unit_types}

    @property
    def module_index(self) -> dict[str, Module]:
        return {module.id: module for module in self.modules}

    def get_unit_type(self, unit_type_id: str) -> Optional[UnitType]:
        return self.unit_type_index.get(unit_type_id)

    def get_module(self, module_id: str) -> Optional[Module]:
        return self.module_index.get(module_id)

    def ordered_modules(self) -> list[Module]:
        """Modules sorted by display order (stable for equal orders)."""
        return sorted(self.modules, key=lambda m: m.order)

    def modules_for_unit_type(self, unit_type_id: str) -> list[Module]:
        return [m for m in self.ordered_modules() if m.unit_type_id == unit_type_id]

    def with_unit_type(self, unit_type: UnitType) -> "Model":
        """Add a unit type, replacing any existing one with the same id."""
        if unit_type.id in self.unit_type_index:
            unit_types = tuple(
                unit_type if existing.id == unit_type.id else existing
                for existing in self.unit_types
            )
        else:
            unit_types = self.unit_types + (unit_type,)
        return replace(self, unit_types=unit_types)

    def without_unit_type(self, unit_type_id: str) -> "Model":
        """Remove a unit type together with every module that references it."""
        return replace(
            self,
            unit_types=tuple(u for u in self.unit_types if u.id != unit_type_id),
            modules=tuple(m for m in self.modules if m.unit_type_id != unit_type_id),
        )

    def with_module(self, module: Module) -> "Model":
        """
        Add a module, replacing any existing one with the same id.

        New modules added with order 0 are placed after the current last module.
        """
        if module.id in self.module_index:
            modules = tuple(module if m.id == module.id else m for m in self.modules)
            return replace(self, modules=modules)

        if module.order == 0 and self.modules:
            module = replace(module, order=max(m.order for m in self.modules) + 1)
        return replace(self, modules=self.modules + (module,))

    def without_module(self, module_id: str) -> "Model":
        return replace(self, modules=tuple(m for m in self.modules if m.id != module_id))

    def with_fees(self, minimum_fee: Optional[float] = None,
                  implementation_fee: Optional[float] = None) -> "Model":
        """Return a copy with updated model-level fees."""
        return replace(
            self,
            minimum_fee=self.minimum_fee if minimum_fee is None else minimum_fee,
            implementation_fee=(self.implementation_fee if implementation_fee is None
                                else implementation_fee),
        )


@dataclass(frozen=True)
class UnitOverride:
    """A manually entered unit count for one unit type at one period."""
    unit_type_id: str
    period: int
    units: float


@dataclass(frozen=True)
class UnitOverrides:
    """Immutable set of manual unit overrides, at most one per (unit type, period)."""
    entries: tuple[UnitOverride, ...] = field(default_factory=tuple)

    @classmethod
    def empty(cls) -> "UnitOverrides":
        return cls()

    def __iter__(self) -> Iterator[UnitOverride]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def for_unit_type(self, unit_type_id: str) -> list[UnitOverride]:
        """Overrides for one unit type ordered by period."""
        return sorted(
            (o for o in self.entries if o.unit_type_id == unit_type_id),
            key=lambda o: o.period,
        )

    def governing(self, unit_type_id: str, period: int) -> Optional[UnitOverride]:
        """The latest override at or before ``period`` for the unit type."""
        candidates = [o for o in self.for_unit_type(unit_type_id) if o.period <= period]
        return candidates[-1] if candidates else None

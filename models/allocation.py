from dataclasses import dataclass, field
from typing import List, Tuple

from models.building import Building
from models.family import Family
from models.diagnostics import PackingWarning


@dataclass
class AllocationRecord:
    """Mutable packing state for one building."""
    building: Building
    capacity_filled: int = 0
    assigned: List[Tuple[Family, str]] = field(default_factory=list)  # (family, owning group name)

    @property
    def remaining_capacity(self) -> int:
        return self.building.capacity - self.capacity_filled

    def copy(self) -> "AllocationRecord":
        return AllocationRecord(self.building, self.capacity_filled, list(self.assigned))


@dataclass
class BuildingGroupAllocation:
    name: str
    priority: int
    records: List[AllocationRecord] = field(default_factory=list)

    @property
    def remaining_capacity(self) -> int:
        return sum(r.remaining_capacity for r in self.records)


@dataclass(frozen=True)
class Assignment:
    family_name: str
    family_size: int
    family_group: str     # "" when placed by direct request or request fallback
    building_name: str
    building_group: str


@dataclass(frozen=True)
class BuildingResult:
    name: str
    priority: int
    capacity: int
    capacity_filled: int
    building_group: str = ""
    housing_type: str = ""
    family_count: int = 0

    @property
    def utilization_pct(self) -> float:
        return self.capacity_filled / self.capacity if self.capacity > 0 else 0.0


@dataclass
class PackingResult:
    assignments: List[Assignment] = field(default_factory=list)
    no_matches: List[Family] = field(default_factory=list)
    building_results: List[BuildingResult] = field(default_factory=list)
    warnings: List[PackingWarning] = field(default_factory=list)

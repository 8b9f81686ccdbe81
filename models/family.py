from dataclasses import dataclass, field
from typing import List, Optional

# Family group origins
GROUPED = "grouped"
REQUEST_FALLBACK = "request_fallback"


@dataclass(frozen=True)
class Family:
    name: str
    size: int
    required_housing_type: Optional[str] = None  # None = any housing type


@dataclass(frozen=True)
class FamilyRequestingBuilding(Family):
    requested_building_name: str = ""

    def as_family(self) -> Family:
        return Family(self.name, self.size, self.required_housing_type)


@dataclass
class FamilyGroup:
    name: str
    priority: int
    families: List[Family] = field(default_factory=list)
    origin: str = GROUPED

    @property
    def size(self) -> int:
        return sum(f.size for f in self.families)

    @property
    def is_request_fallback(self) -> bool:
        return self.origin == REQUEST_FALLBACK

from dataclasses import dataclass, field
from typing import List

COTTAGE = "cottage"
HOTEL = "hotel"
HOUSING_TYPES = (COTTAGE, HOTEL)


@dataclass(frozen=True)
class Building:
    name: str
    capacity: int
    housing_type: str  # "cottage" or "hotel"

    @property
    def lookup_key(self) -> str:
        """Building names are matched case-insensitively."""
        return self.name.lower()


@dataclass
class BuildingGroup:
    name: str
    priority: int  # rank: 1 is filled before 2
    buildings: List[Building] = field(default_factory=list)

    @property
    def total_capacity(self) -> int:
        return sum(b.capacity for b in self.buildings)

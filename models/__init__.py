from models.building import Building, BuildingGroup, COTTAGE, HOTEL, HOUSING_TYPES
from models.family import Family, FamilyGroup, FamilyRequestingBuilding, GROUPED, REQUEST_FALLBACK
from models.allocation import (
    AllocationRecord, BuildingGroupAllocation, Assignment, BuildingResult, PackingResult,
)
from models.diagnostics import PackingWarning, PackingInputError

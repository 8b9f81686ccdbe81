"""Group-aware first-fit packing of families into buildings: the core engine.

A run has four phases:

1. Normalize: copy buildings into allocation records, order building groups
   and family groups by priority rank and families by descending size.
2. Honor requests: place families that asked for a specific building, or
   demote them into request-fallback groups.
3. Group-pack: place each family group as a whole into the first building
   group that can take all of it.
4. Report: derive assignments, per-building fill and unmatched families.

Nothing here performs I/O or mutates its arguments; warnings are returned
on the result.
"""

from dataclasses import replace
from typing import Dict, List, Optional, Tuple

from models.building import BuildingGroup
from models.family import Family, FamilyGroup, FamilyRequestingBuilding, REQUEST_FALLBACK
from models.allocation import (
    AllocationRecord, BuildingGroupAllocation, Assignment, BuildingResult, PackingResult,
)
from models.diagnostics import PackingWarning, UNKNOWN_BUILDING, REQUEST_FAILED
from engine.explainer import explain_unknown_building, explain_request_failure
from config.defaults import FALLBACK_GROUP_PRIORITY_START


def try_assign(family: Family, record: AllocationRecord, family_group_name: str = "") -> bool:
    """Place a family into a building if it fits and the housing type matches.

    Returns False without touching the record otherwise.
    """
    if family.size > record.remaining_capacity:
        return False
    if family.required_housing_type and family.required_housing_type != record.building.housing_type:
        return False

    record.capacity_filled += family.size
    record.assigned.append((family, family_group_name))
    return True


class GroupWorkingSet:
    """Copy-on-attempt snapshot of one building group's allocation records.

    Families are placed against the copies; the building group only sees the
    placements once commit() is called. Dropping the working set discards them.
    """

    def __init__(self, allocation_group: BuildingGroupAllocation):
        self._allocation_group = allocation_group
        self.records = [record.copy() for record in allocation_group.records]
        self.committed = False

    @property
    def remaining_capacity(self) -> int:
        return sum(r.remaining_capacity for r in self.records)

    def place(self, family: Family, family_group_name: str = "") -> bool:
        """First fit: the first building in list order that accepts the family."""
        return any(try_assign(family, record, family_group_name) for record in self.records)

    def place_all(self, family_group: FamilyGroup) -> bool:
        """Place every family of the group; stops at the first one that does not fit."""
        return all(self.place(family, family_group.name) for family in family_group.families)

    def commit(self):
        self._allocation_group.records = self.records
        self.committed = True


# --- Phase 1: normalize ---

def prepare_building_groups(building_groups: List[BuildingGroup]) -> List[BuildingGroupAllocation]:
    """Create zero-fill allocation records, building groups ordered by priority rank."""
    allocation_groups = [
        BuildingGroupAllocation(
            name=group.name,
            priority=group.priority,
            records=[AllocationRecord(building) for building in group.buildings],
        )
        for group in building_groups
    ]
    # Stable: equal priorities keep their input order
    return sorted(allocation_groups, key=lambda g: g.priority)


def _family_group_sort_key(family_group: FamilyGroup) -> Tuple[bool, int]:
    # Request fallbacks after every named group, whatever their priority number
    return family_group.is_request_fallback, family_group.priority


def order_family_groups(family_groups: List[FamilyGroup]) -> List[FamilyGroup]:
    """Return copies ordered by priority rank, families largest first within each group."""
    ordered = []
    for group in sorted(family_groups, key=_family_group_sort_key):
        families = sorted(group.families, key=lambda f: f.size, reverse=True)
        ordered.append(replace(group, families=families))
    return ordered


# --- Phase 2: honor requests ---

def build_index(allocation_groups: List[BuildingGroupAllocation]) -> Dict[str, AllocationRecord]:
    """Case-insensitive building name -> record. A later duplicate name wins."""
    index = {}
    for group in allocation_groups:
        for record in group.records:
            index[record.building.lookup_key] = record
    return index


def make_fallback_group(family: Family, priority: int, housing_type_hint: Optional[str] = None) -> FamilyGroup:
    """Singleton group for a family whose request failed.

    The hint only applies when the family has no housing type of its own.
    """
    required = family.required_housing_type or housing_type_hint
    return FamilyGroup(
        name="",
        priority=priority,
        families=[Family(family.name, family.size, required)],
        origin=REQUEST_FALLBACK,
    )


def honor_requests(
    requesting_families: List[FamilyRequestingBuilding],
    allocation_groups: List[BuildingGroupAllocation],
    warnings: List[PackingWarning],
) -> List[FamilyGroup]:
    """Place requested families directly. Returns fallback groups for the ones that failed."""
    if not requesting_families:
        return []

    index = build_index(allocation_groups)
    fallback_groups = []
    next_priority = FALLBACK_GROUP_PRIORITY_START

    for requesting in requesting_families:
        family = requesting.as_family()
        requested_name = requesting.requested_building_name
        record = index.get(requested_name.lower())

        if record is None:
            warnings.append(PackingWarning(
                kind=UNKNOWN_BUILDING,
                message=explain_unknown_building(family.name, requested_name),
                family_name=family.name,
                building_name=requested_name,
            ))
            fallback_groups.append(make_fallback_group(family, next_priority))
            next_priority += 1
            continue

        if try_assign(family, record):
            continue

        warnings.append(PackingWarning(
            kind=REQUEST_FAILED,
            message=explain_request_failure(family, requested_name, record),
            family_name=family.name,
            building_name=record.building.name,
        ))
        fallback_groups.append(make_fallback_group(family, next_priority, record.building.housing_type))
        next_priority += 1

    return fallback_groups


# --- Phase 3: group packing ---

def place_family_group(
    family_group: FamilyGroup,
    allocation_groups: List[BuildingGroupAllocation],
) -> Optional[BuildingGroupAllocation]:
    """Commit the family group into the first building group that takes all of it."""
    group_size = family_group.size
    for allocation_group in allocation_groups:
        # Cheap pre-filter; housing types can still make it fail
        if allocation_group.remaining_capacity < group_size:
            continue

        working_set = GroupWorkingSet(allocation_group)
        if working_set.place_all(family_group):
            working_set.commit()
            return allocation_group
    return None


def pack_family_groups(
    family_groups: List[FamilyGroup],
    allocation_groups: List[BuildingGroupAllocation],
) -> List[Family]:
    """Pack family groups in order. Returns the families of groups nobody could take."""
    no_matches = []
    for family_group in family_groups:
        if place_family_group(family_group, allocation_groups) is None:
            no_matches.extend(family_group.families)
    return no_matches


# --- Phase 4: report ---

def build_result(
    allocation_groups: List[BuildingGroupAllocation],
    no_matches: List[Family],
    warnings: List[PackingWarning],
) -> PackingResult:
    assignments = []
    building_results = []
    for group in allocation_groups:
        for record in group.records:
            building = record.building
            building_results.append(BuildingResult(
                name=building.name,
                priority=group.priority,
                capacity=building.capacity,
                capacity_filled=record.capacity_filled,
                building_group=group.name,
                housing_type=building.housing_type,
                family_count=len(record.assigned),
            ))
            for family, family_group_name in record.assigned:
                assignments.append(Assignment(
                    family_name=family.name,
                    family_size=family.size,
                    family_group=family_group_name,
                    building_name=building.name,
                    building_group=group.name,
                ))

    return PackingResult(
        assignments=assignments,
        no_matches=list(no_matches),
        building_results=building_results,
        warnings=list(warnings),
    )


def pack_buildings(
    building_groups: List[BuildingGroup],
    family_groups: List[FamilyGroup],
    requesting_families: Optional[List[FamilyRequestingBuilding]] = None,
) -> PackingResult:
    """Full packing pipeline: normalize, honor requests, pack groups, report."""
    warnings: List[PackingWarning] = []

    allocation_groups = prepare_building_groups(building_groups)
    fallback_groups = honor_requests(requesting_families or [], allocation_groups, warnings)
    ordered_groups = order_family_groups(list(family_groups) + fallback_groups)

    no_matches = pack_family_groups(ordered_groups, allocation_groups)
    return build_result(allocation_groups, no_matches, warnings)

"""Generates human-readable messages for packing and parsing warnings."""

from models.allocation import AllocationRecord
from models.family import Family


def explain_unknown_building(family_name: str, requested_building_name: str) -> str:
    return (
        f"Could not assign family '{family_name}' to requested building "
        f"'{requested_building_name}' because the building does not exist."
    )


def explain_request_failure(family: Family, requested_building_name: str, record: AllocationRecord) -> str:
    """Say why a direct request could not be honored: wrong housing type or not enough room."""
    building = record.building
    if family.required_housing_type and family.required_housing_type != building.housing_type:
        reason = (
            f"the family requires a {family.required_housing_type} and the building is a "
            f"{building.housing_type}"
        )
    else:
        reason = (
            f"the building is full ({record.remaining_capacity} of {building.capacity} places left, "
            f"family of {family.size})"
        )
    return (
        f"Could not assign family '{family.name}' to requested building "
        f"'{requested_building_name}' because {reason}."
    )


def explain_unparseable_housing_type(value: str) -> str:
    return f"Could not parse housing type '{value}', defaulting to any."


def explain_unparseable_family_size(family_name: str, value: str) -> str:
    return f"Skipping family '{family_name}': Could not parse family size '{value}'"


def explain_unparseable_group_priority(family_name: str, group_number: str) -> str:
    return (
        f"Skipping family '{family_name}': Could not parse priority from group number "
        f"'{group_number}'"
    )

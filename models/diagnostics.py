from dataclasses import dataclass
from typing import Optional

# Warning kinds
UNKNOWN_BUILDING = "unknown_building"
REQUEST_FAILED = "request_failed"
UNPARSEABLE_HOUSING_TYPE = "unparseable_housing_type"
UNPARSEABLE_FAMILY_SIZE = "unparseable_family_size"
UNPARSEABLE_GROUP_PRIORITY = "unparseable_group_priority"


@dataclass(frozen=True)
class PackingWarning:
    kind: str
    message: str
    family_name: Optional[str] = None
    building_name: Optional[str] = None


class PackingInputError(Exception):
    """Building data that makes a packing run meaningless."""

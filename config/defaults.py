"""Default configuration constants for the Family Housing Planner."""

# Display priority of synthesized request-fallback groups (1000, 1001, ...).
# Ordering does not depend on it: fallback groups always follow named groups.
FALLBACK_GROUP_PRIORITY_START = 1000

# Family input columns
FAMILY_GROUP_COLUMN = "Group number"
FAMILY_HOUSING_TYPE_COLUMN = "Total # Room Type"
FAMILY_SIZE_COLUMN = "Total # people"
FAMILY_FIRST_NAME_COLUMN = "Primary Registrant"
FAMILY_LAST_NAME_COLUMN = "Primary Registrant Last"
FAMILY_REQUESTED_BUILDING_COLUMN = "House/Hotel Name Assigned"
FAMILY_EMAIL_COLUMN = "Email"

# Building input columns
BUILDING_NAME_COLUMN = "Name"
BUILDING_HOUSING_TYPE_COLUMN = "Housing Type"
BUILDING_GROUP_COLUMN = "Building Group #"
BUILDING_CAPACITY_COLUMN = "Total Capacity"

# Group naming
FAMILY_GROUP_NAME_PREFIX = "Group"
BUILDING_GROUP_NAME_PREFIX = "BuildingGroup"

# Report columns
REPORT_COLUMNS = ["Family", "Family Group", "Family Size", "Building Name"]

# Command line file names
DEFAULT_FAMILIES_PATH = "input_families.csv"
DEFAULT_BUILDINGS_PATH = "input_buildings.csv"
DEFAULT_REPORT_PATH = "building-assignments.csv"

# Building fill alert thresholds
BUILDING_SATURATION_THRESHOLD = 0.90
BUILDING_LOW_FILL_THRESHOLD = 0.50

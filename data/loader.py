"""File upload parsing — CSV/XLSX into families, family groups and building groups."""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import pandas as pd

from models.building import Building, BuildingGroup, HOUSING_TYPES
from models.family import Family, FamilyGroup, FamilyRequestingBuilding
from models.diagnostics import (
    PackingWarning, PackingInputError,
    UNPARSEABLE_HOUSING_TYPE, UNPARSEABLE_FAMILY_SIZE, UNPARSEABLE_GROUP_PRIORITY,
)
from engine.explainer import (
    explain_unparseable_housing_type, explain_unparseable_family_size,
    explain_unparseable_group_priority,
)
from config.defaults import (
    FAMILY_GROUP_COLUMN, FAMILY_HOUSING_TYPE_COLUMN, FAMILY_SIZE_COLUMN,
    FAMILY_FIRST_NAME_COLUMN, FAMILY_LAST_NAME_COLUMN,
    FAMILY_REQUESTED_BUILDING_COLUMN, FAMILY_EMAIL_COLUMN,
    BUILDING_NAME_COLUMN, BUILDING_HOUSING_TYPE_COLUMN, BUILDING_GROUP_COLUMN,
    BUILDING_CAPACITY_COLUMN, FAMILY_GROUP_NAME_PREFIX, BUILDING_GROUP_NAME_PREFIX,
)

FAMILY_REQUIRED_COLUMNS = [
    FAMILY_GROUP_COLUMN,
    FAMILY_SIZE_COLUMN,
    FAMILY_FIRST_NAME_COLUMN,
    FAMILY_LAST_NAME_COLUMN,
]

BUILDING_REQUIRED_COLUMNS = [
    BUILDING_NAME_COLUMN,
    BUILDING_HOUSING_TYPE_COLUMN,
    BUILDING_GROUP_COLUMN,
    BUILDING_CAPACITY_COLUMN,
]

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")
_FIRST_NUMBER = re.compile(r"([0-9]+)")


@dataclass
class FamilyParseResult:
    family_groups: List[FamilyGroup] = field(default_factory=list)
    requesting_families: List[FamilyRequestingBuilding] = field(default_factory=list)
    warnings: List[PackingWarning] = field(default_factory=list)

    @property
    def family_count(self) -> int:
        return sum(len(g.families) for g in self.family_groups) + len(self.requesting_families)


def _cell_text(value) -> str:
    """Cell value as stripped text; blank for missing cells."""
    if value is None:
        return ""
    if isinstance(value, float):
        if pd.isna(value):
            return ""
        if value.is_integer():
            return str(int(value))
    return str(value).strip()


def parse_leading_int(text: str) -> Optional[int]:
    """Integer at the start of the text ("4 people" -> 4), or None."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def parse_group_priority(group_number: str) -> Optional[int]:
    """First run of digits anywhere in a free-text group number ("A-12" -> 12)."""
    match = _FIRST_NUMBER.search(group_number)
    return int(match.group(1)) if match else None


def parse_housing_type(text: str) -> Tuple[Optional[str], Optional[str]]:
    """Map a free-text housing type to a known one.

    Returns (housing_type, warning message). Blank text means any type, silently.
    """
    if not text:
        return None, None
    lowered = text.lower()
    if lowered in HOUSING_TYPES:
        return lowered, None
    return None, explain_unparseable_housing_type(text)


def _require_columns(df: pd.DataFrame, required: List[str], file_label: str):
    missing = [col for col in required if col not in df.columns]
    if missing:
        raise PackingInputError(f"{file_label}: Missing required columns: {', '.join(missing)}")


def parse_families(df: pd.DataFrame) -> FamilyParseResult:
    """Convert a families DataFrame into family groups and building requests.

    Rows with an unparseable size or group number are skipped with a warning.
    """
    _require_columns(df, FAMILY_REQUIRED_COLUMNS, "Families")
    result = FamilyParseResult()
    group_map: Dict[str, FamilyGroup] = {}

    for _, row in df.iterrows():
        first = _cell_text(row[FAMILY_FIRST_NAME_COLUMN])
        last = _cell_text(row[FAMILY_LAST_NAME_COLUMN])
        email = _cell_text(row.get(FAMILY_EMAIL_COLUMN))
        family_name = f"{first} {last} ({email})"

        size_text = _cell_text(row[FAMILY_SIZE_COLUMN])
        size = parse_leading_int(size_text)
        if size is None or size <= 0:
            result.warnings.append(PackingWarning(
                kind=UNPARSEABLE_FAMILY_SIZE,
                message=explain_unparseable_family_size(family_name, size_text),
                family_name=family_name,
            ))
            continue

        housing_type, housing_warning = parse_housing_type(_cell_text(row.get(FAMILY_HOUSING_TYPE_COLUMN)))
        if housing_warning:
            result.warnings.append(PackingWarning(
                kind=UNPARSEABLE_HOUSING_TYPE,
                message=housing_warning,
                family_name=family_name,
            ))

        requested_building = _cell_text(row.get(FAMILY_REQUESTED_BUILDING_COLUMN))
        if requested_building:
            result.requesting_families.append(FamilyRequestingBuilding(
                name=family_name,
                size=size,
                required_housing_type=housing_type,
                requested_building_name=requested_building,
            ))
            continue

        group_number = _cell_text(row[FAMILY_GROUP_COLUMN])
        priority = parse_group_priority(group_number)
        if priority is None:
            result.warnings.append(PackingWarning(
                kind=UNPARSEABLE_GROUP_PRIORITY,
                message=explain_unparseable_group_priority(family_name, group_number),
                family_name=family_name,
            ))
            continue

        group_name = FAMILY_GROUP_NAME_PREFIX + group_number
        if group_name not in group_map:
            group_map[group_name] = FamilyGroup(name=group_name, priority=priority)
        group_map[group_name].families.append(Family(family_name, size, housing_type))

    result.family_groups = list(group_map.values())
    return result


def parse_buildings(df: pd.DataFrame) -> List[BuildingGroup]:
    """Convert a buildings DataFrame into building groups.

    Any malformed row aborts the whole load: building data defines the capacity
    being packed.
    """
    _require_columns(df, BUILDING_REQUIRED_COLUMNS, "Buildings")
    group_map: Dict[str, BuildingGroup] = {}

    for _, row in df.iterrows():
        name = _cell_text(row[BUILDING_NAME_COLUMN])
        if not name:
            raise PackingInputError("Building rows require a name.")

        priority = parse_leading_int(_cell_text(row[BUILDING_GROUP_COLUMN]))
        if priority is None:
            raise PackingInputError(f"Could not parse building group priority for '{name}'")

        capacity = parse_leading_int(_cell_text(row[BUILDING_CAPACITY_COLUMN]))
        if capacity is None:
            raise PackingInputError(f"Could not parse building group capacity for '{name}'")
        if capacity <= 0:
            raise PackingInputError(f"Building '{name}' must have a positive capacity, got {capacity}")

        housing_text = _cell_text(row[BUILDING_HOUSING_TYPE_COLUMN])
        housing_type = housing_text.lower()
        if housing_type not in HOUSING_TYPES:
            raise PackingInputError(
                f"Unknown housing type '{housing_text}' for building '{name}'. "
                f"Expected one of: {', '.join(HOUSING_TYPES)}"
            )

        group_name = f"{BUILDING_GROUP_NAME_PREFIX}{priority}"
        if group_name not in group_map:
            group_map[group_name] = BuildingGroup(name=group_name, priority=priority)
        group_map[group_name].buildings.append(Building(name, capacity, housing_type))

    return list(group_map.values())


def load_file(uploaded_file) -> pd.DataFrame:
    """Load an uploaded file (CSV or XLSX) into a DataFrame of text cells."""
    name = uploaded_file.name.lower()
    if name.endswith(".csv"):
        return pd.read_csv(uploaded_file, dtype=str, keep_default_na=False)
    elif name.endswith(".xlsx") or name.endswith(".xls"):
        return pd.read_excel(uploaded_file, engine="openpyxl", dtype=str, keep_default_na=False)
    else:
        raise ValueError(f"Unsupported file format: {name}. Use CSV or XLSX.")


# Expected sheet names for a two-tab Excel workbook (case-insensitive matching)
SHEET_ALIASES = {
    "families": ["families", "family", "registrations", "input families", "family registrations"],
    "buildings": ["buildings", "building", "housing", "input buildings", "building master"],
}


def _match_sheet(sheet_names: List[str], category: str) -> str:
    """Find a sheet name matching the given category. Returns the matched name or raises."""
    aliases = SHEET_ALIASES[category]
    lower_map = {s.lower().strip(): s for s in sheet_names}
    for alias in aliases:
        if alias in lower_map:
            return lower_map[alias]
    raise ValueError(
        f"Could not find a sheet for '{category}'. "
        f"Expected one of: {aliases}. "
        f"Found sheets: {sheet_names}"
    )


def load_multi_sheet_excel(uploaded_file) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """Load a single Excel file with 2 tabs: Families, Buildings.

    Returns (families_df, buildings_df).
    """
    xl = pd.ExcelFile(uploaded_file, engine="openpyxl")
    sheet_names = xl.sheet_names

    families_sheet = _match_sheet(sheet_names, "families")
    buildings_sheet = _match_sheet(sheet_names, "buildings")

    families_df = pd.read_excel(xl, sheet_name=families_sheet, dtype=str, keep_default_na=False)
    buildings_df = pd.read_excel(xl, sheet_name=buildings_sheet, dtype=str, keep_default_na=False)
    return families_df, buildings_df


def load_csv_path(path: str) -> pd.DataFrame:
    """Load a CSV file from a local path as text cells."""
    return pd.read_csv(path, dtype=str, keep_default_na=False)

"""Schema validation for uploaded data files."""

from dataclasses import dataclass, field
from typing import List
import pandas as pd

from data.loader import FAMILY_REQUIRED_COLUMNS, BUILDING_REQUIRED_COLUMNS
from config.defaults import (
    BUILDING_NAME_COLUMN, FAMILY_REQUESTED_BUILDING_COLUMN,
    FAMILY_FIRST_NAME_COLUMN, FAMILY_LAST_NAME_COLUMN, FAMILY_EMAIL_COLUMN,
)


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def _check_required_columns(df: pd.DataFrame, required: List[str], file_label: str) -> ValidationResult:
    result = ValidationResult()
    missing = [col for col in required if col not in df.columns]
    if missing:
        result.is_valid = False
        result.errors.append(f"{file_label}: Missing required columns: {', '.join(missing)}")
    if df.empty:
        result.is_valid = False
        result.errors.append(f"{file_label}: File contains no data rows.")
    return result


def _text_column(df: pd.DataFrame, column: str) -> pd.Series:
    return df[column].fillna("").astype(str).str.strip()


def validate_buildings(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, BUILDING_REQUIRED_COLUMNS, "Buildings")
    if not result.is_valid:
        return result

    # Requests resolve names case-insensitively, so "Oak" and "oak" collide
    names = _text_column(df, BUILDING_NAME_COLUMN).str.lower()
    dupes = names[names.duplicated(keep=False) & (names != "")]
    if not dupes.empty:
        result.warnings.append(
            f"Buildings: Duplicate building names (case-insensitive): {sorted(dupes.unique().tolist())}. "
            "Requests for these names go to the last one listed."
        )
    return result


def validate_families(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, FAMILY_REQUIRED_COLUMNS, "Families")
    if not result.is_valid:
        return result

    first = _text_column(df, FAMILY_FIRST_NAME_COLUMN)
    last = _text_column(df, FAMILY_LAST_NAME_COLUMN)
    if FAMILY_EMAIL_COLUMN in df.columns:
        keys = first + " " + last + " " + _text_column(df, FAMILY_EMAIL_COLUMN)
    else:
        keys = first + " " + last
    dupes = keys[keys.duplicated(keep=False)]
    if not dupes.empty:
        result.warnings.append(
            f"Families: Duplicate registrations: {sorted(dupes.unique().tolist())}. "
            "Each row is packed as its own family."
        )
    return result


def validate_cross_file(families_df: pd.DataFrame, buildings_df: pd.DataFrame) -> ValidationResult:
    """Check that requested buildings exist in the building data."""
    result = ValidationResult()
    if FAMILY_REQUESTED_BUILDING_COLUMN not in families_df.columns:
        return result

    building_names = set(_text_column(buildings_df, BUILDING_NAME_COLUMN).str.lower())
    requested = _text_column(families_df, FAMILY_REQUESTED_BUILDING_COLUMN)
    unknown = sorted({r for r in requested if r and r.lower() not in building_names})

    if unknown:
        result.warnings.append(
            f"Requested buildings not in the building data: {', '.join(unknown)}. "
            "Those families will be packed with the family groups instead."
        )
    return result

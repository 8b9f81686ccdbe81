"""Generate synthetic test datasets for the Family Housing Planner."""

import pandas as pd
import random
import os

from config.defaults import (
    FAMILY_GROUP_COLUMN, FAMILY_HOUSING_TYPE_COLUMN, FAMILY_SIZE_COLUMN,
    FAMILY_FIRST_NAME_COLUMN, FAMILY_LAST_NAME_COLUMN,
    FAMILY_REQUESTED_BUILDING_COLUMN, FAMILY_EMAIL_COLUMN,
    BUILDING_NAME_COLUMN, BUILDING_HOUSING_TYPE_COLUMN, BUILDING_GROUP_COLUMN,
    BUILDING_CAPACITY_COLUMN,
)

FIRST_NAMES = ["Ana", "Ben", "Chloe", "Dev", "Elena", "Farid", "Grace", "Hiro", "Ines", "Jonah",
               "Kira", "Luis", "Maya", "Nils", "Omar", "Priya", "Quinn", "Rosa", "Sam", "Tara"]
LAST_NAMES = ["Alvarez", "Brooks", "Chen", "Diaz", "Evans", "Fischer", "Garcia", "Hughes",
              "Ito", "Jensen", "Khan", "Lopez", "Moreau", "Novak", "Okafor", "Patel"]


def generate_buildings_df() -> pd.DataFrame:
    """Generate building data: 3 building groups mixing cottages and hotels."""
    rows = []
    layout = [
        (1, [("Oak Cottage", "Cottage", 8), ("Pine Cottage", "Cottage", 6), ("Lakeside Hotel", "Hotel", 20)]),
        (2, [("Birch Cottage", "Cottage", 8), ("Maple Cottage", "Cottage", 10), ("Summit Hotel", "Hotel", 24)]),
        (3, [("Overflow Lodge", "Hotel", 30)]),
    ]
    for group, buildings in layout:
        for name, housing, capacity in buildings:
            rows.append({
                BUILDING_NAME_COLUMN: name,
                BUILDING_HOUSING_TYPE_COLUMN: housing,
                BUILDING_GROUP_COLUMN: group,
                BUILDING_CAPACITY_COLUMN: capacity,
            })
    return pd.DataFrame(rows)


def generate_families_df(family_count: int = 40) -> pd.DataFrame:
    """Generate family registrations spread over 8 family groups, a few with building requests."""
    random.seed(42)
    rows = []
    for i in range(family_count):
        first = FIRST_NAMES[i % len(FIRST_NAMES)]
        last = random.choice(LAST_NAMES)
        housing = random.choice(["", "", "Cottage", "Hotel"])
        requested = ""
        if i % 13 == 5:
            requested = random.choice(["Oak Cottage", "Lakeside Hotel", "Summit Hotel"])
        rows.append({
            FAMILY_GROUP_COLUMN: f"G{random.randint(1, 8)}",
            FAMILY_HOUSING_TYPE_COLUMN: housing,
            FAMILY_SIZE_COLUMN: str(random.choice([1, 2, 2, 3, 4, 4, 5, 6])),
            FAMILY_FIRST_NAME_COLUMN: first,
            FAMILY_LAST_NAME_COLUMN: last,
            FAMILY_REQUESTED_BUILDING_COLUMN: requested,
            FAMILY_EMAIL_COLUMN: f"{first.lower()}.{last.lower()}{i}@example.org",
        })
    return pd.DataFrame(rows)


def generate_sample_csvs(output_dir: str):
    """Write sample CSV files to the given directory."""
    os.makedirs(output_dir, exist_ok=True)
    generate_families_df().to_csv(os.path.join(output_dir, "input_families.csv"), index=False)
    generate_buildings_df().to_csv(os.path.join(output_dir, "input_buildings.csv"), index=False)


def generate_sample_excel(output_dir: str):
    """Write a single two-tab Excel file with both datasets."""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, "sample_data.xlsx")
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        generate_families_df().to_excel(writer, sheet_name="Families", index=False)
        generate_buildings_df().to_excel(writer, sheet_name="Buildings", index=False)

"""Textual report and table rows derived from a packing result."""

import csv
from io import StringIO
from typing import List

from models.allocation import PackingResult
from config.defaults import REPORT_COLUMNS


def render_report_csv(result: PackingResult) -> str:
    """Render the assignment report: a comment block with building fill and
    unmatched families, then one CSV row per assignment."""
    comments = ["Buildings filled:"]
    for br in result.building_results:
        comments.append(f"  {br.name} (#{br.priority}): {br.capacity_filled}/{br.capacity}")
    comments.append(" ")

    if result.no_matches:
        unmatched = ",".join(f"{f.name}/{f.size}" for f in result.no_matches)
        comments.append(f"No matches: {unmatched}")
        comments.append(" ")

    output = StringIO()
    for comment in comments:
        output.write(f"# {comment}\n")

    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(REPORT_COLUMNS)
    for a in result.assignments:
        writer.writerow([a.family_name, a.family_group, a.family_size, a.building_name])
    return output.getvalue()


def get_building_fill(result: PackingResult) -> List[dict]:
    """Per-building fill stats, in building-group priority order."""
    rows = []
    for br in result.building_results:
        rows.append({
            "building_name": br.name,
            "building_group": br.building_group,
            "priority": br.priority,
            "housing_type": br.housing_type,
            "capacity": br.capacity,
            "capacity_filled": br.capacity_filled,
            "remaining": br.capacity - br.capacity_filled,
            "utilization_pct": br.utilization_pct,
            "family_count": br.family_count,
        })
    return rows


def assignments_to_rows(result: PackingResult) -> List[dict]:
    return [{
        "Family": a.family_name,
        "Family Group": a.family_group or "(requested)",
        "Family Size": a.family_size,
        "Building Name": a.building_name,
        "Building Group": a.building_group,
    } for a in result.assignments]


def no_matches_to_rows(result: PackingResult) -> List[dict]:
    return [{
        "Family": f.name,
        "Family Size": f.size,
        "Required Housing": f.required_housing_type or "any",
    } for f in result.no_matches]


def summarize_result(result: PackingResult) -> dict:
    """Headline totals for dashboards and the command line."""
    total_capacity = sum(br.capacity for br in result.building_results)
    people_placed = sum(a.family_size for a in result.assignments)
    return {
        "families_placed": len(result.assignments),
        "families_unmatched": len(result.no_matches),
        "people_placed": people_placed,
        "people_unmatched": sum(f.size for f in result.no_matches),
        "total_capacity": total_capacity,
        "remaining_capacity": total_capacity - people_placed,
        "warning_count": len(result.warnings),
    }

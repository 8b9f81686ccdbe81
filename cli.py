"""Command-line packing run: read the two CSV inputs, write the assignment report."""

import argparse
import os
import sys
from typing import List, Optional

from data.loader import load_csv_path, parse_families, parse_buildings
from data.sample_data import generate_sample_csvs, generate_sample_excel
from engine.packing_engine import pack_buildings
from engine.report import render_report_csv, summarize_result
from models.diagnostics import PackingInputError
from config.defaults import DEFAULT_FAMILIES_PATH, DEFAULT_BUILDINGS_PATH, DEFAULT_REPORT_PATH


def _warn(message: str):
    print(f"[WARN] {message}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Pack family groups into building groups.")
    parser.add_argument(
        "--families",
        default=DEFAULT_FAMILIES_PATH,
        help=f"Family registrations CSV (default: {DEFAULT_FAMILIES_PATH}).",
    )
    parser.add_argument(
        "--buildings",
        default=DEFAULT_BUILDINGS_PATH,
        help=f"Buildings CSV (default: {DEFAULT_BUILDINGS_PATH}).",
    )
    parser.add_argument(
        "-o", "--output",
        default=DEFAULT_REPORT_PATH,
        help=f"Assignment report path (default: {DEFAULT_REPORT_PATH}).",
    )
    parser.add_argument(
        "--sample-dir",
        help="Write sample input files (CSV and XLSX) to this directory and exit.",
    )
    args = parser.parse_args(argv)

    if args.sample_dir:
        generate_sample_csvs(args.sample_dir)
        generate_sample_excel(args.sample_dir)
        print(f"Sample inputs written to {args.sample_dir}")
        return 0

    for path in (args.families, args.buildings):
        if not os.path.exists(path):
            print(f"Input file not found: {path}", file=sys.stderr)
            return 2

    try:
        building_groups = parse_buildings(load_csv_path(args.buildings))
        parsed = parse_families(load_csv_path(args.families))
    except (PackingInputError, ValueError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    for w in parsed.warnings:
        _warn(w.message)

    result = pack_buildings(building_groups, parsed.family_groups, parsed.requesting_families)
    for w in result.warnings:
        _warn(w.message)

    with open(args.output, "w", encoding="utf-8", newline="") as handle:
        handle.write(render_report_csv(result))

    summary = summarize_result(result)
    print(
        f"Placed {summary['families_placed']} families ({summary['people_placed']} people), "
        f"{summary['families_unmatched']} unmatched. Report written to {args.output}"
    )
    print("Packing complete!")
    return 0


if __name__ == "__main__":
    sys.exit(main())

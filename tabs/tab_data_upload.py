"""Tab 1: Data Upload — load families and buildings, validate, run the packing."""

import streamlit as st

from data.loader import load_file, load_multi_sheet_excel, parse_families, parse_buildings
from data.validator import validate_families, validate_buildings, validate_cross_file
from data.sample_data import generate_families_df, generate_buildings_df
from data.session_store import set_input_data, set_packing_result, clear_data, is_data_loaded
from engine.packing_engine import pack_buildings
from components.charts import housing_demand_bar
from components.metrics_cards import render_packing_warnings
from models.diagnostics import PackingInputError


def _load_and_pack(families_df, buildings_df):
    """Validate, parse, store and pack uploaded data."""
    errors = []
    warnings = []

    for r in [validate_families(families_df), validate_buildings(buildings_df)]:
        errors.extend(r.errors)
        warnings.extend(r.warnings)

    if not errors:
        warnings.extend(validate_cross_file(families_df, buildings_df).warnings)

    if errors:
        for e in errors:
            st.error(e)
        return False

    for w in warnings:
        st.warning(w)

    try:
        building_groups = parse_buildings(buildings_df)
        parsed = parse_families(families_df)
    except PackingInputError as e:
        st.error(f"Could not load building data: {e}")
        return False

    render_packing_warnings(parsed.warnings)
    set_input_data(building_groups, parsed.family_groups, parsed.requesting_families, parsed.warnings)

    result = pack_buildings(building_groups, parsed.family_groups, parsed.requesting_families)
    set_packing_result(result)

    building_count = sum(len(g.buildings) for g in building_groups)
    st.success(
        f"Data loaded: {building_count} buildings in {len(building_groups)} groups, "
        f"{parsed.family_count} families ({len(parsed.requesting_families)} with building requests). "
        f"Packed {len(result.assignments)} families, {len(result.no_matches)} unmatched."
    )

    # --- Supply vs demand health check ---
    total_capacity = sum(g.total_capacity for g in building_groups)
    total_people = sum(g.size for g in parsed.family_groups) + sum(f.size for f in parsed.requesting_families)

    supply = {}
    for g in building_groups:
        for b in g.buildings:
            supply[b.housing_type] = supply.get(b.housing_type, 0) + b.capacity
    demand = {}
    all_families = [f for g in parsed.family_groups for f in g.families] + list(parsed.requesting_families)
    for f in all_families:
        key = f.required_housing_type or "any"
        demand[key] = demand.get(key, 0) + f.size

    st.divider()
    st.subheader("Data Health Check")

    col1, col2, col3 = st.columns(3)
    col1.metric("Total Places", f"{total_capacity:,}")
    col2.metric("Total People", f"{total_people:,}")
    col3.metric("Headroom", f"{total_capacity - total_people:+,}")

    if total_people > total_capacity:
        st.error(
            f"RISK: {total_people:,} people registered for {total_capacity:,} places. "
            f"At least {total_people - total_capacity:,} people cannot be housed."
        )
    else:
        short_types = [t for t, people in demand.items() if t != "any" and people > supply.get(t, 0)]
        if short_types:
            st.warning(
                f"WARNING: Not enough places of type {', '.join(short_types)} for the families "
                "that require it."
            )
        else:
            st.success(f"Supply looks healthy: {total_people / total_capacity:.0%} of places needed.")

    st.plotly_chart(housing_demand_bar(demand, supply), use_container_width=True)
    return True


def render(sidebar_state):
    """Render the Data Upload tab."""
    st.header("Data Upload")

    upload_mode = st.radio(
        "Upload mode",
        ["Single Excel file (2 tabs)", "Two separate files"],
        horizontal=True,
        key="upload_mode",
    )

    if upload_mode == "Single Excel file (2 tabs)":
        st.caption(
            "Upload one `.xlsx` file with two sheets named **Families** and **Buildings** "
            "(also accepts aliases like 'Registrations', 'Housing', etc.)"
        )
        single_file = st.file_uploader(
            "Excel workbook with 2 tabs",
            type=["xlsx"],
            key="upload_single",
        )

        col_upload, col_sample = st.columns(2)
        with col_upload:
            if st.button("Upload & Pack", type="primary", key="btn_upload_single"):
                if single_file:
                    try:
                        f_df, b_df = load_multi_sheet_excel(single_file)
                    except ValueError as e:
                        st.error(f"Error loading file: {e}")
                    else:
                        _load_and_pack(f_df, b_df)
                else:
                    st.warning("Please upload an Excel file.")

        with col_sample:
            if st.button("Load Sample Data", key="btn_sample_single"):
                _load_and_pack(generate_families_df(), generate_buildings_df())

    else:
        col1, col2 = st.columns(2)
        with col1:
            families_file = st.file_uploader(
                "Family Registrations",
                type=["csv", "xlsx"],
                key="upload_families",
            )
        with col2:
            buildings_file = st.file_uploader(
                "Buildings",
                type=["csv", "xlsx"],
                key="upload_buildings",
            )

        col_upload, col_sample = st.columns(2)
        with col_upload:
            if st.button("Upload & Pack", type="primary", key="btn_upload_multi"):
                if families_file and buildings_file:
                    try:
                        f_df = load_file(families_file)
                        b_df = load_file(buildings_file)
                    except ValueError as e:
                        st.error(f"Error loading files: {e}")
                    else:
                        _load_and_pack(f_df, b_df)
                else:
                    st.warning("Please upload both files.")

        with col_sample:
            if st.button("Load Sample Data", key="btn_sample_multi"):
                _load_and_pack(generate_families_df(), generate_buildings_df())

    if is_data_loaded():
        st.divider()
        if st.button("Clear Data", key="btn_clear"):
            clear_data()
            st.rerun()

"""Tab 2: Assignments — who goes where, who is left over, and the downloadable report."""

import streamlit as st
import pandas as pd

from data.session_store import get_packing_result, is_data_loaded
from engine.report import (
    render_report_csv, assignments_to_rows, no_matches_to_rows, summarize_result,
)
from components.metrics_cards import render_metric_row, render_packing_warnings
from components.tables import render_styled_table
from config.defaults import DEFAULT_REPORT_PATH


def render(sidebar_state):
    """Render the Assignments tab."""
    st.header("Assignments")

    if not is_data_loaded():
        st.info("No data loaded. Please upload data in the Data Upload tab.")
        return

    result = get_packing_result()
    if result is None:
        st.info("No packing results available. Load data in the Data Upload tab.")
        return

    summary = summarize_result(result)
    unmatched = summary["families_unmatched"]
    render_metric_row([
        {"label": "Families Placed", "value": f"{summary['families_placed']:,}"},
        {"label": "Families Unmatched", "value": f"{unmatched:,}",
         "delta": f"{summary['people_unmatched']:,} people" if unmatched else "None",
         "delta_color": "inverse" if unmatched else "normal"},
        {"label": "People Placed", "value": f"{summary['people_placed']:,}"},
        {"label": "Open Places", "value": f"{summary['remaining_capacity']:,}",
         "delta": f"of {summary['total_capacity']:,}", "delta_color": "off"},
    ])

    st.download_button(
        "Download Assignment Report (CSV)",
        data=render_report_csv(result),
        file_name=DEFAULT_REPORT_PATH,
        mime="text/csv",
        key="btn_download_report",
    )

    st.divider()

    # --- Assignments table ---
    st.subheader("Family Assignments")
    rows = assignments_to_rows(result)
    if sidebar_state.building_group_filter:
        rows = [r for r in rows if r["Building Group"] == sidebar_state.building_group_filter]

    if rows:
        search = st.text_input("Filter by family or building", key="assignment_search")
        df = pd.DataFrame(rows)
        if search:
            needle = search.lower()
            mask = (df["Family"].str.lower().str.contains(needle, regex=False)
                    | df["Building Name"].str.lower().str.contains(needle, regex=False))
            df = df[mask]
        st.dataframe(df, use_container_width=True, height=400)
    else:
        st.info("No families assigned in this building group.")

    st.divider()

    # --- Unmatched families ---
    st.subheader("Unmatched Families")
    no_match_rows = no_matches_to_rows(result)
    if no_match_rows:
        st.error(
            f"{len(no_match_rows)} families could not be placed. Family groups are placed "
            "all together or not at all, so one family that does not fit leaves its whole group unmatched."
        )
        render_styled_table(pd.DataFrame(no_match_rows))
    else:
        st.success("Every family has a building.")

    # --- Warnings ---
    if result.warnings:
        st.divider()
        st.subheader("Request Warnings")
        render_packing_warnings(result.warnings)

"""Tab 3: Building Fill — capacity use per building and building group."""

import streamlit as st
import pandas as pd

from data.session_store import get_packing_result, is_data_loaded
from engine.report import get_building_fill
from components.charts import building_fill_bar, building_utilization_bars, fill_donut
from components.tables import render_fill_table
from config.defaults import BUILDING_SATURATION_THRESHOLD, BUILDING_LOW_FILL_THRESHOLD


def render(sidebar_state):
    """Render the Building Fill tab."""
    st.header("Building Fill")

    if not is_data_loaded():
        st.info("No data loaded. Please upload data in the Data Upload tab.")
        return

    result = get_packing_result()
    if result is None:
        st.info("No packing results available. Load data in the Data Upload tab.")
        return

    group_filter = sidebar_state.building_group_filter
    building_fill = get_building_fill(result)
    filtered = [b for b in building_fill if not group_filter or b["building_group"] == group_filter]

    if not filtered:
        st.info("No buildings in this building group.")
        return

    # --- Charts ---
    col1, col2 = st.columns([3, 2])

    with col1:
        st.plotly_chart(building_fill_bar(filtered), use_container_width=True)

    with col2:
        total = sum(b["capacity"] for b in filtered)
        filled = sum(b["capacity_filled"] for b in filtered)
        st.plotly_chart(fill_donut(filled, total), use_container_width=True)

        full = sum(1 for b in filtered if b["utilization_pct"] >= BUILDING_SATURATION_THRESHOLD)
        low = sum(1 for b in filtered if b["utilization_pct"] < BUILDING_LOW_FILL_THRESHOLD)
        st.metric(f"Nearly Full Buildings (≥{BUILDING_SATURATION_THRESHOLD:.0%})", full)
        st.metric(f"Low Fill Buildings (<{BUILDING_LOW_FILL_THRESHOLD:.0%})", low)

    st.plotly_chart(building_utilization_bars(building_fill, group_filter), use_container_width=True)

    st.divider()

    # --- Building Detail Table ---
    st.subheader("Building Detail")
    detail_rows = [{
        "Building": b["building_name"],
        "Group": b["building_group"],
        "Priority": b["priority"],
        "Housing": b["housing_type"],
        "Capacity": b["capacity"],
        "Filled": b["capacity_filled"],
        "Open": b["remaining"],
        "Utilization": b["utilization_pct"],
        "# Families": b["family_count"],
    } for b in filtered]
    render_fill_table(pd.DataFrame(detail_rows))

    # --- Building group summary ---
    st.subheader("Building Group Summary")
    group_rows = {}
    for b in filtered:
        g = group_rows.setdefault(b["building_group"], {
            "Group": b["building_group"], "Priority": b["priority"],
            "Capacity": 0, "Filled": 0, "Utilization": 0.0,
        })
        g["Capacity"] += b["capacity"]
        g["Filled"] += b["capacity_filled"]
    for g in group_rows.values():
        g["Utilization"] = g["Filled"] / g["Capacity"] if g["Capacity"] > 0 else 0.0
    render_fill_table(pd.DataFrame(list(group_rows.values())))

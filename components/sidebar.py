"""Global sidebar controls for data status and building group filtering."""

import streamlit as st
from dataclasses import dataclass
from typing import Optional
from data.session_store import (
    get_building_groups, get_family_groups, get_requesting_families,
    get_load_warnings, get_last_run_at, is_data_loaded,
)


@dataclass
class SidebarState:
    building_group_filter: Optional[str]  # None = all building groups


def render_sidebar() -> SidebarState:
    """Render the global sidebar controls and return current state."""
    with st.sidebar:
        st.title("Family Housing Planner")
        st.divider()

        building_groups = sorted(get_building_groups(), key=lambda g: g.priority)
        group_names = ["All"] + [g.name for g in building_groups]
        selected = st.selectbox(
            "Building Group",
            options=group_names,
            key="sidebar_building_group",
        )

        st.divider()

        # Data status indicator
        if is_data_loaded():
            st.success("Data loaded")
            family_groups = get_family_groups()
            family_count = sum(len(g.families) for g in family_groups)
            st.caption(f"Building groups: {len(building_groups)}")
            st.caption(f"Buildings: {sum(len(g.buildings) for g in building_groups)}")
            st.caption(f"Family groups: {len(family_groups)} ({family_count} families)")
            st.caption(f"Building requests: {len(get_requesting_families())}")
            load_warnings = get_load_warnings()
            if load_warnings:
                st.caption(f"Skipped or defaulted rows: {len(load_warnings)}")
            last_run = get_last_run_at()
            if last_run:
                st.caption(f"Last packed: {last_run:%H:%M:%S}")
        else:
            st.warning("No data loaded — go to Data Upload tab")

    st.session_state["sidebar_state"]["building_group_filter"] = selected
    return SidebarState(
        building_group_filter=selected if selected != "All" else None,
    )

"""Family Housing Planner — Streamlit entry point."""

import streamlit as st
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from components.sidebar import render_sidebar
from data.session_store import initialize_session_state
from tabs import (
    tab_data_upload,
    tab_assignments,
    tab_building_fill,
)


def main():
    st.set_page_config(
        page_title="Family Housing Planner",
        page_icon="🏡",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    initialize_session_state()
    sidebar_state = render_sidebar()

    tab1, tab2, tab3 = st.tabs([
        "📂 Data Upload",
        "👪 Assignments",
        "🏘️ Building Fill",
    ])

    with tab1:
        tab_data_upload.render(sidebar_state)
    with tab2:
        tab_assignments.render(sidebar_state)
    with tab3:
        tab_building_fill.render(sidebar_state)


if __name__ == "__main__":
    main()

"""Typed wrapper around st.session_state for application data."""

import streamlit as st
from typing import List, Optional
from datetime import datetime
from models.building import BuildingGroup
from models.family import FamilyGroup, FamilyRequestingBuilding
from models.allocation import PackingResult
from models.diagnostics import PackingWarning


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "building_groups": [],
        "family_groups": [],
        "requesting_families": [],
        "load_warnings": [],
        "packing_result": None,
        "last_run_at": None,
        "data_loaded": False,
        "sidebar_state": {
            "building_group_filter": "All",
        },
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


# --- Getters ---

def get_building_groups() -> List[BuildingGroup]:
    return st.session_state.get("building_groups", [])


def get_family_groups() -> List[FamilyGroup]:
    return st.session_state.get("family_groups", [])


def get_requesting_families() -> List[FamilyRequestingBuilding]:
    return st.session_state.get("requesting_families", [])


def get_load_warnings() -> List[PackingWarning]:
    return st.session_state.get("load_warnings", [])


def get_packing_result() -> Optional[PackingResult]:
    return st.session_state.get("packing_result")


def get_last_run_at() -> Optional[datetime]:
    return st.session_state.get("last_run_at")


def is_data_loaded() -> bool:
    return st.session_state.get("data_loaded", False)


# --- Setters ---

def set_input_data(
    building_groups: List[BuildingGroup],
    family_groups: List[FamilyGroup],
    requesting_families: List[FamilyRequestingBuilding],
    load_warnings: List[PackingWarning],
):
    st.session_state["building_groups"] = building_groups
    st.session_state["family_groups"] = family_groups
    st.session_state["requesting_families"] = requesting_families
    st.session_state["load_warnings"] = load_warnings
    st.session_state["data_loaded"] = True
    st.session_state["packing_result"] = None


def set_packing_result(result: PackingResult):
    st.session_state["packing_result"] = result
    st.session_state["last_run_at"] = datetime.now()


def clear_data():
    for key in ["building_groups", "family_groups", "requesting_families", "load_warnings"]:
        st.session_state[key] = []
    st.session_state["packing_result"] = None
    st.session_state["last_run_at"] = None
    st.session_state["data_loaded"] = False

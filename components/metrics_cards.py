"""Reusable KPI metric card and warning widgets."""

import streamlit as st
from typing import List

from models.diagnostics import PackingWarning, UNKNOWN_BUILDING, REQUEST_FAILED


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards.

    Each metric dict should have: label, value, and optionally delta, delta_color.
    """
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            st.metric(
                label=m["label"],
                value=m["value"],
                delta=m.get("delta"),
                delta_color=m.get("delta_color", "normal"),
            )


def render_packing_warnings(warnings: List[PackingWarning]):
    """Request problems as warnings, parse problems as info."""
    for w in warnings:
        if w.kind in (UNKNOWN_BUILDING, REQUEST_FAILED):
            st.warning(w.message, icon="🟡")
        else:
            st.info(w.message, icon="🔵")

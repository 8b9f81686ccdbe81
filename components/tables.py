"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd
from typing import Optional

from config.defaults import BUILDING_SATURATION_THRESHOLD, BUILDING_LOW_FILL_THRESHOLD


def render_styled_table(
    df: pd.DataFrame,
    title: Optional[str] = None,
    height: Optional[int] = None,
    use_container_width: bool = True,
):
    """Render a styled, non-editable dataframe."""
    if title:
        st.subheader(title)
    st.dataframe(df, height=height, use_container_width=use_container_width)


def render_fill_table(df: pd.DataFrame, fill_column: str = "Utilization"):
    """Render a building table with fill levels color-coded (fill column holds 0-1 floats)."""
    def color_fill(val):
        try:
            v = float(val)
        except (ValueError, TypeError):
            return ""
        if v >= BUILDING_SATURATION_THRESHOLD:
            return "background-color: #d4edda; color: #155724; font-weight: bold"
        elif v < BUILDING_LOW_FILL_THRESHOLD:
            return "background-color: #fff3cd; color: #856404"
        return ""

    if fill_column in df.columns:
        styled = df.style.map(color_fill, subset=[fill_column]).format({fill_column: "{:.0%}"})
        st.dataframe(styled, use_container_width=True)
    else:
        st.dataframe(df, use_container_width=True)

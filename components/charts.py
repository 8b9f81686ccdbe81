"""Plotly chart builders for the Family Housing Planner."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import List


def building_fill_bar(
    building_fill: List[dict],
    title: str = "Capacity vs Filled by Building",
) -> go.Figure:
    """Bar chart comparing capacity and filled places per building."""
    df = pd.DataFrame(building_fill)
    fig = px.bar(
        df, x="building_name", y=["capacity", "capacity_filled"],
        barmode="group",
        labels={"value": "Places", "building_name": "Building", "variable": ""},
        title=title,
        color_discrete_map={"capacity": "#4A90D9", "capacity_filled": "#E8734A"},
    )
    fig.update_layout(legend_title_text="", height=400)
    return fig


def fill_donut(filled: int, total: int, title: str = "Overall Fill") -> go.Figure:
    """Donut chart showing overall filled vs open places."""
    available = total - filled
    fig = go.Figure(data=[go.Pie(
        labels=["Filled", "Open"],
        values=[filled, available],
        hole=0.6,
        marker_colors=["#E8734A", "#4A90D9"],
        textinfo="percent+label",
    )])
    fig.update_layout(
        title=title,
        height=350,
        showlegend=True,
        annotations=[dict(text=f"{filled}/{total}", x=0.5, y=0.5, font_size=16, showarrow=False)],
    )
    return fig


def building_utilization_bars(
    building_fill: List[dict],
    group_filter: str = None,
) -> go.Figure:
    """Horizontal utilization bars, one per building."""
    df = pd.DataFrame(building_fill)
    if group_filter:
        df = df[df["building_group"] == group_filter]

    fig = px.bar(
        df, x="utilization_pct", y="building_name",
        orientation="h",
        title=f"Building Utilization{' — ' + group_filter if group_filter else ''}",
        labels={"utilization_pct": "Utilization %", "building_name": "Building"},
        color="utilization_pct",
        color_continuous_scale=["#4A90D9", "#F5C542", "#E8734A"],
        range_color=[0, 1],
    )
    fig.update_layout(height=max(300, len(df) * 35), yaxis_type="category")
    fig.update_traces(texttemplate="%{x:.0%}", textposition="auto")
    return fig


def housing_demand_bar(demand: dict, supply: dict) -> go.Figure:
    """Grouped bars of people requiring each housing type vs places of that type."""
    labels = sorted(set(demand) | set(supply))
    fig = go.Figure()
    fig.add_trace(go.Bar(name="People", x=labels, y=[demand.get(l, 0) for l in labels],
                         marker_color="#E8734A"))
    fig.add_trace(go.Bar(name="Places", x=labels, y=[supply.get(l, 0) for l in labels],
                         marker_color="#4A90D9"))
    fig.update_layout(
        barmode="group",
        title="Housing Demand vs Supply",
        xaxis_title="Housing Type",
        yaxis_title="People / Places",
        height=350,
    )
    return fig

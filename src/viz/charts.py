"""Plotly chart generators for the analysis dashboard."""

from typing import Sequence

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from src.data.models import ChartDatum, HeatEntry


# Color palette for consistent styling
COLORS = {
    "primary": "#8884d8",
    "organizational": "#82ca9d",
    "tier1": "#27ae60",
    "tier2": "#f1c40f",
    "tier3": "#e74c3c",
}

# Low -> medium -> high performance
PERFORMANCE_COLORS = [COLORS["tier3"], COLORS["tier2"], COLORS["tier1"]]

SIZE_COLORS = ["#667eea", "#764ba2", "#8e44ad", "#9b59b6"]


def create_heat_radar(heat: Sequence[HeatEntry]) -> go.Figure:
    """
    Radar chart of the share of schools scoring 1-2 on each dimension.

    Args:
        heat: Heat entries from the cohort summary
    """
    if not heat:
        return _empty_chart("No schools to analyze")

    labels = [h.label for h in heat]
    values = [h.percentage for h in heat]

    fig = go.Figure()
    fig.add_trace(
        go.Scatterpolar(
            # Close the polygon by repeating the first point
            r=values + values[:1],
            theta=labels + labels[:1],
            fill="toself",
            name="% of schools",
            line_color=COLORS["primary"],
            customdata=[h.low_schools for h in heat] + [heat[0].low_schools],
            hovertemplate="%{theta}: %{r}% (%{customdata} schools)<extra></extra>",
        )
    )

    fig.update_layout(
        title="Heat Map: Share of Schools Scoring Low (1-2)",
        polar=dict(radialaxis=dict(visible=True, range=[0, 100], ticksuffix="%")),
        showlegend=False,
    )

    return fig


def create_organizational_chart(data: Sequence[ChartDatum]) -> go.Figure:
    """Horizontal bar chart of average organizational-functioning scores (0-5)."""
    if not data:
        return _empty_chart("No organizational data available")

    df = pd.DataFrame([{"Dimension": d.name, "Average": d.value} for d in data])

    fig = px.bar(
        df,
        x="Average",
        y="Dimension",
        orientation="h",
        color_discrete_sequence=[COLORS["organizational"]],
        title="Organizational Functioning (Average Score)",
    )

    fig.update_layout(
        xaxis_range=[0, 5],
        yaxis_title="",
        xaxis_title="Average score",
    )

    return fig


def create_performance_chart(data: Sequence[ChartDatum]) -> go.Figure:
    """Bar chart of the number of schools in each overall performance band."""
    if not data:
        return _empty_chart("No schools to analyze")

    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            x=[d.name for d in data],
            y=[d.value for d in data],
            marker_color=PERFORMANCE_COLORS[: len(data)],
            hovertemplate="%{x}: %{y} schools<extra></extra>",
        )
    )

    fig.update_layout(
        title="Overall Functioning (Number of Schools)",
        xaxis_title="",
        yaxis_title="Schools",
    )

    return fig


def create_school_size_chart(data: Sequence[ChartDatum]) -> go.Figure:
    """Pie chart of schools by student-count bucket."""
    if not data:
        return _empty_chart("No schools to analyze")

    fig = go.Figure()
    fig.add_trace(
        go.Pie(
            labels=[d.name for d in data],
            values=[d.value for d in data],
            marker=dict(colors=SIZE_COLORS[: len(data)]),
            textinfo="label+percent",
            hovertemplate="%{label}: %{value} schools<extra></extra>",
        )
    )

    fig.update_layout(title="School Size Distribution", showlegend=False)

    return fig


def _empty_chart(message: str) -> go.Figure:
    """Create an empty chart with a message."""
    fig = go.Figure()
    fig.add_annotation(
        text=message,
        xref="paper",
        yref="paper",
        x=0.5,
        y=0.5,
        showarrow=False,
        font=dict(size=16, color="gray"),
    )
    fig.update_layout(
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
        height=300,
    )
    return fig

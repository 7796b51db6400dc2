"""
Plotly chart factory functions with consistent styling for the dashboard.
"""

from __future__ import annotations

from typing import List, Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from consulta_dashboard.aggregation.institutions import InstitutionRanking
from consulta_dashboard.aggregation.timeline import TimelineSeries
from consulta_dashboard.config import CHART_COLORS, TIMELINE_COLOR
from consulta_dashboard.ui.components.formatting import format_percent, shorten_label

DEFAULT_TEMPLATE = "plotly_white"


def _configure_layout(
    fig: go.Figure,
    title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
    showlegend: bool = False,
) -> go.Figure:
    fig.update_layout(
        template=DEFAULT_TEMPLATE,
        colorway=CHART_COLORS,
        title=title,
        showlegend=showlegend,
        margin=dict(l=40, r=20, t=60, b=40),
    )
    if yaxis_title:
        fig.update_yaxes(title=yaxis_title)
    return fig


def render_plotly(fig: go.Figure) -> None:
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})


def timeline_chart_frame(series: TimelineSeries) -> pd.DataFrame:
    """Chart rows: ``dd/mm`` label, contributions and distinct authors per day."""
    return pd.DataFrame(
        {
            "label": [key[:5] for key in series.dates],
            "contributions": series.contributions,
            "authors": series.contributors,
        },
        columns=["label", "contributions", "authors"],
    )


def timeline_chart(series: TimelineSeries, title: Optional[str] = None) -> go.Figure:
    frame = timeline_chart_frame(series)
    fig = px.area(frame, x="label", y="contributions", custom_data=["authors"])
    fig.update_traces(
        line=dict(color=TIMELINE_COLOR, width=3, shape="spline"),
        fillcolor="rgba(11, 109, 101, 0.2)",
        hovertemplate="Data: %{x}<br>Contribuições: %{y}<br>Autores: %{customdata[0]}<extra></extra>",
    )
    fig = _configure_layout(fig, title, yaxis_title="Contribuições")
    fig.update_xaxes(title=None, showgrid=False)
    fig.update_yaxes(rangemode="tozero", gridcolor="rgba(107, 114, 128, 0.1)")
    return fig


def legend_entries(ranking: InstitutionRanking) -> List[str]:
    """Legend text ``"<name> (<count> - <pct>%)"`` with long names shortened."""
    total = ranking.total
    entries = []
    for name, count in ranking.items:
        percentage = count / total * 100 if total else 0.0
        entries.append(f"{shorten_label(name)} ({count} - {format_percent(percentage)})")
    return entries


def institution_donut(ranking: InstitutionRanking, title: Optional[str] = None) -> go.Figure:
    fig = go.Figure(
        go.Pie(
            labels=legend_entries(ranking),
            values=ranking.counts,
            customdata=ranking.labels,
            hole=0.55,
            sort=False,
            marker=dict(colors=CHART_COLORS, line=dict(color="#ffffff", width=2)),
            textinfo="none",
            hovertemplate="%{customdata}: %{value} contribuições (%{percent})<extra></extra>",
        )
    )
    fig = _configure_layout(fig, title, showlegend=True)
    fig.update_layout(legend=dict(font=dict(size=10)))
    return fig

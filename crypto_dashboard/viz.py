"""Visualization utilities for the crypto dashboard."""

from __future__ import annotations

import logging
from collections.abc import Iterable

import plotly.express as px
import plotly.graph_objects as go

from . import insights, synth

logger = logging.getLogger(__name__)

BAR_COLOR = "#3b82f6"


def _empty_figure(message: str) -> go.Figure:
    fig = go.Figure()
    fig.add_annotation(
        text=message,
        showarrow=False,
        x=0.5,
        y=0.5,
        xref="paper",
        yref="paper",
        font=dict(size=14, color="#6c757d"),
    )
    fig.update_layout(margin=dict(l=0, r=0, t=20, b=20))
    return fig


def plot_portfolio_performance(
    points: Iterable[synth.ChartPoint], currency_symbol: str = "$"
) -> go.Figure:
    """Bar chart of monthly portfolio value with currency tooltips."""

    df = insights.chart_frame(points)
    if df.empty:
        logger.debug("No chart points supplied; rendering empty figure")
        return _empty_figure("No portfolio history available.")

    fig = px.bar(
        df,
        x="month",
        y="value",
        labels={"month": "Month", "value": "Portfolio Value"},
        category_orders={"month": list(df["month"])},
    )
    fig.update_traces(
        marker_color=BAR_COLOR,
        hovertemplate=f"%{{x}}<br>Portfolio Value: {currency_symbol}%{{y:,.0f}}<extra></extra>",
    )
    fig.update_xaxes(showgrid=True, griddash="dash")
    fig.update_yaxes(showgrid=True, griddash="dash")
    fig.update_layout(margin=dict(l=0, r=0, t=20, b=0))

    return fig

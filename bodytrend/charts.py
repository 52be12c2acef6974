"""Plotly figure builders for the dashboard.

Plain functions returning ``go.Figure`` objects, with no Streamlit state.
"""

from __future__ import annotations

from typing import Sequence

import plotly.graph_objects as go
from plotly.subplots import make_subplots

from .models.body import BodyMeasurement
from .models.trend import TrendAnalysis

WEIGHT_COLOR = "#8884d8"
FAT_COLOR = "#82ca9d"
BMI_COLOR = "#ffc658"
UPPER_COLOR = "#ff9999"
LOWER_COLOR = "#99ff99"


def _dark_layout(fig: go.Figure, height: int = 400) -> go.Figure:
    fig.update_layout(
        template="plotly_dark",
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        height=height,
        margin=dict(l=30, r=50, t=40, b=50),
        legend=dict(orientation="h", yanchor="bottom", y=1.02),
        hovermode="x unified",
    )
    return fig


def build_preview_chart(
    measurements: Sequence[BodyMeasurement], normalized: bool = False
) -> go.Figure:
    """Weight on the left axis; body fat and BMI share the right axis."""

    x = [m.measurement_time for m in measurements]
    fig = make_subplots(specs=[[{"secondary_y": True}]])
    fig.add_trace(
        go.Scatter(
            x=x,
            y=[m.weight_kg for m in measurements],
            name="Weight",
            mode="lines+markers",
            line=dict(color=WEIGHT_COLOR, width=2),
        ),
        secondary_y=False,
    )
    fig.add_trace(
        go.Scatter(
            x=x,
            y=[m.body_fat_percent for m in measurements],
            name="Body Fat %",
            mode="lines+markers",
            line=dict(color=FAT_COLOR, width=2),
        ),
        secondary_y=True,
    )
    fig.add_trace(
        go.Scatter(
            x=x,
            y=[m.bmi for m in measurements],
            name="BMI",
            mode="lines+markers",
            line=dict(color=BMI_COLOR, width=2),
        ),
        secondary_y=True,
    )
    fig.update_yaxes(title_text="% of first" if normalized else "kg", secondary_y=False)
    if not normalized:
        fig.update_yaxes(range=[10, 30], secondary_y=True)
    return _dark_layout(fig)


def build_trend_chart(analysis: TrendAnalysis) -> go.Figure:
    """Observed weight plus the dashed trend line and its prediction bounds."""

    chart = analysis.chart
    x = [p.measurement_time for p in chart]
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=x,
            y=[p.weight_kg for p in chart],
            name="Weight",
            mode="lines+markers",
            line=dict(color=WEIGHT_COLOR, width=2),
            connectgaps=False,
        )
    )
    fig.add_trace(
        go.Scatter(
            x=x,
            y=[p.trend_weight_kg for p in chart],
            name="Trend",
            mode="lines",
            line=dict(color=FAT_COLOR, width=2, dash="dash"),
            connectgaps=True,
            text=[p.label for p in chart],
        )
    )
    if analysis.deviation_available:
        for name, values, color in (
            ("Upper Bound", [p.upper_bound_kg for p in chart], UPPER_COLOR),
            ("Lower Bound", [p.lower_bound_kg for p in chart], LOWER_COLOR),
        ):
            fig.add_trace(
                go.Scatter(
                    x=x,
                    y=values,
                    name=name,
                    mode="lines",
                    line=dict(color=color, width=1, dash="dot"),
                    connectgaps=True,
                )
            )
    fig.add_hline(
        y=analysis.target_weight_kg,
        line=dict(color="#a1a1aa", width=1, dash="dot"),
        annotation_text=f"Target {analysis.target_weight_kg:g} kg",
    )
    return _dark_layout(fig)

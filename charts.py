# -*- coding: utf-8 -*-
import plotly.graph_objects as go

from formatting import breakdown_frame
from salary_calculator import SalaryBreakdown
from translations import get_text

PIE_COLORS = ["#4F46E5", "#EC4899", "#8B5CF6", "#F59E0B"]


def build_pie_chart(breakdown: SalaryBreakdown, language: str = "en") -> go.Figure:
    """Donut chart of net salary, health, social and income tax."""
    df = breakdown_frame(breakdown, language)
    labels, values = df.columns
    fig = go.Figure(data=[go.Pie(
        labels=df[labels],
        values=df[values],
        hole=.4,
        sort=False,
        marker=dict(colors=PIE_COLORS),
    )])
    fig.update_layout(
        title=get_text(language, "chartTitle"),
        legend=dict(orientation="h", yanchor="top", y=-0.05, xanchor="center", x=0.5),
        margin=dict(l=0, r=0, t=50, b=0),
    )
    return fig

"""Chart configuration and the default plotly renderer for the submissions chart."""

from __future__ import annotations

from typing import Any

import plotly.graph_objects as go

from admin_dashboard.models import ChartModel

CHART_TITLE = "Total Contest Submissions"
SERIES_NAME = "Submission Count"
CHART_HEIGHT = 350


def chart_props(chart: ChartModel) -> dict[str, Any]:
    """Build the options/series pair handed to the charting collaborator."""
    return {
        "options": {
            "chart": {"type": "area", "height": CHART_HEIGHT, "animations": {"enabled": False}},
            "xaxis": {"categories": [str(label) for label in chart.categories]},
            "yaxis": {"labels": {"decimals": 0}},
            "title": {"text": CHART_TITLE, "align": "center"},
        },
        "series": [{"name": SERIES_NAME, "data": list(chart.series)}],
    }


def build_figure(props: dict[str, Any]) -> go.Figure:
    options = props["options"]
    series = props["series"][0]
    categories = options["xaxis"]["categories"]
    positions = list(range(len(categories)))
    fig = go.Figure(
        go.Scatter(
            x=positions,
            y=series["data"],
            text=categories,
            hovertemplate="%{text}: %{y}<extra></extra>",
            name=series["name"],
            mode="lines+markers",
            fill="tozeroy",
        )
    )
    fig.update_layout(
        title={"text": options["title"]["text"], "x": 0.5, "xanchor": "center"},
        height=options["chart"]["height"],
        showlegend=False,
    )
    # one slot per contest; repeated or numeric-looking names must not collapse
    fig.update_xaxes(tickmode="array", tickvals=positions, ticktext=categories)
    fig.update_yaxes(tickformat=",.0f", rangemode="tozero")
    return fig


class PlotlyChartRenderer:
    """Render a ChartModel to an embeddable HTML fragment."""

    def __init__(self, include_plotlyjs: str | bool = "cdn") -> None:
        self.include_plotlyjs = include_plotlyjs

    def __call__(self, chart: ChartModel) -> str:
        fig = build_figure(chart_props(chart))
        return fig.to_html(full_html=False, include_plotlyjs=self.include_plotlyjs)

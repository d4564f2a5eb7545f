from admin_dashboard.chart import CHART_TITLE, SERIES_NAME, PlotlyChartRenderer, build_figure, chart_props
from admin_dashboard.models import ChartModel


def _chart():
    return ChartModel(categories=("Spring Cup", "2024"), series=(5, 7))


def test_chart_props_shape():
    props = chart_props(_chart())

    assert props["options"]["chart"] == {"type": "area", "height": 350, "animations": {"enabled": False}}
    assert props["options"]["xaxis"]["categories"] == ["Spring Cup", "2024"]
    assert props["options"]["title"] == {"text": CHART_TITLE, "align": "center"}
    assert props["series"] == [{"name": SERIES_NAME, "data": [5, 7]}]


def test_build_figure_labels_each_contest_slot():
    fig = build_figure(chart_props(_chart()))

    trace = fig.data[0]
    assert list(trace.x) == [0, 1]
    assert list(fig.layout.xaxis.ticktext) == ["Spring Cup", "2024"]
    assert list(trace.y) == [5, 7]
    assert trace.fill == "tozeroy"
    assert fig.layout.title.text == CHART_TITLE
    assert fig.layout.height == 350


def test_renderer_returns_html_fragment():
    html = PlotlyChartRenderer(include_plotlyjs=False)(_chart())

    assert isinstance(html, str)
    assert "<html" not in html
    assert "Spring Cup" in html


def test_repeated_contest_names_keep_separate_points():
    chart = ChartModel(categories=("Weekly Cup", "Weekly Cup", "Final"), series=(3, 5, 8))

    fig = build_figure(chart_props(chart))

    trace = fig.data[0]
    assert list(trace.x) == [0, 1, 2]
    assert list(trace.y) == [3, 5, 8]
    assert list(trace.text) == ["Weekly Cup", "Weekly Cup", "Final"]
    assert list(fig.layout.xaxis.tickvals) == [0, 1, 2]
    assert list(fig.layout.xaxis.ticktext) == ["Weekly Cup", "Weekly Cup", "Final"]

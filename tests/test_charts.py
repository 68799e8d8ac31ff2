from datetime import datetime

from analytics.chart_math import average_by_weekday, convert
from analytics.charts import (
    step_bar_chart, weekday_delta_chart, weekday_frame, weekday_pie_chart, weight_line_chart,
)
from analytics.chart_types import ChartType
from shared.constants import VIZ_CONFIG
from shared.schemas import ChartPoint

SUNDAY_FIRST = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday"]


def test_weekday_frame_keeps_summary_order(metrics):
    df = weekday_frame(average_by_weekday(metrics))
    assert list(df["weekday"]) == SUNDAY_FIRST
    assert list(df["order"]) == [0, 1, 2, 3, 4]
    assert df["average"].iloc[0] == 250.0


def test_weekday_delta_chart_axis_is_not_alphabetical(metrics):
    chart = weekday_delta_chart(average_by_weekday(metrics)).to_dict()
    assert chart["encoding"]["x"]["sort"] == SUNDAY_FIRST
    condition = chart["encoding"]["color"]["condition"]
    assert condition["value"] == VIZ_CONFIG["gain_color"]
    assert chart["encoding"]["color"]["value"] == VIZ_CONFIG["loss_color"]


def test_weekday_pie_chart_highlights_selected_slice(metrics):
    summaries = average_by_weekday(metrics)
    chart = weekday_pie_chart(summaries).to_dict()
    assert chart["mark"] == "arc" or chart["mark"]["type"] == "arc"
    assert chart["encoding"]["color"]["sort"] == SUNDAY_FIRST
    assert chart["encoding"]["opacity"] == {"value": 1.0}

    chart = weekday_pie_chart(summaries, summaries[1]).to_dict()
    assert "Monday" in chart["encoding"]["opacity"]["condition"]["test"]


def test_weight_line_chart_starts_at_lowest_value():
    points = [ChartPoint(date=datetime(2025, 6, d), value=v) for d, v in [(9, 165.0), (10, 162.5), (11, 164.0)]]

    chart = weight_line_chart(points, goal=150.0).to_dict()
    assert chart["layer"][0]["encoding"]["y"]["scale"]["domainMin"] == 150.0

    chart = weight_line_chart(points, goal=170.0).to_dict()
    assert chart["layer"][0]["encoding"]["y"]["scale"]["domainMin"] == 162.5
    assert chart["layer"][0]["mark"]["color"] == ChartType.WEIGHT_LINE.color


def test_step_bar_chart_color(metrics):
    chart = step_bar_chart(convert(metrics)).to_dict()
    assert chart["mark"]["type"] == "bar"
    assert chart["mark"]["color"] == ChartType.STEP_BAR.color

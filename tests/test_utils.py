from datetime import date, datetime

from analytics.chart_types import ChartType
from shared.constants import VIZ_CONFIG
from shared.schemas import MetricKind
from shared.utils import (
    create_date_interval, get_date_range, is_same_day, load_json, parse_datetime, save_json,
    start_of_day, to_local_naive, weekday_int, weekday_title,
)


def test_weekday_identity():
    # 2025-06-15 is a Sunday
    assert weekday_int(date(2025, 6, 15)) == 1
    assert weekday_int(datetime(2025, 6, 16, 23, 59)) == 2
    assert weekday_int(date(2025, 6, 21)) == 7
    assert weekday_title(date(2025, 6, 11)) == "Wednesday"


def test_create_date_interval():
    start, end = create_date_interval(datetime(2025, 6, 17, 15, 30), 28)
    assert end == datetime(2025, 6, 18)
    assert start == datetime(2025, 5, 21)
    assert len(get_date_range(start, end)) == 28


def test_day_helpers():
    assert start_of_day(date(2025, 6, 9)) == datetime(2025, 6, 9)
    assert start_of_day(datetime(2025, 6, 9, 7, 15, 3)) == datetime(2025, 6, 9)
    assert is_same_day(datetime(2025, 6, 9, 1), date(2025, 6, 9))
    assert not is_same_day(datetime(2025, 6, 9, 23), datetime(2025, 6, 10, 0))
    assert parse_datetime("2025-06-09T08:00:00Z").tzinfo is not None


def test_json_roundtrip(tmp_path):
    path = tmp_path / "nested" / "data.json"
    save_json({"steps": [{"value": 1.0}]}, path)
    assert load_json(path) == {"steps": [{"value": 1.0}]}


def test_chart_types():
    assert ChartType.STEP_BAR.context is MetricKind.STEPS
    assert ChartType.WEIGHT_DIFF_BAR.context is MetricKind.WEIGHT
    assert ChartType.STEP_BAR.is_nav and ChartType.WEIGHT_LINE.is_nav
    assert not ChartType.STEP_WEEKDAY_PIE.is_nav
    assert ChartType.STEP_BAR.subtitle(8123.7) == "Avg: 8,123 steps"
    assert ChartType.WEIGHT_LINE.subtitle(165.26) == "Avg: 165.3 lbs"
    assert ChartType.STEP_WEEKDAY_PIE.subtitle() == "Last 28 Days"
    assert ChartType.WEIGHT_DIFF_BAR.title == "Average Weight Change"
    assert ChartType.WEIGHT_DIFF_BAR.subtitle() == "Per Weekday (Last 28 Days)"


def test_chart_type_icons_and_colors():
    assert ChartType.STEP_BAR.symbol == ":material/directions_walk:"
    assert all(t.symbol.startswith(":material/") for t in ChartType)
    assert ChartType.STEP_WEEKDAY_PIE.color == VIZ_CONFIG["steps_color"]
    assert ChartType.WEIGHT_DIFF_BAR.color == VIZ_CONFIG["weight_color"]


def test_to_local_naive():
    naive = datetime(2025, 6, 9, 8, 0)
    assert to_local_naive(naive) is naive
    aware = parse_datetime("2025-06-09T08:00:00Z")
    local = to_local_naive(aware)
    assert local.tzinfo is None
    assert local == aware.astimezone().replace(tzinfo=None)


def test_save_json_replaces_file_whole(tmp_path):
    path = tmp_path / "data.json"
    save_json({"v": 1}, path)
    save_json({"v": 2}, path)
    assert load_json(path) == {"v": 2}
    assert [p.name for p in tmp_path.iterdir()] == ["data.json"]

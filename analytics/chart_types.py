from __future__ import annotations

from enum import Enum
from typing import Optional

from shared.constants import FETCH_CONFIG, VIZ_CONFIG
from shared.schemas import MetricKind


class ChartType(Enum):
    STEP_BAR = "step_bar"
    STEP_WEEKDAY_PIE = "step_weekday_pie"
    WEIGHT_LINE = "weight_line"
    WEIGHT_DIFF_BAR = "weight_diff_bar"

    @property
    def context(self) -> MetricKind:
        if self in (ChartType.STEP_BAR, ChartType.STEP_WEEKDAY_PIE):
            return MetricKind.STEPS
        return MetricKind.WEIGHT

    @property
    def is_nav(self) -> bool:
        """Charts with a drill-down into the raw data list"""
        return self in (ChartType.STEP_BAR, ChartType.WEIGHT_LINE)

    @property
    def title(self) -> str:
        return {
            ChartType.STEP_BAR: "Steps",
            ChartType.STEP_WEEKDAY_PIE: "Averages",
            ChartType.WEIGHT_LINE: "Weight",
            ChartType.WEIGHT_DIFF_BAR: "Average Weight Change",
        }[self]

    @property
    def symbol(self) -> str:
        """Streamlit material icon shortcode shown beside the chart title"""
        return {
            ChartType.STEP_BAR: ":material/directions_walk:",
            ChartType.STEP_WEEKDAY_PIE: ":material/calendar_month:",
            ChartType.WEIGHT_LINE: ":material/monitor_weight:",
            ChartType.WEIGHT_DIFF_BAR: ":material/monitor_weight:",
        }[self]

    @property
    def color(self) -> str:
        if self.context is MetricKind.STEPS:
            return VIZ_CONFIG["steps_color"]
        return VIZ_CONFIG["weight_color"]

    def subtitle(self, average: Optional[float] = None) -> str:
        days = FETCH_CONFIG["steps_days_back"]
        if self is ChartType.STEP_BAR:
            return f"Avg: {int(average or 0):,} steps"
        if self is ChartType.STEP_WEEKDAY_PIE:
            return f"Last {days} Days"
        if self is ChartType.WEIGHT_LINE:
            return f"Avg: {average or 0:.1f} lbs"
        return f"Per Weekday (Last {days} Days)"

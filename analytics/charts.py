"""Altair chart builders for the dashboard.

Weekday charts keep the Sunday-first order of their summaries: the category
axis is sorted by that order instead of alphabetically.
"""

from __future__ import annotations

from typing import Optional, Sequence

import altair as alt
import pandas as pd

from shared.constants import VIZ_CONFIG
from shared.schemas import ChartPoint, WeekdaySummary

from .chart_math import min_value
from .chart_types import ChartType


def weekday_frame(summaries: Sequence[WeekdaySummary]) -> pd.DataFrame:
    return pd.DataFrame({
        "weekday": [s.weekday_title for s in summaries],
        "average": [s.value for s in summaries],
        "order": list(range(len(summaries))),
    })


def step_bar_chart(points: Sequence[ChartPoint]) -> alt.Chart:
    df = pd.DataFrame({"date": [p.date for p in points], "steps": [p.value for p in points]})
    return (
        alt.Chart(df)
        .mark_bar(color=ChartType.STEP_BAR.color)
        .encode(
            x=alt.X("date:T", title="Date"),
            y=alt.Y("steps:Q", title="Steps"),
            tooltip=[
                alt.Tooltip("date:T", title="Day", format="%b %d"),
                alt.Tooltip("steps:Q", title="Steps", format=",.0f"),
            ],
        )
    )


def weekday_pie_chart(summaries: Sequence[WeekdaySummary],
                      selected: Optional[WeekdaySummary] = None) -> alt.Chart:
    """Average steps per weekday as pie slices; the selected slice stays opaque"""
    df = weekday_frame(summaries)
    if selected is None:
        opacity = alt.value(1.0)
    else:
        opacity = alt.condition(alt.datum.weekday == selected.weekday_title, alt.value(1.0), alt.value(0.3))
    return (
        alt.Chart(df)
        .mark_arc()
        .encode(
            theta=alt.Theta("average:Q", stack=True),
            order=alt.Order("order:Q"),
            color=alt.Color("weekday:N", sort=list(df["weekday"]), title="Weekday"),
            opacity=opacity,
            tooltip=[
                alt.Tooltip("weekday:N", title="Day"),
                alt.Tooltip("average:Q", title="Avg Steps", format=",.0f"),
            ],
        )
    )


def weight_line_chart(points: Sequence[ChartPoint], goal: float = VIZ_CONFIG["weight_goal"]) -> alt.LayerChart:
    """Daily weight with a dashed goal line. The y axis starts at the lower of both."""
    df = pd.DataFrame({"date": [p.date for p in points], "weight": [p.value for p in points]})
    floor = min(min_value(points), goal)
    line = (
        alt.Chart(df)
        .mark_line(point=True, color=ChartType.WEIGHT_LINE.color)
        .encode(
            x=alt.X("date:T", title="Date"),
            y=alt.Y("weight:Q", title="Weight (lbs)", scale=alt.Scale(domainMin=floor, zero=False)),
            tooltip=[
                alt.Tooltip("date:T", title="Day", format="%b %d"),
                alt.Tooltip("weight:Q", title="Weight", format=".1f"),
            ],
        )
    )
    rule = (
        alt.Chart(pd.DataFrame({"goal": [goal]}))
        .mark_rule(strokeDash=[4, 4], color=VIZ_CONFIG["loss_color"])
        .encode(y="goal:Q")
    )
    return alt.layer(line, rule)


def weekday_delta_chart(summaries: Sequence[WeekdaySummary]) -> alt.Chart:
    df = weekday_frame(summaries)
    return (
        alt.Chart(df)
        .mark_bar()
        .encode(
            x=alt.X("weekday:N", sort=list(df["weekday"]), title="Weekday"),
            y=alt.Y("average:Q", title="Average change (lbs)"),
            color=alt.condition(
                alt.datum.average >= 0, alt.value(VIZ_CONFIG["gain_color"]), alt.value(VIZ_CONFIG["loss_color"])
            ),
            tooltip=[
                alt.Tooltip("weekday:N", title="Day"),
                alt.Tooltip("average:Q", title="Change", format="+.2f"),
            ],
        )
    )

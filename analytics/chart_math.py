"""Weekday aggregation and chart helpers.

Everything in this module is a pure function over in-memory sequences: no
I/O, no shared state, and no exceptions for degenerate input (an empty series
yields an empty result, the mean of nothing is 0).
"""

from __future__ import annotations

from datetime import date, datetime
from itertools import groupby
from typing import Callable, Iterable, List, Optional, Sequence, TypeVar, Union

from shared.schemas import ChartPoint, HealthMetric, WeekdaySummary
from shared.utils import is_same_day, weekday_int

T = TypeVar("T")


def mean(values: Iterable[float]) -> float:
    """Arithmetic mean using plain left-to-right summation; 0.0 when empty."""
    total = 0.0
    count = 0
    for v in values:
        total += v
        count += 1
    if count == 0:
        return 0.0
    return total / count


def group_by_weekday(items: Iterable[T], key: Callable[[T], datetime] = lambda item: item.date) -> List[List[T]]:
    """Group items sharing a weekday, ordered Sunday first.

    The sort is stable, so each group keeps the input order of its items and
    ``group[0]`` is the first item of that weekday in the original sequence.
    """
    ordered = sorted(items, key=lambda item: weekday_int(key(item)))
    return [list(run) for _, run in groupby(ordered, key=lambda item: weekday_int(key(item)))]


def _summarize(groups: List[List[T]], key: Callable[[T], datetime]) -> List[WeekdaySummary]:
    return [
        WeekdaySummary(representative_date=key(group[0]), value=mean(item.value for item in group))
        for group in groups
    ]


def average_by_weekday(samples: Sequence[HealthMetric]) -> List[WeekdaySummary]:
    """Mean value per weekday, at most one summary for each of the seven days."""
    return _summarize(group_by_weekday(samples), key=lambda s: s.date)


def daily_deltas(samples: Sequence[HealthMetric]) -> List[HealthMetric]:
    """Day-over-day differences, each tagged with the later sample's date.

    ``samples`` must already be chronological; nothing is re-sorted here.
    """
    return [
        HealthMetric(date=samples[i].date, value=samples[i].value - samples[i - 1].value)
        for i in range(1, len(samples))
    ]


def average_daily_deltas_by_weekday(samples: Sequence[HealthMetric]) -> List[WeekdaySummary]:
    """Mean day-over-day change per weekday. Positive values are increases."""
    if len(samples) < 2:
        return []
    return average_by_weekday(daily_deltas(samples))


def convert(samples: Iterable[HealthMetric]) -> List[ChartPoint]:
    return [ChartPoint(date=s.date, value=s.value) for s in samples]


def average_value(points: Iterable[Union[ChartPoint, HealthMetric, WeekdaySummary]]) -> float:
    return mean(p.value for p in points)


def min_value(points: Iterable[ChartPoint]) -> float:
    """Lowest value in the series (area chart baseline), 0.0 when empty"""
    return min((p.value for p in points), default=0.0)


def parse_selected_data(points: Sequence[ChartPoint], selected_date: Optional[Union[date, datetime]]) -> Optional[ChartPoint]:
    """First point on the same calendar day as the selection."""
    if selected_date is None:
        return None
    return next((p for p in points if is_same_day(selected_date, p.date)), None)


def select_weekday_by_cumulative_value(summaries: Sequence[WeekdaySummary], selected_value: float) -> Optional[WeekdaySummary]:
    """Map an angle value from a pie chart onto the weekday slice it falls in.

    Slices are laid out in summary order, so the selected slice is the first one
    whose running total reaches ``selected_value``.
    """
    total = 0.0
    for summary in summaries:
        total += summary.value
        if selected_value <= total:
            return summary
    return None

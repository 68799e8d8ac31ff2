"""
Data schemas for the Step Counter system.
Defines the health samples read from the store and the chart-ready shapes derived from them.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .utils import weekday_int, weekday_title


class MetricKind(Enum):
    """Health data categories the store tracks"""
    STEPS = "steps"
    WEIGHT = "weight"


class AuthorizationStatus(Enum):
    """Sharing authorization state for a metric kind"""
    NOT_DETERMINED = "NOT_DETERMINED"
    SHARING_DENIED = "SHARING_DENIED"
    SHARING_AUTHORIZED = "SHARING_AUTHORIZED"


@dataclass(frozen=True)
class HealthMetric:
    """Single dated health measurement (step count, body weight)"""
    date: datetime
    value: float


@dataclass(frozen=True)
class ChartPoint:
    """Date/value pair handed to a chart"""
    date: datetime
    value: float


@dataclass(frozen=True)
class WeekdaySummary:
    """Averaged value for one weekday.

    ``representative_date`` is only meant for deriving the weekday label.
    """
    representative_date: datetime
    value: float

    @property
    def weekday(self) -> int:
        return weekday_int(self.representative_date)

    @property
    def weekday_title(self) -> str:
        return weekday_title(self.representative_date)

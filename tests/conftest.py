from datetime import datetime

import pytest

from health_store import HealthStore
from shared.schemas import HealthMetric


@pytest.fixture
def metrics():
    """Mon 2025-06-09 .. Tue 2025-06-17, skipping the weekend"""
    return [
        HealthMetric(date=datetime(2025, 6, 9), value=1_000),
        HealthMetric(date=datetime(2025, 6, 10), value=750),
        HealthMetric(date=datetime(2025, 6, 11), value=500),
        HealthMetric(date=datetime(2025, 6, 12), value=1_250),
        HealthMetric(date=datetime(2025, 6, 15), value=250),
        HealthMetric(date=datetime(2025, 6, 16), value=1_000),
        HealthMetric(date=datetime(2025, 6, 17), value=1_500),
    ]


@pytest.fixture
def store(tmp_path):
    return HealthStore(tmp_path / "health")

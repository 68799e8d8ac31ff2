from __future__ import annotations

import json
import threading
from datetime import datetime, timedelta
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import numpy as np

from shared.constants import (
    AUTHORIZATION_FILENAME, DATA_DIR, FETCH_CONFIG, LOGS_DIR, METRIC_CONFIG,
    SAMPLES_FILENAME, SIMULATOR_CONFIG,
)
from shared.errors import (
    AuthNotDeterminedError, NoDataError, SharingDeniedError, UnableToCompleteRequestError,
)
from shared.schemas import AuthorizationStatus, HealthMetric, MetricKind
from shared.utils import (
    create_date_interval, format_datetime, get_date_range, load_json, parse_datetime,
    save_json, setup_logging, to_local_naive,
)

logger = setup_logging("health_store", LOGS_DIR)


class HealthStore:
    """Local health data store backed by two JSON files.

    ``samples.json`` holds every written sample per metric kind and
    ``authorization.json`` the sharing decision per kind. Queries answer with
    one aggregated value per day, 0 for days with nothing recorded.
    """

    def __init__(self, data_dir: Optional[Path] = None):
        self.data_dir = Path(data_dir) if data_dir is not None else DATA_DIR
        self.samples_path = self.data_dir / SAMPLES_FILENAME
        self.authorization_path = self.data_dir / AUTHORIZATION_FILENAME
        self._lock = threading.Lock()

    # Authorization

    def authorization_status(self, kind: MetricKind) -> AuthorizationStatus:
        statuses = self._read(self.authorization_path)
        raw = statuses.get(kind.value, AuthorizationStatus.NOT_DETERMINED.value)
        return AuthorizationStatus(raw)

    def request_authorization(self, kinds: Iterable[MetricKind], granted: bool = True) -> Dict[str, str]:
        """Record the user's answer to the permission prompt"""
        status = AuthorizationStatus.SHARING_AUTHORIZED if granted else AuthorizationStatus.SHARING_DENIED
        with self._lock:
            statuses = self._read(self.authorization_path)
            for kind in kinds:
                statuses[kind.value] = status.value
            self._write(self.authorization_path, statuses)
        logger.info(f"Authorization recorded: {statuses}")
        return statuses

    # Queries

    def query_daily_samples(self, kind: MetricKind, start: datetime, end: datetime) -> List[HealthMetric]:
        """One sample per day in [start, end), oldest first"""
        if self.authorization_status(kind) is AuthorizationStatus.NOT_DETERMINED:
            raise AuthNotDeterminedError(f"{kind.value} authorization not requested")

        records = self._read(self.samples_path).get(kind.value, [])
        if not records:
            raise NoDataError(f"no {kind.value} samples recorded")

        by_day: Dict[object, List[dict]] = {}
        for rec in records:
            try:
                recorded = to_local_naive(parse_datetime(rec["date"]))
                by_day.setdefault(recorded.date(), []).append({**rec, "_parsed": recorded})
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"Skipping malformed {kind.value} record {rec!r}: {e}")

        daily = []
        for day in get_date_range(start, end):
            day_records = by_day.get(day.date(), [])
            daily.append(HealthMetric(date=day, value=self._aggregate(kind, day_records)))

        logger.debug(f"Queried {len(daily)} daily {kind.value} samples from {start.date()} to {end.date()}")
        return daily

    @staticmethod
    def _aggregate(kind: MetricKind, day_records: List[dict]) -> float:
        if not day_records:
            return 0.0
        values = [float(r["value"]) for r in day_records]
        if METRIC_CONFIG[kind.value]["aggregation"] == "sum":
            return float(np.sum(values))
        # Most recent measurement wins; later writes win ties
        latest_index = max(range(len(day_records)), key=lambda i: (day_records[i]["_parsed"], i))
        return values[latest_index]

    def fetch_daily(self, kind: MetricKind, days_back: int, now: Optional[datetime] = None) -> List[HealthMetric]:
        """The last `days_back` days up to and including today"""
        start, end = create_date_interval(now or datetime.now(), days_back)
        return self.query_daily_samples(kind, start, end)

    def fetch_step_count(self, now: Optional[datetime] = None) -> List[HealthMetric]:
        return self.fetch_daily(MetricKind.STEPS, FETCH_CONFIG["steps_days_back"], now=now)

    def fetch_weights(self, days_back: Optional[int] = None, now: Optional[datetime] = None) -> List[HealthMetric]:
        days = days_back if days_back is not None else FETCH_CONFIG["weight_days_back"]
        return self.fetch_daily(MetricKind.WEIGHT, days, now=now)

    def fetch_weights_for_differentials(self, now: Optional[datetime] = None) -> List[HealthMetric]:
        return self.fetch_weights(FETCH_CONFIG["weight_diff_days_back"], now=now)

    # Writes

    def write_sample(self, kind: MetricKind, date: datetime, value: float) -> HealthMetric:
        status = self.authorization_status(kind)
        if status is AuthorizationStatus.NOT_DETERMINED:
            raise AuthNotDeterminedError(f"{kind.value} authorization not requested")
        if status is AuthorizationStatus.SHARING_DENIED:
            raise SharingDeniedError(METRIC_CONFIG[kind.value]["quantity_type"])

        # Stored dates are naive local time so one day never mixes aware and naive values
        sample = HealthMetric(date=to_local_naive(date), value=float(value))
        self._append({kind: [sample]})
        logger.info(f"Saved {kind.value} sample {value} for {sample.date.date()}")
        return sample

    def add_simulator_data(self, days: Optional[int] = None, now: Optional[datetime] = None,
                           rng: Optional[np.random.Generator] = None) -> int:
        """Seed random steps and a slowly drifting weight for the past days"""
        days = days if days is not None else SIMULATOR_CONFIG["days"]
        now = now or datetime.now()
        rng = rng if rng is not None else np.random.default_rng()

        steps, weights = [], []
        for i in range(days):
            day = now - timedelta(days=i)
            low = SIMULATOR_CONFIG["weight_min"] + i // 3
            steps.append(HealthMetric(
                date=day,
                value=float(rng.uniform(SIMULATOR_CONFIG["steps_min"], SIMULATOR_CONFIG["steps_max"])),
            ))
            weights.append(HealthMetric(
                date=day,
                value=float(rng.uniform(low, low + SIMULATOR_CONFIG["weight_spread"])),
            ))

        self._append({MetricKind.STEPS: steps, MetricKind.WEIGHT: weights})
        logger.info(f"Dummy data added for {days} days")
        return len(steps) + len(weights)

    # File access

    def _append(self, samples: Dict[MetricKind, List[HealthMetric]]) -> None:
        with self._lock:
            data = self._read(self.samples_path)
            for kind, items in samples.items():
                data.setdefault(kind.value, []).extend(
                    {"date": format_datetime(s.date), "value": s.value} for s in items
                )
            self._write(self.samples_path, data)

    def _read(self, path: Path) -> dict:
        if not path.exists():
            return {}
        try:
            return load_json(path)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to read {path}: {e}")
            raise UnableToCompleteRequestError(str(e)) from e

    def _write(self, path: Path, data: dict) -> None:
        try:
            save_json(data, path)
        except OSError as e:
            logger.error(f"Failed to write {path}: {e}")
            raise UnableToCompleteRequestError(str(e)) from e

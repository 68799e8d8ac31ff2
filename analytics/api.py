from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from health_store import HealthStore
from shared.constants import API_CONFIG, FETCH_CONFIG, LOGS_DIR, METRIC_CONFIG
from shared.errors import (
    AuthNotDeterminedError, InvalidValueError, NoDataError, SharingDeniedError,
    StepCounterError, parse_metric_value,
)
from shared.schemas import HealthMetric, MetricKind, WeekdaySummary
from shared.utils import (
    format_datetime, parse_datetime, setup_logging, start_of_day, to_local_naive,
)

from .chart_math import average_by_weekday, average_daily_deltas_by_weekday

logger = setup_logging("step_counter_api", LOGS_DIR)

app = FastAPI(title="Step Counter API")

ERROR_STATUS_CODES = {
    AuthNotDeterminedError: 403,
    SharingDeniedError: 403,
    NoDataError: 404,
    InvalidValueError: 422,
}


class AuthorizationRequest(BaseModel):
    granted: bool = True


class NewSample(BaseModel):
    date: str
    value: str


@lru_cache()
def get_store() -> HealthStore:
    """Process-wide store; its lock serializes writes across requests"""
    return HealthStore()


def _metric_kind(kind: str) -> MetricKind:
    try:
        return MetricKind(kind)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown metric: {kind}")


def _sample_json(sample: HealthMetric) -> Dict[str, Any]:
    return {"date": format_datetime(sample.date), "value": sample.value}


def _summary_json(summaries: List[WeekdaySummary]) -> List[Dict[str, Any]]:
    return [
        {
            "weekday": s.weekday,
            "weekday_title": s.weekday_title,
            "date": format_datetime(s.representative_date),
            "value": s.value,
        }
        for s in summaries
    ]


@app.exception_handler(StepCounterError)
async def step_counter_error_handler(request: Request, exc: StepCounterError):
    status_code = ERROR_STATUS_CODES.get(type(exc), 500)
    logger.warning(f"{request.method} {request.url.path} failed: {exc.title} ({exc})")
    return JSONResponse(status_code=status_code, content=exc.to_dict())


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/authorization")
async def authorization(store: HealthStore = Depends(get_store)):
    return {kind.value: store.authorization_status(kind).value for kind in MetricKind}


@app.post("/authorization")
async def request_authorization(body: AuthorizationRequest, store: HealthStore = Depends(get_store)):
    return store.request_authorization(list(MetricKind), granted=body.granted)


@app.get("/metrics/steps/weekday-averages")
async def step_weekday_averages(store: HealthStore = Depends(get_store)):
    steps = store.fetch_step_count()
    return {"weekdays": _summary_json(average_by_weekday(steps))}


@app.get("/metrics/weight/weekday-deltas")
async def weight_weekday_deltas(store: HealthStore = Depends(get_store)):
    weights = store.fetch_weights_for_differentials()
    return {"weekdays": _summary_json(average_daily_deltas_by_weekday(weights))}


@app.get("/metrics/{kind}")
async def daily_samples(kind: str, days_back: Optional[int] = Query(default=None, ge=1),
                        store: HealthStore = Depends(get_store)):
    metric = _metric_kind(kind)
    default_days = FETCH_CONFIG[f"{metric.value}_days_back"]
    samples = store.fetch_daily(metric, days_back or default_days)
    return {
        "metric": metric.value,
        "unit": METRIC_CONFIG[metric.value]["unit"],
        "samples": [_sample_json(s) for s in samples],
    }


@app.post("/metrics/{kind}", status_code=201)
async def add_sample(kind: str, body: NewSample, store: HealthStore = Depends(get_store)):
    metric = _metric_kind(kind)
    value = parse_metric_value(body.value)
    try:
        date = parse_datetime(body.date)
    except ValueError:
        raise HTTPException(status_code=422, detail=f"Invalid date: {body.date}")
    sample = store.write_sample(metric, start_of_day(to_local_naive(date)), value)
    return _sample_json(sample)


@app.post("/simulator-data")
async def simulator_data(store: HealthStore = Depends(get_store)):
    written = store.add_simulator_data()
    return {"samples_written": written}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=API_CONFIG["host"], port=API_CONFIG["port"])

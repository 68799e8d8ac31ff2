"""
Utility functions for the Step Counter system.
Common functions for logging, date handling, and JSON persistence.
"""

import json
import logging
import os
import tempfile
from datetime import date, datetime, timedelta
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union

from .constants import LOGGING_CONFIG, WEEKDAY_TITLES

def setup_logging(name: str, log_dir: Optional[Path] = None) -> logging.Logger:
    """Set up logging configuration"""
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, LOGGING_CONFIG["level"].upper(), logging.INFO))

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)

    # File handler
    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / f"{name}.log")
        file_handler.setLevel(logging.DEBUG)

        formatter = logging.Formatter(
            LOGGING_CONFIG["format"],
            datefmt=LOGGING_CONFIG["date_format"]
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    formatter = logging.Formatter(LOGGING_CONFIG["format"])
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger

def parse_datetime(dt_string: str) -> datetime:
    """Parse an ISO 8601 timestamp, accepting a trailing Z"""
    if dt_string.endswith('Z'):
        dt_string = dt_string[:-1] + '+00:00'
    return datetime.fromisoformat(dt_string)

def format_datetime(dt: datetime) -> str:
    """Format datetime for storage"""
    return dt.isoformat()

def to_local_naive(dt: datetime) -> datetime:
    """Convert an aware datetime to naive local time; naive values pass through"""
    if dt.tzinfo is None:
        return dt
    return dt.astimezone().replace(tzinfo=None)

def start_of_day(value: Union[date, datetime]) -> datetime:
    """Midnight at the start of the given day"""
    if isinstance(value, datetime):
        return value.replace(hour=0, minute=0, second=0, microsecond=0)
    return datetime.combine(value, datetime.min.time())

def create_date_interval(from_date: Union[date, datetime], days_back: int) -> Tuple[datetime, datetime]:
    """Interval spanning ``days_back`` whole days and ending at the start of tomorrow"""
    end = start_of_day(from_date) + timedelta(days=1)
    start = end - timedelta(days=days_back)
    return start, end

def get_date_range(start_date: datetime, end_date: datetime) -> List[datetime]:
    """Start-of-day datetimes for every day in [start_date, end_date)"""
    dates = []
    current = start_of_day(start_date)

    while current < end_date:
        dates.append(current)
        current += timedelta(days=1)

    return dates

def weekday_int(value: Union[date, datetime]) -> int:
    """Weekday identity, 1 = Sunday ... 7 = Saturday"""
    return value.isoweekday() % 7 + 1

def weekday_title(value: Union[date, datetime]) -> str:
    """Full weekday name, e.g. 'Wednesday'"""
    return WEEKDAY_TITLES[weekday_int(value)]

def is_same_day(a: Union[date, datetime], b: Union[date, datetime]) -> bool:
    """True when both values fall on the same calendar day"""
    day_a = a.date() if isinstance(a, datetime) else a
    day_b = b.date() if isinstance(b, datetime) else b
    return day_a == day_b

def save_json(data: Any, filepath: Path) -> None:
    """Save data as JSON file"""
    filepath.parent.mkdir(parents=True, exist_ok=True)

    # Write to a sibling temp file and swap it in so readers never see a partial file
    fd, tmp_path = tempfile.mkstemp(dir=filepath.parent, prefix=f".{filepath.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, 'w') as f:
            json.dump(data, f, indent=2, default=str)
        os.replace(tmp_path, filepath)
    except BaseException:
        os.unlink(tmp_path)
        raise

def load_json(filepath: Path) -> Any:
    """Load data from JSON file"""
    with open(filepath, 'r') as f:
        return json.load(f)

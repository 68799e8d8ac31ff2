"""
Constants and configuration values for the Step Counter system.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment overrides from a local .env file if present
load_dotenv()

REPO_ROOT = Path(__file__).resolve().parents[1]

# File paths
DATA_DIR = Path(os.environ.get("HEALTH_DATA_DIR", str(REPO_ROOT / "data")))
# File logging is enabled only when LOG_DIR is set
LOGS_DIR = Path(os.environ["LOG_DIR"]) if os.environ.get("LOG_DIR") else None

# Health store files
SAMPLES_FILENAME = "samples.json"
AUTHORIZATION_FILENAME = "authorization.json"

# Query windows (days back from today)
FETCH_CONFIG = {
    "steps_days_back": 28,
    "weight_days_back": 28,
    # One extra day so the differential series yields 28 deltas
    "weight_diff_days_back": 29,
}

# Per-metric configuration
METRIC_CONFIG = {
    "steps": {
        "title": "Steps",
        "unit": "count",
        "aggregation": "sum",
        "quantity_type": "step count",
        "fraction_digits": 0,
    },
    "weight": {
        "title": "Weight",
        "unit": "lbs",
        "aggregation": "most_recent",
        "quantity_type": "weight",
        "fraction_digits": 2,
    },
}

# Weekday identity: 1 = Sunday ... 7 = Saturday
WEEKDAY_TITLES = {
    1: "Sunday",
    2: "Monday",
    3: "Tuesday",
    4: "Wednesday",
    5: "Thursday",
    6: "Friday",
    7: "Saturday",
}

# Simulator data ranges
SIMULATOR_CONFIG = {
    "days": 28,
    "steps_min": 4_000,
    "steps_max": 20_000,
    "weight_min": 160.0,
    "weight_spread": 5.0,
}

# User-entered values: digits with at most one decimal place
VALUE_INPUT_PATTERN = r"^\d+(\.\d)?$"

# Logging
LOGGING_CONFIG = {
    "level": os.environ.get("LOG_LEVEL", "INFO"),
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    "date_format": "%Y-%m-%d %H:%M:%S",
}

# Visualization
VIZ_CONFIG = {
    "steps_color": "#FF2D55",
    "weight_color": "#5856D6",
    "gain_color": "#5856D6",
    "loss_color": "#00C7BE",
    # TODO: replace with a per-user goal once goals are stored
    "weight_goal": 155.0,
}

# API
API_CONFIG = {
    "host": os.environ.get("API_HOST", "0.0.0.0"),
    "port": int(os.environ.get("API_PORT", "8000")),
}

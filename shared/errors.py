"""
Application error taxonomy.

Every error carries a short ``title`` for alert headers and a longer
``failure_reason`` shown as the alert body.
"""

import re

from .constants import VALUE_INPUT_PATTERN


class StepCounterError(Exception):
    """Base class for failures surfaced to the user"""
    title = "Unable to Complete Request"
    failure_reason = "We are unable to complete your request at this time."

    def __init__(self, detail: str = ""):
        super().__init__(detail or self.title)
        self.detail = detail

    def to_dict(self) -> dict:
        return {"error": self.title, "reason": self.failure_reason}


class AuthNotDeterminedError(StepCounterError):
    title = "Need Access to Health Data"
    failure_reason = (
        "You have not given access to your Health data. "
        "Please go to Settings > Health > Data Access & Devices."
    )


class NoDataError(StepCounterError):
    title = "No Data"
    failure_reason = "There is no data for this Health statistics."


class UnableToCompleteRequestError(StepCounterError):
    title = "Unable to Complete Request"
    failure_reason = (
        "We are unable to complete your request at this time.\n\n"
        "Please try again later or contact support."
    )


class SharingDeniedError(StepCounterError):
    title = "No Write Access"

    def __init__(self, quantity_type: str):
        super().__init__(f"sharing denied for {quantity_type}")
        self.quantity_type = quantity_type

    @property
    def failure_reason(self) -> str:
        return (
            f"You have denied access to upload your {self.quantity_type} data.\n\n"
            "You can change this in Settings > Health > Data Access & Devices."
        )


class InvalidValueError(StepCounterError):
    title = "Invalid Value"
    failure_reason = "Must be a numeric value with a maximum of one decimal place."


def parse_metric_value(text: str) -> float:
    """Validate user-entered text and convert it to a positive float.

    Accepts digits with at most one decimal place ("8500", "165.5").
    """
    cleaned = (text or "").strip()
    if not re.match(VALUE_INPUT_PATTERN, cleaned):
        raise InvalidValueError(f"not a numeric value: {text!r}")
    value = float(cleaned)
    if value <= 0:
        raise InvalidValueError(f"value must be positive: {text!r}")
    return value

import pytest

from shared.errors import (
    AuthNotDeterminedError, InvalidValueError, NoDataError, SharingDeniedError,
    StepCounterError, UnableToCompleteRequestError, parse_metric_value,
)


@pytest.mark.parametrize("text,expected", [
    ("8500", 8500.0),
    ("165.5", 165.5),
    (" 170 ", 170.0),
])
def test_parse_metric_value_accepts(text, expected):
    assert parse_metric_value(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "165.55", "-4", "1e3", "0", "12,000", None])
def test_parse_metric_value_rejects(text):
    with pytest.raises(InvalidValueError):
        parse_metric_value(text)


def test_error_messages():
    assert AuthNotDeterminedError().title == "Need Access to Health Data"
    assert "Data Access & Devices" in AuthNotDeterminedError().failure_reason
    assert NoDataError().to_dict() == {
        "error": "No Data",
        "reason": "There is no data for this Health statistics.",
    }
    assert UnableToCompleteRequestError().failure_reason.endswith("contact support.")
    assert InvalidValueError().failure_reason == "Must be a numeric value with a maximum of one decimal place."


def test_sharing_denied_names_quantity_type():
    error = SharingDeniedError("weight")
    assert isinstance(error, StepCounterError)
    assert error.title == "No Write Access"
    assert error.failure_reason.startswith("You have denied access to upload your weight data.")

"""Tests for exception classes."""

import pytest

from planner.exceptions import (
    EventNotFoundError,
    ExportError,
    PlannerError,
    RecurrenceError,
    StoreError,
    UnsupportedFormatError,
    ValidationError,
)


def test_planner_error():
    """Test PlannerError base exception."""
    error = PlannerError("Test error")
    assert str(error) == "Test error"
    assert isinstance(error, Exception)


@pytest.mark.parametrize(
    "error_class",
    [
        EventNotFoundError,
        StoreError,
        ValidationError,
        RecurrenceError,
        UnsupportedFormatError,
        ExportError,
    ],
)
def test_subclasses_of_planner_error(error_class):
    """Every planner exception can be caught as PlannerError."""
    error = error_class("Something failed")
    assert str(error) == "Something failed"
    assert isinstance(error, PlannerError)


def test_exception_raising():
    """Test that exceptions can be raised and caught."""
    with pytest.raises(PlannerError):
        raise EventNotFoundError("Event 'abc' not found")

    with pytest.raises(RecurrenceError):
        raise RecurrenceError("Unsupported recurrence rule: HOURLY")

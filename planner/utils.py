"""Utility functions for planner."""

from datetime import date, datetime, timedelta
from typing import Iterator

from planner.constants import DATE_FORMAT


def parse_date(value: date | str) -> date:
    """
    Parse a YYYY-MM-DD string as a naive local date.

    Date objects pass through unchanged (datetimes are truncated to their
    date). No timezone conversion is applied.

    Args:
        value: Date or date string

    Returns:
        Parsed date

    Raises:
        ValueError: If the string is not a valid YYYY-MM-DD date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(value.strip(), DATE_FORMAT).date()


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every date from start to end inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def week_bounds(day: date) -> tuple[date, date]:
    """Return the Monday and Sunday of the week containing ``day``."""
    monday = day - timedelta(days=day.weekday())
    return monday, monday + timedelta(days=6)

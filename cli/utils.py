"""CLI helpers for parsing option values."""

from datetime import date, time

import typer

from planner.models.event import Weekday
from planner.utils import parse_date


def parse_date_option(value: str) -> date:
    """Parse a YYYY-MM-DD option value.

    Raises:
        typer.BadParameter: If the date format is invalid.
    """
    try:
        return parse_date(value)
    except ValueError:
        raise typer.BadParameter(f"Invalid date format: {value}. Use YYYY-MM-DD.")


def parse_time_option(value: str) -> time:
    """Parse an HH:MM or HH:MM:SS option value.

    Raises:
        typer.BadParameter: If the time format is invalid.
    """
    try:
        return time.fromisoformat(value)
    except ValueError:
        raise typer.BadParameter(f"Invalid time format: {value}. Use HH:MM.")


def parse_weekdays_option(value: str) -> list[Weekday]:
    """Parse a comma separated list of weekday tags (e.g. "MON,WED").

    Raises:
        typer.BadParameter: If a tag is not a weekday.
    """
    days = []
    for part in value.split(","):
        tag = part.strip().upper()
        if not tag:
            continue
        try:
            days.append(Weekday(tag))
        except ValueError:
            raise typer.BadParameter(
                f"Invalid weekday: {part}. Use MON, TUE, WED, THU, FRI, SAT, SUN."
            )
    return days

"""Pure formatting functions for display output."""

from datetime import date

from planner.day_view import DayEntry, DayPosition
from planner.models.event import Occurrence
from planner.recurrence_format import format_time


def format_day_label(day: date, today: date) -> str:
    """Format a date as a human-readable day label.

    Args:
        day: The date to format.
        today: Today's date for relative comparison.

    Returns:
        Formatted string like "TODAY (Thu Jan 16)" or "Mon Jan 19".
    """
    delta = (day - today).days

    if delta == 0:
        return f"TODAY ({day.strftime('%a %b %d')})"
    elif delta == 1:
        return f"Tomorrow ({day.strftime('%a %b %d')})"
    elif delta == -1:
        return f"Yesterday ({day.strftime('%a %b %d')})"
    else:
        return day.strftime("%a %b %d")


def format_entry_time(entry: DayEntry) -> str:
    """Format the resolved time of a day entry.

    Returns:
        "All day", "9:00 AM", "until 5:00 PM" or "9:00 AM – 5:00 PM".
    """
    if entry.is_all_day:
        return "All day"
    if entry.position == DayPosition.LAST:
        end = format_time(entry.end_time)
        return f"until {end}" if end else "All day"

    start = format_time(entry.start_time)
    end = format_time(entry.end_time)
    if start and end:
        return f"{start} – {end}"
    return start or end


def format_span(occurrence: Occurrence) -> str:
    """Format an occurrence's own times, ignoring per-day resolution."""
    if occurrence.is_all_day:
        return "All day"
    start = format_time(occurrence.start_time)
    end = format_time(occurrence.end_time)
    if start and end:
        return f"{start} – {end}"
    return start or end

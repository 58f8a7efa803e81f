"""Calendar query module for expanding and selecting occurrences."""

import calendar
from datetime import date, time, timedelta
from typing import Iterable

from planner.constants import DEFAULT_MAX_OCCURRENCES
from planner.day_view import DayEntry, entries_for_day
from planner.models.event import EventTemplate, Occurrence
from planner.recurrence import expand
from planner.utils import week_bounds


class CalendarQuery:
    """Select occurrences from a set of templates.

    Every method re-expands the templates over the window it needs, the
    way a calendar view re-renders after navigation or a mutation.
    """

    def __init__(
        self,
        templates: Iterable[EventTemplate],
        max_occurrences: int = DEFAULT_MAX_OCCURRENCES,
    ):
        """Initialize with templates.

        Args:
            templates: Templates to expand.
            max_occurrences: Safety cap per template without a count.
        """
        self.templates = list(templates)
        self.max_occurrences = max_occurrences

    def date_range(self, start: date, end: date) -> list[Occurrence]:
        """Get occurrences within a date range (inclusive).

        Args:
            start: Start date (inclusive).
            end: End date (inclusive).

        Returns:
            Occurrences in the range, sorted by date and time.
        """
        occurrences = expand(self.templates, start, end, self.max_occurrences)
        return self._sort_by_date_time(occurrences)

    def on_date(self, target: date) -> list[DayEntry]:
        """Get the resolved entries shown on a specific date.

        Multi-day single events that started earlier are included with
        their times resolved for ``target``.

        Args:
            target: The date to show.

        Returns:
            Entries for the date, all-day first, then by start time.
        """
        occurrences = expand(self.templates, target, target, self.max_occurrences)
        return entries_for_day(occurrences, target)

    def today(self, ref_date: date | None = None) -> list[DayEntry]:
        """Get entries for today."""
        return self.on_date(ref_date or date.today())

    def month(self, year: int, month: int) -> list[Occurrence]:
        """Get occurrences for a calendar month."""
        last_day = calendar.monthrange(year, month)[1]
        return self.date_range(date(year, month, 1), date(year, month, last_day))

    def week(self, day: date) -> list[Occurrence]:
        """Get occurrences for the Monday-start week containing ``day``."""
        monday, sunday = week_bounds(day)
        return self.date_range(monday, sunday)

    def upcoming(self, days: int = 7, ref_date: date | None = None) -> list[Occurrence]:
        """Get occurrences in the next N days.

        Args:
            days: Number of days to look ahead (default: 7).
            ref_date: Reference date (defaults to today).

        Returns:
            Occurrences in the range, sorted by date and time.
        """
        start = ref_date or date.today()
        end = start + timedelta(days=days - 1)
        return self.date_range(start, end)

    def search(self, query: str, start: date, end: date) -> list[Occurrence]:
        """Search occurrences in a range by text.

        Matches title, description and location, case-insensitive.
        """
        query_lower = query.lower()
        matching = []
        for occurrence in self.date_range(start, end):
            fields = (occurrence.title, occurrence.description, occurrence.location)
            if any(f and query_lower in f.lower() for f in fields):
                matching.append(occurrence)
        return matching

    def _sort_by_date_time(self, occurrences: list[Occurrence]) -> list[Occurrence]:
        """Sort by date, then all-day first, then by start time."""
        return sorted(
            occurrences,
            key=lambda o: (
                o.occurrence_start_date,
                not o.is_all_day,
                o.start_time or time.min,
            ),
        )

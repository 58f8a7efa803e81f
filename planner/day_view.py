"""Per-day resolution of occurrences for rendering.

A multi-day occurrence is shown on every day it covers, but with different
effective times: the first day keeps the start time, the last day runs from
midnight to the end time, and the days in between are shown as all-day.
"""

from dataclasses import dataclass
from datetime import date, time
from enum import Enum
from typing import Iterable

from planner.models.event import Occurrence
from planner.utils import iter_days


class DayPosition(str, Enum):
    """Where a day falls within an occurrence's span."""

    SINGLE = "single"
    FIRST = "first"
    MIDDLE = "middle"
    LAST = "last"


@dataclass(frozen=True)
class DayEntry:
    """An occurrence as displayed on one calendar day."""

    occurrence: Occurrence
    day: date
    start_time: time | None
    end_time: time | None
    is_all_day: bool
    position: DayPosition

    @property
    def title(self) -> str | None:
        return self.occurrence.title

    @property
    def sort_key(self) -> tuple[bool, time]:
        """All-day entries first, then by start time (missing time is midnight)."""
        return (not self.is_all_day, self.start_time or time.min)


def resolve_for_day(occurrence: Occurrence, day: date) -> DayEntry | None:
    """Resolve the effective times of an occurrence on one day.

    Args:
        occurrence: Occurrence to resolve.
        day: Calendar day being rendered.

    Returns:
        The resolved entry, or None if the occurrence does not cover ``day``.
    """
    if not occurrence.covers(day):
        return None

    if not occurrence.is_multi_day:
        return DayEntry(
            occurrence=occurrence,
            day=day,
            start_time=occurrence.start_time,
            end_time=occurrence.end_time,
            is_all_day=occurrence.is_all_day,
            position=DayPosition.SINGLE,
        )

    if day == occurrence.occurrence_start_date:
        return DayEntry(
            occurrence=occurrence,
            day=day,
            start_time=occurrence.start_time,
            end_time=None,
            is_all_day=occurrence.is_all_day,
            position=DayPosition.FIRST,
        )

    if day == occurrence.occurrence_end_date:
        return DayEntry(
            occurrence=occurrence,
            day=day,
            start_time=time.min,
            end_time=occurrence.end_time,
            is_all_day=occurrence.is_all_day,
            position=DayPosition.LAST,
        )

    return DayEntry(
        occurrence=occurrence,
        day=day,
        start_time=None,
        end_time=None,
        is_all_day=True,
        position=DayPosition.MIDDLE,
    )


def sort_day_entries(entries: Iterable[DayEntry]) -> list[DayEntry]:
    """Sort one day's entries; ties keep their input order."""
    return sorted(entries, key=lambda e: e.sort_key)


def entries_for_day(occurrences: Iterable[Occurrence], day: date) -> list[DayEntry]:
    """Resolve and sort every occurrence shown on ``day``."""
    resolved = (resolve_for_day(o, day) for o in occurrences)
    return sort_day_entries(e for e in resolved if e is not None)


def group_by_day(
    occurrences: Iterable[Occurrence], window_start: date, window_end: date
) -> dict[date, list[DayEntry]]:
    """Group occurrences by every window day they cover.

    Returns:
        Mapping of day to sorted entries, in date order, omitting empty days.
    """
    occurrences = list(occurrences)
    grouped: dict[date, list[DayEntry]] = {}
    for day in iter_days(window_start, window_end):
        entries = entries_for_day(occurrences, day)
        if entries:
            grouped[day] = entries
    return grouped

"""Renderer protocol shared by the display commands."""

from datetime import date
from typing import Protocol

from planner.day_view import DayEntry
from planner.models.event import Occurrence


class EventRenderer(Protocol):
    """Anything that can present expanded occurrences to the user.

    ``show``, ``day`` and ``search`` only talk to this interface, so a
    plain-text or HTML renderer can replace the Rich one.
    """

    def render_agenda(
        self,
        days: dict[date, list[DayEntry]],
        title: str | None = None,
        subtitle: str | None = None,
    ) -> None:
        """Show resolved entries under one heading per day."""
        ...

    def render_day(self, day: date, entries: list[DayEntry]) -> None:
        """Show a single day, all-day entries before timed ones."""
        ...

    def render_list(
        self,
        occurrences: list[Occurrence],
        title: str | None = None,
        subtitle: str | None = None,
    ) -> None:
        """Show occurrences one per line with their own dates and times."""
        ...

    def render_empty(self, message: str | None = None) -> None:
        ...

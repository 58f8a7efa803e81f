"""Rich-based occurrence renderer for terminal display."""

from datetime import date

from rich.console import Console
from rich.rule import Rule
from rich.text import Text

from cli.display.console import console as default_console
from cli.display.formatters import format_day_label, format_entry_time, format_span
from planner.day_view import DayEntry, DayPosition
from planner.models.event import Occurrence

NO_TITLE = "(No Title)"


class RichEventRenderer:
    """Terminal renderer for agenda, single-day and list views.

    Day headings are cyan, times and metadata dim, titles unstyled.
    Multi-day entries are marked with their end weekday on the first day
    and "(continued)" afterwards; recurring instances get a trailing ↻.
    """

    def __init__(self, console: Console | None = None):
        self.console = console or default_console

    def render_agenda(
        self,
        days: dict[date, list[DayEntry]],
        title: str | None = None,
        subtitle: str | None = None,
    ) -> None:
        """Print each day that has entries, in date order.

        Args:
            days: Resolved entries keyed by day (see ``group_by_day``).
            title: Heading text.
            subtitle: Dimmed text after the heading, usually the window.
        """
        if not days:
            self.render_empty()
            return

        self._heading(title, subtitle)

        today = date.today()
        count = 0
        for day in sorted(days):
            self.console.print(f"\n[cyan]{format_day_label(day, today)}[/cyan]")
            for entry in days[day]:
                self._render_agenda_entry(entry)
                count += 1

        self._summary(count, "entry", "entries")

    def render_day(self, day: date, entries: list[DayEntry]) -> None:
        """Print one day with All Day and Timed sections."""
        if not entries:
            self.render_empty(f"No events on {day.strftime('%a %b %d, %Y')}")
            return

        self._heading(day.strftime("%A, %B %d, %Y"))

        all_day = [e for e in entries if e.is_all_day]
        timed = [e for e in entries if not e.is_all_day]

        if all_day:
            self.console.print("\n[cyan]All Day[/cyan]")
            for entry in all_day:
                self._render_agenda_entry(entry)
        if timed:
            # Section label only needed to separate from the all-day block
            self.console.print("\n[cyan]Timed[/cyan]" if all_day else "")
            for entry in timed:
                self._render_agenda_entry(entry)

        self._summary(len(entries), "event", "events")

    def render_list(
        self,
        occurrences: list[Occurrence],
        title: str | None = None,
        subtitle: str | None = None,
    ) -> None:
        """Print occurrences one per line, already sorted by the caller."""
        if not occurrences:
            self.render_empty()
            return

        self._heading(title, subtitle)
        self.console.print()
        for occurrence in occurrences:
            self._render_list_occurrence(occurrence)

        self._summary(len(occurrences), "event", "events")

    def render_empty(self, message: str | None = None) -> None:
        self.console.print(Text(f"\n{message or 'No events found'}\n", style="dim"))

    def _heading(self, title: str | None, subtitle: str | None = None) -> None:
        heading = Text()
        if title:
            heading.append(f" {title} ", style="bold")
        if subtitle:
            heading.append(f"({subtitle}) ", style="dim")
        self.console.print()
        self.console.print(Rule(heading, characters="━", align="left"))

    def _summary(self, count: int, singular: str, plural: str) -> None:
        self.console.print()
        self.console.print(Rule(characters="─", style="dim"))
        self.console.print(Text(f"{count} {singular if count == 1 else plural}", style="dim"))
        self.console.print()

    def _render_agenda_entry(self, entry: DayEntry) -> None:
        occurrence = entry.occurrence

        line = Text("  ")
        line.append(format_entry_time(entry).ljust(20), style="dim")
        line.append((occurrence.title or NO_TITLE).ljust(16))
        if occurrence.location:
            line.append(f" ({occurrence.location})", style="dim")

        if entry.position == DayPosition.FIRST:
            ends = occurrence.occurrence_end_date.strftime("%a")
            line.append(f" → {ends}", style="dim")
        elif entry.position in (DayPosition.MIDDLE, DayPosition.LAST):
            line.append(" (continued)", style="dim")
        if occurrence.is_recurring_instance:
            line.append(" ↻", style="dim")

        self.console.print(line)

    def _render_list_occurrence(self, occurrence: Occurrence) -> None:
        starts = occurrence.occurrence_start_date

        line = Text()
        line.append(starts.isoformat() + "  ", style="dim")
        line.append(starts.strftime("%a") + "  ", style="cyan")
        line.append(format_span(occurrence).ljust(20), style="blue")
        line.append(occurrence.title or NO_TITLE)
        if occurrence.location:
            line.append(f" ({occurrence.location})", style="italic dim")

        if occurrence.is_multi_day:
            ends = occurrence.occurrence_end_date.strftime("%a %b %d")
            line.append(f" → {ends}", style="cyan")
        if occurrence.is_recurring_instance:
            line.append(" ↻", style="dim")

        self.console.print(line)

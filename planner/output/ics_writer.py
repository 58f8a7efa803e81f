"""ICS file writer for expanded occurrences."""

from datetime import datetime, timedelta
from pathlib import Path

from icalendar import Calendar, Event

from planner.exceptions import ExportError
from planner.models.event import Occurrence


def occurrence_uid(occurrence: Occurrence) -> str:
    """Stable UID for an occurrence: template id plus start date."""
    return (
        f"{occurrence.original_template_id}-"
        f"{occurrence.occurrence_start_date.strftime('%Y%m%d')}@planner"
    )


def build_calendar(occurrences: list[Occurrence], name: str = "Planner") -> Calendar:
    """Build an iCalendar object with one VEVENT per occurrence."""
    cal = Calendar()
    cal.add("prodid", "-//Planner//EN")
    cal.add("version", "2.0")
    cal.add("X-WR-CALNAME", name)

    for occurrence in occurrences:
        event = Event()

        # Required fields
        event.add("summary", occurrence.title or "(No Title)")
        event.add("uid", occurrence_uid(occurrence))
        event.add("dtstamp", datetime.now())

        if occurrence.description:
            event.add("description", occurrence.description)
        if occurrence.location:
            event.add("location", occurrence.location)

        if occurrence.is_all_day or occurrence.start_time is None:
            # All-day: end date is exclusive in iCalendar
            event.add("dtstart", occurrence.occurrence_start_date)
            event.add("dtend", occurrence.occurrence_end_date + timedelta(days=1))
        else:
            start_dt = datetime.combine(
                occurrence.occurrence_start_date, occurrence.start_time
            )
            if occurrence.end_time is not None:
                end_dt = datetime.combine(
                    occurrence.occurrence_end_date, occurrence.end_time
                )
            else:
                end_dt = start_dt + timedelta(hours=1)
            event.add("dtstart", start_dt)
            event.add("dtend", end_dt)

        cal.add_component(event)

    return cal


class ICSWriter:
    """Writer for ICS occurrence files."""

    def __init__(self, calendar_name: str = "Planner"):
        self.calendar_name = calendar_name

    def write(self, occurrences: list[Occurrence], path: Path) -> None:
        """Write occurrences to ICS file.

        Raises:
            ExportError: If the calendar could not be serialized or written
        """
        try:
            ical_content = build_calendar(occurrences, self.calendar_name).to_ical()
            if not ical_content:
                raise ExportError("Calendar.to_ical() returned empty content")

            with open(path, "wb") as f:
                f.write(ical_content)
        except (OSError, ValueError) as e:
            # Remove empty file if it was created
            if path.exists() and path.stat().st_size == 0:
                path.unlink()
            raise ExportError(f"Failed to write {path}: {e}") from e

    def get_extension(self) -> str:
        """Returns file extension."""
        return "ics"

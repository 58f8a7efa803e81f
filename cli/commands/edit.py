"""Edit or duplicate an existing event."""

import logging
from typing import Any

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import console
from cli.utils import parse_date_option, parse_time_option, parse_weekdays_option
from planner.exceptions import EventNotFoundError, ValidationError
from planner.models.event import EventTemplate, RecurrenceRule, Weekday
from planner.recurrence_format import describe_recurrence

logger = logging.getLogger(__name__)

# Fields a duplicate does not inherit
_NOT_COPIED = {"id", "is_recurring", "excluded_dates"}


def _load(event_id: str) -> EventTemplate:
    try:
        return get_context().store.get(event_id)
    except EventNotFoundError as e:
        logger.error(str(e))
        raise typer.Exit(1)


def edit(
    event_id: Annotated[
        str,
        typer.Argument(help="Event ID to edit"),
    ],
    title: Annotated[
        str | None,
        typer.Option("--title", "-t", help="New title"),
    ] = None,
    start: Annotated[
        str | None,
        typer.Option("--start", "-s", help="New start date (YYYY-MM-DD); the end date moves with it"),
    ] = None,
    end: Annotated[
        str | None,
        typer.Option("--end", "-e", help="New end date (YYYY-MM-DD)"),
    ] = None,
    start_time: Annotated[
        str | None,
        typer.Option("--start-time", help="New start time (HH:MM)"),
    ] = None,
    end_time: Annotated[
        str | None,
        typer.Option("--end-time", help="New end time (HH:MM)"),
    ] = None,
    all_day: Annotated[
        bool | None,
        typer.Option("--all-day/--timed", help="Make the event all-day or timed"),
    ] = None,
    location: Annotated[
        str | None,
        typer.Option("--location", "-l", help="New location"),
    ] = None,
    description: Annotated[
        str | None,
        typer.Option("--description", help="New description"),
    ] = None,
    rule: Annotated[
        RecurrenceRule | None,
        typer.Option("--rule", "-r", help="New recurrence rule (NONE stops repeating)", case_sensitive=False),
    ] = None,
    interval: Annotated[
        int | None,
        typer.Option("--interval", "-i", min=1, help="Repeat every N periods"),
    ] = None,
    days: Annotated[
        str | None,
        typer.Option("--days", help="Weekdays for CUSTOM_DAYS (e.g. MON,WED)"),
    ] = None,
    nth_week: Annotated[
        int | None,
        typer.Option("--nth-week", help="Week position for MONTHLY_NTH (1-4, -1 = last)"),
    ] = None,
    nth_weekday: Annotated[
        Weekday | None,
        typer.Option("--nth-weekday", help="Weekday for MONTHLY_NTH", case_sensitive=False),
    ] = None,
    until: Annotated[
        str | None,
        typer.Option("--until", help="Last date of the series (YYYY-MM-DD)"),
    ] = None,
    count: Annotated[
        int | None,
        typer.Option("--count", "-c", min=1, help="Number of occurrences in the series"),
    ] = None,
) -> None:
    """Change fields of an event. Options left out keep their value.

    Editing a recurring event changes the whole series.

    Examples:
        planner edit abc123 --title "Team sync" --start-time 10:00
        planner edit abc123 --rule WEEKLY --interval 2
        planner edit abc123 --rule NONE
    """
    ctx = get_context()
    template = _load(event_id)

    changes: dict[str, Any] = {}
    if title is not None:
        changes["title"] = title
    if description is not None:
        changes["description"] = description
    if location is not None:
        changes["location"] = location
    if start is not None:
        new_start = parse_date_option(start)
        changes["start_date"] = new_start.isoformat()
        if end is None:
            changes["end_date"] = (new_start + template.span).isoformat()
    if end is not None:
        changes["end_date"] = parse_date_option(end).isoformat()
    if all_day is not None:
        changes["is_all_day"] = all_day
    if start_time is not None:
        changes["start_time"] = parse_time_option(start_time).isoformat()
    if end_time is not None:
        changes["end_time"] = parse_time_option(end_time).isoformat()
    if rule is not None:
        changes["recurrence_rule"] = rule.value
    if interval is not None:
        changes["recurrence_interval"] = interval
    if days is not None:
        changes["recurrence_days"] = [d.value for d in parse_weekdays_option(days)]
    if nth_week is not None:
        changes["nth_week"] = nth_week
    if nth_weekday is not None:
        changes["nth_weekday"] = nth_weekday.value
    if until is not None:
        changes["recurrence_end_date"] = parse_date_option(until).isoformat()
    if count is not None:
        changes["recurrence_count"] = count

    if not changes:
        logger.warning("Nothing to change; pass at least one option.")
        raise typer.Exit(1)

    try:
        updated = ctx.store.update(event_id, changes)
    except ValidationError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    console.print(f"\n[bold green]✓[/bold green] Event '{updated.title}' updated")
    console.print(f"  Changed: {', '.join(sorted(changes))}")
    console.print(f"  Repeats: {describe_recurrence(updated)}")


def duplicate(
    event_id: Annotated[
        str,
        typer.Argument(help="Event ID to copy"),
    ],
    start: Annotated[
        str,
        typer.Option("--start", "-s", help="Start date of the copy (YYYY-MM-DD)"),
    ],
    title: Annotated[
        str | None,
        typer.Option("--title", "-t", help="Title of the copy (default: same title)"),
    ] = None,
) -> None:
    """Create a new event from an existing one on another date.

    The copy keeps times, location, description and recurrence. It gets a
    new ID and no excluded dates.
    """
    ctx = get_context()
    template = _load(event_id)
    new_start = parse_date_option(start)

    data = template.model_dump(mode="json", exclude=_NOT_COPIED)
    data["start_date"] = new_start.isoformat()
    data["end_date"] = (new_start + template.span).isoformat()
    if title is not None:
        data["title"] = title

    try:
        copy = ctx.store.create(data)
    except ValidationError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    console.print(f"\n[bold green]✓[/bold green] Event '{copy.title}' created from {template.id}")
    console.print(f"  ID: {copy.id}")
    console.print(f"  Date: {copy.start_date}")

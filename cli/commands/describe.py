"""Describe an event's recurrence pattern."""

import logging
from datetime import date

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import console
from planner.exceptions import EventNotFoundError
from planner.recurrence import next_occurrence
from planner.recurrence_format import describe_recurrence, format_time

logger = logging.getLogger(__name__)


def describe(
    event_id: Annotated[
        str,
        typer.Argument(help="Event ID"),
    ],
) -> None:
    """Show an event's details, recurrence pattern and next occurrence."""
    ctx = get_context()

    try:
        template = ctx.store.get(event_id)
    except EventNotFoundError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    console.print(f"\n[bold]{template.title or '(No Title)'}[/bold]")
    console.print(f"  ID: {template.id}")
    if template.is_multi_day:
        console.print(f"  Dates: {template.start_date} → {template.end_date}")
    else:
        console.print(f"  Date: {template.start_date}")
    if template.is_all_day:
        console.print("  Time: All day")
    elif template.start_time:
        time_str = format_time(template.start_time)
        if template.end_time:
            time_str += f" – {format_time(template.end_time)}"
        console.print(f"  Time: {time_str}")
    if template.location:
        console.print(f"  Location: {template.location}")
    console.print(f"  Repeats: {describe_recurrence(template)}")

    if template.is_recurring:
        if template.excluded_dates:
            excluded = ", ".join(d.isoformat() for d in sorted(template.excluded_dates))
            console.print(f"  Excluded: {excluded}")
        upcoming = next_occurrence(
            template, date.today(), max_occurrences=ctx.config.max_occurrences
        )
        console.print(f"  Next: {upcoming.isoformat() if upcoming else '-'}")

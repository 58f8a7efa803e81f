"""Create a new event or recurring series."""

import logging

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import console
from cli.utils import parse_date_option, parse_time_option, parse_weekdays_option
from planner.exceptions import ValidationError
from planner.models.event import RecurrenceRule, Weekday
from planner.recurrence_format import describe_recurrence

logger = logging.getLogger(__name__)


def add(
    title: Annotated[
        str,
        typer.Argument(help="Event title"),
    ],
    start: Annotated[
        str,
        typer.Option("--start", "-s", help="Start date (YYYY-MM-DD)"),
    ],
    end: Annotated[
        str | None,
        typer.Option("--end", "-e", help="End date for multi-day events (YYYY-MM-DD)"),
    ] = None,
    start_time: Annotated[
        str | None,
        typer.Option("--start-time", help="Start time (HH:MM)"),
    ] = None,
    end_time: Annotated[
        str | None,
        typer.Option("--end-time", help="End time (HH:MM)"),
    ] = None,
    all_day: Annotated[
        bool,
        typer.Option("--all-day", help="All-day event (times are ignored)"),
    ] = False,
    location: Annotated[
        str | None,
        typer.Option("--location", "-l", help="Location"),
    ] = None,
    description: Annotated[
        str | None,
        typer.Option("--description", help="Description"),
    ] = None,
    rule: Annotated[
        RecurrenceRule,
        typer.Option("--rule", "-r", help="Recurrence rule", case_sensitive=False),
    ] = RecurrenceRule.NONE,
    interval: Annotated[
        int,
        typer.Option("--interval", "-i", min=1, help="Repeat every N periods"),
    ] = 1,
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
    """Create a new event.

    Examples:
        planner add "Dentist" --start 2024-05-10 --start-time 09:00
        planner add "Standup" --start 2024-01-01 --rule WEEKLY --interval 2
        planner add "Gym" --start 2024-01-01 --rule CUSTOM_DAYS --days MON,WED
        planner add "Book club" --start 2024-03-01 --rule MONTHLY_NTH \\
            --nth-week 2 --nth-weekday FRI --count 10
    """
    ctx = get_context()

    data = {
        "title": title,
        "description": description,
        "location": location,
        "start_date": parse_date_option(start).isoformat(),
        "end_date": parse_date_option(end).isoformat() if end else None,
        "is_all_day": all_day,
        "start_time": parse_time_option(start_time).isoformat() if start_time else None,
        "end_time": parse_time_option(end_time).isoformat() if end_time else None,
        "recurrence_rule": rule.value,
        "recurrence_interval": interval,
        "recurrence_days": [d.value for d in parse_weekdays_option(days)] if days else [],
        "nth_week": nth_week,
        "nth_weekday": nth_weekday.value if nth_weekday else None,
        "recurrence_end_date": parse_date_option(until).isoformat() if until else None,
        "recurrence_count": count,
    }

    try:
        template = ctx.store.create(data)
    except ValidationError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    console.print(f"\n[bold green]✓[/bold green] Event '{template.title}' created")
    console.print(f"  ID: {template.id}")
    console.print(f"  Repeats: {describe_recurrence(template)}")

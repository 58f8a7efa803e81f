"""Search occurrences by text."""

import logging
from datetime import date, timedelta

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import RichEventRenderer
from cli.utils import parse_date_option
from planner.calendar_query import CalendarQuery

logger = logging.getLogger(__name__)


def search(
    query: Annotated[
        str,
        typer.Argument(help="Text to search for in titles, descriptions and locations"),
    ],
    start: Annotated[
        str | None,
        typer.Option("--start", "-s", help="First day to search (default today)"),
    ] = None,
    days: Annotated[
        int,
        typer.Option("--days", "-d", min=1, help="Number of days to search"),
    ] = 90,
) -> None:
    """Search upcoming occurrences.

    Examples:
        planner search dentist              # Next 90 days
        planner search gym --days 14        # Next 2 weeks
        planner search standup -s 2024-01-01 -d 31
    """
    ctx = get_context()

    window_start = parse_date_option(start) if start else date.today()
    window_end = window_start + timedelta(days=days - 1)

    templates = ctx.store.query(window_start, window_end)
    cal_query = CalendarQuery(templates, ctx.config.max_occurrences)
    occurrences = cal_query.search(query, window_start, window_end)

    renderer = RichEventRenderer()
    subtitle = f'"{query}" next {days} days'
    if occurrences:
        renderer.render_list(occurrences, title="Search", subtitle=subtitle)
    else:
        renderer.render_empty(f"No events matching: {subtitle}")

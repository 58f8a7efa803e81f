"""Display expanded occurrences in agenda or list format."""

import calendar
import logging
from datetime import date, datetime, timedelta

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import EventRenderer, RichEventRenderer
from cli.utils import parse_date_option
from planner.calendar_query import CalendarQuery
from planner.day_view import group_by_day
from planner.utils import week_bounds

logger = logging.getLogger(__name__)


def _parse_month(value: str) -> tuple[date, date]:
    """Parse YYYY-MM into the first and last day of that month."""
    try:
        first = datetime.strptime(value, "%Y-%m").date()
    except ValueError:
        raise typer.BadParameter(f"Invalid month format: {value}. Use YYYY-MM.")
    last_day = calendar.monthrange(first.year, first.month)[1]
    return first, first.replace(day=last_day)


def show(
    days: Annotated[
        int | None,
        typer.Option("--days", "-d", help="Number of days to show"),
    ] = None,
    target_date: Annotated[
        str | None,
        typer.Option("--date", help="First day to show (YYYY-MM-DD, default today)"),
    ] = None,
    month: Annotated[
        str | None,
        typer.Option("--month", "-m", help="Show a whole month (YYYY-MM)"),
    ] = None,
    week: Annotated[
        str | None,
        typer.Option("--week", "-w", help="Show the Monday-start week containing a date"),
    ] = None,
    view: Annotated[
        str,
        typer.Option("--view", help="View mode: 'agenda' or 'list'"),
    ] = "agenda",
) -> None:
    """Display occurrences for a window of days.

    Recurring events are expanded for the window on every call.

    Examples:
        planner show                      # Next 7 days (agenda view)
        planner show --days 14            # Next 2 weeks
        planner show --month 2024-05      # May 2024
        planner show --week 2024-05-15    # Week of May 13, 2024
        planner show --view list          # Flat list
    """
    ctx = get_context()

    if view not in ("agenda", "list"):
        logger.error(f"Invalid view mode: {view}. Use 'agenda' or 'list'.")
        raise typer.Exit(1)

    if month:
        start, end = _parse_month(month)
        title = "Month"
        subtitle = start.strftime("%B %Y")
    elif week:
        start, end = week_bounds(parse_date_option(week))
        title = "Week"
        subtitle = f"{start.strftime('%b %d')} – {end.strftime('%b %d, %Y')}"
    else:
        count = days or ctx.config.default_days
        start = parse_date_option(target_date) if target_date else date.today()
        end = start + timedelta(days=count - 1)
        title = "Upcoming"
        subtitle = f"{count} days" if count != 1 else "1 day"

    templates = ctx.store.query(start, end)
    query = CalendarQuery(templates, ctx.config.max_occurrences)
    occurrences = query.date_range(start, end)
    renderer: EventRenderer = RichEventRenderer()

    if view == "agenda":
        renderer.render_agenda(
            group_by_day(occurrences, start, end), title=title, subtitle=subtitle
        )
    else:
        renderer.render_list(occurrences, title=title, subtitle=subtitle)


def day(
    target_date: Annotated[
        str,
        typer.Argument(help="Day to show (YYYY-MM-DD)"),
    ],
) -> None:
    """Show one day: all-day events first, then timed events by start time.

    Multi-day events are shown with the times that apply on that day.
    """
    ctx = get_context()
    target = parse_date_option(target_date)

    query = CalendarQuery(ctx.store.all(), ctx.config.max_occurrences)
    RichEventRenderer().render_day(target, query.on_date(target))

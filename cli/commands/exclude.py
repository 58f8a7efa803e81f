"""Remove a single occurrence from a recurring event."""

import logging

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import console
from cli.utils import parse_date_option
from planner.exceptions import EventNotFoundError

logger = logging.getLogger(__name__)


def exclude(
    event_id: Annotated[
        str,
        typer.Argument(help="Event ID of the recurring series"),
    ],
    occurrence_date: Annotated[
        str,
        typer.Argument(help="Occurrence date to remove (YYYY-MM-DD)"),
    ],
) -> None:
    """Delete only one occurrence of a recurring event.

    The date is added to the series' excluded dates; the rest of the
    series is unchanged.
    """
    ctx = get_context()
    day = parse_date_option(occurrence_date)

    try:
        template = ctx.store.get(event_id)
    except EventNotFoundError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    if not template.is_recurring:
        logger.error(
            f"Event '{event_id}' does not repeat. Use 'delete' to remove it."
        )
        raise typer.Exit(1)

    ctx.store.add_exception(event_id, day)
    console.print(
        f"\n[bold green]✓[/bold green] Removed {day.isoformat()} from '{template.title}'"
    )

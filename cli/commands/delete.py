"""Delete an event or a whole recurring series."""

import logging

import typer
from typing_extensions import Annotated

from cli.context import get_context
from planner.exceptions import EventNotFoundError
from planner.recurrence_format import describe_recurrence

logger = logging.getLogger(__name__)


def delete(
    event_id: Annotated[
        str,
        typer.Argument(help="Event ID to delete"),
    ],
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Skip confirmation prompt"),
    ] = False,
) -> None:
    """Delete an event. For a recurring event this deletes the whole series.

    Use 'exclude' to remove a single occurrence instead.
    """
    ctx = get_context()
    store = ctx.store

    try:
        template = store.get(event_id)
    except EventNotFoundError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    # Show confirmation prompt unless --force is set
    if not force:
        print(f"\nDelete event '{template.title}'")
        print(f"  Starts: {template.start_date}")
        if template.is_recurring:
            print(f"  Repeats: {describe_recurrence(template)}")
            print(
                f"\n{typer.style('⚠', fg=typer.colors.YELLOW, bold=True)} "
                "This deletes every occurrence of the series"
            )
        print()
        if not typer.confirm("Continue?"):
            typer.echo("Delete cancelled.")
            return

    store.delete(event_id)
    print(
        f"\n{typer.style('✓', fg=typer.colors.GREEN, bold=True)} "
        f"Event '{template.title}' deleted"
    )

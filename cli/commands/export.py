"""Export expanded occurrences to ICS or JSON."""

import logging
from pathlib import Path

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.utils import parse_date_option
from planner.exceptions import ExportError, UnsupportedFormatError
from planner.output import get_writer
from planner.recurrence import expand

logger = logging.getLogger(__name__)


def export(
    start: Annotated[
        str,
        typer.Option("--start", "-s", help="First day of the window (YYYY-MM-DD)"),
    ],
    end: Annotated[
        str,
        typer.Option("--end", "-e", help="Last day of the window (YYYY-MM-DD)"),
    ],
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: 'ics' or 'json'"),
    ] = "ics",
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output path (default: occurrences.<ext>)"),
    ] = None,
) -> None:
    """Export every occurrence in a window.

    Each occurrence of a recurring event becomes its own entry.
    """
    ctx = get_context()
    window_start = parse_date_option(start)
    window_end = parse_date_option(end)

    try:
        writer = get_writer(format)
    except UnsupportedFormatError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    path = output or Path(f"occurrences.{writer.get_extension()}")
    templates = ctx.store.query(window_start, window_end)
    occurrences = expand(
        templates, window_start, window_end, ctx.config.max_occurrences
    )

    try:
        writer.write(occurrences, path)
    except ExportError as e:
        logger.error(f"Export failed: {e}")
        raise typer.Exit(1)

    print(f"{typer.style('✓', fg=typer.colors.GREEN, bold=True)} Exported {len(occurrences)} occurrences")
    print(f"  {path.resolve()}")
    logger.info(f"Exported {len(occurrences)} occurrences to {path}")

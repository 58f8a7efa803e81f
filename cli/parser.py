"""CLI application and command routing."""

import logging

import typer
from typing_extensions import Annotated

from cli import setup_logging
from cli.commands import (
    add,
    day,
    delete,
    describe,
    duplicate,
    edit,
    exclude,
    export,
    search,
    show,
)
from cli.context import CLIContext, set_context

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Personal organizer calendar with recurring events.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show info messages"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only show errors"),
    ] = False,
) -> None:
    """Set up logging and the shared command context."""
    ctx = CLIContext(verbose=verbose, quiet=quiet)
    setup_logging(verbose=verbose, quiet=quiet, config=ctx.config)
    set_context(ctx)


app.command("show")(show)
app.command("day")(day)
app.command("search")(search)
app.command("describe")(describe)
app.command("add")(add)
app.command("edit")(edit)
app.command("duplicate")(duplicate)
app.command("exclude")(exclude)
app.command("delete")(delete)
app.command("export")(export)

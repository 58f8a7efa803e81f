"""CLI commands package."""

from cli.commands.add import add
from cli.commands.delete import delete
from cli.commands.describe import describe
from cli.commands.edit import duplicate, edit
from cli.commands.exclude import exclude
from cli.commands.export import export
from cli.commands.search import search
from cli.commands.show import day, show

__all__ = [
    "add",
    "day",
    "delete",
    "describe",
    "duplicate",
    "edit",
    "exclude",
    "export",
    "search",
    "show",
]

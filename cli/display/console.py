"""Shared Rich console instance for terminal output."""

from rich.console import Console

# Dates and times in event titles are not highlighted
console = Console(highlight=False)

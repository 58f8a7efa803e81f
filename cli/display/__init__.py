"""Display module for rendering planner output.

This module provides:
- EventRenderer: Protocol for occurrence rendering
- RichEventRenderer: Rich-based display (agenda/day/list views)
- console: Shared Rich console instance
- Formatting functions for day labels and times
"""

from cli.display.console import console
from cli.display.event_renderer import EventRenderer
from cli.display.formatters import format_day_label, format_entry_time, format_span
from cli.display.rich_renderer import RichEventRenderer

__all__ = [
    # Console
    "console",
    # Protocols
    "EventRenderer",
    # Renderers
    "RichEventRenderer",
    # Formatters
    "format_day_label",
    "format_entry_time",
    "format_span",
]

"""Base classes for occurrence writers."""

from pathlib import Path
from typing import Protocol

from planner.models.event import Occurrence


class OccurrenceWriter(Protocol):
    """Protocol for occurrence writers."""

    def write(self, occurrences: list[Occurrence], path: Path) -> None:
        """Write occurrences to file path."""
        ...

    def get_extension(self) -> str:
        """Returns file extension (e.g., 'ics', 'json')."""
        ...

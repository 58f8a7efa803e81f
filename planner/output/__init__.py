"""Output writers for expanded occurrences."""

from planner.exceptions import UnsupportedFormatError
from planner.output.base import OccurrenceWriter
from planner.output.ics_writer import ICSWriter
from planner.output.json_writer import JSONWriter


def get_writer(format: str) -> OccurrenceWriter:
    """Get writer for format."""
    if format == "ics":
        return ICSWriter()
    elif format == "json":
        return JSONWriter()
    else:
        raise UnsupportedFormatError(f"Unsupported output format: {format}")


__all__ = ["OccurrenceWriter", "ICSWriter", "JSONWriter", "get_writer"]

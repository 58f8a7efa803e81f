"""JSON file writer for expanded occurrences."""

import json
from pathlib import Path

from planner.models.event import Occurrence


def occurrences_to_json(occurrences: list[Occurrence]) -> list[dict]:
    """Serialize occurrences to JSON-compatible dicts."""
    return [o.model_dump(mode="json") for o in occurrences]


class JSONWriter:
    """Writer for JSON occurrence files."""

    def write(self, occurrences: list[Occurrence], path: Path) -> None:
        """Write occurrences to JSON file."""
        data = {"occurrences": occurrences_to_json(occurrences)}
        with open(path, "w", encoding="utf-8") as f:
            f.write(json.dumps(data, indent=2))

    def get_extension(self) -> str:
        """Returns file extension."""
        return "json"

"""Event template storage."""

import json
import logging
import uuid
from datetime import date
from pathlib import Path
from typing import Any, Protocol

from pydantic import ValidationError as PydanticValidationError

from planner.exceptions import EventNotFoundError, StoreError, ValidationError
from planner.models.event import EventTemplate
from planner.utils import parse_date

logger = logging.getLogger(__name__)

# Computed fields are derived on load and never written back
_COMPUTED_FIELDS = {"is_recurring"}


class EventStore(Protocol):
    """Protocol for event template stores."""

    def query(self, start: date, end: date) -> list[EventTemplate]:
        """Return templates that may produce occurrences in [start, end]."""
        ...

    def get(self, event_id: str) -> EventTemplate:
        """Return one template by id."""
        ...

    def create(self, data: dict[str, Any]) -> EventTemplate:
        """Create a template from row data."""
        ...

    def update(self, event_id: str, changes: dict[str, Any]) -> EventTemplate:
        """Apply changes to a template."""
        ...

    def delete(self, event_id: str) -> bool:
        """Delete a template (the whole series)."""
        ...

    def add_exception(self, event_id: str, day: date) -> EventTemplate:
        """Exclude one occurrence date from a recurring template."""
        ...


def _row_id(row: Any) -> str | None:
    """Id of a raw row, or None for rows that are not objects."""
    if isinstance(row, dict) and row.get("id") is not None:
        return str(row["id"])
    return None


def _may_occur_in(template: EventTemplate, start: date, end: date) -> bool:
    """Coarse date predicate applied before expansion."""
    if not template.is_recurring:
        return template.start_date <= end and template.end_date >= start
    if template.start_date > end:
        return False
    if template.recurrence_end_date and template.recurrence_end_date < start:
        return False
    return True


class JSONEventStore:
    """Event store backed by a single JSON file.

    The file holds ``{"events": [row, ...]}`` with rows in the persisted
    column format. A missing file is an empty store.
    """

    def __init__(self, path: Path):
        """Initialize store.

        Args:
            path: Path to the JSON events file.
        """
        self.path = Path(path)

    def _read_rows(self) -> list[dict[str, Any]]:
        """Read raw rows from disk."""
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise StoreError(f"Failed to read events file {self.path}: {e}") from e

        if isinstance(data, list):
            return data
        if isinstance(data, dict) and isinstance(data.get("events"), list):
            return data["events"]
        raise StoreError(
            f"Events file {self.path} not recognized. Expected an array of "
            "events or an object with an 'events' key."
        )

    def _write_rows(self, rows: list[dict[str, Any]]) -> None:
        """Write raw rows to disk."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                json.dumps({"events": rows}, indent=2), encoding="utf-8"
            )
        except OSError as e:
            raise StoreError(f"Failed to write events file {self.path}: {e}") from e

    @staticmethod
    def _to_row(template: EventTemplate) -> dict[str, Any]:
        """Serialize a template to its persisted row."""
        return template.model_dump(mode="json", exclude=_COMPUTED_FIELDS)

    @staticmethod
    def _validate(row: dict[str, Any]) -> EventTemplate:
        try:
            return EventTemplate.model_validate(row)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid event data: {e}") from e

    def all(self) -> list[EventTemplate]:
        """Return every valid template; invalid rows are logged and skipped."""
        templates = []
        for row in self._read_rows():
            try:
                templates.append(self._validate(row))
            except ValidationError as e:
                logger.warning(f"Skipping stored event {_row_id(row) or '<no id>'}: {e}")
        return templates

    def query(self, start: date | str, end: date | str) -> list[EventTemplate]:
        """Return templates that may produce occurrences in [start, end].

        Non-recurring events must overlap the range. Recurring events must
        start on or before ``end`` and not finish before ``start``.

        Returns:
            Templates sorted by start date.
        """
        start = parse_date(start)
        end = parse_date(end)
        matching = [t for t in self.all() if _may_occur_in(t, start, end)]
        return sorted(matching, key=lambda t: t.start_date)

    def get(self, event_id: str) -> EventTemplate:
        """Return one template by id.

        Raises:
            EventNotFoundError: If no event has this id
        """
        for template in self.all():
            if template.id == str(event_id):
                return template
        raise EventNotFoundError(f"Event '{event_id}' not found")

    def create(self, data: dict[str, Any]) -> EventTemplate:
        """Create a template.

        A new id is assigned unless ``data`` carries one.

        Raises:
            ValidationError: If the row is invalid
        """
        row = dict(data)
        row.setdefault("id", uuid.uuid4().hex)
        template = self._validate(row)

        rows = self._read_rows()
        rows.append(self._to_row(template))
        self._write_rows(rows)
        logger.info(f"Created event {template.id} ({template.title})")
        return template

    def update(self, event_id: str, changes: dict[str, Any]) -> EventTemplate:
        """Apply changes to a template.

        Raises:
            EventNotFoundError: If no event has this id
            ValidationError: If the updated row is invalid
        """
        rows = self._read_rows()
        for i, row in enumerate(rows):
            if _row_id(row) == str(event_id):
                merged = {**row, **changes, "id": row["id"]}
                template = self._validate(merged)
                rows[i] = self._to_row(template)
                self._write_rows(rows)
                logger.info(f"Updated event {event_id}")
                return template
        raise EventNotFoundError(f"Event '{event_id}' not found")

    def delete(self, event_id: str) -> bool:
        """Delete a template.

        Returns:
            True if deleted, False if no event has this id
        """
        rows = self._read_rows()
        remaining = [r for r in rows if _row_id(r) != str(event_id)]
        if len(remaining) == len(rows):
            return False
        self._write_rows(remaining)
        logger.info(f"Deleted event {event_id}")
        return True

    def add_exception(self, event_id: str, day: date | str) -> EventTemplate:
        """Exclude one occurrence date from a recurring template.

        Adding a date that is already excluded leaves the row unchanged.

        Raises:
            EventNotFoundError: If no event has this id
        """
        day = parse_date(day)
        template = self.get(event_id)
        if day in template.excluded_dates:
            return template
        excluded = [d.isoformat() for d in template.excluded_dates]
        excluded.append(day.isoformat())
        return self.update(event_id, {"excluded_dates": excluded})

"""Exception hierarchy for planner operations."""


class PlannerError(Exception):
    """Base exception for planner operations."""

    pass


class EventNotFoundError(PlannerError):
    """Event template not found in the store."""

    pass


class StoreError(PlannerError):
    """Event store could not be read or written."""

    pass


class ValidationError(PlannerError):
    """Pydantic validation error."""

    pass


class RecurrenceError(PlannerError):
    """Recurrence metadata on a template cannot be evaluated."""

    pass


class UnsupportedFormatError(PlannerError):
    """Export format not supported."""

    pass


class ExportError(PlannerError):
    """Error during occurrence export."""

    pass

"""Storage layer for event templates."""

from planner.storage.event_store import EventStore, JSONEventStore

__all__ = ["EventStore", "JSONEventStore"]

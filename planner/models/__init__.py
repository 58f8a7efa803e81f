"""Pydantic models for the planner."""

from planner.models.event import EventTemplate, Occurrence, RecurrenceRule, Weekday

__all__ = [
    "EventTemplate",
    "Occurrence",
    "RecurrenceRule",
    "Weekday",
]

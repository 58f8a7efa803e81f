"""Shared constants for the planner."""

# Safety cap on generated dates per template when no count is set
DEFAULT_MAX_OCCURRENCES = 365

# Default events file for the JSON store
DEFAULT_EVENTS_FILE = "data/events.json"

# Wire formats
DATE_FORMAT = "%Y-%m-%d"

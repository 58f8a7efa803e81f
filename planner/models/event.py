"""Event template and occurrence models with Pydantic v2 validation."""

import json
from datetime import date, time, timedelta
from enum import Enum
from typing import Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    computed_field,
    field_validator,
    model_validator,
)


class Weekday(str, Enum):
    """Weekday tags as stored in recurrence rows."""

    MON = "MON"
    TUE = "TUE"
    WED = "WED"
    THU = "THU"
    FRI = "FRI"
    SAT = "SAT"
    SUN = "SUN"

    @property
    def day_number(self) -> int:
        """Position in the week, matching date.weekday() (Monday is 0)."""
        return list(Weekday).index(self)

    @property
    def full_name(self) -> str:
        """English day name (e.g. "Friday")."""
        return _FULL_NAMES[self.day_number]

    @classmethod
    def from_date(cls, value: date) -> "Weekday":
        """Get the weekday tag for a calendar date."""
        return list(cls)[value.weekday()]


_FULL_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


class RecurrenceRule(str, Enum):
    """Named repetition patterns."""

    NONE = "NONE"
    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"
    CUSTOM_DAYS = "CUSTOM_DAYS"
    MONTHLY_NTH = "MONTHLY_NTH"


def _parse_list(v):
    """Accept a list, a JSON-encoded list or a comma separated string."""
    if v is None or v == "":
        return []
    if isinstance(v, str):
        text = v.strip()
        if text.startswith("["):
            return json.loads(text)
        return [part.strip() for part in text.split(",") if part.strip()]
    if not isinstance(v, (list, tuple, set)):
        raise ValueError(f"Expected a list, got {type(v).__name__}")
    return list(v)


class EventTemplate(BaseModel):
    """Stored event row: a single event or the rule for a recurring series.

    Attribute names follow the persisted column names. A row without an
    ``end_date`` is a single-day event; all-day rows carry no times.
    """

    id: str
    title: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    color: Optional[str] = None

    start_date: date
    end_date: date
    is_all_day: bool = False
    start_time: Optional[time] = None
    end_time: Optional[time] = None

    recurrence_rule: RecurrenceRule = RecurrenceRule.NONE
    recurrence_interval: int = Field(default=1, ge=1)
    recurrence_days: list[Weekday] = Field(default_factory=list)
    nth_week: Optional[int] = None
    nth_weekday: Optional[Weekday] = None
    recurrence_end_date: Optional[date] = None
    recurrence_count: Optional[int] = Field(default=None, ge=1)
    excluded_dates: list[date] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def fill_defaults(cls, data):
        """Default end_date to start_date."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if not data.get("end_date"):
            data["end_date"] = data.get("start_date")
        return data

    @field_validator("id", mode="before")
    @classmethod
    def convert_id(cls, v):
        """Store ids are opaque; integers become strings."""
        if isinstance(v, int):
            return str(v)
        return v

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def blank_time(cls, v):
        """Treat empty time strings as missing."""
        if v == "":
            return None
        return v

    @field_validator("start_time", "end_time")
    @classmethod
    def clear_all_day_time(cls, v, info: ValidationInfo):
        """All-day rows carry no times."""
        if info.data.get("is_all_day"):
            return None
        return v

    @field_validator("recurrence_rule", mode="before")
    @classmethod
    def normalize_rule(cls, v):
        """Empty, null and "NONE" all mean a non-recurring row."""
        if v is None or v == "":
            return RecurrenceRule.NONE
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("recurrence_interval", mode="before")
    @classmethod
    def default_interval(cls, v):
        """Missing interval defaults to 1."""
        if v is None or v == "" or v == 0:
            return 1
        return v

    @field_validator("recurrence_count", mode="before")
    @classmethod
    def blank_count(cls, v):
        """Zero or empty count means unbounded."""
        if v is None or v == "" or v == 0:
            return None
        return v

    @field_validator("recurrence_days", mode="before")
    @classmethod
    def parse_days(cls, v):
        """Convert JSON or comma separated weekday tags to a list."""
        return [d.upper() if isinstance(d, str) else d for d in _parse_list(v)]

    @field_validator("nth_week", mode="before")
    @classmethod
    def parse_nth_week(cls, v):
        """Convert nth week strings ("2", "-1") to int."""
        if v is None or v == "":
            return None
        if isinstance(v, bool) or not isinstance(v, (int, str)):
            raise ValueError(f"Invalid nth_week: {v!r}")
        return int(v)

    @field_validator("nth_week")
    @classmethod
    def check_nth_week(cls, v):
        """Allow positive positions or -1 for "last"."""
        if v is not None and v != -1 and v < 1:
            raise ValueError(f"Invalid nth_week: {v}")
        return v

    @field_validator("nth_weekday", mode="before")
    @classmethod
    def parse_nth_weekday(cls, v):
        """Normalize weekday tag case."""
        if v is None or v == "":
            return None
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("excluded_dates", mode="before")
    @classmethod
    def parse_excluded(cls, v):
        """Convert null or JSON exception lists to a list."""
        return _parse_list(v)

    @model_validator(mode="after")
    def validate_dates(self):
        """Validate date consistency."""
        if self.end_date < self.start_date:
            raise ValueError("end_date must be >= start_date")
        return self

    @computed_field
    @property
    def is_recurring(self) -> bool:
        """True if the row describes a series."""
        return self.recurrence_rule != RecurrenceRule.NONE

    @property
    def is_multi_day(self) -> bool:
        """True if end_date is after start_date."""
        return self.end_date > self.start_date

    @property
    def span(self) -> timedelta:
        """Distance from start_date to end_date."""
        return self.end_date - self.start_date


class Occurrence(BaseModel):
    """One concrete dated instance derived from a template.

    Occurrences are produced fresh by each expansion and never persisted.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    color: Optional[str] = None
    is_all_day: bool = False
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    recurrence_rule: RecurrenceRule = RecurrenceRule.NONE

    occurrence_start_date: date
    occurrence_end_date: date
    is_recurring_instance: bool = False
    original_template_id: str

    template: EventTemplate = Field(exclude=True, repr=False)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_template(
        cls, template: EventTemplate, start: date, recurring: bool
    ) -> "Occurrence":
        """Build an occurrence starting on ``start``.

        A single event keeps its own date range. Each instance of a
        recurring series covers only its generated date.
        """
        end = start if recurring else start + template.span
        return cls(
            title=template.title,
            description=template.description,
            location=template.location,
            color=template.color,
            is_all_day=template.is_all_day,
            start_time=template.start_time,
            end_time=template.end_time,
            recurrence_rule=template.recurrence_rule,
            occurrence_start_date=start,
            occurrence_end_date=end,
            is_recurring_instance=recurring,
            original_template_id=template.id,
            template=template,
        )

    @property
    def key(self) -> tuple[str, date]:
        """Identity of the occurrence within one render pass."""
        return (self.original_template_id, self.occurrence_start_date)

    @property
    def is_multi_day(self) -> bool:
        """True if the occurrence covers more than one day."""
        return self.occurrence_end_date > self.occurrence_start_date

    def covers(self, day: date) -> bool:
        """True if ``day`` falls within this occurrence's span."""
        return self.occurrence_start_date <= day <= self.occurrence_end_date

    def overlaps(self, start: date, end: date) -> bool:
        """True if the span intersects the inclusive range [start, end]."""
        return self.occurrence_start_date <= end and self.occurrence_end_date >= start

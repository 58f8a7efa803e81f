"""Tests for Pydantic models."""

from datetime import date, time, timedelta

import pytest
from pydantic import ValidationError as PydanticValidationError

from planner.models.event import EventTemplate, Occurrence, RecurrenceRule, Weekday


def test_template_creation():
    """Test basic template creation."""
    template = EventTemplate(
        id="1",
        title="Dentist",
        start_date=date(2024, 5, 10),
        start_time=time(9, 0),
        end_time=time(10, 0),
    )
    assert template.title == "Dentist"
    assert template.end_date == date(2024, 5, 10)
    assert template.recurrence_rule == RecurrenceRule.NONE
    assert template.recurrence_interval == 1
    assert template.is_recurring is False
    assert template.is_multi_day is False
    assert template.span == timedelta(0)


def test_template_from_store_row():
    """Rows with string values and nulls are normalized."""
    template = EventTemplate.model_validate(
        {
            "id": 7,
            "title": "Book club",
            "start_date": "2024-03-01",
            "end_date": None,
            "start_time": "19:00",
            "end_time": "",
            "recurrence_rule": "monthly_nth",
            "recurrence_interval": "",
            "nth_week": "-1",
            "nth_weekday": "fri",
            "recurrence_count": 0,
            "excluded_dates": None,
        }
    )
    assert template.id == "7"
    assert template.end_date == date(2024, 3, 1)
    assert template.start_time == time(19, 0)
    assert template.end_time is None
    assert template.recurrence_rule == RecurrenceRule.MONTHLY_NTH
    assert template.recurrence_interval == 1
    assert template.nth_week == -1
    assert template.nth_weekday == Weekday.FRI
    assert template.recurrence_count is None
    assert template.excluded_dates == []
    assert template.is_recurring is True


@pytest.mark.parametrize(
    "value",
    [["MON", "WED"], '["MON", "WED"]', "mon, wed", [Weekday.MON, Weekday.WED]],
)
def test_recurrence_days_formats(value):
    """Weekday lists may be lists, JSON strings or comma separated."""
    template = EventTemplate(
        id="1", start_date=date(2024, 1, 1), recurrence_days=value
    )
    assert template.recurrence_days == [Weekday.MON, Weekday.WED]


def test_excluded_dates_from_json_string():
    template = EventTemplate(
        id="1",
        start_date=date(2024, 1, 1),
        recurrence_rule="WEEKLY",
        excluded_dates='["2024-01-08", "2024-01-22"]',
    )
    assert template.excluded_dates == [date(2024, 1, 8), date(2024, 1, 22)]


def test_all_day_clears_times():
    """All-day rows carry no times."""
    template = EventTemplate(
        id="1",
        start_date=date(2024, 1, 1),
        is_all_day=True,
        start_time=time(9, 0),
        end_time=time(17, 0),
    )
    assert template.start_time is None
    assert template.end_time is None


@pytest.mark.parametrize("flag,expected", [
    ("false", time(9, 0)),
    ("true", None),
])
def test_all_day_string_flag_from_store_row(flag, expected):
    """String all-day flags are coerced before times are dropped."""
    template = EventTemplate.model_validate(
        {"id": "1", "start_date": "2024-01-01", "is_all_day": flag, "start_time": "09:00"}
    )
    assert template.is_all_day is (flag == "true")
    assert template.start_time == expected


def test_end_before_start_rejected():
    """Test date validation."""
    with pytest.raises(PydanticValidationError):
        EventTemplate(id="1", start_date=date(2024, 1, 5), end_date=date(2024, 1, 4))


@pytest.mark.parametrize("field,value", [
    ("nth_week", 0),
    ("nth_week", -2),
    ("recurrence_interval", -1),
    ("recurrence_count", -3),
    ("recurrence_rule", "FORTNIGHTLY"),
    ("nth_weekday", "FUNDAY"),
    ("nth_week", [2]),
    ("nth_week", True),
    ("recurrence_days", 5),
    ("excluded_dates", {"2024-01-02": True}),
])
def test_invalid_recurrence_fields_rejected(field, value):
    with pytest.raises(PydanticValidationError):
        EventTemplate(id="1", start_date=date(2024, 1, 1), **{field: value})


def test_nth_week_beyond_four_allowed():
    """A 5th-weekday position is valid; months without it are skipped later."""
    template = EventTemplate(id="1", start_date=date(2024, 1, 1), nth_week=5)
    assert template.nth_week == 5


def test_template_is_frozen():
    template = EventTemplate(id="1", start_date=date(2024, 1, 1))
    with pytest.raises(PydanticValidationError):
        template.title = "Changed"


def test_template_multi_day_span():
    template = EventTemplate(
        id="1", start_date=date(2024, 5, 10), end_date=date(2024, 5, 12)
    )
    assert template.is_multi_day is True
    assert template.span == timedelta(days=2)


def test_weekday_helpers():
    assert Weekday.MON.day_number == 0
    assert Weekday.SUN.day_number == 6
    assert Weekday.FRI.full_name == "Friday"
    assert Weekday.from_date(date(2024, 1, 1)) == Weekday.MON
    assert Weekday.from_date(date(2024, 3, 8)) == Weekday.FRI


def test_occurrence_from_template():
    """Occurrences copy display fields; a series instance covers one day."""
    template = EventTemplate(
        id="abc",
        title="Trip",
        location="Lake",
        start_date=date(2024, 5, 10),
        end_date=date(2024, 5, 12),
        start_time=time(18, 0),
        end_time=time(12, 0),
        recurrence_rule="YEARLY",
    )
    occurrence = Occurrence.from_template(template, date(2025, 5, 10), recurring=True)

    assert occurrence.title == "Trip"
    assert occurrence.location == "Lake"
    assert occurrence.occurrence_start_date == date(2025, 5, 10)
    assert occurrence.occurrence_end_date == date(2025, 5, 10)
    assert occurrence.is_recurring_instance is True
    assert occurrence.original_template_id == "abc"
    assert occurrence.recurrence_rule == RecurrenceRule.YEARLY
    assert occurrence.key == ("abc", date(2025, 5, 10))
    assert occurrence.is_multi_day is False
    assert occurrence.template is template


def test_single_occurrence_keeps_date_range():
    template = EventTemplate(
        id="abc",
        start_date=date(2024, 5, 10),
        end_date=date(2024, 5, 12),
    )
    occurrence = Occurrence.from_template(template, template.start_date, recurring=False)

    assert occurrence.occurrence_end_date == date(2024, 5, 12)
    assert occurrence.is_multi_day is True
    assert occurrence.is_recurring_instance is False


def test_occurrence_covers_and_overlaps():
    template = EventTemplate(
        id="1", start_date=date(2024, 5, 10), end_date=date(2024, 5, 12)
    )
    occurrence = Occurrence.from_template(template, template.start_date, recurring=False)

    assert occurrence.covers(date(2024, 5, 11))
    assert not occurrence.covers(date(2024, 5, 13))
    assert occurrence.overlaps(date(2024, 5, 12), date(2024, 5, 20))
    assert occurrence.overlaps(date(2024, 5, 1), date(2024, 5, 10))
    assert not occurrence.overlaps(date(2024, 5, 13), date(2024, 5, 20))


def test_occurrence_dump_excludes_template():
    """The source template is not part of the serialized occurrence."""
    template = EventTemplate(id="1", title="X", start_date=date(2024, 1, 1))
    occurrence = Occurrence.from_template(template, template.start_date, recurring=False)
    data = occurrence.model_dump(mode="json")

    assert "template" not in data
    assert data["occurrence_start_date"] == "2024-01-01"
    assert data["original_template_id"] == "1"
    assert data["recurrence_rule"] == "NONE"

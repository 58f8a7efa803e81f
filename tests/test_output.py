"""Tests for output writers."""

import json
from datetime import date, datetime

import pytest
from icalendar import Calendar

from planner.exceptions import UnsupportedFormatError
from planner.models.event import EventTemplate
from planner.output import ICSWriter, JSONWriter, get_writer
from planner.output.ics_writer import build_calendar, occurrence_uid
from planner.recurrence import expand


@pytest.fixture
def occurrences():
    templates = [
        EventTemplate.model_validate(
            {
                "id": "standup",
                "title": "Standup",
                "location": "Room 1",
                "start_date": "2024-01-01",
                "start_time": "09:00",
                "end_time": "09:15",
                "recurrence_rule": "DAILY",
                "recurrence_count": 2,
            }
        ),
        EventTemplate.model_validate(
            {
                "id": "trip",
                "start_date": "2024-01-01",
                "end_date": "2024-01-03",
                "is_all_day": True,
            }
        ),
        EventTemplate.model_validate(
            {"id": "call", "title": "Call", "start_date": "2024-01-02", "start_time": "14:00"}
        ),
    ]
    return expand(templates, date(2024, 1, 1), date(2024, 1, 31))


def _events(cal: Calendar) -> dict[str, object]:
    return {str(e.get("uid")): e for e in cal.walk("VEVENT")}


def test_get_writer():
    assert isinstance(get_writer("ics"), ICSWriter)
    assert isinstance(get_writer("json"), JSONWriter)
    with pytest.raises(UnsupportedFormatError):
        get_writer("xml")


def test_occurrence_uid(occurrences):
    assert occurrence_uid(occurrences[0]) == "standup-20240101@planner"
    assert occurrence_uid(occurrences[1]) == "standup-20240102@planner"


def test_build_calendar_one_event_per_occurrence(occurrences):
    cal = Calendar.from_ical(build_calendar(occurrences, name="Test").to_ical())
    events = _events(cal)

    assert str(cal.get("X-WR-CALNAME")) == "Test"
    assert len(events) == 4

    standup = events["standup-20240102@planner"]
    assert str(standup.get("summary")) == "Standup"
    assert str(standup.get("location")) == "Room 1"
    assert standup.decoded("dtstart") == datetime(2024, 1, 2, 9, 0)
    assert standup.decoded("dtend") == datetime(2024, 1, 2, 9, 15)


def test_build_calendar_all_day_end_is_exclusive(occurrences):
    events = _events(Calendar.from_ical(build_calendar(occurrences).to_ical()))
    trip = events["trip-20240101@planner"]

    assert str(trip.get("summary")) == "(No Title)"
    assert trip.decoded("dtstart") == date(2024, 1, 1)
    assert trip.decoded("dtend") == date(2024, 1, 4)


def test_build_calendar_missing_end_time_defaults_to_one_hour(occurrences):
    events = _events(Calendar.from_ical(build_calendar(occurrences).to_ical()))
    call = events["call-20240102@planner"]
    assert call.decoded("dtend") == datetime(2024, 1, 2, 15, 0)


def test_ics_writer(occurrences, tmp_path):
    path = tmp_path / "out.ics"
    ICSWriter().write(occurrences, path)

    cal = Calendar.from_ical(path.read_bytes())
    assert len(list(cal.walk("VEVENT"))) == 4


def test_json_writer(occurrences, tmp_path):
    path = tmp_path / "out.json"
    JSONWriter().write(occurrences, path)

    data = json.loads(path.read_text())
    assert len(data["occurrences"]) == 4
    first = data["occurrences"][0]
    assert first["original_template_id"] == "standup"
    assert first["occurrence_start_date"] == "2024-01-01"
    assert first["is_recurring_instance"] is True
    assert "template" not in first


def test_writer_extensions():
    assert ICSWriter().get_extension() == "ics"
    assert JSONWriter().get_extension() == "json"

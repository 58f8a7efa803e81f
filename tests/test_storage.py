"""Tests for the JSON event store."""

import json
import logging
from datetime import date

import pytest

from planner.exceptions import EventNotFoundError, StoreError, ValidationError
from planner.models.event import RecurrenceRule
from planner.storage import JSONEventStore


def test_missing_file_is_empty(store):
    assert store.all() == []
    assert store.query(date(2024, 1, 1), date(2024, 12, 31)) == []


def test_create_assigns_id_and_persists(store, events_file):
    template = store.create(
        {"title": "Standup", "start_date": "2024-01-01", "recurrence_rule": "WEEKLY"}
    )

    assert template.id
    assert template.recurrence_rule == RecurrenceRule.WEEKLY

    data = json.loads(events_file.read_text())
    assert len(data["events"]) == 1
    row = data["events"][0]
    assert row["id"] == template.id
    assert row["start_date"] == "2024-01-01"
    assert row["recurrence_rule"] == "WEEKLY"
    assert "is_recurring" not in row


def test_create_keeps_given_id(store):
    template = store.create({"id": "fixed", "start_date": "2024-01-01"})
    assert template.id == "fixed"
    assert store.get("fixed") == template


def test_create_invalid_raises(store, events_file):
    with pytest.raises(ValidationError):
        store.create({"start_date": "2024-01-05", "end_date": "2024-01-01"})
    assert not events_file.exists()


def test_get_missing_raises(store):
    with pytest.raises(EventNotFoundError):
        store.get("nope")


def test_update_merges_changes(store):
    created = store.create({"title": "Old", "start_date": "2024-01-01"})
    updated = store.update(created.id, {"title": "New", "location": "Room 1"})

    assert updated.id == created.id
    assert updated.title == "New"
    assert updated.location == "Room 1"
    assert updated.start_date == date(2024, 1, 1)
    assert store.get(created.id).title == "New"


def test_update_missing_raises(store):
    with pytest.raises(EventNotFoundError):
        store.update("nope", {"title": "X"})


def test_delete(store):
    created = store.create({"start_date": "2024-01-01"})
    assert store.delete(created.id) is True
    assert store.delete(created.id) is False
    assert store.all() == []


def test_add_exception_is_idempotent(store):
    created = store.create({"start_date": "2024-01-01", "recurrence_rule": "DAILY"})

    first = store.add_exception(created.id, "2024-01-03")
    second = store.add_exception(created.id, date(2024, 1, 3))

    assert first.excluded_dates == [date(2024, 1, 3)]
    assert second.excluded_dates == [date(2024, 1, 3)]
    assert store.get(created.id).excluded_dates == [date(2024, 1, 3)]


def test_add_exception_missing_raises(store):
    with pytest.raises(EventNotFoundError):
        store.add_exception("nope", date(2024, 1, 1))


def test_query_filters_by_range(store):
    store.create({"id": "single-in", "start_date": "2024-03-10"})
    store.create({"id": "single-out", "start_date": "2024-05-10"})
    store.create({"id": "span", "start_date": "2024-02-27", "end_date": "2024-03-02"})
    store.create({"id": "series-open", "start_date": "2023-01-01", "recurrence_rule": "YEARLY"})
    store.create(
        {
            "id": "series-ended",
            "start_date": "2023-01-01",
            "recurrence_rule": "DAILY",
            "recurrence_end_date": "2023-06-30",
        }
    )
    store.create({"id": "series-later", "start_date": "2024-06-01", "recurrence_rule": "DAILY"})

    result = store.query(date(2024, 3, 1), date(2024, 3, 31))

    assert [t.id for t in result] == ["series-open", "span", "single-in"]


def test_reads_plain_list_file(events_file):
    events_file.write_text(json.dumps([{"id": 1, "start_date": "2024-01-01"}]))
    store = JSONEventStore(events_file)
    assert [t.id for t in store.all()] == ["1"]


def test_invalid_rows_skipped(events_file, caplog):
    events_file.write_text(
        json.dumps(
            {
                "events": [
                    {"id": "bad", "start_date": "2024-01-01", "nth_week": 0},
                    {"id": "good", "start_date": "2024-01-01"},
                ]
            }
        )
    )
    store = JSONEventStore(events_file)

    with caplog.at_level(logging.WARNING):
        templates = store.all()

    assert [t.id for t in templates] == ["good"]
    assert "bad" in caplog.text


def test_non_object_rows_skipped(events_file, caplog):
    events_file.write_text(
        json.dumps(
            {
                "events": [
                    5,
                    "stray",
                    {"id": "days", "start_date": "2024-01-01", "recurrence_days": 5},
                    {"id": "good", "start_date": "2024-01-01"},
                ]
            }
        )
    )
    store = JSONEventStore(events_file)

    with caplog.at_level(logging.WARNING):
        templates = store.all()

    assert [t.id for t in templates] == ["good"]
    assert "<no id>" in caplog.text
    assert "days" in caplog.text

    assert store.update("good", {"title": "Kept"}).title == "Kept"
    assert store.delete("good") is True
    assert store.delete("good") is False
    assert json.loads(events_file.read_text())["events"][:2] == [5, "stray"]


def test_corrupt_file_raises(events_file):
    events_file.write_text("{not json")
    with pytest.raises(StoreError):
        JSONEventStore(events_file).all()


def test_unrecognized_file_raises(events_file):
    events_file.write_text(json.dumps({"calendar": []}))
    with pytest.raises(StoreError):
        JSONEventStore(events_file).all()


def test_creates_parent_directories(tmp_path):
    store = JSONEventStore(tmp_path / "nested" / "dir" / "events.json")
    store.create({"start_date": "2024-01-01"})
    assert (tmp_path / "nested" / "dir" / "events.json").exists()

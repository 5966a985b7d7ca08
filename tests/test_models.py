from datetime import datetime, timedelta

import pytest

from household_calendar.config import DEFAULT_EVENT_COLOR, color_for
from household_calendar.domain import CalendarEvent, EventCategory, EventKind, MalformedEventError, parse_events


def test_record_is_parsed_into_event():
    event = CalendarEvent.from_record(
        {
            "id": "abc",
            "title": "Midsommar",
            "start_date": "2024-06-21T12:00:00",
            "end_date": "2024-06-21T18:00:00",
            "event_category": "midsummer",
            "event_type": "major_event",
            "color": "",
        }
    )

    assert event.start == datetime(2024, 6, 21, 12, 0)
    assert event.end == datetime(2024, 6, 21, 18, 0)
    assert event.category is EventCategory.MIDSUMMER
    assert event.is_major
    assert event.color is None
    assert event.all_day is False


def test_legacy_major_value_and_unknown_category():
    event = CalendarEvent.from_record(
        {"id": 7, "title": "x", "start_date": "2024-01-01T00:00:00Z", "event_type": "major", "event_category": "party"}
    )

    assert event.id == "7"
    assert event.kind is EventKind.MAJOR_EVENT
    assert event.category is EventCategory.CUSTOM
    assert event.start.tzinfo is not None


def test_missing_end_gets_default_duration():
    event = CalendarEvent(id="1", title="t", start=datetime(2024, 1, 1, 9, 0))

    assert event.effective_end - event.start == timedelta(hours=1)


@pytest.mark.parametrize(
    "record",
    [
        {"title": "no id", "start_date": "2024-01-01T09:00:00"},
        {"id": "x", "start_date": "yesterday"},
        {"id": "x", "start_date": None},
    ],
)
def test_malformed_records_raise(record):
    with pytest.raises(MalformedEventError):
        CalendarEvent.from_record(record)


def test_parse_events_drops_malformed_records(caplog):
    events = parse_events(
        [
            {"id": "ok", "title": "fine", "start_date": "2024-01-01T09:00:00"},
            {"id": "bad", "title": "broken", "start_date": "soon"},
        ]
    )

    assert [e.id for e in events] == ["ok"]
    assert "bad" in caplog.text


def test_to_record_keeps_backend_keys():
    event = CalendarEvent(id="1", title="t", start=datetime(2024, 1, 1, 9, 0), category=EventCategory.WEDDING)

    record = event.to_record()

    assert record["start_date"] == "2024-01-01T09:00:00"
    assert record["end_date"] is None
    assert record["event_category"] == "wedding"
    assert CalendarEvent.from_record(record).category is EventCategory.WEDDING


def test_color_for_prefers_override_and_falls_back():
    assert color_for(EventCategory.CHRISTMAS) == "#ef4444"
    assert color_for("christmas", "#000000") == "#000000"
    assert color_for("nonsense") == DEFAULT_EVENT_COLOR
    assert color_for(None) == DEFAULT_EVENT_COLOR

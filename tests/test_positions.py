from datetime import datetime, timedelta, timezone

import pytest

from household_calendar.domain import InvertedIntervalError, MalformedEventError
from household_calendar.layout import DAY_METRICS, WEEK_METRICS, NowMarker, TimelineMetrics, offset_for, position_for


def test_ninety_minute_event_is_not_clamped(make_event):
    event = make_event(datetime(2024, 3, 4, 10, 0), datetime(2024, 3, 4, 11, 30))

    position = position_for(event, TimelineMetrics(hour_height=60, minimum_height=40))

    assert position.top_offset == 600
    assert position.height == 90


def test_short_event_is_clamped_to_minimum(make_event):
    event = make_event(datetime(2024, 3, 4, 10, 0), datetime(2024, 3, 4, 10, 5))

    position = position_for(event, TimelineMetrics(hour_height=60, minimum_height=40))

    assert position.height == 40


def test_missing_end_defaults_to_one_hour(make_event):
    event = make_event(datetime(2024, 3, 4, 7, 15))

    position = position_for(event, DAY_METRICS)

    assert position.top_offset == 7 * 80 + 20
    assert position.height == 80


def test_week_and_day_minimums_differ(make_event):
    event = make_event(datetime(2024, 3, 4, 10, 0), datetime(2024, 3, 4, 10, 10))

    assert position_for(event, WEEK_METRICS).height == 30
    assert position_for(event, DAY_METRICS).height == 40


def test_inverted_interval_is_rejected(make_event):
    event = make_event(datetime(2024, 3, 4, 10, 0), datetime(2024, 3, 4, 9, 0))

    with pytest.raises(InvertedIntervalError):
        position_for(event, WEEK_METRICS)


def test_offset_uses_hours_and_minutes():
    assert offset_for(datetime(2024, 3, 4, 13, 45), WEEK_METRICS) == 13 * 60 + 45


def test_now_marker_advances_on_refresh():
    moments = iter([datetime(2024, 3, 4, 9, 0), datetime(2024, 3, 4, 9, 1), datetime(2024, 3, 4, 10, 30)])
    marker = NowMarker(WEEK_METRICS, clock=lambda: next(moments))

    assert marker.current_offset == 540
    assert marker.refresh() == 541
    assert marker.refresh() == 630
    assert marker.current_offset == 630


def test_now_marker_uses_display_zone():
    far_east = timezone(timedelta(hours=14))
    marker = NowMarker(WEEK_METRICS, clock=lambda: datetime(2024, 3, 5, 12, 30, tzinfo=timezone.utc), tz=far_east)

    assert marker.current_offset == 2 * 60 + 30


def test_non_datetime_end_is_malformed(make_event):
    event = make_event(datetime(2024, 3, 4, 10, 0))
    event.end = "11:00"

    with pytest.raises(MalformedEventError):
        position_for(event, WEEK_METRICS)

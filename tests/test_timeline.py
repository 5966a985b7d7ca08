from datetime import date, datetime, timedelta, timezone

from household_calendar.layout import (
    DAY_METRICS,
    WEEK_METRICS,
    EventHit,
    SlotHit,
    TimelineState,
    bucket_events,
    build_day_column,
    build_time_column,
    build_week_columns,
    initial_scroll_offset,
    resolve_click,
    split_lanes,
)

DAY = date(2024, 3, 6)
NOW = datetime(2024, 3, 6, 9, 30)


def test_all_day_and_timed_events_use_separate_lanes(make_event):
    party = make_event(datetime(2024, 3, 6), all_day=True, title="party")
    meeting = make_event(datetime(2024, 3, 6, 10, 0), datetime(2024, 3, 6, 11, 0), title="meeting")

    column = build_time_column(DAY, [party, meeting], WEEK_METRICS, now=NOW)

    assert column.all_day_events == (party,)
    assert column.timed_events == (meeting,)
    assert split_lanes([party, meeting]) == ([party], [meeting])


def test_overlapping_events_stack_by_input_order(make_event):
    first = make_event(datetime(2024, 3, 6, 10, 0), datetime(2024, 3, 6, 12, 0))
    second = make_event(datetime(2024, 3, 6, 11, 0), datetime(2024, 3, 6, 12, 0))

    column = build_time_column(DAY, [first, second], WEEK_METRICS, now=NOW)

    assert [p.z_index for p in column.placements] == [10, 11]
    assert all(p.column == 0 and p.column_count == 1 for p in column.placements)


def test_inverted_event_is_skipped_not_rendered(make_event, caplog):
    broken = make_event(datetime(2024, 3, 6, 14, 0), datetime(2024, 3, 6, 13, 0))
    fine = make_event(datetime(2024, 3, 6, 15, 0))

    column = build_time_column(DAY, [broken, fine], WEEK_METRICS, now=NOW)

    assert column.timed_events == (fine,)
    assert [s.event for s in column.skipped] == [broken]
    assert broken.id in caplog.text


def test_event_with_unusable_end_is_skipped(make_event):
    broken = make_event(datetime(2024, 3, 6, 14, 0))
    broken.end = "not a date"
    fine = make_event(datetime(2024, 3, 6, 15, 0))

    column = build_time_column(DAY, [fine, broken], WEEK_METRICS, now=NOW)

    assert column.timed_events == (fine,)
    assert [s.event for s in column.skipped] == [broken]
    assert "end=" in column.skipped[0].reason


def test_all_day_lane_truncates_to_limit(make_event):
    events = [make_event(datetime(2024, 3, 6), all_day=True, title=str(i)) for i in range(5)]

    column = build_time_column(DAY, events, DAY_METRICS, now=NOW)

    assert len(column.visible_all_day) == 3
    assert column.all_day_overflow == 2


def test_click_on_event_wins_over_slot(make_event):
    meeting = make_event(datetime(2024, 3, 6, 10, 0), datetime(2024, 3, 6, 11, 0))
    column = build_time_column(DAY, [meeting], WEEK_METRICS, now=NOW)

    assert resolve_click(column, 630) == EventHit(event=meeting)
    assert resolve_click(column, 700) == SlotHit(day=DAY, hour=11)


def test_click_on_overlap_picks_topmost(make_event):
    below = make_event(datetime(2024, 3, 6, 10, 0), datetime(2024, 3, 6, 12, 0))
    above = make_event(datetime(2024, 3, 6, 10, 30), datetime(2024, 3, 6, 11, 0))
    column = build_time_column(DAY, [below, above], WEEK_METRICS, now=NOW)

    assert resolve_click(column, 640) == EventHit(event=above)
    assert resolve_click(column, 700) == EventHit(event=below)


def test_click_beyond_track_clamps_to_last_hour():
    column = build_time_column(DAY, [], WEEK_METRICS, now=NOW)

    assert resolve_click(column, 5000) == SlotHit(day=DAY, hour=23)
    assert resolve_click(column, 0) == SlotHit(day=DAY, hour=0)


def test_now_offset_only_on_today():
    today = build_time_column(DAY, [], WEEK_METRICS, now=NOW)
    other = build_time_column(date(2024, 3, 7), [], WEEK_METRICS, now=NOW)

    assert today.is_today and today.now_offset == 570
    assert not other.is_today and other.now_offset is None


def test_week_columns_start_on_monday(make_event):
    event = make_event(datetime(2024, 3, 10, 8, 0))

    columns = build_week_columns(DAY, bucket_events([event]), WEEK_METRICS, now=NOW)

    assert [c.day for c in columns] == [date(2024, 3, d) for d in range(4, 11)]
    assert columns[-1].timed_events == (event,)
    assert [c.is_today for c in columns].count(True) == 1


def test_day_column_uses_the_current_date_bucket(make_event):
    event = make_event(datetime(2024, 3, 6, 8, 0))
    column = build_day_column(DAY, bucket_events([event]), DAY_METRICS, now=NOW)

    assert column.timed_events == (event,)
    assert column.placements[0].position.top_offset == 640


def test_initial_scroll_leads_current_hour():
    assert initial_scroll_offset(datetime(2024, 3, 6, 9, 45), WEEK_METRICS) == 420
    assert initial_scroll_offset(datetime(2024, 3, 6, 1, 0), WEEK_METRICS) == 0


def test_first_scroll_happens_once():
    state = TimelineState(DAY_METRICS)

    assert state.first_scroll(datetime(2024, 3, 6, 12, 0)) == 800
    assert state.first_scroll(datetime(2024, 3, 6, 15, 0)) is None


def test_now_and_today_follow_display_zone():
    far_east = timezone(timedelta(hours=14))
    # 12:00 UTC on the 5th is 02:00 on the 6th at UTC+14
    now = datetime(2024, 3, 5, 12, 0, tzinfo=timezone.utc)

    today = build_time_column(date(2024, 3, 6), [], WEEK_METRICS, now=now, tz=far_east)
    yesterday = build_time_column(date(2024, 3, 5), [], WEEK_METRICS, now=now, tz=far_east)

    assert today.is_today and today.now_offset == 120
    assert not yesterday.is_today and yesterday.now_offset is None
    assert initial_scroll_offset(now, WEEK_METRICS, tz=far_east) == 0
    assert TimelineState(DAY_METRICS, tz=far_east).first_scroll(now + timedelta(hours=8)) == 640

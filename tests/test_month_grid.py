import calendar
from datetime import date, datetime

from household_calendar.layout import bucket_events, build_month_grid


def test_every_month_fills_whole_weeks():
    for year in range(1900, 2101):
        for month in range(1, 13):
            grid = build_month_grid(date(year, month, 15), {}, today=date(2000, 1, 1))
            days_in_month = calendar.monthrange(year, month)[1]

            assert grid.day_count == days_in_month
            assert (grid.leading_padding + days_in_month + grid.trailing_padding) % 7 == 0
            assert 0 <= grid.leading_padding < 7
            assert 0 <= grid.trailing_padding < 7


def test_saturday_start_gets_five_leading_cells():
    # 1 June 2024 is a Saturday
    grid = build_month_grid(date(2024, 6, 10), {}, today=date(2024, 6, 10))

    assert grid.leading_padding == 5
    assert grid.day_count == 30
    assert grid.total_cells % 7 == 0
    assert grid.rows()[0][:5] == [None] * 5
    assert grid.rows()[0][5].date == date(2024, 6, 1)


def test_march_2024_starts_on_friday():
    grid = build_month_grid(date(2024, 3, 10), {}, today=date(2024, 3, 10))

    assert grid.leading_padding == 4
    assert grid.trailing_padding == 0
    assert grid.total_cells == 35


def test_leap_february():
    grid = build_month_grid(date(2024, 2, 1), {}, today=date(2024, 2, 1))

    assert grid.day_count == 29
    assert grid.leading_padding == 3
    assert grid.total_cells == 35


def test_sunday_first_month_gets_six_leading_cells():
    # December 2024 starts on a Sunday
    grid = build_month_grid(date(2024, 12, 24), {}, today=date(2024, 12, 24))

    assert grid.leading_padding == 6
    assert grid.trailing_padding == 5


def test_cell_flags(make_event):
    grid = build_month_grid(date(2024, 3, 1), {}, today=date(2024, 3, 13))

    today = grid.days[12]
    saturday = grid.days[1]
    monday = grid.days[3]
    assert today.is_today and today.date == date(2024, 3, 13)
    assert grid.today_index == 12
    assert saturday.is_weekend and not monday.is_weekend
    assert all(cell.is_in_current_month for cell in grid.days)


def test_today_outside_month_has_no_index():
    grid = build_month_grid(date(2024, 3, 1), {}, today=date(2024, 4, 2))

    assert grid.today_index is None


def test_only_three_events_visible_but_all_kept(make_event):
    events = [make_event(datetime(2024, 3, 8, hour, 0), title=f"e{hour}") for hour in range(8, 13)]

    grid = build_month_grid(date(2024, 3, 1), bucket_events(events), today=date(2024, 3, 1))
    cell = grid.days[7]

    assert [e.title for e in cell.visible_events] == ["e8", "e9", "e10"]
    assert cell.overflow_count == 2
    assert len(cell.events) == 5


def test_empty_event_list_renders_empty_cells():
    grid = build_month_grid(date(2024, 3, 1), {}, today=date(2024, 3, 1))

    assert all(cell.events == () and cell.overflow_count == 0 for cell in grid.days)


def test_index_of_and_cell_position():
    grid = build_month_grid(date(2024, 3, 1), {}, today=date(2024, 3, 1))

    assert grid.index_of(date(2024, 3, 31)) == 30
    assert grid.index_of(date(2024, 4, 1)) is None
    assert grid.cell_position(0) == (0, 4)
    assert grid.cell_position(2) == (0, 6)
    assert grid.cell_position(3) == (1, 0)

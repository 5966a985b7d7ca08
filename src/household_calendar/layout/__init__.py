"""Qt-free layout engine for the month, week, day and year calendar views."""

from __future__ import annotations

from .buckets import DayBucketCache, DayBuckets, bucket_events, day_key, to_local
from .month import WEEKDAY_LABELS, CalendarDayCell, MonthGrid, build_month_grid, month_bounds
from .navigation import GridKeyboardNavigator, NavigationKey
from .overlap import OverlapStrategy, StackedOverlap, TimedPlacement
from .periods import period_title, shift_period, today_label, week_start
from .positions import DAY_METRICS, WEEK_METRICS, NowMarker, TimelineMetrics, TimeSlotPosition, offset_for, position_for
from .timeline import (
    HOURS,
    ClickTarget,
    EventHit,
    SkippedEvent,
    SlotHit,
    TimeGridColumn,
    TimelineState,
    build_day_column,
    build_time_column,
    build_week_columns,
    initial_scroll_offset,
    resolve_click,
    split_lanes,
    week_days,
)
from .year import MiniDay, MiniMonth, build_mini_month, build_year

__all__ = [
    "DAY_METRICS",
    "HOURS",
    "WEEKDAY_LABELS",
    "WEEK_METRICS",
    "CalendarDayCell",
    "ClickTarget",
    "DayBucketCache",
    "DayBuckets",
    "EventHit",
    "GridKeyboardNavigator",
    "MiniDay",
    "MiniMonth",
    "MonthGrid",
    "NavigationKey",
    "NowMarker",
    "OverlapStrategy",
    "SkippedEvent",
    "SlotHit",
    "StackedOverlap",
    "TimeGridColumn",
    "TimeSlotPosition",
    "TimedPlacement",
    "TimelineMetrics",
    "TimelineState",
    "bucket_events",
    "build_day_column",
    "build_mini_month",
    "build_month_grid",
    "build_time_column",
    "build_week_columns",
    "build_year",
    "day_key",
    "initial_scroll_offset",
    "month_bounds",
    "offset_for",
    "period_title",
    "position_for",
    "resolve_click",
    "shift_period",
    "split_lanes",
    "to_local",
    "today_label",
    "week_days",
    "week_start",
]

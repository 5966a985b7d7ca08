from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Mapping, Optional, Sequence, Tuple

from ..config.theme import color_for
from ..domain import CalendarEvent
from .periods import week_start

MINI_MONTH_DAYS = 42
DOT_LIMIT = 3


@dataclass(frozen=True)
class MiniDay:
    date: date
    is_in_month: bool
    is_today: bool
    events: Tuple[CalendarEvent, ...] = ()

    @property
    def has_events(self) -> bool:
        return bool(self.events)

    @property
    def selectable(self) -> bool:
        return self.is_in_month

    @property
    def dot_colors(self) -> Tuple[str, ...]:
        if not self.is_in_month:
            return ()
        return tuple(color_for(event.category, event.color) for event in self.events[:DOT_LIMIT])


@dataclass(frozen=True)
class MiniMonth:
    year: int
    month: int
    weeks: Tuple[Tuple[MiniDay, ...], ...]
    event_count: int

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)


def build_mini_month(
    year: int,
    month: int,
    buckets: Mapping[date, Sequence[CalendarEvent]],
    *,
    today: date,
) -> MiniMonth:
    first = date(year, month, 1)
    cursor = week_start(first)
    days: List[MiniDay] = []
    event_count = 0
    for _ in range(MINI_MONTH_DAYS):
        in_month = cursor.month == month
        events = tuple(buckets.get(cursor, ()))
        if in_month:
            event_count += len(events)
        days.append(MiniDay(date=cursor, is_in_month=in_month, is_today=cursor == today, events=events))
        cursor += timedelta(days=1)

    weeks = tuple(
        tuple(days[start : start + 7])
        for start in range(0, MINI_MONTH_DAYS, 7)
        if any(day.is_in_month for day in days[start : start + 7])
    )
    return MiniMonth(year=year, month=month, weeks=weeks, event_count=event_count)


def build_year(
    year: int,
    buckets: Mapping[date, Sequence[CalendarEvent]],
    *,
    today: Optional[date] = None,
) -> List[MiniMonth]:
    today = today or date.today()
    return [build_mini_month(year, month, buckets, today=today) for month in range(1, 13)]

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, tzinfo
from typing import List, Mapping, Optional, Sequence, Tuple, Union

from ..domain import CalendarDataError, CalendarEvent
from .overlap import OverlapStrategy, StackedOverlap, TimedPlacement
from .periods import week_start
from .buckets import to_local
from .positions import TimelineMetrics, TimeSlotPosition, offset_for, position_for

logger = logging.getLogger(__name__)

HOURS = tuple(range(24))
ALL_DAY_LIMIT = 3


@dataclass(frozen=True)
class SkippedEvent:
    event: CalendarEvent
    reason: str


@dataclass(frozen=True)
class TimeGridColumn:
    day: date
    metrics: TimelineMetrics
    is_today: bool
    all_day_events: Tuple[CalendarEvent, ...] = ()
    placements: Tuple[TimedPlacement, ...] = ()
    skipped: Tuple[SkippedEvent, ...] = ()
    now_offset: Optional[float] = None
    all_day_limit: int = ALL_DAY_LIMIT

    @property
    def visible_all_day(self) -> Tuple[CalendarEvent, ...]:
        return self.all_day_events[: self.all_day_limit]

    @property
    def all_day_overflow(self) -> int:
        return max(0, len(self.all_day_events) - self.all_day_limit)

    @property
    def timed_events(self) -> Tuple[CalendarEvent, ...]:
        return tuple(placement.event for placement in self.placements)

    def slot_span(self, hour: int) -> TimeSlotPosition:
        return TimeSlotPosition(top_offset=hour * self.metrics.hour_height, height=self.metrics.hour_height)


@dataclass(frozen=True)
class EventHit:
    event: CalendarEvent


@dataclass(frozen=True)
class SlotHit:
    day: date
    hour: int


ClickTarget = Union[EventHit, SlotHit]


def split_lanes(events: Sequence[CalendarEvent]) -> Tuple[List[CalendarEvent], List[CalendarEvent]]:
    all_day: list[CalendarEvent] = []
    timed: list[CalendarEvent] = []
    for event in events:
        (all_day if event.all_day else timed).append(event)
    return all_day, timed


def build_time_column(
    day: date,
    events: Sequence[CalendarEvent],
    metrics: TimelineMetrics,
    *,
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None,
    overlap: Optional[OverlapStrategy] = None,
    all_day_limit: int = ALL_DAY_LIMIT,
) -> TimeGridColumn:
    """Lay out one 24-hour column.

    ``events`` is expected to be the day's bucket. Timed events that cannot be
    positioned are left out of the track and reported in ``skipped``.
    """

    now = to_local(now, tz) if now is not None else datetime.now(tz)
    all_day, timed = split_lanes(events)

    positioned: list[tuple[CalendarEvent, TimeSlotPosition]] = []
    skipped: list[SkippedEvent] = []
    for event in timed:
        try:
            positioned.append((event, position_for(event, metrics, tz)))
        except (CalendarDataError, TypeError) as exc:
            logger.warning("Event %r left out of the %s timeline: %s", event.id, day.isoformat(), exc)
            skipped.append(SkippedEvent(event=event, reason=str(exc)))

    strategy = overlap or StackedOverlap()
    is_today = day == now.date()
    return TimeGridColumn(
        day=day,
        metrics=metrics,
        is_today=is_today,
        all_day_events=tuple(all_day),
        placements=tuple(strategy.arrange(positioned)),
        skipped=tuple(skipped),
        now_offset=offset_for(now, metrics) if is_today else None,
        all_day_limit=all_day_limit,
    )


def week_days(current_date: date) -> List[date]:
    first = week_start(current_date)
    return [first + timedelta(days=offset) for offset in range(7)]


def build_week_columns(
    current_date: date,
    buckets: Mapping[date, Sequence[CalendarEvent]],
    metrics: TimelineMetrics,
    *,
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None,
    overlap: Optional[OverlapStrategy] = None,
    all_day_limit: int = ALL_DAY_LIMIT,
) -> List[TimeGridColumn]:
    now = to_local(now, tz) if now is not None else datetime.now(tz)
    return [
        build_time_column(
            day,
            buckets.get(day, ()),
            metrics,
            now=now,
            tz=tz,
            overlap=overlap,
            all_day_limit=all_day_limit,
        )
        for day in week_days(current_date)
    ]


def build_day_column(
    current_date: date,
    buckets: Mapping[date, Sequence[CalendarEvent]],
    metrics: TimelineMetrics,
    *,
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None,
    overlap: Optional[OverlapStrategy] = None,
    all_day_limit: int = ALL_DAY_LIMIT,
) -> TimeGridColumn:
    return build_time_column(
        current_date,
        buckets.get(current_date, ()),
        metrics,
        now=now,
        tz=tz,
        overlap=overlap,
        all_day_limit=all_day_limit,
    )


def resolve_click(column: TimeGridColumn, y: float) -> ClickTarget:
    """Map a click at track offset ``y`` to an event block or an hour slot.

    Event blocks sit above the hour slots, so they take precedence; among
    overlapping blocks the highest z-index wins.
    """

    for placement in sorted(column.placements, key=lambda item: item.z_index, reverse=True):
        if placement.position.contains(y):
            return EventHit(event=placement.event)
    hour = int(max(0.0, y) // column.metrics.hour_height)
    return SlotHit(day=column.day, hour=min(hour, HOURS[-1]))


def initial_scroll_offset(
    now: datetime,
    metrics: TimelineMetrics,
    *,
    lead_hours: int = 2,
    tz: Optional[tzinfo] = None,
) -> float:
    now = to_local(now, tz)
    return max(0.0, (now.hour - lead_hours) * metrics.hour_height)


@dataclass
class TimelineState:
    """Scroll bookkeeping for one mounted timeline view."""

    metrics: TimelineMetrics
    lead_hours: int = 2
    tz: Optional[tzinfo] = None
    scrolled: bool = field(default=False)

    def first_scroll(self, now: datetime) -> Optional[float]:
        if self.scrolled:
            return None
        self.scrolled = True
        return initial_scroll_offset(now, self.metrics, lead_hours=self.lead_hours, tz=self.tz)

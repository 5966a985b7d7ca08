from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Callable, Optional

from ..domain import CalendarEvent, InvertedIntervalError, MalformedEventError
from .buckets import to_local


@dataclass(frozen=True)
class TimelineMetrics:
    hour_height: float
    minimum_height: float

    @property
    def day_height(self) -> float:
        return self.hour_height * 24


WEEK_METRICS = TimelineMetrics(hour_height=60, minimum_height=30)
DAY_METRICS = TimelineMetrics(hour_height=80, minimum_height=40)


@dataclass(frozen=True)
class TimeSlotPosition:
    top_offset: float
    height: float

    @property
    def bottom(self) -> float:
        return self.top_offset + self.height

    def contains(self, y: float) -> bool:
        return self.top_offset <= y < self.bottom


def offset_for(moment: datetime, metrics: TimelineMetrics) -> float:
    return moment.hour * metrics.hour_height + (moment.minute / 60) * metrics.hour_height


def position_for(
    event: CalendarEvent,
    metrics: TimelineMetrics,
    tz: Optional[tzinfo] = None,
) -> TimeSlotPosition:
    """Vertical placement of a timed event inside a 24-hour track.

    Events without an end are laid out as one hour long. Short events are
    clamped to ``metrics.minimum_height`` so they stay clickable.
    """

    if not isinstance(event.start, datetime):
        raise MalformedEventError(event.id, f"start={event.start!r}")
    if event.end is not None and not isinstance(event.end, datetime):
        raise MalformedEventError(event.id, f"end={event.end!r}")
    start = to_local(event.start, tz)
    end = to_local(event.effective_end, tz)
    if end < start:
        raise InvertedIntervalError(event.id)
    duration_minutes = (end - start).total_seconds() // 60
    height = max(metrics.minimum_height, (duration_minutes / 60) * metrics.hour_height)
    return TimeSlotPosition(top_offset=offset_for(start, metrics), height=height)


class NowMarker:
    """Offset of the current-time line, recomputed from the clock on refresh."""

    def __init__(
        self,
        metrics: TimelineMetrics,
        *,
        clock: Callable[[], datetime] = datetime.now,
        tz: Optional[tzinfo] = None,
    ) -> None:
        self.metrics = metrics
        self.clock = clock
        self.tz = tz
        self.current_offset = self.offset()

    def offset(self) -> float:
        return offset_for(to_local(self.clock(), self.tz), self.metrics)

    def refresh(self) -> float:
        self.current_offset = self.offset()
        return self.current_offset

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, tzinfo
from typing import Dict, List, Optional, Sequence, Tuple

from ..domain import CalendarEvent

logger = logging.getLogger(__name__)

DayBuckets = Dict[date, List[CalendarEvent]]


def to_local(moment: datetime, tz: Optional[tzinfo] = None) -> datetime:
    """Naive datetimes are already local; aware ones are converted to ``tz``."""

    if moment.tzinfo is None:
        return moment
    return moment.astimezone(tz) if tz is not None else moment.astimezone()


def day_key(moment: datetime, tz: Optional[tzinfo] = None) -> date:
    return to_local(moment, tz).date()


def bucket_events(events: Sequence[CalendarEvent], tz: Optional[tzinfo] = None) -> DayBuckets:
    """Group events under the local date of their start, keeping input order.

    Multi-day events are only listed under their start day.
    """

    buckets: DayBuckets = {}
    for event in events:
        if not isinstance(event.start, datetime):
            logger.warning("Skipping event %r with unusable start %r", event.id, event.start)
            continue
        buckets.setdefault(day_key(event.start, tz), []).append(event)
    return buckets


@dataclass
class DayBucketCache:
    """Memoized day buckets keyed on the events list and the displayed month."""

    tz: Optional[tzinfo] = None
    computations: int = 0
    buckets: DayBuckets = field(default_factory=dict)
    _events: Optional[Sequence[CalendarEvent]] = field(default=None, repr=False)
    _month: Optional[Tuple[int, int]] = None

    def get(self, events: Sequence[CalendarEvent], current_date: date) -> DayBuckets:
        month = (current_date.year, current_date.month)
        if events is self._events and month == self._month:
            return self.buckets
        self.buckets = bucket_events(events, self.tz)
        self._events = events
        self._month = month
        self.computations += 1
        logger.debug("Rebuilt day buckets for %04d-%02d (%d events)", month[0], month[1], len(events))
        return self.buckets

    def events_for(self, day: date) -> List[CalendarEvent]:
        return self.buckets.get(day, [])

    def clear(self) -> None:
        self.buckets = {}
        self._events = None
        self._month = None

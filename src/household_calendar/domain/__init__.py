"""Domain models for household calendar events."""

from __future__ import annotations

from .enums import CalendarViewMode, EventCategory, EventKind
from .errors import CalendarDataError, InvertedIntervalError, MalformedEventError
from .models import CalendarEvent, parse_events

__all__ = [
    "CalendarDataError",
    "CalendarEvent",
    "CalendarViewMode",
    "EventCategory",
    "EventKind",
    "InvertedIntervalError",
    "MalformedEventError",
    "parse_events",
]

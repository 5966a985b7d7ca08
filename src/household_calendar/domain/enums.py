from __future__ import annotations

from enum import Enum


class EventCategory(str, Enum):
    BIRTHDAY = "birthday"
    CHRISTMAS = "christmas"
    WEDDING = "wedding"
    EASTER = "easter"
    MIDSUMMER = "midsummer"
    NEW_YEAR = "new_year"
    GRADUATION = "graduation"
    ANNIVERSARY = "anniversary"
    HOLIDAY = "holiday"
    CUSTOM = "custom"

    @classmethod
    def parse(cls, value: object) -> "EventCategory":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value or cls.CUSTOM.value).strip().lower())
        except ValueError:
            return cls.CUSTOM


class EventKind(str, Enum):
    SIMPLE = "simple"
    MAJOR_EVENT = "major_event"

    @classmethod
    def parse(cls, value: object) -> "EventKind":
        if isinstance(value, cls):
            return value
        if str(value or "").strip().lower() in {"major", "major_event"}:
            return cls.MAJOR_EVENT
        return cls.SIMPLE


class CalendarViewMode(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

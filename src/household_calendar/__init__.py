"""Household calendar: month, week, day and year views over event lists."""

from __future__ import annotations

from .domain import CalendarEvent, CalendarViewMode, EventCategory, EventKind

__all__ = ["CalendarEvent", "CalendarViewMode", "EventCategory", "EventKind", "main"]


def main() -> None:
    from .cli import main as cli_main

    raise SystemExit(cli_main())

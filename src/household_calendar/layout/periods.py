from __future__ import annotations

import calendar
from datetime import date, timedelta

from ..domain import CalendarViewMode

_TODAY_LABELS = {
    CalendarViewMode.DAY: "Today",
    CalendarViewMode.WEEK: "This week",
    CalendarViewMode.MONTH: "This month",
    CalendarViewMode.YEAR: "This year",
}


def week_start(current_date: date) -> date:
    """Monday of the week containing ``current_date``."""

    return current_date - timedelta(days=current_date.weekday())


def _add_months(current: date, months: int) -> date:
    index = current.year * 12 + (current.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    day = min(current.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def shift_period(mode: CalendarViewMode, current: date, step: int) -> date:
    if mode is CalendarViewMode.DAY:
        return current + timedelta(days=step)
    if mode is CalendarViewMode.WEEK:
        return current + timedelta(weeks=step)
    if mode is CalendarViewMode.MONTH:
        return _add_months(current, step)
    return _add_months(current, step * 12)


def period_title(mode: CalendarViewMode, current: date) -> str:
    if mode is CalendarViewMode.DAY:
        return f"{current:%A} {current.day} {current:%B %Y}"
    if mode is CalendarViewMode.WEEK:
        first = week_start(current)
        last = first + timedelta(days=6)
        return f"{first.day} {first:%b} - {last.day} {last:%b %Y}"
    if mode is CalendarViewMode.MONTH:
        return f"{current:%B %Y}"
    return str(current.year)


def today_label(mode: CalendarViewMode) -> str:
    return _TODAY_LABELS[mode]

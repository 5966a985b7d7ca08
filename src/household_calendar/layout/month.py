from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Mapping, Optional, Sequence, Tuple

from ..domain import CalendarEvent

DEFAULT_VISIBLE_LIMIT = 3
WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


@dataclass(frozen=True)
class CalendarDayCell:
    date: date
    is_in_current_month: bool
    is_today: bool
    is_weekend: bool
    events: Tuple[CalendarEvent, ...] = ()
    visible_limit: int = DEFAULT_VISIBLE_LIMIT

    @property
    def visible_events(self) -> Tuple[CalendarEvent, ...]:
        return self.events[: self.visible_limit]

    @property
    def overflow_count(self) -> int:
        return max(0, len(self.events) - self.visible_limit)


@dataclass(frozen=True)
class MonthGrid:
    year: int
    month: int
    leading_padding: int
    days: Tuple[CalendarDayCell, ...]
    trailing_padding: int

    @property
    def day_count(self) -> int:
        return len(self.days)

    @property
    def total_cells(self) -> int:
        return self.leading_padding + len(self.days) + self.trailing_padding

    @property
    def today_index(self) -> Optional[int]:
        for index, cell in enumerate(self.days):
            if cell.is_today:
                return index
        return None

    def index_of(self, day: date) -> Optional[int]:
        if (day.year, day.month) != (self.year, self.month):
            return None
        return day.day - 1

    def cell_position(self, index: int) -> Tuple[int, int]:
        """Row and column of the ``index``-th real day inside the padded grid."""

        return divmod(self.leading_padding + index, 7)

    def rows(self) -> List[List[Optional[CalendarDayCell]]]:
        cells: List[Optional[CalendarDayCell]] = [None] * self.leading_padding
        cells.extend(self.days)
        cells.extend([None] * self.trailing_padding)
        return [cells[start : start + 7] for start in range(0, len(cells), 7)]


def month_bounds(current_date: date) -> Tuple[date, date]:
    days_in_month = calendar.monthrange(current_date.year, current_date.month)[1]
    first = current_date.replace(day=1)
    return first, first.replace(day=days_in_month)


def build_month_grid(
    current_date: date,
    buckets: Mapping[date, Sequence[CalendarEvent]],
    *,
    today: Optional[date] = None,
    visible_limit: int = DEFAULT_VISIBLE_LIMIT,
) -> MonthGrid:
    """Lay out the month containing ``current_date`` on a Monday-first grid."""

    today = today or date.today()
    first, last = month_bounds(current_date)
    # date.weekday() is Monday=0 .. Sunday=6
    leading = first.weekday()

    cells = []
    day = first
    while day <= last:
        cells.append(
            CalendarDayCell(
                date=day,
                is_in_current_month=True,
                is_today=day == today,
                is_weekend=day.weekday() >= 5,
                events=tuple(buckets.get(day, ())),
                visible_limit=visible_limit,
            )
        )
        day += timedelta(days=1)

    trailing = (7 - (leading + len(cells)) % 7) % 7
    return MonthGrid(
        year=first.year,
        month=first.month,
        leading_padding=leading,
        days=tuple(cells),
        trailing_padding=trailing,
    )

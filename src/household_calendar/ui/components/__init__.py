"""Calendar view widgets."""

from __future__ import annotations

from .day_view import DayView
from .month_view import MonthView
from .view_switcher import ViewSwitcher
from .week_view import WeekView
from .year_view import YearView

__all__ = ["DayView", "MonthView", "ViewSwitcher", "WeekView", "YearView"]

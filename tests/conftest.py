from __future__ import annotations

import os
from datetime import datetime
from itertools import count
from typing import Optional

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from household_calendar.domain import CalendarEvent, EventCategory, EventKind

_ids = count(1)


@pytest.fixture
def make_event():
    def factory(
        start: datetime,
        end: Optional[datetime] = None,
        *,
        title: str = "Event",
        all_day: bool = False,
        category: EventCategory = EventCategory.CUSTOM,
        color: Optional[str] = None,
        kind: EventKind = EventKind.SIMPLE,
    ) -> CalendarEvent:
        return CalendarEvent(
            id=f"evt-{next(_ids)}",
            title=title,
            start=start,
            end=end,
            all_day=all_day,
            category=category,
            color=color,
            kind=kind,
        )

    return factory


@pytest.fixture(scope="session")
def qapp():
    widgets = pytest.importorskip("PyQt6.QtWidgets")
    app = widgets.QApplication.instance() or widgets.QApplication([])
    yield app

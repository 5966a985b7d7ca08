from __future__ import annotations

import logging
from datetime import date, datetime
from functools import partial
from typing import Callable, Dict, Optional, Sequence

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QMainWindow, QPushButton, QStackedWidget, QVBoxLayout, QWidget

from ..config.settings import AppSettings
from ..domain import CalendarEvent, CalendarViewMode
from ..layout import period_title, shift_period, to_local, today_label
from .components.day_view import DayView
from .components.month_view import MonthView
from .components.view_switcher import ViewSwitcher
from .components.week_view import WeekView
from .components.year_view import YearView

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Hosts the four calendar views and forwards their callbacks.

    The window never edits events. Collaborators listen to ``day_selected``,
    ``event_selected`` and ``time_slot_selected`` and call ``set_events``
    with a fresh list after any change.
    """

    day_selected = pyqtSignal(object)
    event_selected = pyqtSignal(object)
    time_slot_selected = pyqtSignal(object, int)

    def __init__(
        self,
        *,
        settings: AppSettings,
        events: Sequence[CalendarEvent] = (),
        current_date: Optional[date] = None,
        view: CalendarViewMode = CalendarViewMode.MONTH,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        super().__init__()
        self.settings = settings
        self.zone = settings.ui.zone
        self.clock = clock or partial(datetime.now, self.zone)
        self.events: Sequence[CalendarEvent] = list(events)
        self.current_date = current_date or self._today()
        self.view = view

        self.setWindowTitle(settings.ui.app_name)
        self.resize(1200, 820)

        self.previous_button = QPushButton("<")
        self.previous_button.setObjectName("secondaryButton")
        self.today_button = QPushButton(today_label(view))
        self.next_button = QPushButton(">")
        self.next_button.setObjectName("secondaryButton")
        self.title_label = QLabel("")
        self.title_label.setObjectName("title")
        self.switcher = ViewSwitcher(view)

        toolbar = QHBoxLayout()
        toolbar.addWidget(self.previous_button)
        toolbar.addWidget(self.today_button)
        toolbar.addWidget(self.next_button)
        toolbar.addWidget(self.title_label, stretch=1, alignment=Qt.AlignmentFlag.AlignCenter)
        toolbar.addWidget(self.switcher)

        self.month_view = MonthView(settings=settings.layout, today=self._today, tz=self.zone)
        self.week_view = WeekView(settings=settings.layout, clock=self.clock, tz=self.zone)
        self.day_view = DayView(settings=settings.layout, clock=self.clock, tz=self.zone)
        self.year_view = YearView(today=self._today, tz=self.zone)

        self.stack = QStackedWidget()
        self.pages: Dict[CalendarViewMode, QWidget] = {
            CalendarViewMode.MONTH: self.month_view,
            CalendarViewMode.WEEK: self.week_view,
            CalendarViewMode.DAY: self.day_view,
            CalendarViewMode.YEAR: self.year_view,
        }
        for page in self.pages.values():
            self.stack.addWidget(page)

        container = QWidget()
        layout = QVBoxLayout(container)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.addLayout(toolbar)
        layout.addWidget(self.stack, stretch=1)
        self.setCentralWidget(container)

        self.previous_button.clicked.connect(lambda: self.step(-1))
        self.next_button.clicked.connect(lambda: self.step(1))
        self.today_button.clicked.connect(self.go_to_today)
        self.switcher.view_changed.connect(self.set_view)

        self.month_view.day_clicked.connect(self._handle_day_click)
        self.month_view.event_clicked.connect(self._handle_event_click)
        self.week_view.event_clicked.connect(self._handle_event_click)
        self.week_view.time_slot_clicked.connect(self._handle_time_slot_click)
        self.day_view.event_clicked.connect(self._handle_event_click)
        self.day_view.time_slot_clicked.connect(lambda hour: self._handle_time_slot_click(self.current_date, hour))
        self.year_view.month_clicked.connect(self._open_month)
        self.year_view.day_clicked.connect(self._open_day)

        self.refresh()

    # ------------------------------------------------------------------ state

    def set_events(self, events: Sequence[CalendarEvent]) -> None:
        self.events = list(events)
        self.refresh()

    def set_view(self, view: CalendarViewMode) -> None:
        self.view = view
        self.switcher.set_view(view, notify=False)
        self.refresh()

    def set_current_date(self, current_date: date) -> None:
        self.current_date = current_date
        self.refresh()

    def step(self, direction: int) -> None:
        self.set_current_date(shift_period(self.view, self.current_date, direction))

    def go_to_today(self) -> None:
        self.set_current_date(self._today())

    def refresh(self) -> None:
        page = self.pages[self.view]
        page.set_data(self.events, self.current_date)
        self.stack.setCurrentWidget(page)
        self.title_label.setText(period_title(self.view, self.current_date))
        self.today_button.setText(today_label(self.view))

    def _today(self) -> date:
        return to_local(self.clock(), self.zone).date()

    # ------------------------------------------------------------------ callbacks

    def _handle_day_click(self, day: date) -> None:
        self.statusBar().showMessage(f"Selected {day:%A %d %B %Y}", 3000)
        self.day_selected.emit(day)

    def _handle_event_click(self, event: CalendarEvent) -> None:
        self.statusBar().showMessage(f"Event: {event.title}", 3000)
        self.event_selected.emit(event)

    def _handle_time_slot_click(self, day: date, hour: int) -> None:
        self.statusBar().showMessage(f"New event at {day.isoformat()} {hour:02d}:00", 3000)
        self.time_slot_selected.emit(day, hour)

    def _open_month(self, month: int) -> None:
        self.current_date = self.current_date.replace(month=month, day=1)
        self.set_view(CalendarViewMode.MONTH)

    def _open_day(self, day: date) -> None:
        self.current_date = day
        self.set_view(CalendarViewMode.DAY)

from __future__ import annotations

import logging
from datetime import date, datetime, tzinfo
from typing import Callable, List, Optional, Sequence

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFocusEvent, QKeyEvent, QMouseEvent
from PyQt6.QtWidgets import QFrame, QGridLayout, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from ...config import LayoutSettings, color_for, get_settings
from ...domain import CalendarEvent
from ...layout import (
    WEEKDAY_LABELS,
    CalendarDayCell,
    DayBucketCache,
    GridKeyboardNavigator,
    MonthGrid,
    build_month_grid,
)
from ...utils.qt import navigation_key

logger = logging.getLogger(__name__)

MAJOR_MARKER = "✨"
TITLE_LIMIT = 2


def event_label(event: CalendarEvent) -> str:
    return f"{MAJOR_MARKER} {event.title}" if event.is_major else event.title


class DayCell(QFrame):
    activated = pyqtSignal(int)
    focused = pyqtSignal(int)
    event_activated = pyqtSignal(object)

    def __init__(self, index: int, cell: CalendarDayCell) -> None:
        super().__init__()
        self.index = index
        self.cell = cell
        self.setObjectName("dayCell")
        self.setProperty("weekend", "true" if cell.is_weekend else "false")
        self.setProperty("today", "true" if cell.is_today else "false")
        self.setMinimumHeight(90)
        self.setAccessibleName(cell.date.strftime("%A %d %B %Y"))

        layout = QVBoxLayout(self)
        layout.setContentsMargins(6, 4, 6, 4)
        layout.setSpacing(2)

        self.number_label = QLabel(str(cell.date.day))
        if cell.is_today:
            self.number_label.setStyleSheet("font-weight: 800; color: #7dd3fc;")
        elif cell.is_weekend:
            self.number_label.setStyleSheet("color: #f472b6;")
        layout.addWidget(self.number_label)

        dots = QHBoxLayout()
        dots.setSpacing(2)
        for event in cell.visible_events:
            dot = QLabel("●")
            dot.setToolTip(event.title)
            dot.setStyleSheet(f"color: {color_for(event.category, event.color)}; font-size: 9px;")
            dots.addWidget(dot)
        if cell.overflow_count:
            more = QLabel(f"+{cell.overflow_count}")
            more.setObjectName("muted")
            dots.addWidget(more)
        dots.addStretch(1)
        layout.addLayout(dots)

        for event in cell.visible_events[:TITLE_LIMIT]:
            chip = QPushButton(event_label(event))
            chip.setObjectName("eventBlock")
            chip.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            chip.setStyleSheet(f"background-color: {color_for(event.category, event.color)};")
            chip.clicked.connect(lambda _checked=False, ev=event: self.event_activated.emit(ev))
            layout.addWidget(chip)
        if len(cell.events) > TITLE_LIMIT:
            more_titles = QLabel(f"+{len(cell.events) - TITLE_LIMIT} more")
            more_titles.setObjectName("muted")
            layout.addWidget(more_titles)
        layout.addStretch(1)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:  # noqa: N802
        if event.button() == Qt.MouseButton.LeftButton:
            self.activated.emit(self.index)
            event.accept()
            return
        super().mouseReleaseEvent(event)

    def focusInEvent(self, event: QFocusEvent) -> None:  # noqa: N802
        super().focusInEvent(event)
        self.focused.emit(self.index)


class MonthView(QWidget):
    """Month grid with roving keyboard focus over the real days."""

    day_clicked = pyqtSignal(object)
    event_clicked = pyqtSignal(object)

    def __init__(
        self,
        *,
        settings: Optional[LayoutSettings] = None,
        today: Optional[Callable[[], date]] = None,
        tz: Optional[tzinfo] = None,
    ) -> None:
        super().__init__()
        self.setObjectName("calendarPanel")
        self.settings = settings or get_settings().layout
        self.today = today or (lambda: datetime.now(tz).date())
        self.cache = DayBucketCache(tz=tz)
        self._events: Optional[Sequence[CalendarEvent]] = None
        self.navigator = GridKeyboardNavigator(0)
        self.grid: Optional[MonthGrid] = None
        self.cells: List[DayCell] = []
        self.setFocusPolicy(Qt.FocusPolicy.NoFocus)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        header = QGridLayout()
        for column, label in enumerate(WEEKDAY_LABELS):
            title = QLabel(label)
            title.setAlignment(Qt.AlignmentFlag.AlignCenter)
            title.setObjectName("weekendHeader" if column >= 5 else "weekdayHeader")
            header.addWidget(title, 0, column)
        layout.addLayout(header)

        self.body = QWidget()
        self.body_layout = QGridLayout(self.body)
        self.body_layout.setContentsMargins(0, 0, 0, 0)
        self.body_layout.setSpacing(0)
        layout.addWidget(self.body, stretch=1)

    # ------------------------------------------------------------------ data

    def set_data(self, events: Sequence[CalendarEvent], current_date: date) -> None:
        buckets = self.cache.get(events, current_date)
        grid = build_month_grid(
            current_date,
            buckets,
            today=self.today(),
            visible_limit=self.settings.visible_event_limit,
        )
        if events is self._events and grid == self.grid:
            return
        self._events = events
        month_changed = self.grid is None or (grid.year, grid.month) != (self.grid.year, self.grid.month)
        self.grid = grid
        if month_changed:
            self.navigator.reset(grid.day_count, grid.today_index)
        else:
            self.navigator.day_count = grid.day_count
        self._rebuild_cells()

    def _rebuild_cells(self) -> None:
        while self.body_layout.count():
            item = self.body_layout.takeAt(0)
            widget = item.widget() if item else None
            if widget is not None:
                widget.deleteLater()
        self.cells = []
        if self.grid is None:
            return

        for row_index, row in enumerate(self.grid.rows()):
            for column, cell in enumerate(row):
                if cell is None:
                    padding = QFrame()
                    padding.setObjectName("paddingCell")
                    padding.setFocusPolicy(Qt.FocusPolicy.NoFocus)
                    self.body_layout.addWidget(padding, row_index, column)
                    continue
                widget = DayCell(len(self.cells), cell)
                widget.activated.connect(self._on_cell_activated)
                widget.focused.connect(self._on_cell_focused)
                widget.event_activated.connect(self.event_clicked)
                self.body_layout.addWidget(widget, row_index, column)
                self.cells.append(widget)
        self._apply_focus_policies()

    # ------------------------------------------------------------------ focus

    def _apply_focus_policies(self) -> None:
        for index, cell in enumerate(self.cells):
            reachable = self.navigator.tab_index(index) == 0
            cell.setFocusPolicy(Qt.FocusPolicy.StrongFocus if reachable else Qt.FocusPolicy.ClickFocus)

    def _focus_current(self) -> None:
        index = self.navigator.effective_index
        if index is None or index >= len(self.cells):
            return
        self._apply_focus_policies()
        self.cells[index].setFocus(Qt.FocusReason.OtherFocusReason)

    def keyPressEvent(self, event: QKeyEvent) -> None:  # noqa: N802
        key = navigation_key(event.key())
        if key is None or self.grid is None:
            super().keyPressEvent(event)
            return
        selected = self.navigator.handle_key(key)
        if selected is not None:
            self.day_clicked.emit(self.grid.days[selected].date)
        else:
            self._focus_current()
        event.accept()

    def _on_cell_focused(self, index: int) -> None:
        self.navigator.focus_from_pointer(index)
        self._apply_focus_policies()

    def _on_cell_activated(self, index: int) -> None:
        if self.grid is None:
            return
        self.navigator.focus_from_pointer(index)
        self._apply_focus_policies()
        self.day_clicked.emit(self.grid.days[index].date)

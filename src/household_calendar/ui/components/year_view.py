from __future__ import annotations

from datetime import date, datetime, tzinfo
from typing import Callable, List, Optional, Sequence

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QMouseEvent
from PyQt6.QtWidgets import QFrame, QGridLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from ...domain import CalendarEvent
from ...layout import DayBucketCache, MiniDay, MiniMonth, build_year

MINI_WEEKDAYS = ("M", "T", "W", "T", "F", "S", "S")
COLUMNS = 4


class MiniDayLabel(QLabel):
    clicked = pyqtSignal(object)

    def __init__(self, day: MiniDay) -> None:
        super().__init__()
        self.day = day
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setTextFormat(Qt.TextFormat.RichText)
        dots = "".join(f"<span style='color:{color}'>•</span>" for color in day.dot_colors)
        text = str(day.date.day)
        if day.is_today and day.is_in_month:
            text = f"<b style='color:#7dd3fc'>{text}</b>"
        elif not day.is_in_month:
            text = f"<span style='color:#475569'>{text}</span>"
        self.setText(f"{text}<br>{dots}" if dots and not day.is_today else text)
        if day.events:
            self.setToolTip("\n".join(event.title for event in day.events))
        if day.selectable:
            self.setCursor(Qt.CursorShape.PointingHandCursor)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:  # noqa: N802
        if event.button() == Qt.MouseButton.LeftButton and self.day.selectable:
            self.clicked.emit(self.day.date)
            event.accept()
            return
        super().mouseReleaseEvent(event)


class MiniMonthWidget(QFrame):
    month_clicked = pyqtSignal(int)
    day_clicked = pyqtSignal(object)

    def __init__(self, mini: MiniMonth) -> None:
        super().__init__()
        self.mini = mini
        self.setObjectName("dayCell")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        header = QPushButton(f"{mini.first_day:%B}")
        header.setObjectName("viewButton")
        header.clicked.connect(lambda: self.month_clicked.emit(mini.month))
        layout.addWidget(header)

        grid = QGridLayout()
        grid.setSpacing(0)
        for column, label in enumerate(MINI_WEEKDAYS):
            title = QLabel(label)
            title.setObjectName("muted")
            title.setAlignment(Qt.AlignmentFlag.AlignCenter)
            grid.addWidget(title, 0, column)
        self.day_labels: List[MiniDayLabel] = []
        for row, week in enumerate(mini.weeks, start=1):
            for column, day in enumerate(week):
                label = MiniDayLabel(day)
                label.clicked.connect(self.day_clicked)
                grid.addWidget(label, row, column)
                self.day_labels.append(label)
        layout.addLayout(grid)


class YearView(QWidget):
    month_clicked = pyqtSignal(int)
    day_clicked = pyqtSignal(object)

    def __init__(self, *, today: Optional[Callable[[], date]] = None, tz: Optional[tzinfo] = None) -> None:
        super().__init__()
        self.setObjectName("calendarPanel")
        self.today = today or (lambda: datetime.now(tz).date())
        self.cache = DayBucketCache(tz=tz)
        self.months: List[MiniMonthWidget] = []

        layout = QVBoxLayout(self)
        self.summary = QLabel("")
        self.summary.setObjectName("muted")
        self.summary.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.summary)
        self.grid = QGridLayout()
        layout.addLayout(self.grid, stretch=1)

    def set_data(self, events: Sequence[CalendarEvent], current_date: date) -> None:
        buckets = self.cache.get(events, current_date)
        minis = build_year(current_date.year, buckets, today=self.today())

        while self.grid.count():
            item = self.grid.takeAt(0)
            if item is not None and item.widget() is not None:
                item.widget().deleteLater()
        self.months = []
        for index, mini in enumerate(minis):
            widget = MiniMonthWidget(mini)
            widget.month_clicked.connect(self.month_clicked)
            widget.day_clicked.connect(self.day_clicked)
            self.grid.addWidget(widget, *divmod(index, COLUMNS))
            self.months.append(widget)
        total = sum(mini.event_count for mini in minis)
        self.summary.setText(f"{total} event{'s' if total != 1 else ''}")

from __future__ import annotations

import logging
from datetime import date, datetime, tzinfo
from functools import partial
from typing import Callable, List, Optional, Sequence

from PyQt6.QtCore import QRectF, Qt, QTimer, pyqtSignal
from PyQt6.QtGui import QColor, QHideEvent, QMouseEvent, QPainter, QPaintEvent, QPen, QResizeEvent, QShowEvent
from PyQt6.QtWidgets import QFrame, QLabel, QPushButton, QScrollArea, QVBoxLayout, QWidget

from ...config import LayoutSettings, color_for, get_settings
from ...domain import CalendarEvent
from ...layout import (
    HOURS,
    DayBucketCache,
    EventHit,
    NowMarker,
    OverlapStrategy,
    TimedPlacement,
    TimeGridColumn,
    TimelineMetrics,
    TimelineState,
    resolve_click,
    to_local,
)
from ...utils.qt import MinuteTicker
from .month_view import event_label

logger = logging.getLogger(__name__)

HOUR_LABEL_WIDTH = 60
BLOCK_INSET = 2


class EventBlock(QPushButton):
    def __init__(self, placement: TimedPlacement, *, show_details: bool = False, parent: Optional[QWidget] = None) -> None:
        event = placement.event
        lines = [event_label(event), event.start.strftime("%H:%M")]
        if show_details:
            if event.end is not None:
                lines[1] += f" - {event.end:%H:%M}"
            if event.description and placement.position.height > 80:
                lines.append(event.description)
        super().__init__("\n".join(lines), parent)
        self.placement = placement
        self.setObjectName("eventBlock")
        self.setFocusPolicy(Qt.FocusPolicy.TabFocus)
        self.setToolTip(event.title)
        self.setStyleSheet(f"background-color: {color_for(event.category, event.color)};")


class TimeColumn(QWidget):
    """One 24-hour track; hour slots are painted, events are child buttons."""

    slot_clicked = pyqtSignal(object, int)
    event_clicked = pyqtSignal(object)

    def __init__(self, column: TimeGridColumn, *, show_details: bool = False, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.column = column
        self.setFixedHeight(int(column.metrics.day_height))
        self.setMinimumWidth(80)
        self.setCursor(Qt.CursorShape.PointingHandCursor)

        self.blocks: List[EventBlock] = []
        for placement in sorted(column.placements, key=lambda item: item.z_index):
            block = EventBlock(placement, show_details=show_details, parent=self)
            block.clicked.connect(lambda _checked=False, ev=placement.event: self.event_clicked.emit(ev))
            block.raise_()
            self.blocks.append(block)

        self.now_line = QFrame(self)
        self.now_line.setObjectName("nowLine")
        self.now_line.setFixedHeight(2)
        self.now_line.setVisible(column.now_offset is not None)
        self.now_line.raise_()
        self._layout_children()

    def set_now_offset(self, offset: Optional[float]) -> None:
        if offset is None or not self.column.is_today:
            self.now_line.setVisible(False)
            return
        self.now_line.setGeometry(0, int(offset), self.width(), 2)
        self.now_line.setVisible(True)
        self.now_line.raise_()

    def _layout_children(self) -> None:
        width = max(0, self.width() - 2 * BLOCK_INSET)
        for block in self.blocks:
            position = block.placement.position
            block.setGeometry(BLOCK_INSET, int(position.top_offset), width, int(position.height))
        if self.column.now_offset is not None:
            self.set_now_offset(self.column.now_offset)

    def resizeEvent(self, event: QResizeEvent) -> None:  # noqa: N802
        super().resizeEvent(event)
        self._layout_children()

    def paintEvent(self, event: QPaintEvent) -> None:  # noqa: N802
        painter = QPainter(self)
        if self.column.is_today:
            painter.fillRect(self.rect(), QColor(125, 211, 252, 14))
        painter.setPen(QPen(QColor("#1e293b"), 1))
        hour_height = self.column.metrics.hour_height
        for hour in HOURS:
            y = int((hour + 1) * hour_height) - 1
            painter.drawLine(0, y, self.width(), y)
        painter.end()

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:  # noqa: N802
        if event.button() != Qt.MouseButton.LeftButton:
            super().mouseReleaseEvent(event)
            return
        target = resolve_click(self.column, event.position().y())
        if isinstance(target, EventHit):
            self.event_clicked.emit(target.event)
        else:
            self.slot_clicked.emit(target.day, target.hour)
        event.accept()


class HourLabels(QWidget):
    def __init__(self, metrics: TimelineMetrics, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.metrics = metrics
        self.setFixedWidth(HOUR_LABEL_WIDTH)
        self.setFixedHeight(int(metrics.day_height))

    def paintEvent(self, event: QPaintEvent) -> None:  # noqa: N802
        painter = QPainter(self)
        painter.setPen(QColor("#94a3b8"))
        for hour in HOURS:
            top = hour * self.metrics.hour_height
            rect = QRectF(0, top, self.width() - 8, 16)
            painter.drawText(rect, int(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignTop), f"{hour:02d}:00")
        painter.end()


class AllDayLane(QWidget):
    event_clicked = pyqtSignal(object)

    def __init__(self, column: TimeGridColumn, *, expanded: bool = False, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.column = column
        layout = QVBoxLayout(self)
        layout.setContentsMargins(2, 2, 2, 2)
        layout.setSpacing(2)
        events = column.all_day_events if expanded else column.visible_all_day
        for event in events:
            button = QPushButton(event_label(event))
            button.setObjectName("eventBlock")
            button.setStyleSheet(f"background-color: {color_for(event.category, event.color)};")
            button.clicked.connect(lambda _checked=False, ev=event: self.event_clicked.emit(ev))
            layout.addWidget(button)
        if not expanded and column.all_day_overflow:
            more = QLabel(f"+{column.all_day_overflow} more")
            more.setObjectName("muted")
            more.setAlignment(Qt.AlignmentFlag.AlignCenter)
            layout.addWidget(more)
        layout.addStretch(1)


class TimelineView(QWidget):
    """Shared scaffolding for the week and day views.

    Subclasses build their header and columns in ``_rebuild`` and translate
    slot clicks into their own signal signature.
    """

    def __init__(
        self,
        metrics: TimelineMetrics,
        *,
        settings: Optional[LayoutSettings] = None,
        clock: Optional[Callable[[], datetime]] = None,
        overlap: Optional[OverlapStrategy] = None,
        tz: Optional[tzinfo] = None,
    ) -> None:
        super().__init__()
        self.setObjectName("calendarPanel")
        self.settings = settings or get_settings().layout
        self.metrics = metrics
        self.clock = clock or partial(datetime.now, tz)
        self.overlap = overlap
        self.cache = DayBucketCache(tz=tz)
        self.state = TimelineState(metrics, lead_hours=self.settings.scroll_lead_hours, tz=tz)
        self.now_marker = NowMarker(metrics, clock=self.clock, tz=tz)
        self.ticker = MinuteTicker(self.settings.now_refresh_seconds, clock=self.clock, parent=self)
        self.ticker.ticked.connect(self._on_tick)

        self.events: Sequence[CalendarEvent] = []
        self.current_date: date = self._now().date()
        self.columns: List[TimeGridColumn] = []
        self.column_widgets: List[TimeColumn] = []
        self._rendered_today: date = self.current_date
        self.scroll_target: Optional[int] = None

        self.outer = QVBoxLayout(self)
        self.outer.setContentsMargins(0, 0, 0, 0)
        self.outer.setSpacing(0)
        self.header_host = QWidget()
        self.header_layout = QVBoxLayout(self.header_host)
        self.header_layout.setContentsMargins(0, 0, 0, 0)
        self.outer.addWidget(self.header_host)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.outer.addWidget(self.scroll_area, stretch=1)

    # ------------------------------------------------------------------ data

    def set_data(self, events: Sequence[CalendarEvent], current_date: date) -> None:
        self.events = events
        self.current_date = current_date
        buckets = self.cache.get(events, current_date)
        now = self._now()
        self._rendered_today = now.date()
        self.columns = self._build_columns(buckets, now)
        self._clear_layout(self.header_layout)
        self.column_widgets = []
        self._rebuild()
        for column, widget in zip(self.columns, self.column_widgets):
            if column.skipped:
                logger.debug("%d event(s) skipped on %s", len(column.skipped), column.day.isoformat())
            widget.slot_clicked.connect(self._emit_slot)
            widget.event_clicked.connect(self._emit_event)

    def _now(self) -> datetime:
        """Current time in the display zone."""

        return to_local(self.clock(), self.cache.tz)

    def _build_columns(self, buckets, now: datetime) -> List[TimeGridColumn]:
        raise NotImplementedError

    def _rebuild(self) -> None:
        raise NotImplementedError

    def _emit_slot(self, day: date, hour: int) -> None:
        raise NotImplementedError

    def _emit_event(self, event: CalendarEvent) -> None:
        raise NotImplementedError

    @staticmethod
    def _clear_layout(layout) -> None:
        while layout.count():
            item = layout.takeAt(0)
            if item is None:
                continue
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()
            elif item.layout() is not None:
                TimelineView._clear_layout(item.layout())

    # ------------------------------------------------------------------ now line

    def showEvent(self, event: QShowEvent) -> None:  # noqa: N802
        super().showEvent(event)
        offset = self.state.first_scroll(self.clock())
        if offset is not None:
            self.scroll_target = int(offset)
            QTimer.singleShot(0, self._apply_scroll)
        self._on_tick(self._now())
        self.ticker.start()

    def _apply_scroll(self) -> None:
        if self.scroll_target is not None:
            self.scroll_area.verticalScrollBar().setValue(self.scroll_target)

    def hideEvent(self, event: QHideEvent) -> None:  # noqa: N802
        self.ticker.stop()
        super().hideEvent(event)

    def _on_tick(self, now: datetime) -> None:
        now = to_local(now, self.cache.tz)
        if now.date() != self._rendered_today:
            self.set_data(self.events, self.current_date)
            return
        offset = self.now_marker.refresh()
        for widget in self.column_widgets:
            widget.set_now_offset(offset if widget.column.is_today else None)

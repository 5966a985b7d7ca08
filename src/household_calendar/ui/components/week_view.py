from __future__ import annotations

from datetime import date, datetime, tzinfo
from typing import Callable, List, Mapping, Optional, Sequence

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QWidget

from ...config import LayoutSettings, get_settings
from ...domain import CalendarEvent
from ...layout import OverlapStrategy, TimeGridColumn, TimelineMetrics, build_week_columns
from .time_grid import HOUR_LABEL_WIDTH, AllDayLane, HourLabels, TimeColumn, TimelineView


class WeekView(TimelineView):
    """Seven Monday-first day columns sharing one scrollable hour track."""

    time_slot_clicked = pyqtSignal(object, int)
    event_clicked = pyqtSignal(object)

    def __init__(
        self,
        *,
        settings: Optional[LayoutSettings] = None,
        clock: Optional[Callable[[], datetime]] = None,
        overlap: Optional[OverlapStrategy] = None,
        tz: Optional[tzinfo] = None,
    ) -> None:
        settings = settings or get_settings().layout
        metrics = TimelineMetrics(settings.week_hour_height, settings.week_minimum_height)
        super().__init__(metrics, settings=settings, clock=clock, overlap=overlap, tz=tz)

    def _build_columns(self, buckets: Mapping[date, Sequence[CalendarEvent]], now: datetime) -> List[TimeGridColumn]:
        return build_week_columns(
            self.current_date,
            buckets,
            self.metrics,
            now=now,
            tz=self.cache.tz,
            overlap=self.overlap,
            all_day_limit=self.settings.visible_event_limit,
        )

    def _rebuild(self) -> None:
        names = QHBoxLayout()
        names.setContentsMargins(0, 0, 0, 0)
        names.addSpacing(HOUR_LABEL_WIDTH)
        lanes = QHBoxLayout()
        lanes.setContentsMargins(0, 0, 0, 0)
        all_day_caption = QLabel("All day")
        all_day_caption.setObjectName("muted")
        all_day_caption.setFixedWidth(HOUR_LABEL_WIDTH)
        lanes.addWidget(all_day_caption)

        for column in self.columns:
            label = QLabel(f"{column.day:%a}\n{column.day.day}")
            label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            label.setObjectName("title" if column.is_today else "weekdayHeader")
            names.addWidget(label, stretch=1)

            lane = AllDayLane(column)
            lane.event_clicked.connect(self._emit_event)
            lanes.addWidget(lane, stretch=1)

        self.header_layout.addLayout(names)
        self.header_layout.addLayout(lanes)

        body = QWidget()
        track = QHBoxLayout(body)
        track.setContentsMargins(0, 0, 0, 0)
        track.setSpacing(1)
        track.addWidget(HourLabels(self.metrics))
        for column in self.columns:
            widget = TimeColumn(column)
            track.addWidget(widget, stretch=1)
            self.column_widgets.append(widget)
        self.scroll_area.setWidget(body)

    def _emit_slot(self, day: date, hour: int) -> None:
        self.time_slot_clicked.emit(day, hour)

    def _emit_event(self, event: CalendarEvent) -> None:
        self.event_clicked.emit(event)

from __future__ import annotations

from datetime import date, datetime, tzinfo
from typing import Callable, List, Mapping, Optional, Sequence

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QWidget

from ...config import LayoutSettings, get_settings
from ...domain import CalendarEvent
from ...layout import OverlapStrategy, TimeGridColumn, TimelineMetrics, build_day_column
from .time_grid import AllDayLane, HourLabels, TimeColumn, TimelineView


class DayView(TimelineView):
    time_slot_clicked = pyqtSignal(int)
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
        metrics = TimelineMetrics(settings.day_hour_height, settings.day_minimum_height)
        super().__init__(metrics, settings=settings, clock=clock, overlap=overlap, tz=tz)

    def _build_columns(self, buckets: Mapping[date, Sequence[CalendarEvent]], now: datetime) -> List[TimeGridColumn]:
        return [
            build_day_column(
                self.current_date,
                buckets,
                self.metrics,
                now=now,
                tz=self.cache.tz,
                overlap=self.overlap,
                all_day_limit=self.settings.visible_event_limit,
            )
        ]

    def _rebuild(self) -> None:
        column = self.columns[0]
        heading = QLabel(f"{column.day:%A}\n{column.day.day} {column.day:%B}" + ("\nToday" if column.is_today else ""))
        heading.setObjectName("title")
        heading.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.header_layout.addWidget(heading)

        if column.all_day_events:
            caption = QLabel("All-day events")
            caption.setObjectName("muted")
            self.header_layout.addWidget(caption)
            lane = AllDayLane(column)
            lane.event_clicked.connect(self._emit_event)
            self.header_layout.addWidget(lane)

        body = QWidget()
        track = QHBoxLayout(body)
        track.setContentsMargins(0, 0, 0, 0)
        track.addWidget(HourLabels(self.metrics))
        widget = TimeColumn(column, show_details=True)
        track.addWidget(widget, stretch=1)
        self.column_widgets.append(widget)
        self.scroll_area.setWidget(body)

    def _emit_slot(self, day: date, hour: int) -> None:
        self.time_slot_clicked.emit(hour)

    def _emit_event(self, event: CalendarEvent) -> None:
        self.event_clicked.emit(event)

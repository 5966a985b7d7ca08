from __future__ import annotations

from typing import Dict

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QButtonGroup, QHBoxLayout, QPushButton, QWidget

from ...domain import CalendarViewMode

_LABELS = {
    CalendarViewMode.DAY: "Day",
    CalendarViewMode.WEEK: "Week",
    CalendarViewMode.MONTH: "Month",
    CalendarViewMode.YEAR: "Year",
}


class ViewSwitcher(QWidget):
    view_changed = pyqtSignal(object)

    def __init__(self, current: CalendarViewMode = CalendarViewMode.MONTH) -> None:
        super().__init__()
        self.current = current
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(2)

        self.group = QButtonGroup(self)
        self.group.setExclusive(True)
        self.buttons: Dict[CalendarViewMode, QPushButton] = {}
        for mode, label in _LABELS.items():
            button = QPushButton(label)
            button.setObjectName("viewButton")
            button.setCheckable(True)
            button.setChecked(mode is current)
            button.clicked.connect(lambda _checked=False, m=mode: self.set_view(m))
            self.group.addButton(button)
            layout.addWidget(button)
            self.buttons[mode] = button

    def set_view(self, mode: CalendarViewMode, *, notify: bool = True) -> None:
        self.buttons[mode].setChecked(True)
        if mode is self.current:
            return
        self.current = mode
        if notify:
            self.view_changed.emit(mode)

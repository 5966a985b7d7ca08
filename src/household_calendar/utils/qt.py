from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional

from PyQt6.QtCore import QObject, Qt, QTimer, pyqtSignal

from ..layout import NavigationKey

_KEY_MAP = {
    Qt.Key.Key_Left: NavigationKey.LEFT,
    Qt.Key.Key_Right: NavigationKey.RIGHT,
    Qt.Key.Key_Up: NavigationKey.UP,
    Qt.Key.Key_Down: NavigationKey.DOWN,
    Qt.Key.Key_Home: NavigationKey.HOME,
    Qt.Key.Key_End: NavigationKey.END,
    Qt.Key.Key_Return: NavigationKey.ENTER,
    Qt.Key.Key_Enter: NavigationKey.ENTER,
    Qt.Key.Key_Space: NavigationKey.SPACE,
}


def navigation_key(key: int) -> Optional[NavigationKey]:
    try:
        return _KEY_MAP.get(Qt.Key(key))
    except ValueError:
        return None


class MinuteTicker(QObject):
    """Periodic clock signal used to advance the current-time line."""

    ticked = pyqtSignal(object)

    def __init__(
        self,
        interval_seconds: int = 60,
        *,
        clock: Callable[[], datetime] = datetime.now,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self.clock = clock
        self.timer = QTimer(self)
        self.timer.setInterval(max(1, interval_seconds) * 1000)
        self.timer.timeout.connect(self.tick)

    @property
    def active(self) -> bool:
        return self.timer.isActive()

    def start(self) -> None:
        if not self.timer.isActive():
            self.timer.start()

    def stop(self) -> None:
        self.timer.stop()

    def tick(self) -> None:
        self.ticked.emit(self.clock())

from __future__ import annotations

from enum import Enum
from typing import Optional


class NavigationKey(str, Enum):
    LEFT = "ArrowLeft"
    RIGHT = "ArrowRight"
    UP = "ArrowUp"
    DOWN = "ArrowDown"
    HOME = "Home"
    END = "End"
    ENTER = "Enter"
    SPACE = "Space"


_STEPS = {
    NavigationKey.LEFT: -1,
    NavigationKey.RIGHT: 1,
    NavigationKey.UP: -7,
    NavigationKey.DOWN: 7,
}


class GridKeyboardNavigator:
    """Focus index over the real days of one mounted month grid.

    ``focus_index`` is ``None`` until the user moves focus. Movement clamps to
    the first and last day and never wraps.
    """

    def __init__(self, day_count: int, today_index: Optional[int] = None) -> None:
        self.day_count = 0
        self.today_index: Optional[int] = None
        self.focus_index: Optional[int] = None
        self.reset(day_count, today_index)

    def reset(self, day_count: int, today_index: Optional[int] = None) -> None:
        self.day_count = max(0, day_count)
        self.today_index = self._clamp(today_index) if today_index is not None else None
        self.focus_index = None

    def _clamp(self, index: int) -> Optional[int]:
        if self.day_count == 0:
            return None
        return min(max(index, 0), self.day_count - 1)

    @property
    def effective_index(self) -> Optional[int]:
        if self.focus_index is not None:
            return self._clamp(self.focus_index)
        return self.today_index

    def tab_index(self, index: int) -> int:
        anchor = self.effective_index
        if anchor is None:
            anchor = 0
        return 0 if index == anchor else -1

    def focus_from_pointer(self, index: int) -> Optional[int]:
        self.focus_index = self._clamp(index)
        return self.focus_index

    def move(self, key: NavigationKey) -> Optional[int]:
        if self.day_count == 0:
            return None
        if key is NavigationKey.HOME:
            self.focus_index = 0
        elif key is NavigationKey.END:
            self.focus_index = self.day_count - 1
        else:
            origin = self.effective_index
            if origin is None:
                origin = 0
            self.focus_index = self._clamp(origin + _STEPS[key])
        return self.focus_index

    def handle_key(self, key: NavigationKey) -> Optional[int]:
        """Apply ``key``; return the day index to select for Enter/Space, else None."""

        if key in (NavigationKey.ENTER, NavigationKey.SPACE):
            return self.effective_index
        self.move(key)
        return None

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from ..domain import EventCategory

DEFAULT_EVENT_COLOR = "#3b82f6"

CATEGORY_COLORS: Mapping[EventCategory, str] = {
    EventCategory.BIRTHDAY: "#ec4899",
    EventCategory.CHRISTMAS: "#ef4444",
    EventCategory.WEDDING: "#a855f7",
    EventCategory.EASTER: "#eab308",
    EventCategory.MIDSUMMER: "#22c55e",
    EventCategory.NEW_YEAR: "#3b82f6",
    EventCategory.GRADUATION: "#6366f1",
    EventCategory.ANNIVERSARY: "#f43f5e",
    EventCategory.HOLIDAY: "#f97316",
    EventCategory.CUSTOM: DEFAULT_EVENT_COLOR,
}


def color_for(category: object, override: Optional[str] = None) -> str:
    """Return the display color for an event category.

    An explicit ``override`` always wins. Unknown categories fall back to the
    ``custom`` color, so the result is never empty.
    """

    if override:
        return override
    return CATEGORY_COLORS.get(EventCategory.parse(category), DEFAULT_EVENT_COLOR)


@dataclass(frozen=True)
class AppPalette:
    background_primary: str = "#0b1120"
    background_secondary: str = "#111a2e"
    surface: str = "#15203a"
    surface_alt: str = "#1c2a4a"
    accent_primary: str = "#7dd3fc"
    accent_secondary: str = "#f472b6"
    accent_now: str = "#ef4444"
    text_primary: str = "#f8fafc"
    text_secondary: str = "#94a3b8"
    text_muted: str = "#475569"
    border_subtle: str = "#1e293b"
    border_strong: str = "#243657"

    def as_stylesheet(self) -> str:
        """Quick access to a global stylesheet for the PyQt app."""

        return f"""
        QWidget {{
            background-color: {self.background_primary};
            color: {self.text_primary};
            font-family: 'Helvetica Neue', 'Segoe UI', Arial, sans-serif;
            font-size: 13px;
        }}
        QPushButton {{
            background-color: {self.accent_primary};
            color: #031525;
            border: none;
            padding: 6px 12px;
            border-radius: 8px;
            font-weight: 600;
        }}
        QPushButton:hover {{
            background-color: #5cc9f5;
        }}
        QPushButton#secondaryButton {{
            background-color: transparent;
            color: {self.accent_primary};
            border: 1px solid {self.accent_primary};
        }}
        QPushButton#viewButton {{
            background-color: transparent;
            color: {self.text_secondary};
        }}
        QPushButton#viewButton:checked {{
            background-color: {self.surface_alt};
            color: {self.text_primary};
        }}
        QLabel#title {{
            font-size: 20px;
            font-weight: 700;
        }}
        QLabel#weekdayHeader {{
            color: {self.text_secondary};
            font-weight: 600;
        }}
        QLabel#weekendHeader {{
            color: {self.accent_secondary};
            font-weight: 600;
        }}
        QFrame#dayCell {{
            border-top: 1px solid {self.border_subtle};
            border-right: 1px solid {self.border_subtle};
        }}
        QFrame#dayCell[weekend="true"] {{
            background-color: rgba(244, 114, 182, 0.05);
        }}
        QFrame#dayCell:focus {{
            border: 2px solid {self.accent_primary};
        }}
        QFrame#paddingCell {{
            background-color: {self.background_secondary};
            border-top: 1px solid {self.border_subtle};
            border-right: 1px solid {self.border_subtle};
        }}
        QFrame#hourSlot {{
            border-bottom: 1px solid {self.border_subtle};
        }}
        QPushButton#eventBlock {{
            color: white;
            text-align: left;
            border-radius: 4px;
            padding: 2px 6px;
            font-size: 11px;
        }}
        QFrame#nowLine {{
            background-color: {self.accent_now};
        }}
        QLabel#muted {{
            color: {self.text_muted};
        }}
        QWidget#calendarPanel {{
            background-color: {self.surface};
        }}
        """

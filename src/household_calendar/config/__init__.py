"""Configuration models and helpers."""

from __future__ import annotations

from .settings import APP_NAME, DATA_DIR, AppSettings, LayoutSettings, LoggingSettings, UiSettings, get_settings
from .theme import CATEGORY_COLORS, DEFAULT_EVENT_COLOR, AppPalette, color_for

__all__ = [
    "APP_NAME",
    "CATEGORY_COLORS",
    "DATA_DIR",
    "DEFAULT_EVENT_COLOR",
    "AppPalette",
    "AppSettings",
    "LayoutSettings",
    "LoggingSettings",
    "UiSettings",
    "color_for",
    "get_settings",
]

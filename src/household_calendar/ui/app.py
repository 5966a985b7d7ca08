from __future__ import annotations

import logging
import sys
from datetime import date
from typing import Optional, Sequence

from PyQt6.QtWidgets import QApplication

from ..bootstrap import configure_logging
from ..config import AppPalette, get_settings
from ..domain import CalendarEvent, CalendarViewMode
from .main_window import MainWindow
from .styles.theme import apply_palette


def run_gui(
    events: Sequence[CalendarEvent] = (),
    *,
    current_date: Optional[date] = None,
    view: CalendarViewMode = CalendarViewMode.MONTH,
) -> int:
    configure_logging()
    app = QApplication.instance() or QApplication(sys.argv)
    settings = get_settings()
    app.setApplicationName(settings.ui.app_name)
    app.setOrganizationName(settings.ui.organization)
    apply_palette(app, AppPalette())

    window = MainWindow(settings=settings, events=events, current_date=current_date, view=view)
    window.show()
    logging.getLogger(__name__).info("Calendar window opened with %d event(s)", len(events))
    return app.exec()

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import tzinfo
from functools import lru_cache
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv
from platformdirs import user_data_dir

load_dotenv()

APP_NAME = "Household Calendar"
APP_AUTHOR = "HouseholdCalendar"
DATA_DIR = Path(user_data_dir(APP_NAME, APP_AUTHOR))


@dataclass(frozen=True)
class LayoutSettings:
    week_hour_height: int
    week_minimum_height: int
    day_hour_height: int
    day_minimum_height: int
    visible_event_limit: int
    now_refresh_seconds: int
    scroll_lead_hours: int


@dataclass(frozen=True)
class UiSettings:
    app_name: str
    organization: str
    timezone: Optional[str]

    @property
    def zone(self) -> Optional[tzinfo]:
        """Configured display zone; ``None`` means the system local zone."""

        if not self.timezone:
            return None
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError):
            return None


@dataclass(frozen=True)
class LoggingSettings:
    level: str
    directory: Path


@dataclass(frozen=True)
class AppSettings:
    layout: LayoutSettings
    ui: UiSettings
    logging: LoggingSettings


def _int_from_env(name: str, default: int, *, minimum: int = 0) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= minimum else default


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    layout = LayoutSettings(
        week_hour_height=_int_from_env("CALENDAR_WEEK_HOUR_HEIGHT", 60, minimum=1),
        week_minimum_height=_int_from_env("CALENDAR_WEEK_MIN_EVENT_HEIGHT", 30),
        day_hour_height=_int_from_env("CALENDAR_DAY_HOUR_HEIGHT", 80, minimum=1),
        day_minimum_height=_int_from_env("CALENDAR_DAY_MIN_EVENT_HEIGHT", 40),
        visible_event_limit=_int_from_env("CALENDAR_VISIBLE_EVENTS", 3, minimum=1),
        now_refresh_seconds=_int_from_env("CALENDAR_NOW_REFRESH_SECONDS", 60, minimum=1),
        scroll_lead_hours=_int_from_env("CALENDAR_SCROLL_LEAD_HOURS", 2),
    )

    ui = UiSettings(
        app_name=os.getenv("HOUSEHOLD_CALENDAR_APP_NAME", APP_NAME),
        organization=os.getenv("HOUSEHOLD_CALENDAR_ORG", APP_AUTHOR),
        timezone=os.getenv("HOUSEHOLD_CALENDAR_TIMEZONE") or None,
    )

    logging_settings = LoggingSettings(
        level=os.getenv("HOUSEHOLD_CALENDAR_LOG_LEVEL", "INFO").upper(),
        directory=Path(os.getenv("HOUSEHOLD_CALENDAR_LOG_DIR", str(DATA_DIR / "logs"))),
    )

    return AppSettings(layout=layout, ui=ui, logging=logging_settings)

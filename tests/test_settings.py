from pathlib import Path

import pytest

from household_calendar.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch):
    for name in ("CALENDAR_WEEK_HOUR_HEIGHT", "CALENDAR_DAY_MIN_EVENT_HEIGHT", "CALENDAR_VISIBLE_EVENTS"):
        monkeypatch.delenv(name, raising=False)

    layout = get_settings().layout

    assert layout.week_hour_height == 60
    assert layout.day_minimum_height == 40
    assert layout.visible_event_limit == 3


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("CALENDAR_WEEK_HOUR_HEIGHT", "48")
    monkeypatch.setenv("CALENDAR_VISIBLE_EVENTS", "5")
    monkeypatch.setenv("HOUSEHOLD_CALENDAR_LOG_LEVEL", "debug")
    monkeypatch.setenv("HOUSEHOLD_CALENDAR_LOG_DIR", str(tmp_path))

    settings = get_settings()

    assert settings.layout.week_hour_height == 48
    assert settings.layout.visible_event_limit == 5
    assert settings.logging.level == "DEBUG"
    assert settings.logging.directory == Path(tmp_path)


@pytest.mark.parametrize("raw", ["abc", "0", "-3"])
def test_invalid_values_fall_back(monkeypatch, raw):
    monkeypatch.setenv("CALENDAR_WEEK_HOUR_HEIGHT", raw)

    assert get_settings().layout.week_hour_height == 60


def test_settings_are_cached():
    assert get_settings() is get_settings()


def test_display_zone(monkeypatch):
    monkeypatch.setenv("HOUSEHOLD_CALENDAR_TIMEZONE", "Europe/Stockholm")
    assert str(get_settings().ui.zone) == "Europe/Stockholm"

    get_settings.cache_clear()
    monkeypatch.setenv("HOUSEHOLD_CALENDAR_TIMEZONE", "Nowhere/Special")
    assert get_settings().ui.zone is None

    get_settings.cache_clear()
    monkeypatch.delenv("HOUSEHOLD_CALENDAR_TIMEZONE")
    assert get_settings().ui.zone is None

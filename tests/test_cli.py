import json

import pytest

from household_calendar.cli import load_events, main
from household_calendar.config import get_settings


@pytest.fixture(autouse=True)
def log_dir(monkeypatch, tmp_path):
    monkeypatch.setenv("HOUSEHOLD_CALENDAR_LOG_DIR", str(tmp_path / "logs"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _write(path, payload):
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_load_events_accepts_wrapped_list(tmp_path):
    path = _write(
        tmp_path / "events.json",
        {"events": [{"id": "1", "title": "a", "start_date": "2024-03-08T10:00:00"}, "junk"]},
    )

    events = load_events(path)

    assert [e.id for e in events] == ["1"]


def test_load_events_rejects_non_list(tmp_path):
    path = _write(tmp_path / "events.json", {"events": {"id": "1"}})

    with pytest.raises(ValueError):
        load_events(path)


def test_month_command_prints_grid(tmp_path, capsys):
    path = _write(tmp_path / "events.json", [{"id": "1", "title": "a", "start_date": "2024-03-08T10:00:00"}])

    code = main(["month", "--events", str(path), "--date", "2024-03-15"])

    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert out[0] == "March 2024"
    assert out[1].split() == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
    assert "8+" in out[3]
    assert len(out) == 2 + 5


def test_unreadable_file_returns_error(tmp_path):
    assert main(["month", "--events", str(tmp_path / "missing.json"), "--date", "2024-03-15"]) == 1


def test_invalid_json_returns_error(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    assert main(["month", "--events", str(path)]) == 1

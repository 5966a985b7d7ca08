from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional, Sequence

from .bootstrap import configure_logging
from .config import get_settings
from .domain import CalendarEvent, CalendarViewMode, parse_events
from .layout import WEEKDAY_LABELS, DayBucketCache, MonthGrid, build_month_grid, period_title

logger = logging.getLogger(__name__)


def load_events(path: Optional[Path]) -> List[CalendarEvent]:
    """Read event records from a JSON list or an object with an ``events`` key."""

    if path is None:
        return []
    payload = json.loads(path.read_text(encoding="utf-8"))
    records = payload.get("events", []) if isinstance(payload, dict) else payload
    if not isinstance(records, list):
        raise ValueError(f"{path} does not contain a list of events")
    events = parse_events(record for record in records if isinstance(record, dict))
    logger.info("Loaded %d event(s) from %s", len(events), path)
    return events


def render_month_text(grid: MonthGrid) -> str:
    lines = ["  ".join(f"{label:>5}" for label in WEEKDAY_LABELS)]
    for row in grid.rows():
        cells = []
        for cell in row:
            if cell is None:
                cells.append(f"{'':>5}")
                continue
            marker = "*" if cell.is_today else " "
            dot = "+" if cell.events else " "
            cells.append(f" {marker}{cell.date.day:>2}{dot}")
        lines.append("  ".join(cells))
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Household calendar command line interface.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_common(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("--events", type=Path, default=None, help="JSON file with event records.")
        sub.add_argument("--date", type=date.fromisoformat, default=None, help="Anchor date (YYYY-MM-DD).")

    gui_parser = subparsers.add_parser("gui", help="Launch the desktop calendar.")
    add_common(gui_parser)
    gui_parser.add_argument(
        "--view",
        choices=[mode.value for mode in CalendarViewMode],
        default=CalendarViewMode.MONTH.value,
    )

    month_parser = subparsers.add_parser("month", help="Print the month grid as text.")
    add_common(month_parser)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        events = load_events(args.events)
    except (OSError, ValueError) as exc:
        logger.error("Could not load events: %s", exc)
        return 1

    current = args.date or date.today()
    if args.command == "gui":
        from .ui.app import run_gui

        return run_gui(events, current_date=current, view=CalendarViewMode(args.view))
    if args.command == "month":
        grid = build_month_grid(current, DayBucketCache(tz=get_settings().ui.zone).get(events, current))
        print(period_title(CalendarViewMode.MONTH, current))
        print(render_month_text(grid))
        return 0
    parser.print_help()  # pragma: no cover - argparse enforces choices
    return 2


if __name__ == "__main__":
    sys.exit(main())

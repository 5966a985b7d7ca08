from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Dict, Iterable, List, Optional

from .enums import EventCategory, EventKind
from .errors import MalformedEventError

logger = logging.getLogger(__name__)

DEFAULT_DURATION = timedelta(hours=1)


def _parse_datetime(value: Any, *, event_id: object, field_name: str) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError as exc:
            raise MalformedEventError(event_id, f"{field_name}={value!r}") from exc
    raise MalformedEventError(event_id, f"unsupported {field_name} value {value!r}")


@dataclass(slots=True)
class CalendarEvent:
    id: str
    title: str
    start: datetime
    end: Optional[datetime] = None
    all_day: bool = False
    category: EventCategory = EventCategory.CUSTOM
    color: Optional[str] = None
    kind: EventKind = EventKind.SIMPLE
    description: str = ""

    @property
    def is_major(self) -> bool:
        return self.kind is EventKind.MAJOR_EVENT

    @property
    def effective_end(self) -> datetime:
        return self.end if self.end is not None else self.start + DEFAULT_DURATION

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "CalendarEvent":
        event_id = str(record.get("id", ""))
        if not event_id:
            raise MalformedEventError(record.get("id"), "missing id")
        start = _parse_datetime(record.get("start_date"), event_id=event_id, field_name="start_date")
        raw_end = record.get("end_date")
        end = _parse_datetime(raw_end, event_id=event_id, field_name="end_date") if raw_end else None
        return cls(
            id=event_id,
            title=str(record.get("title") or ""),
            start=start,
            end=end,
            all_day=bool(record.get("all_day")),
            category=EventCategory.parse(record.get("event_category")),
            color=record.get("color") or None,
            kind=EventKind.parse(record.get("event_type")),
            description=record.get("description") or "",
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "start_date": self.start.isoformat(),
            "end_date": self.end.isoformat() if self.end else None,
            "all_day": self.all_day,
            "event_category": self.category.value,
            "color": self.color,
            "event_type": self.kind.value,
            "description": self.description,
        }


def parse_events(records: Iterable[Dict[str, Any]]) -> List[CalendarEvent]:
    """Parse backend records, dropping the ones that cannot be rendered."""

    events: list[CalendarEvent] = []
    for record in records:
        try:
            events.append(CalendarEvent.from_record(record))
        except MalformedEventError as exc:
            logger.warning("Skipping event record: %s", exc)
    return events

from __future__ import annotations


class CalendarDataError(ValueError):
    """Raised when an event record cannot be laid out."""


class MalformedEventError(CalendarDataError):
    def __init__(self, event_id: object, detail: str) -> None:
        super().__init__(f"Event {event_id!r} is malformed: {detail}")
        self.event_id = event_id
        self.detail = detail


class InvertedIntervalError(CalendarDataError):
    def __init__(self, event_id: object) -> None:
        super().__init__(f"Event {event_id!r} ends before it starts")
        self.event_id = event_id

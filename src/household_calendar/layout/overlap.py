from __future__ import annotations

from dataclasses import dataclass
from typing import List, Protocol, Sequence, Tuple

from ..domain import CalendarEvent
from .positions import TimeSlotPosition


@dataclass(frozen=True)
class TimedPlacement:
    event: CalendarEvent
    position: TimeSlotPosition
    z_index: int
    column: int = 0
    column_count: int = 1


class OverlapStrategy(Protocol):
    def arrange(self, items: Sequence[Tuple[CalendarEvent, TimeSlotPosition]]) -> List[TimedPlacement]:
        ...


class StackedOverlap:
    """Stack events by input order; overlapping blocks are drawn over each other."""

    base_z_index = 10

    def arrange(self, items: Sequence[Tuple[CalendarEvent, TimeSlotPosition]]) -> List[TimedPlacement]:
        return [
            TimedPlacement(event=event, position=position, z_index=self.base_z_index + index)
            for index, (event, position) in enumerate(items)
        ]

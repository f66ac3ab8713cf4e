from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from ..domain import CalendarCell, CalendarEvent
from .dates import DateLike, as_date

MONTH_CELL_LIMIT = 3


def overflow_label(hidden: int) -> str:
    return f"+{hidden} more" if hidden > 0 else ""


def events_for_day(
    events: Iterable[CalendarEvent],
    day: DateLike,
    *,
    sort_by_start: bool = False,
) -> List[CalendarEvent]:
    """Return the events falling on ``day``.

    Results keep the source collection's order unless ``sort_by_start`` is set,
    in which case they are ordered by their zero-padded ``HH:MM`` start time.
    """

    target = as_date(day)
    matches = [event for event in events if as_date(event.date) == target]
    if sort_by_start:
        matches.sort(key=lambda event: event.start_time)
    return matches


@dataclass(slots=True)
class DayBucket:
    cell: CalendarCell
    events: List[CalendarEvent] = field(default_factory=list)
    limit: Optional[int] = None

    @property
    def total(self) -> int:
        return len(self.events)

    @property
    def visible(self) -> List[CalendarEvent]:
        if self.limit is None:
            return list(self.events)
        return self.events[: self.limit]

    @property
    def overflow(self) -> int:
        if self.limit is None:
            return 0
        return max(self.total - self.limit, 0)

    @property
    def overflow_label(self) -> str:
        return overflow_label(self.overflow)


def bucket(
    events: Sequence[CalendarEvent],
    cells: Iterable[CalendarCell],
    *,
    limit: Optional[int] = None,
    sort_by_start: bool = False,
) -> List[DayBucket]:
    return [
        DayBucket(
            cell=cell,
            events=events_for_day(events, cell.day, sort_by_start=sort_by_start),
            limit=limit,
        )
        for cell in cells
    ]

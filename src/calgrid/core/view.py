from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Sequence

from ..domain import CalendarEvent, ViewMode
from .dates import header_text
from .grid import grid_for
from .index import MONTH_CELL_LIMIT, DayBucket, bucket


@dataclass(frozen=True, slots=True)
class CalendarView:
    """Everything a renderer needs to draw one view."""

    mode: ViewMode
    anchor: date
    title: str
    buckets: List[DayBucket]

    @property
    def days(self) -> List[date]:
        return [entry.cell.day for entry in self.buckets]

    def weeks(self) -> List[List[DayBucket]]:
        return [self.buckets[index : index + 7] for index in range(0, len(self.buckets), 7)]


def build_view(
    mode: ViewMode,
    anchor: date,
    events: Sequence[CalendarEvent],
    *,
    current: Optional[date] = None,
    month_limit: int = MONTH_CELL_LIMIT,
) -> CalendarView:
    mode = ViewMode(mode)
    cells = grid_for(mode, anchor, current=current)
    buckets = bucket(
        events,
        cells,
        limit=month_limit if mode is ViewMode.MONTH else None,
        sort_by_start=mode is ViewMode.DAY,
    )
    return CalendarView(mode=mode, anchor=anchor, title=header_text(anchor, mode), buckets=buckets)

"""Calendar cell computation for the month, week and day views.

Weeks start on Sunday. The month grid is always six full weeks so the view
keeps a stable shape whatever the month.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Callable, List, Optional

from ..domain import CalendarCell, NavDirection, ViewMode
from .dates import DateLike, add_months, as_date, start_of_week

MONTH_GRID_SIZE = 42
WEEK_LENGTH = 7


def today() -> date:
    return date.today()


def is_today(day: DateLike, *, current: Optional[date] = None) -> bool:
    return as_date(day) == (current or today())


def _consecutive(start: date, count: int) -> List[date]:
    return [start + timedelta(days=offset) for offset in range(count)]


def month_grid(anchor: DateLike, *, current: Optional[date] = None) -> List[CalendarCell]:
    anchor_day = as_date(anchor)
    reference = current or today()
    first_of_month = anchor_day.replace(day=1)
    grid_start = start_of_week(first_of_month)
    return [
        CalendarCell(
            day=day,
            is_current_period=(day.month == anchor_day.month and day.year == anchor_day.year),
            is_today=day == reference,
        )
        for day in _consecutive(grid_start, MONTH_GRID_SIZE)
    ]


def week_grid(anchor: DateLike, *, current: Optional[date] = None) -> List[CalendarCell]:
    reference = current or today()
    return [
        CalendarCell(day=day, is_current_period=True, is_today=day == reference)
        for day in _consecutive(start_of_week(anchor), WEEK_LENGTH)
    ]


def day_grid(anchor: DateLike, *, current: Optional[date] = None) -> List[CalendarCell]:
    anchor_day = as_date(anchor)
    return [CalendarCell(day=anchor_day, is_current_period=True, is_today=is_today(anchor_day, current=current))]


_GRID_BUILDERS: dict[ViewMode, Callable[..., List[CalendarCell]]] = {
    ViewMode.MONTH: month_grid,
    ViewMode.WEEK: week_grid,
    ViewMode.DAY: day_grid,
}


def grid_for(mode: ViewMode, anchor: DateLike, *, current: Optional[date] = None) -> List[CalendarCell]:
    return _GRID_BUILDERS[ViewMode(mode)](anchor, current=current)


def navigate(anchor: DateLike, mode: ViewMode, direction: NavDirection) -> date:
    step = 1 if NavDirection(direction) is NavDirection.NEXT else -1
    anchor_day = as_date(anchor)
    mode = ViewMode(mode)
    if mode is ViewMode.MONTH:
        return add_months(anchor_day, step)
    if mode is ViewMode.WEEK:
        return anchor_day + timedelta(days=WEEK_LENGTH * step)
    return anchor_day + timedelta(days=step)

"""Date grids, event bucketing and view models shared by every calendar view."""

from .dates import add_months, format_long_date, header_text, is_same_day, start_of_week, weekday_sun0
from .grid import MONTH_GRID_SIZE, day_grid, grid_for, is_today, month_grid, navigate, today, week_grid
from .index import MONTH_CELL_LIMIT, DayBucket, bucket, events_for_day, overflow_label
from .view import CalendarView, build_view

__all__ = [
    "MONTH_CELL_LIMIT",
    "MONTH_GRID_SIZE",
    "CalendarView",
    "DayBucket",
    "add_months",
    "bucket",
    "build_view",
    "day_grid",
    "events_for_day",
    "format_long_date",
    "grid_for",
    "header_text",
    "is_same_day",
    "is_today",
    "month_grid",
    "navigate",
    "overflow_label",
    "start_of_week",
    "today",
    "week_grid",
    "weekday_sun0",
]

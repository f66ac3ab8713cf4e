from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Union

from ..domain import ViewMode

DateLike = Union[date, datetime]

# English names regardless of the process locale.
WEEKDAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
WEEKDAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def as_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def is_same_day(first: DateLike, second: DateLike) -> bool:
    """Compare two values by calendar date only, ignoring time of day."""

    return as_date(first) == as_date(second)


def weekday_sun0(day: DateLike) -> int:
    """Weekday number with Sunday as 0 and Saturday as 6."""

    return (as_date(day).weekday() + 1) % 7


def start_of_week(day: DateLike) -> date:
    value = as_date(day)
    return value - timedelta(days=weekday_sun0(value))


def add_months(day: DateLike, months: int) -> date:
    """Shift by whole calendar months, clamping the day to the target month's length."""

    value = as_date(day)
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(value.day, last_day))


def month_name(day: DateLike) -> str:
    return MONTH_NAMES[as_date(day).month - 1]


def format_long_date(day: DateLike) -> str:
    value = as_date(day)
    return f"{WEEKDAY_NAMES[weekday_sun0(value)]}, {month_name(value)} {value.day}, {value.year}"


def format_short(day: date) -> str:
    return f"{month_name(day)[:3]} {day.day}"


def header_text(anchor: DateLike, mode: ViewMode) -> str:
    value = as_date(anchor)
    if mode is ViewMode.MONTH:
        return f"{month_name(value)} {value.year}"
    if mode is ViewMode.WEEK:
        week_start = start_of_week(value)
        week_end = week_start + timedelta(days=6)
        return f"{format_short(week_start)} - {month_name(week_end)} {week_end.day}, {week_end.year}"
    return format_long_date(value)

from datetime import date, timedelta

import pytest

from calgrid.core import (
    MONTH_GRID_SIZE,
    add_months,
    day_grid,
    grid_for,
    is_today,
    month_grid,
    navigate,
    week_grid,
    weekday_sun0,
)
from calgrid.domain import NavDirection, ViewMode


def test_month_grid_for_march_2024(today):
    cells = month_grid(date(2024, 3, 15), current=today)

    assert len(cells) == MONTH_GRID_SIZE
    assert cells[0].day == date(2024, 2, 25)
    assert cells[-1].day == date(2024, 4, 6)
    assert not cells[0].is_current_period
    assert cells[5].day == date(2024, 3, 1)
    assert cells[5].is_current_period
    assert [cell.day for cell in cells if cell.is_today] == [date(2024, 3, 15)]


@pytest.mark.parametrize(
    "anchor",
    [date(2024, 2, 10), date(2023, 9, 1), date(2026, 2, 1), date(2024, 12, 31), date(2025, 6, 30)],
)
def test_month_grid_is_six_consecutive_weeks_from_sunday(anchor):
    cells = month_grid(anchor, current=date(2000, 1, 1))

    assert len(cells) == 42
    assert weekday_sun0(cells[0].day) == 0
    for previous, following in zip(cells, cells[1:]):
        assert following.day - previous.day == timedelta(days=1)
    in_month = [cell.day for cell in cells if cell.is_current_period]
    assert in_month[0] == anchor.replace(day=1)
    assert all(day.month == anchor.month for day in in_month)


def test_month_starting_on_sunday_has_no_leading_days():
    cells = month_grid(date(2026, 2, 14), current=date(2026, 2, 14))

    assert cells[0].day == date(2026, 2, 1)
    assert cells[0].is_current_period


def test_week_grid_contains_anchor():
    anchor = date(2024, 3, 13)
    cells = week_grid(anchor, current=anchor)

    assert [cell.day for cell in cells] == [date(2024, 3, 10) + timedelta(days=i) for i in range(7)]
    assert all(cell.is_current_period for cell in cells)
    assert sum(cell.is_today for cell in cells) == 1


def test_week_grid_on_saturday_starts_previous_sunday():
    cells = week_grid(date(2024, 3, 16), current=date(2024, 3, 16))

    assert cells[0].day == date(2024, 3, 10)
    assert cells[-1].day == date(2024, 3, 16)


def test_day_grid_is_single_anchor_cell(today):
    cells = day_grid(date(2024, 3, 20), current=today)

    assert len(cells) == 1
    assert cells[0].day == date(2024, 3, 20)
    assert not cells[0].is_today


def test_grid_for_dispatches_by_mode(today):
    assert len(grid_for(ViewMode.MONTH, today, current=today)) == 42
    assert len(grid_for(ViewMode.WEEK, today, current=today)) == 7
    assert len(grid_for("day", today, current=today)) == 1


def test_is_today_compares_dates_only(today):
    assert is_today(today, current=today)
    assert not is_today(today + timedelta(days=1), current=today)


@pytest.mark.parametrize(
    "mode, expected_next",
    [
        (ViewMode.MONTH, date(2024, 4, 15)),
        (ViewMode.WEEK, date(2024, 3, 22)),
        (ViewMode.DAY, date(2024, 3, 16)),
    ],
)
def test_navigate_forward_and_back(mode, expected_next):
    anchor = date(2024, 3, 15)

    forward = navigate(anchor, mode, NavDirection.NEXT)

    assert forward == expected_next
    assert navigate(forward, mode, NavDirection.PREV) == anchor


def test_navigate_month_clamps_to_shorter_month():
    assert navigate(date(2024, 1, 31), ViewMode.MONTH, NavDirection.NEXT) == date(2024, 2, 29)
    assert navigate(date(2023, 3, 31), ViewMode.MONTH, NavDirection.PREV) == date(2023, 2, 28)


def test_add_months_crosses_year_boundaries():
    assert add_months(date(2024, 12, 5), 1) == date(2025, 1, 5)
    assert add_months(date(2024, 1, 5), -1) == date(2023, 12, 5)
    assert add_months(date(2024, 5, 31), 13) == date(2025, 6, 30)

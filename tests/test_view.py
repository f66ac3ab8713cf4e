from datetime import date

from calgrid.core import build_view
from calgrid.domain import ViewMode


def test_month_view_shape(make_event, today):
    view = build_view(ViewMode.MONTH, today, [make_event(today)], current=today)

    assert view.title == "March 2024"
    assert len(view.buckets) == 42
    assert len(view.weeks()) == 6
    assert all(len(week) == 7 for week in view.weeks())
    assert view.days[0] == date(2024, 2, 25)


def test_month_view_respects_custom_limit(make_event, today):
    events = [make_event(today) for _ in range(4)]

    view = build_view(ViewMode.MONTH, today, events, current=today, month_limit=2)
    entry = next(entry for entry in view.buckets if entry.cell.is_today)

    assert len(entry.visible) == 2
    assert entry.overflow_label == "+2 more"


def test_week_view_does_not_truncate(make_event, today):
    events = [make_event(today) for _ in range(5)]

    view = build_view(ViewMode.WEEK, today, events, current=today)
    entry = next(entry for entry in view.buckets if entry.cell.day == today)

    assert len(view.buckets) == 7
    assert len(entry.visible) == 5
    assert entry.overflow == 0


def test_day_view_sorts_by_start_time(make_event, today):
    events = [make_event(today, "14:00", title="Review"), make_event(today, "08:30", title="Gym")]

    view = build_view(ViewMode.DAY, today, events, current=today)

    assert view.title == "Friday, March 15, 2024"
    assert [event.title for event in view.buckets[0].events] == ["Gym", "Review"]
    assert view.buckets[0].cell.is_today


def test_day_view_empty(today):
    view = build_view(ViewMode.DAY, today, [], current=today)

    assert view.buckets[0].events == []

from datetime import date

from calgrid.core import MONTH_CELL_LIMIT, bucket, events_for_day, month_grid, overflow_label


def test_events_for_day_keeps_insertion_order(make_event):
    day = date(2024, 3, 15)
    late = make_event(day, "15:00", title="Late")
    other = make_event(date(2024, 3, 16), "08:00")
    early = make_event(day, "09:00", title="Early")

    assert [event.title for event in events_for_day([late, other, early], day)] == ["Late", "Early"]


def test_events_for_day_sorted_by_start_time(make_event):
    day = date(2024, 3, 15)
    lunch = make_event(day, "12:00", title="Lunch")
    standup = make_event(day, "09:00", title="Standup")

    ordered = events_for_day([lunch, standup], day, sort_by_start=True)

    assert [event.title for event in ordered] == ["Standup", "Lunch"]


def test_events_for_day_with_no_matches(make_event):
    assert events_for_day([make_event(date(2024, 3, 1))], date(2024, 3, 2)) == []


def test_month_bucket_shows_three_and_counts_the_rest(make_event, today):
    events = [make_event(today, f"{hour:02d}:00") for hour in range(8, 13)]

    buckets = bucket(events, month_grid(today, current=today), limit=MONTH_CELL_LIMIT)
    entry = next(entry for entry in buckets if entry.cell.day == today)

    assert entry.total == 5
    assert entry.visible == events[:3]
    assert entry.overflow == 2
    assert entry.overflow_label == "+2 more"


def test_bucket_without_limit_shows_everything(make_event, today):
    events = [make_event(today) for _ in range(5)]

    entry = bucket(events, month_grid(today, current=today))[19]

    assert entry.cell.day == today
    assert len(entry.visible) == 5
    assert entry.overflow_label == ""


def test_overflow_label():
    assert overflow_label(0) == ""
    assert overflow_label(4) == "+4 more"

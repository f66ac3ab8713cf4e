"""Domain models for the calendar views."""

from __future__ import annotations

from .models import CalendarCell, CalendarEvent, EventDraft, UserRecord
from .enums import ChangeKind, MutationStatus, NavDirection, ViewMode

__all__ = [
    "CalendarCell",
    "CalendarEvent",
    "ChangeKind",
    "EventDraft",
    "MutationStatus",
    "NavDirection",
    "UserRecord",
    "ViewMode",
]

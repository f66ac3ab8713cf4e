from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Any, Dict, Optional

DEFAULT_COLOR = "#3B82F6"
DEFAULT_START_TIME = "09:00"
DEFAULT_END_TIME = "10:00"


def _parse_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value[:10])
    raise ValueError(f"Unsupported date value: {value!r}")


def _split_stamp(value: Any) -> tuple[date, str]:
    """Split a ``YYYY-MM-DDTHH:MM`` wire stamp into its date and wall-clock time."""

    if isinstance(value, datetime):
        return value.date(), value.strftime("%H:%M")
    if not isinstance(value, str) or not value:
        raise ValueError(f"Unsupported timestamp value: {value!r}")
    day_part, _, time_part = value.partition("T")
    return _parse_date(day_part), (time_part[:5] or "00:00")


def join_stamp(day: date, wall_time: str) -> str:
    return f"{day.isoformat()}T{wall_time}"


@dataclass(slots=True)
class EventDraft:
    """Every editable field of an event; what the event dialog submits."""

    title: str
    date: date
    start_time: str = DEFAULT_START_TIME
    end_time: str = DEFAULT_END_TIME
    description: str = ""
    location: Optional[str] = None
    color: str = DEFAULT_COLOR

    @property
    def has_title(self) -> bool:
        return bool(self.title.strip())


@dataclass(slots=True)
class CalendarEvent:
    id: str
    title: str
    date: date
    start_time: str = DEFAULT_START_TIME
    end_time: str = DEFAULT_END_TIME
    description: str = ""
    location: Optional[str] = None
    color: str = DEFAULT_COLOR

    @classmethod
    def from_draft(cls, event_id: str, draft: EventDraft) -> "CalendarEvent":
        return cls(
            id=event_id,
            title=draft.title,
            date=draft.date,
            start_time=draft.start_time,
            end_time=draft.end_time,
            description=draft.description,
            location=draft.location,
            color=draft.color,
        )

    def with_draft(self, draft: EventDraft) -> "CalendarEvent":
        return CalendarEvent.from_draft(self.id, draft)

    def copy(self) -> "CalendarEvent":
        return replace(self)

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "CalendarEvent":
        start_day, start_time = _split_stamp(record["start"])
        end_time = start_time
        if record.get("end"):
            _, end_time = _split_stamp(record["end"])
        return cls(
            id=str(record["id"]),
            title=str(record.get("title") or ""),
            date=start_day,
            start_time=start_time,
            end_time=end_time,
            description=record.get("description") or "",
            location=record.get("location"),
            color=record.get("color") or DEFAULT_COLOR,
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "start": join_stamp(self.date, self.start_time),
            "end": join_stamp(self.date, self.end_time),
            "allDay": False,
            "location": self.location,
            "color": self.color,
        }


@dataclass(frozen=True, slots=True)
class CalendarCell:
    day: date
    is_current_period: bool = True
    is_today: bool = False


@dataclass(slots=True)
class UserRecord:
    id: str
    username: str
    password_hash: str
    created_at: Optional[datetime] = None

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "UserRecord":
        created = record.get("created_at")
        return cls(
            id=str(record["id"]),
            username=str(record["username"]),
            password_hash=str(record["password_hash"]),
            created_at=datetime.fromisoformat(created) if created else None,
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "username": self.username,
            "password_hash": self.password_hash,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

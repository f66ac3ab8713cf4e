from __future__ import annotations

from enum import Enum


class ViewMode(str, Enum):
    MONTH = "month"
    WEEK = "week"
    DAY = "day"


class NavDirection(str, Enum):
    PREV = "prev"
    NEXT = "next"


class MutationStatus(str, Enum):
    APPLIED = "applied"
    PENDING = "pending"
    REJECTED = "rejected"
    NOT_FOUND = "not_found"


class ChangeKind(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"

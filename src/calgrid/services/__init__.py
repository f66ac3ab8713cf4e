"""Application services orchestrating data access and calendar state."""

from __future__ import annotations

from .auth import AuthError, AuthService, InvalidCredentialsError, InvalidTokenError, UsernameTakenError
from .calendar import CalendarService, CalendarState, MutationResult, PendingChange, sample_events
from .context import ServiceContext
from .events import EventConflictError, EventNotFoundError, EventService
from .sync import CalendarSync

__all__ = [
    "AuthError",
    "AuthService",
    "CalendarService",
    "CalendarState",
    "CalendarSync",
    "EventConflictError",
    "EventNotFoundError",
    "EventService",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "MutationResult",
    "PendingChange",
    "ServiceContext",
    "UsernameTakenError",
    "sample_events",
]

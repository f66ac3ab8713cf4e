"""FastAPI dependencies for identity and shared services."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from fastapi import Depends, Header, Request, status

from ..auth import AuthError, AuthNotConfiguredError, AuthService
from ..context import ServiceContext
from ..events import EventService


class ApiError(Exception):
    """Turned into a ``{"message": ...}`` JSON response by the app's exception handler."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


@dataclass(slots=True)
class BackendState:
    context: ServiceContext
    auth: AuthService = field(init=False)
    events: EventService = field(init=False)

    def __post_init__(self) -> None:
        self.auth = AuthService(self.context)
        self.events = EventService(self.context)


def get_backend(request: Request) -> BackendState:
    return request.app.state.backend


async def require_identity(
    authorization: Optional[str] = Header(default=None),
    backend: BackendState = Depends(get_backend),
) -> str:
    """Resolve the bearer token in the Authorization header to an identity id.

    Raises:
        ApiError: 401 if the token is missing or cannot be decoded
    """
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise ApiError(status.HTTP_401_UNAUTHORIZED, "missing bearer token")
    try:
        return backend.auth.identity_from_token(token.strip())
    except AuthNotConfiguredError as exc:
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc)) from exc
    except AuthError as exc:
        raise ApiError(status.HTTP_401_UNAUTHORIZED, str(exc)) from exc

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import httpx

from ..domain import CalendarEvent

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"
GENERIC_FAILURE = "Something went wrong while talking to the calendar server."


class EventStoreError(RuntimeError):
    """A request to the calendar server failed; ``detail`` holds the server's message."""

    def __init__(self, message: str = GENERIC_FAILURE, *, status_code: Optional[int] = None, detail: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class NotSignedInError(EventStoreError):
    """Raised when an event request is attempted before signing in."""


@dataclass
class EventStoreClient:
    """HTTP client for the calendar server's auth and event endpoints."""

    base_url: str
    http: Optional[httpx.Client] = None
    token: Optional[str] = None
    timeout: float = 10.0
    _owns_http: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        if self.http is None:
            self.http = httpx.Client(base_url=self.base_url, timeout=self.timeout)
            self._owns_http = True

    # ------------------------------------------------------------------ plumbing

    def _headers(self, *, authenticated: bool) -> Dict[str, str]:
        if not authenticated:
            return {}
        if not self.token:
            raise NotSignedInError("Sign in before syncing events.")
        return {"Authorization": f"Bearer {self.token}"}

    def _request(self, method: str, path: str, *, authenticated: bool = True, json: Any = None) -> Dict[str, Any]:
        headers = self._headers(authenticated=authenticated)
        try:
            response = self.http.request(method, f"{API_PREFIX}{path}", json=json, headers=headers)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise EventStoreError(detail=str(exc)) from exc

        try:
            body = response.json()
        except ValueError:
            body = {"message": response.text}

        if response.is_error:
            detail = body.get("message") if isinstance(body, dict) else str(body)
            logger.warning("%s %s returned %s: %s", method, path, response.status_code, detail)
            raise EventStoreError(status_code=response.status_code, detail=detail or "")
        return body if isinstance(body, dict) else {"message": body}

    def close(self) -> None:
        if self._owns_http and self.http is not None:
            self.http.close()

    @property
    def is_signed_in(self) -> bool:
        return bool(self.token)

    # ------------------------------------------------------------------ auth

    def sign_up(self, username: str, password: str) -> str:
        body = self._request(
            "POST", "/signup", authenticated=False, json={"username": username, "password": password}
        )
        return body.get("message", "")

    def sign_in(self, username: str, password: str) -> str:
        body = self._request(
            "POST", "/signin", authenticated=False, json={"username": username, "password": password}
        )
        token = body.get("token")
        if not token:
            raise EventStoreError(detail="Server did not return a token.")
        self.token = token
        return token

    def sign_out(self) -> None:
        self.token = None

    # ------------------------------------------------------------------ events

    def list_events(self) -> List[CalendarEvent]:
        body = self._request("GET", "/events")
        events: list[CalendarEvent] = []
        for record in body.get("events") or []:
            try:
                events.append(CalendarEvent.from_record(record))
            except (KeyError, ValueError) as exc:
                logger.warning("Skipping malformed event record %r: %s", record.get("id"), exc)
        return events

    def add_event(self, event: CalendarEvent) -> str:
        return self._request("POST", "/event", json=event.to_record()).get("message", "")

    def update_event(self, event: CalendarEvent) -> str:
        return self._request("PUT", f"/event/{event.id}", json=event.to_record()).get("message", "")

    def delete_event(self, event_id: str) -> str:
        return self._request("DELETE", f"/event/{event_id}").get("message", "")

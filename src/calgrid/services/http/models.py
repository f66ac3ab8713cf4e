"""Pydantic request and response bodies for the HTTP API."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Credentials(BaseModel):
    username: str
    password: str


class EventBody(BaseModel):
    """Event fields as sent by clients. Every field is optional and stored as given."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None
    all_day: Optional[bool] = Field(default=None, alias="allDay")
    location: Optional[str] = None
    color: Optional[str] = None

    def fields(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)


class MessageResponse(BaseModel):
    message: str


class TokenResponse(MessageResponse):
    token: str


class EventsResponse(BaseModel):
    events: List[Dict[str, Any]] = []


class HealthResponse(BaseModel):
    status: str
    version: str

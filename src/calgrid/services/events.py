from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List
from uuid import uuid4

from .context import ServiceContext

logger = logging.getLogger(__name__)


class EventNotFoundError(LookupError):
    pass


class EventConflictError(ValueError):
    """Raised when an event id is already stored."""


@dataclass(slots=True)
class EventService:
    """Server-side event persistence. Fields are stored as sent; nothing is validated."""

    context: ServiceContext

    def list_events(self, owner_id: str) -> List[Dict[str, Any]]:
        return self.context.events.list_for_owner(owner_id)

    def add_event(self, owner_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        event_id = str(fields.get("id") or uuid4().hex)
        saved = self.context.events.insert(event_id, owner_id, fields)
        if saved is None:
            raise EventConflictError(event_id)
        logger.info("Stored event %s for %s", event_id, owner_id)
        return saved

    def update_event(self, event_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        updated = self.context.events.update(event_id, fields)
        if updated is None:
            raise EventNotFoundError(event_id)
        logger.info("Updated event %s", event_id)
        return updated

    def delete_event(self, event_id: str) -> None:
        if not self.context.events.delete(event_id):
            raise EventNotFoundError(event_id)
        logger.info("Deleted event %s", event_id)

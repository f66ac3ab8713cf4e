from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..documents import JsonDocumentStore

# Event documents keep the wire shape (title, description, start, end, allDay, ...)
# plus the owning identity in ``created_by``.
EVENT_FIELDS = ("title", "description", "start", "end", "allDay", "location", "color")


@dataclass(slots=True)
class EventRepository:
    store: JsonDocumentStore
    collection: str = "events"

    def list_for_owner(self, owner_id: str) -> List[Dict[str, Any]]:
        return self.store.find(self.collection, created_by=owner_id)

    def insert(self, event_id: str, owner_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        document = {key: fields.get(key) for key in EVENT_FIELDS}
        document["id"] = event_id
        document["created_by"] = owner_id
        return self.store.insert_unique(self.collection, document, key="id")

    def update(self, event_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        changes = {key: fields.get(key) for key in EVENT_FIELDS if key in fields}
        return self.store.update(self.collection, event_id, changes)

    def delete(self, event_id: str) -> bool:
        return self.store.delete(self.collection, event_id)

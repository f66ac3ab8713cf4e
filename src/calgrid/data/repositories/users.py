from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ...domain import UserRecord
from ..documents import JsonDocumentStore


@dataclass(slots=True)
class UserRepository:
    store: JsonDocumentStore
    collection: str = "users"

    def fetch_by_username(self, username: str) -> Optional[UserRecord]:
        record = self.store.find_one(self.collection, username=username)
        return UserRecord.from_record(record) if record else None

    def insert(self, user: UserRecord) -> Optional[UserRecord]:
        """Store a new user; None when the username is already registered."""
        record = self.store.insert_unique(self.collection, user.to_record(), key="username")
        return UserRecord.from_record(record) if record else None

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..config import AppSettings, get_settings
from ..data import JsonDocumentStore
from ..data.repositories import EventRepository, UserRepository


@dataclass(slots=True)
class ServiceContext:
    """Aggregate root for backend services to share settings, the store and repositories."""

    settings: AppSettings = field(default_factory=get_settings)
    store: Optional[JsonDocumentStore] = None
    users: UserRepository = field(init=False)
    events: EventRepository = field(init=False)

    def __post_init__(self) -> None:
        if self.store is None:
            self.settings.storage.ensure_data_dir()
            self.store = JsonDocumentStore(self.settings.storage.documents_file)
        self.users = UserRepository(store=self.store)
        self.events = EventRepository(store=self.store)

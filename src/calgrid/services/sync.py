from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from ..data import EventStoreClient, EventStoreError
from ..domain import CalendarEvent, ChangeKind
from .calendar import CalendarService, PendingChange

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CalendarSync:
    """Pushes pending local changes to the event store and reconciles the outcome.

    :meth:`send` only talks to the network and is safe to run on a worker
    thread; :meth:`settle` touches the calendar state and belongs on the UI
    thread.
    """

    calendar: CalendarService
    client: EventStoreClient

    def fetch(self) -> List[CalendarEvent]:
        return self.client.list_events()

    def send(self, change: PendingChange) -> str:
        if change.kind is ChangeKind.CREATE:
            return self.client.add_event(change.event)
        if change.kind is ChangeKind.UPDATE:
            return self.client.update_event(change.event)
        return self.client.delete_event(change.event_id)

    def settle(self, change: PendingChange, error: Optional[Exception] = None) -> bool:
        if error is None:
            self.calendar.confirm(change.change_id)
            return True
        logger.warning("Event store rejected %s of %s: %s", change.kind.value, change.event_id, error)
        self.calendar.rollback(change.change_id)
        return False

    def push(self, change: PendingChange) -> bool:
        try:
            self.send(change)
        except EventStoreError as exc:
            return self.settle(change, exc)
        return self.settle(change)

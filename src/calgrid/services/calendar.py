from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import date, timedelta
from typing import Callable, Dict, Iterable, List, Optional
from uuid import uuid4

from ..core import CalendarView, build_view, navigate
from ..core import today as real_today
from ..core.index import MONTH_CELL_LIMIT
from ..domain import CalendarEvent, ChangeKind, EventDraft, MutationStatus, NavDirection, ViewMode

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CalendarState:
    """The whole UI model: where the user is looking and what is loaded."""

    anchor: date
    mode: ViewMode = ViewMode.MONTH
    selected_day: Optional[date] = None
    events: List[CalendarEvent] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.selected_day is None:
            self.selected_day = self.anchor


@dataclass(frozen=True, slots=True)
class PendingChange:
    """A local mutation that the event store has not acknowledged yet."""

    change_id: str
    kind: ChangeKind
    event_id: str
    event: Optional[CalendarEvent]
    previous: Optional[CalendarEvent] = None
    position: Optional[int] = None


@dataclass(frozen=True, slots=True)
class MutationResult:
    status: MutationStatus
    event: Optional[CalendarEvent] = None
    change: Optional[PendingChange] = None

    @property
    def accepted(self) -> bool:
        return self.status in (MutationStatus.APPLIED, MutationStatus.PENDING)


def sample_events(anchor: date) -> List[CalendarEvent]:
    """The two events a fresh offline session starts with."""

    return [
        CalendarEvent(
            id="1",
            title="Team Meeting",
            description="Weekly team sync to discuss project progress",
            date=anchor,
            start_time="09:00",
            end_time="10:00",
            location="Conference Room A",
            color="#3B82F6",
        ),
        CalendarEvent(
            id="2",
            title="Lunch with Client",
            date=anchor + timedelta(days=1),
            start_time="12:00",
            end_time="13:30",
            location="Downtown Restaurant",
            color="#10B981",
        ),
    ]


class CalendarService:
    """Owns the calendar state and is the only place that changes it.

    Mutations update the local collection immediately. When ``track_pending`` is
    set every accepted mutation is also recorded as a :class:`PendingChange`
    that must later be confirmed or rolled back once the event store answers.
    """

    def __init__(
        self,
        state: Optional[CalendarState] = None,
        *,
        track_pending: bool = False,
        today: Callable[[], date] = real_today,
        month_limit: int = MONTH_CELL_LIMIT,
    ) -> None:
        self._today = today
        self.state = state or CalendarState(anchor=today())
        self.track_pending = track_pending
        self.month_limit = month_limit
        self.pending: Dict[str, PendingChange] = {}
        self._latest: Dict[str, str] = {}

    # ------------------------------------------------------------------ queries

    @property
    def events(self) -> List[CalendarEvent]:
        return list(self.state.events)

    def find(self, event_id: str) -> Optional[CalendarEvent]:
        index = self._index_of(event_id)
        return self.state.events[index] if index is not None else None

    def view(self) -> CalendarView:
        return build_view(
            self.state.mode,
            self.state.anchor,
            self.state.events,
            current=self._today(),
            month_limit=self.month_limit,
        )

    # ------------------------------------------------------------------ navigation

    def navigate(self, direction: NavDirection) -> date:
        self.state.anchor = navigate(self.state.anchor, self.state.mode, direction)
        return self.state.anchor

    def go_to_today(self) -> date:
        self.state.anchor = self._today()
        return self.state.anchor

    def set_view_mode(self, mode: ViewMode) -> None:
        self.state.mode = ViewMode(mode)

    def select_day(self, day: date) -> None:
        """Focus a single day, switching to the day view."""

        self.state.selected_day = day
        self.state.anchor = day
        self.state.mode = ViewMode.DAY

    def load(self, events: Iterable[CalendarEvent]) -> None:
        """Replace the collection, keeping local changes the store has not answered yet."""

        self.state.events = list(events)
        for change in self.pending.values():
            self._reapply(change)
        logger.debug("Loaded %d events", len(self.state.events))

    # ------------------------------------------------------------------ mutations

    def create_event(self, draft: EventDraft) -> MutationResult:
        if not draft.has_title:
            return MutationResult(status=MutationStatus.REJECTED)
        event = CalendarEvent.from_draft(uuid4().hex, draft)
        self.state.events.append(event)
        logger.info("Created event %s on %s", event.id, event.date)
        return self._record(ChangeKind.CREATE, event)

    def update_event(self, event_id: str, draft: EventDraft) -> MutationResult:
        index = self._index_of(event_id)
        if index is None:
            logger.info("Update skipped, no event %s", event_id)
            return MutationResult(status=MutationStatus.NOT_FOUND)
        previous = self.state.events[index]
        updated = previous.with_draft(draft)
        self.state.events[index] = updated
        logger.info("Updated event %s", event_id)
        return self._record(ChangeKind.UPDATE, updated, previous=previous.copy(), position=index)

    def delete_event(self, event_id: str) -> MutationResult:
        index = self._index_of(event_id)
        if index is None:
            logger.info("Delete skipped, no event %s", event_id)
            return MutationResult(status=MutationStatus.NOT_FOUND)
        removed = self.state.events.pop(index)
        logger.info("Deleted event %s", event_id)
        return self._record(ChangeKind.DELETE, None, previous=removed, position=index, event_id=event_id)

    # ------------------------------------------------------------------ reconciliation

    def confirm(self, change_id: str) -> bool:
        return self.pending.pop(change_id, None) is not None

    def rollback(self, change_id: str) -> bool:
        change = self.pending.pop(change_id, None)
        if change is None:
            return False
        index = self._index_of(change.event_id)
        if change.kind is ChangeKind.CREATE:
            if index is not None:
                del self.state.events[index]
        elif change.kind is ChangeKind.UPDATE:
            if index is not None and self._latest.get(change.event_id) == change.change_id:
                self.state.events[index] = change.previous
                self._retreat_latest(change.event_id)
            else:
                # A later change superseded this one; it now undoes to our starting point.
                self._rebase(change)
        elif change.previous is not None and index is None:
            position = min(change.position or 0, len(self.state.events))
            self.state.events.insert(position, change.previous)
        logger.warning("Rolled back %s of event %s", change.kind.value, change.event_id)
        return True

    # ------------------------------------------------------------------ helpers

    def _reapply(self, change: PendingChange) -> None:
        index = self._index_of(change.event_id)
        if change.kind is ChangeKind.DELETE:
            if index is not None:
                del self.state.events[index]
        elif index is None:
            if change.kind is ChangeKind.CREATE:
                self.state.events.append(change.event.copy())
        else:
            self.state.events[index] = change.event.copy()

    def _retreat_latest(self, event_id: str) -> None:
        earlier = [change.change_id for change in self.pending.values() if change.event_id == event_id]
        if earlier:
            self._latest[event_id] = earlier[-1]
        else:
            self._latest.pop(event_id, None)

    def _rebase(self, undone: PendingChange) -> None:
        for change_id, change in list(self.pending.items()):
            if change.event_id == undone.event_id and change.previous == undone.event:
                self.pending[change_id] = replace(change, previous=undone.previous)
                break

    def _index_of(self, event_id: str) -> Optional[int]:
        for index, event in enumerate(self.state.events):
            if event.id == event_id:
                return index
        return None

    def _record(
        self,
        kind: ChangeKind,
        event: Optional[CalendarEvent],
        *,
        previous: Optional[CalendarEvent] = None,
        position: Optional[int] = None,
        event_id: Optional[str] = None,
    ) -> MutationResult:
        if not self.track_pending:
            return MutationResult(status=MutationStatus.APPLIED, event=event)
        change = PendingChange(
            change_id=uuid4().hex,
            kind=kind,
            event_id=event_id or event.id,
            event=event.copy() if event else None,
            previous=previous,
            position=position,
        )
        self.pending[change.change_id] = change
        self._latest[change.event_id] = change.change_id
        return MutationResult(status=MutationStatus.PENDING, event=event, change=change)

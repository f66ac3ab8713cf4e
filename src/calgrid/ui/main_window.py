from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from PyQt6.QtWidgets import QMainWindow, QMessageBox, QVBoxLayout, QWidget

from ..config.settings import AppSettings
from ..data import EventStoreError
from ..domain import CalendarEvent, MutationStatus, NavDirection, ViewMode
from ..services import CalendarService, CalendarSync, MutationResult
from ..utils.qt import TaskRunner
from .components.calendar_panel import CalendarPanel
from .components.event_dialog import EventDialog
from .components.header import CalendarHeader

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(
        self,
        *,
        calendar: CalendarService,
        settings: AppSettings,
        sync: Optional[CalendarSync] = None,
    ) -> None:
        super().__init__()
        self.calendar = calendar
        self.sync = sync
        self.settings = settings
        self.runner = TaskRunner()

        self.setWindowTitle(settings.ui.app_name)
        self.resize(1200, 820)

        self.header = CalendarHeader()
        self.calendar_panel = CalendarPanel()

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.addWidget(self.header)
        layout.addWidget(self.calendar_panel, stretch=1)
        self.setCentralWidget(central)

        self.header.navigate_requested.connect(self.navigate)
        self.header.today_requested.connect(self.go_to_today)
        self.header.mode_changed.connect(self.set_view_mode)
        self.header.add_event_requested.connect(self.create_event)
        self.calendar_panel.day_clicked.connect(self.select_day)
        self.calendar_panel.event_clicked.connect(self.edit_event)

        self.refresh()
        if self.sync is not None:
            self.load_remote_events()

    # ------------------------------------------------------------------ rendering

    def refresh(self) -> None:
        view = self.calendar.view()
        self.header.set_title(view.title)
        self.header.set_mode(view.mode)
        self.calendar_panel.show_view(view)

    # ------------------------------------------------------------------ navigation

    def navigate(self, direction: str) -> None:
        self.calendar.navigate(NavDirection(direction))
        self.refresh()

    def go_to_today(self) -> None:
        self.calendar.go_to_today()
        self.refresh()

    def set_view_mode(self, mode: str) -> None:
        self.calendar.set_view_mode(ViewMode(mode))
        self.refresh()

    def select_day(self, day: date) -> None:
        self.calendar.select_day(day)
        self.refresh()

    # ------------------------------------------------------------------ data

    def load_remote_events(self) -> None:
        self.statusBar().showMessage("Loading events…")

        def done(events: List[CalendarEvent]) -> None:
            self.calendar.load(events)
            self.statusBar().showMessage(f"Loaded {len(events)} events.", 3000)
            self.refresh()

        self.runner.submit(self.sync.fetch, on_success=done, on_error=self._handle_error)

    # ------------------------------------------------------------------ actions

    def create_event(self) -> None:
        dialog = EventDialog(day=self.calendar.state.selected_day or self.calendar.state.anchor)
        if dialog.exec() != EventDialog.DialogCode.Accepted.value:
            return
        self._apply(self.calendar.create_event(dialog.values()))

    def edit_event(self, event: CalendarEvent) -> None:
        dialog = EventDialog(day=event.date, event=event)
        outcome = dialog.exec()
        if outcome == EventDialog.DELETE_CODE:
            self._apply(self.calendar.delete_event(event.id))
        elif outcome == EventDialog.DialogCode.Accepted.value:
            self._apply(self.calendar.update_event(event.id, dialog.values()))

    def _apply(self, result: MutationResult) -> None:
        if result.status is MutationStatus.REJECTED:
            return
        if result.status is MutationStatus.NOT_FOUND:
            self.statusBar().showMessage("That event no longer exists.", 4000)
            return
        self.refresh()
        change = result.change
        if change is None or self.sync is None:
            return

        def done(_message: str) -> None:
            self.sync.settle(change)
            self.statusBar().showMessage("Saved.", 2000)

        def failed(exc: Exception) -> None:
            self.sync.settle(change, exc)
            self.refresh()
            self._handle_error(exc)

        self.runner.submit(self.sync.send, change, on_success=done, on_error=failed)

    # ------------------------------------------------------------------ misc

    def _handle_error(self, exc: Exception) -> None:
        message = str(exc) if isinstance(exc, EventStoreError) else "Something went wrong."
        logger.warning("Calendar request failed: %s", exc)
        self.statusBar().showMessage(message, 5000)
        QMessageBox.critical(self, "Error", message)

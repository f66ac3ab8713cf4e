from __future__ import annotations

from datetime import date
from typing import Optional

from PyQt6.QtCore import QTime
from PyQt6.QtWidgets import (
    QButtonGroup,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QTextEdit,
    QTimeEdit,
    QVBoxLayout,
)

from ...config import EVENT_COLORS
from ...core import format_long_date
from ...domain import CalendarEvent, EventDraft
from ...domain.models import DEFAULT_COLOR, DEFAULT_END_TIME, DEFAULT_START_TIME

TIME_FORMAT = "HH:mm"


def _qtime(value: str) -> QTime:
    parsed = QTime.fromString(value, TIME_FORMAT)
    return parsed if parsed.isValid() else QTime(9, 0)


class EventDialog(QDialog):
    """Create or edit one event on a fixed day."""

    DELETE_CODE = 2

    def __init__(self, *, day: date, event: Optional[CalendarEvent] = None) -> None:
        super().__init__()
        self.day = event.date if event else day
        self.editing = event is not None
        self.setWindowTitle("Edit Event" if self.editing else "Add New Event")
        layout = QVBoxLayout(self)

        layout.addWidget(QLabel(format_long_date(self.day)))

        form = QFormLayout()
        self.title_input = QLineEdit(event.title if event else "")
        self.title_input.setPlaceholderText("Enter event title")
        form.addRow("Event Title *", self.title_input)

        self.description_input = QTextEdit(event.description if event else "")
        self.description_input.setPlaceholderText("Event description")
        form.addRow("Description", self.description_input)

        self.start_input = QTimeEdit(_qtime(event.start_time if event else DEFAULT_START_TIME))
        self.start_input.setDisplayFormat(TIME_FORMAT)
        form.addRow("Start Time", self.start_input)

        self.end_input = QTimeEdit(_qtime(event.end_time if event else DEFAULT_END_TIME))
        self.end_input.setDisplayFormat(TIME_FORMAT)
        form.addRow("End Time", self.end_input)

        self.location_input = QLineEdit((event.location or "") if event else "")
        self.location_input.setPlaceholderText("Event location")
        form.addRow("Location", self.location_input)

        self._color = event.color if event else DEFAULT_COLOR
        swatches = QHBoxLayout()
        self._swatch_group = QButtonGroup(self)
        for color in EVENT_COLORS:
            swatch = QPushButton("")
            swatch.setObjectName("colorSwatch")
            swatch.setCheckable(True)
            swatch.setChecked(color == self._color)
            swatch.setStyleSheet(f"background-color: {color};")
            swatch.clicked.connect(lambda _checked, value=color: self._set_color(value))
            self._swatch_group.addButton(swatch)
            swatches.addWidget(swatch)
        swatches.addStretch(1)
        form.addRow("Color", swatches)

        self.warning_label = QLabel("")
        self.warning_label.setObjectName("statusLabel")
        layout.addLayout(form)
        layout.addWidget(self.warning_label)

        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel)
        buttons.button(QDialogButtonBox.StandardButton.Ok).setText("Update Event" if self.editing else "Create Event")
        buttons.accepted.connect(self._submit)
        buttons.rejected.connect(self.reject)
        if self.editing:
            delete = buttons.addButton("Delete", QDialogButtonBox.ButtonRole.DestructiveRole)
            delete.setObjectName("secondaryButton")
            delete.clicked.connect(lambda: self.done(self.DELETE_CODE))
        layout.addWidget(buttons)

    def _submit(self) -> None:
        if not self.values().has_title:
            self.warning_label.setText("Event title is required.")
            self.title_input.setFocus()
            return
        self.accept()

    def _set_color(self, color: str) -> None:
        self._color = color

    def values(self) -> EventDraft:
        return EventDraft(
            title=self.title_input.text(),
            date=self.day,
            start_time=self.start_input.time().toString(TIME_FORMAT),
            end_time=self.end_input.time().toString(TIME_FORMAT),
            description=self.description_input.toPlainText(),
            location=self.location_input.text().strip() or None,
            color=self._color,
        )

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import QFrame, QLabel, QVBoxLayout

from ...domain import CalendarEvent

TINT_ALPHA = 0x33


def tint(color: str, alpha: int = TINT_ALPHA) -> str:
    """Stylesheet ``rgba()`` for ``color`` at ``alpha``."""
    value = QColor(color)
    return f"rgba({value.red()}, {value.green()}, {value.blue()}, {alpha})"


class EventCard(QFrame):
    clicked = pyqtSignal(object)

    def __init__(self, event: CalendarEvent, *, compact: bool = False, detailed: bool = False) -> None:
        super().__init__()
        self.setObjectName("eventCard")
        self.event = event
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setStyleSheet(
            f"QFrame#eventCard {{ background-color: {tint(event.color)}; border-left: 3px solid {event.color}; }}"
        )

        layout = QVBoxLayout(self)
        layout.setContentsMargins(6, 2, 6, 2)
        layout.setSpacing(0)

        title = QLabel(event.title)
        title.setStyleSheet("font-weight: 600; background: transparent;")
        layout.addWidget(title)

        times = QLabel(f"{event.start_time} - {event.end_time}")
        times.setStyleSheet("font-size: 11px; background: transparent;")
        layout.addWidget(times)

        if event.location and not compact:
            location = QLabel(event.location)
            location.setStyleSheet("font-size: 11px; background: transparent;")
            layout.addWidget(location)

        if event.description and detailed:
            description = QLabel(event.description)
            description.setWordWrap(True)
            description.setStyleSheet("font-size: 11px; background: transparent;")
            layout.addWidget(description)

        self.setToolTip(event.description or "")

    def mousePressEvent(self, event) -> None:  # noqa: N802
        self.clicked.emit(self.event)
        event.accept()

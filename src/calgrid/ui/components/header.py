from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QButtonGroup, QHBoxLayout, QLabel, QPushButton, QWidget

from ...domain import NavDirection, ViewMode


class CalendarHeader(QWidget):
    navigate_requested = pyqtSignal(str)
    today_requested = pyqtSignal()
    mode_changed = pyqtSignal(str)
    add_event_requested = pyqtSignal()

    def __init__(self) -> None:
        super().__init__()
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 8)
        layout.setSpacing(8)

        self.title_label = QLabel("")
        self.title_label.setObjectName("title")
        layout.addWidget(self.title_label)

        previous = QPushButton("<")
        previous.setObjectName("navButton")
        previous.clicked.connect(lambda: self.navigate_requested.emit(NavDirection.PREV.value))
        layout.addWidget(previous)

        following = QPushButton(">")
        following.setObjectName("navButton")
        following.clicked.connect(lambda: self.navigate_requested.emit(NavDirection.NEXT.value))
        layout.addWidget(following)

        layout.addStretch(1)

        today = QPushButton("Today")
        today.setObjectName("secondaryButton")
        today.clicked.connect(self.today_requested)
        layout.addWidget(today)

        self._mode_buttons: dict[ViewMode, QPushButton] = {}
        group = QButtonGroup(self)
        group.setExclusive(True)
        for mode in ViewMode:
            button = QPushButton(mode.value.capitalize())
            button.setObjectName("modeButton")
            button.setCheckable(True)
            button.clicked.connect(lambda _checked, value=mode.value: self.mode_changed.emit(value))
            group.addButton(button)
            layout.addWidget(button)
            self._mode_buttons[mode] = button

        add_event = QPushButton("Add Event")
        add_event.clicked.connect(self.add_event_requested)
        layout.addWidget(add_event)

    def set_title(self, text: str) -> None:
        self.title_label.setText(text)

    def set_mode(self, mode: ViewMode) -> None:
        self._mode_buttons[ViewMode(mode)].setChecked(True)

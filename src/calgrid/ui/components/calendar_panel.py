from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QFrame,
    QGridLayout,
    QLabel,
    QScrollArea,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from ...core import CalendarView, DayBucket, format_long_date, weekday_sun0
from ...core.dates import WEEKDAY_LABELS
from ...domain import ViewMode
from ...utils.qt import clear_layout
from .event_card import EventCard


class DayCell(QFrame):
    """One grid cell: the day number, its visible events and an overflow hint."""

    clicked = pyqtSignal(object)
    event_clicked = pyqtSignal(object)

    def __init__(self, entry: DayBucket, *, compact: bool, show_weekday: bool = False) -> None:
        super().__init__()
        self.setObjectName("dayCell")
        self.day = entry.cell.day
        self.setProperty("outside", "false" if entry.cell.is_current_period else "true")
        self.setProperty("today", "true" if entry.cell.is_today else "false")
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setMinimumHeight(96 if compact else 240)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(2)

        label = f"{WEEKDAY_LABELS[weekday_sun0(self.day)]} {self.day.day}" if show_weekday else str(self.day.day)
        number = QLabel(label)
        number.setStyleSheet("font-weight: 700;" if entry.cell.is_today else "")
        layout.addWidget(number)

        for event in entry.visible:
            card = EventCard(event, compact=compact)
            card.clicked.connect(self.event_clicked)
            layout.addWidget(card)

        if entry.overflow_label:
            more = QLabel(entry.overflow_label)
            more.setObjectName("overflowLabel")
            layout.addWidget(more)

        layout.addStretch(1)

    def mousePressEvent(self, event) -> None:  # noqa: N802
        self.clicked.emit(self.day)
        event.accept()


class _GridView(QWidget):
    day_clicked = pyqtSignal(object)
    event_clicked = pyqtSignal(object)

    def __init__(self, *, compact: bool, show_weekday_row: bool) -> None:
        super().__init__()
        self.compact = compact
        self.show_weekday_row = show_weekday_row
        self.grid = QGridLayout(self)
        self.grid.setSpacing(0)
        self.grid.setContentsMargins(0, 0, 0, 0)

    def show_view(self, view: CalendarView) -> None:
        clear_layout(self.grid)
        row_offset = 0
        if self.show_weekday_row:
            for column, name in enumerate(WEEKDAY_LABELS):
                label = QLabel(name)
                label.setObjectName("weekdayLabel")
                label.setAlignment(Qt.AlignmentFlag.AlignCenter)
                self.grid.addWidget(label, 0, column)
            row_offset = 1
        for row, week in enumerate(view.weeks()):
            for column, entry in enumerate(week):
                cell = DayCell(entry, compact=self.compact, show_weekday=not self.show_weekday_row)
                cell.clicked.connect(self.day_clicked)
                cell.event_clicked.connect(self.event_clicked)
                self.grid.addWidget(cell, row + row_offset, column)


class MonthView(_GridView):
    def __init__(self) -> None:
        super().__init__(compact=True, show_weekday_row=True)


class WeekView(_GridView):
    def __init__(self) -> None:
        super().__init__(compact=False, show_weekday_row=False)


class DayView(QWidget):
    event_clicked = pyqtSignal(object)

    def __init__(self) -> None:
        super().__init__()
        layout = QVBoxLayout(self)
        self.date_label = QLabel("")
        self.date_label.setStyleSheet("font-size: 16px; font-weight: 600;")
        layout.addWidget(self.date_label)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        container = QWidget()
        self.list_layout = QVBoxLayout(container)
        self.list_layout.setSpacing(8)
        scroll.setWidget(container)
        layout.addWidget(scroll, stretch=1)

    def show_view(self, view: CalendarView) -> None:
        self.date_label.setText(format_long_date(view.anchor))
        clear_layout(self.list_layout)
        entry = view.buckets[0]
        if not entry.events:
            empty = QLabel("No events scheduled for this day")
            empty.setObjectName("emptyLabel")
            empty.setAlignment(Qt.AlignmentFlag.AlignCenter)
            self.list_layout.addWidget(empty)
        for event in entry.events:
            card = EventCard(event, detailed=True)
            card.clicked.connect(self.event_clicked)
            self.list_layout.addWidget(card)
        self.list_layout.addStretch(1)


class CalendarPanel(QStackedWidget):
    """Hosts the three views and shows the one matching the view model's mode."""

    day_clicked = pyqtSignal(object)
    event_clicked = pyqtSignal(object)

    def __init__(self) -> None:
        super().__init__()
        self.setObjectName("calendarPanel")
        self.month_view = MonthView()
        self.week_view = WeekView()
        self.day_view = DayView()
        self._pages = {
            ViewMode.MONTH: self.month_view,
            ViewMode.WEEK: self.week_view,
            ViewMode.DAY: self.day_view,
        }
        for page in self._pages.values():
            self.addWidget(page)
            page.event_clicked.connect(self.event_clicked)
        self.month_view.day_clicked.connect(self.day_clicked)
        self.week_view.day_clicked.connect(self.day_clicked)

    def show_view(self, view: CalendarView) -> None:
        page = self._pages[view.mode]
        page.show_view(view)
        self.setCurrentWidget(page)

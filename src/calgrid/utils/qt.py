from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from PyQt6.QtCore import QObject, QRunnable, QThreadPool, pyqtSignal

logger = logging.getLogger(__name__)


class TaskSignals(QObject):
    completed = pyqtSignal(object)
    failed = pyqtSignal(Exception)


class _Runnable(QRunnable):
    def __init__(self, fn: Callable[..., Any], args: tuple[Any, ...], signals: TaskSignals) -> None:
        super().__init__()
        self.fn = fn
        self.args = args
        self.signals = signals

    def run(self) -> None:  # noqa: D401
        try:
            result = self.fn(*self.args)
        except Exception as exc:  # noqa: BLE001
            logger.debug("Background task %s failed: %s", getattr(self.fn, "__name__", self.fn), exc)
            self.signals.failed.emit(exc)
        else:
            self.signals.completed.emit(result)


class TaskRunner:
    """Runs blocking calls on the Qt thread pool and reports back on the UI thread."""

    def __init__(self, *, max_threads: Optional[int] = None) -> None:
        self.pool = QThreadPool.globalInstance()
        if max_threads is not None:
            self.pool.setMaxThreadCount(max_threads)
        self._in_flight: set[TaskSignals] = set()

    def submit(
        self,
        fn: Callable[..., Any],
        *args: Any,
        on_success: Optional[Callable[[Any], None]] = None,
        on_error: Optional[Callable[[Exception], None]] = None,
    ) -> TaskSignals:
        signals = TaskSignals()
        self._in_flight.add(signals)
        if on_success:
            signals.completed.connect(on_success)
        if on_error:
            signals.failed.connect(on_error)
        signals.completed.connect(lambda _result: self._in_flight.discard(signals))
        signals.failed.connect(lambda _exc: self._in_flight.discard(signals))
        self.pool.start(_Runnable(fn, args, signals))
        return signals


def clear_layout(layout) -> None:
    """Remove and schedule deletion of every widget held by ``layout``."""

    while layout.count():
        item = layout.takeAt(0)
        widget = item.widget()
        if widget is not None:
            widget.deleteLater()
        elif item.layout() is not None:
            clear_layout(item.layout())

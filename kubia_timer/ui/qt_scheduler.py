"""Single-shot timeout scheduling backed by QTimer."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import QObject, QTimer


class QtTimeout:
    """Handle for one pending single-shot timer."""

    def __init__(self, parent: QObject, delay_ms: int, callback: Callable[[], None]) -> None:
        self._timer: QTimer | None = QTimer(parent)
        self._timer.setSingleShot(True)
        self._timer.setInterval(delay_ms)
        self._timer.timeout.connect(self._release)
        self._timer.timeout.connect(callback)
        self._timer.start()

    def cancel(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._release()

    def _release(self) -> None:
        if self._timer is not None:
            self._timer.deleteLater()
            self._timer = None


class QtTimeoutScheduler:
    """Callable scheduler handing out cancellable single-shot QTimers."""

    def __init__(self, parent: QObject) -> None:
        self._parent = parent

    def __call__(self, delay_ms: int, callback: Callable[[], None]) -> QtTimeout:
        return QtTimeout(self._parent, delay_ms, callback)

"""One-shot callbacks on the Qt event loop.

``QtScheduler.call_later(seconds, callback)`` is the only scheduling
primitive the timer needs: run *callback* once after a delay and hand
back a handle that can cancel it.
"""

from __future__ import annotations

from typing import Callable, Protocol

from PyQt6.QtCore import QObject, QTimer


class Cancellable(Protocol):
    @property
    def active(self) -> bool: ...

    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, seconds: float, callback: Callable[[], None]) -> Cancellable: ...


class ScheduledCall:
    """Handle for a pending single-shot ``QTimer``.

    Keep a reference until it fires; the timer only holds a weak one.
    """

    def __init__(self, timer: QTimer, callback: Callable[[], None]) -> None:
        self._timer: QTimer | None = timer
        self._callback = callback
        timer.timeout.connect(self._fire)

    @property
    def active(self) -> bool:
        return self._timer is not None

    def cancel(self) -> None:
        """Stop the timer if it has not fired yet.  Safe to call twice."""
        if self._timer is None:
            return
        self._timer.stop()
        self._release()

    def _fire(self) -> None:
        if self._timer is None:
            return
        self._release()
        self._callback()

    def _release(self) -> None:
        timer, self._timer = self._timer, None
        timer.deleteLater()


class QtScheduler(QObject):
    """Creates one single-shot ``QTimer`` per ``call_later``."""

    def call_later(self, seconds: float, callback: Callable[[], None]) -> ScheduledCall:
        timer = QTimer(self)
        timer.setSingleShot(True)
        timer.setInterval(int(seconds * 1000))
        call = ScheduledCall(timer, callback)
        timer.start()
        return call

"""Drives a ``TimerEngine`` from the Qt event loop.

The controller keeps at most one tick pending.  A tick is armed when the
timer starts and re-armed only after the previous tick has been applied
and the engine is still running.  Leaving RUNNING cancels the pending
tick before the command returns.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal

from .engine import Direction, SessionType, TimerEngine, TimerState
from .scheduler import Cancellable, QtScheduler, Scheduler

log = logging.getLogger(__name__)

TICK_SECONDS = 1.0


class TimerController(QObject):
    """Qt-facing wrapper that turns user commands into engine transitions.

    Signals
    -------
    state_changed(state: TimerState)
        Emitted after every command and every applied tick.
    tick(remaining_seconds: int)
        Emitted after each applied tick.
    session_switched(session: SessionType)
        Emitted when an interval expires and the next one begins.
    """

    state_changed = pyqtSignal(object)
    tick = pyqtSignal(int)
    session_switched = pyqtSignal(object)

    def __init__(
        self,
        engine: TimerEngine | None = None,
        scheduler: Scheduler | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._engine = engine if engine is not None else TimerEngine()
        self._scheduler: Scheduler = (
            scheduler if scheduler is not None else QtScheduler(self)
        )
        self._pending: Cancellable | None = None

    # ── properties ────────────────────────────────────────────────────────

    @property
    def engine(self) -> TimerEngine:
        return self._engine

    @property
    def state(self) -> TimerState:
        return self._engine.state

    @property
    def has_pending_tick(self) -> bool:
        return self._pending is not None and self._pending.active

    # ── commands ──────────────────────────────────────────────────────────

    def start(self) -> None:
        self._engine.start()
        self._arm()
        self._emit_state()

    def pause(self) -> None:
        self._cancel()
        self._engine.pause()
        self._emit_state()

    def toggle(self) -> None:
        """Start when idle or paused, pause when running."""
        if self._engine.is_running:
            self.pause()
        else:
            self.start()

    def reset(self) -> None:
        self._cancel()
        self._engine.reset()
        self._emit_state()

    def adjust_duration(self, session: SessionType, direction: Direction) -> None:
        self._engine.adjust_duration(session, direction)
        self._emit_state()

    # ── tick loop ─────────────────────────────────────────────────────────

    def _on_tick(self) -> None:
        self._pending = None
        if not self._engine.is_running:
            log.debug("stale tick dropped")
            return

        before = self._engine.state.current_session
        state = self._engine.tick()
        self.tick.emit(state.current_time)
        if state.current_session != before:
            self.session_switched.emit(state.current_session)
        self._arm()
        self._emit_state()

    def _arm(self) -> None:
        if not self._engine.is_running or self.has_pending_tick:
            return
        self._pending = self._scheduler.call_later(TICK_SECONDS, self._on_tick)

    def _cancel(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _emit_state(self) -> None:
        self.state_changed.emit(self._engine.state)

"""Timer state machine for the Pomodoro timer.

States
------
IDLE      Not counting, waiting for the user to start.
RUNNING   Counting down the active interval.
PAUSED    Countdown frozen; remaining time is kept.

Transitions
-----------
IDLE → RUNNING                   (start)
PAUSED → RUNNING                 (start)
RUNNING → PAUSED                 (pause)
Any → IDLE                       (reset)
RUNNING → RUNNING, other session (countdown reaches 0)

The engine is pure: it never schedules anything itself.  The caller
feeds it one ``tick()`` per elapsed second while it is running (see
``TimerController``).  Calls that make no sense in the current state
are ignored rather than raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

log = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class SessionType(Enum):
    WORK = "work"
    BREAK = "break"


class TimerStatus(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


class Direction(Enum):
    INCREASE = "increase"
    DECREASE = "decrease"


# ── constants ─────────────────────────────────────────────────────────────

DEFAULT_WORK_DURATION = 25 * 60
DEFAULT_BREAK_DURATION = 5 * 60
DURATION_STEP = 60
MIN_DURATION = 60

_NEXT_SESSION: dict[SessionType, SessionType] = {
    SessionType.WORK: SessionType.BREAK,
    SessionType.BREAK: SessionType.WORK,
}


# ── state record ──────────────────────────────────────────────────────────


@dataclass
class TimerState:
    """Everything the timer knows.  Mutated only by ``TimerEngine``."""

    work_duration: int
    break_duration: int
    current_time: int
    current_session: SessionType = SessionType.WORK
    timer_status: TimerStatus = TimerStatus.IDLE

    def __post_init__(self) -> None:
        self.work_duration = max(MIN_DURATION, self.work_duration)
        self.break_duration = max(MIN_DURATION, self.break_duration)
        self.current_time = max(0, self.current_time)

    @classmethod
    def initial(
        cls,
        work_duration: int = DEFAULT_WORK_DURATION,
        break_duration: int = DEFAULT_BREAK_DURATION,
    ) -> TimerState:
        """Fresh idle state at the start of a work interval."""
        work_duration = max(MIN_DURATION, work_duration)
        return cls(
            work_duration=work_duration,
            break_duration=break_duration,
            current_time=work_duration,
        )

    def duration_for(self, session: SessionType) -> int:
        if session == SessionType.WORK:
            return self.work_duration
        return self.break_duration


# ── formatting ────────────────────────────────────────────────────────────


def format_time(seconds: int) -> str:
    """Render *seconds* as ``MM:SS``."""
    minutes, remainder = divmod(max(0, seconds), 60)
    return f"{minutes:02d}:{remainder:02d}"


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine:
    """Work/break countdown state machine.

    Every control returns the engine's ``TimerState`` after the
    transition has been applied, so callers can render it directly.
    """

    def __init__(self, state: TimerState | None = None) -> None:
        self._state: TimerState = state if state is not None else TimerState.initial()

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state.timer_status == TimerStatus.RUNNING

    @property
    def total_duration(self) -> int:
        """Configured length of the active session."""
        return self._state.duration_for(self._state.current_session)

    @property
    def percent_complete(self) -> float:
        """0.0 → 1.0 progress through the active interval."""
        total = self.total_duration
        elapsed = total - self._state.current_time
        return max(0.0, min(1.0, elapsed / total))

    def duration_for(self, session: SessionType) -> int:
        return self._state.duration_for(session)

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> TimerState:
        """Begin or resume counting.  No-op while already running."""
        if self.is_running:
            log.debug("start() ignored: already running")
            return self._state
        self._set_status(TimerStatus.RUNNING)
        return self._state

    def pause(self) -> TimerState:
        """Freeze the countdown.  Only valid while running."""
        if not self.is_running:
            log.debug("pause() ignored: status is %s", self._state.timer_status.value)
            return self._state
        self._set_status(TimerStatus.PAUSED)
        return self._state

    def reset(self) -> TimerState:
        """Back to an idle work interval.  Configured durations are kept."""
        state = self._state
        state.current_session = SessionType.WORK
        state.current_time = state.work_duration
        self._set_status(TimerStatus.IDLE)
        return state

    def tick(self) -> TimerState:
        """Apply one elapsed second.

        Reaching zero switches session within the same call, so expiry
        happens exactly once per interval.
        """
        state = self._state
        if not self.is_running:
            log.debug("tick() ignored: status is %s", state.timer_status.value)
            return state

        if state.current_time > 0:
            state.current_time -= 1
        if state.current_time == 0:
            self.on_interval_expired()
        return state

    def on_interval_expired(self) -> TimerState:
        """Switch work ↔ break and keep running into the next interval."""
        state = self._state
        if not self.is_running or state.current_time != 0:
            log.debug(
                "expiry ignored: status=%s remaining=%d",
                state.timer_status.value, state.current_time,
            )
            return state

        finished = state.current_session
        state.current_session = _NEXT_SESSION[finished]
        state.current_time = state.duration_for(state.current_session)
        log.info(
            "%s interval finished; %s interval started (%ds)",
            finished.value, state.current_session.value, state.current_time,
        )
        return state

    def adjust_duration(self, session: SessionType, direction: Direction) -> TimerState:
        """Step the configured length of *session* by one minute.

        Durations never drop below one minute.  When *session* is the
        active one, the remaining time is overwritten with the new full
        length, even mid-countdown.
        """
        state = self._state
        step = DURATION_STEP if direction == Direction.INCREASE else -DURATION_STEP
        new_duration = max(MIN_DURATION, state.duration_for(session) + step)

        if session == SessionType.WORK:
            state.work_duration = new_duration
        else:
            state.break_duration = new_duration

        if session == state.current_session:
            state.current_time = new_duration

        log.debug("%s duration set to %ds", session.value, new_duration)
        return state

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _set_status(self, status: TimerStatus) -> None:
        log.debug("%s → %s", self._state.timer_status.value, status.value)
        self._state.timer_status = status

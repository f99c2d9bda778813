"""Timer package."""

from .engine import (
    TimerEngine,
    TimerState,
    SessionType,
    TimerStatus,
    Direction,
    format_time,
    DEFAULT_WORK_DURATION,
    DEFAULT_BREAK_DURATION,
    DURATION_STEP,
    MIN_DURATION,
)
from .controller import TimerController
from .scheduler import QtScheduler, ScheduledCall

__all__ = [
    "TimerEngine",
    "TimerState",
    "SessionType",
    "TimerStatus",
    "Direction",
    "format_time",
    "DEFAULT_WORK_DURATION",
    "DEFAULT_BREAK_DURATION",
    "DURATION_STEP",
    "MIN_DURATION",
    "TimerController",
    "QtScheduler",
    "ScheduledCall",
]

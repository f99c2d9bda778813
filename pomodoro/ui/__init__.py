"""UI package."""

from .timer_widget import TimerWidget
from .help_dialog import HelpDialog
from .styles import build_stylesheet, session_color

__all__ = [
    "TimerWidget",
    "HelpDialog",
    "build_stylesheet",
    "session_color",
]

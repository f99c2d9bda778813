"""Main application window for the Pomodoro timer."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QKeySequence, QShortcut
from PyQt6.QtWidgets import QMainWindow, QVBoxLayout, QWidget

from .settings import Settings, load_settings
from .timer.controller import TimerController
from .timer.engine import SessionType, TimerEngine, TimerState, TimerStatus
from .ui.styles import build_stylesheet
from .ui.timer_widget import TimerWidget

log = logging.getLogger(__name__)

APP_TITLE = "Pomodoro Timer"


class PomodoroApp(QMainWindow):
    """Main application window."""

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self.setWindowTitle(APP_TITLE)
        self.setMinimumSize(420, 560)

        # ── settings ──────────────────────────────────────────────────
        self._settings: Settings = settings if settings is not None else load_settings()

        # ── engine + driver ───────────────────────────────────────────
        engine = TimerEngine(TimerState.initial(
            self._settings.work_duration,
            self._settings.break_duration,
        ))
        self._controller = TimerController(engine, parent=self)
        self._controller.state_changed.connect(self._refresh_title)
        self._controller.session_switched.connect(self._on_session_switched)

        # ── layout ────────────────────────────────────────────────────
        central = QWidget(self)
        central.setObjectName("root")
        layout = QVBoxLayout(central)
        layout.setContentsMargins(24, 24, 24, 24)
        self._timer_widget = TimerWidget(self._controller, central)
        layout.addWidget(self._timer_widget)
        self.setCentralWidget(central)

        self.setStyleSheet(build_stylesheet())
        self._setup_shortcuts()

    @property
    def controller(self) -> TimerController:
        return self._controller

    def _setup_shortcuts(self) -> None:
        QShortcut(QKeySequence("Space"), self, activated=self._controller.toggle)
        QShortcut(QKeySequence("R"), self, activated=self._controller.reset)

    def _refresh_title(self, state: TimerState) -> None:
        if state.timer_status == TimerStatus.IDLE:
            self.setWindowTitle(APP_TITLE)
        else:
            self.setWindowTitle(f"{APP_TITLE}: {state.current_session.value}")

    def _on_session_switched(self, session: SessionType) -> None:
        self.statusBar().showMessage(f"{session.value} interval started", 5000)

    def closeEvent(self, event) -> None:
        self._controller.reset()
        log.debug("window closed")
        super().closeEvent(event)

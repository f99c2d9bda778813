"""Main timer card.

Layout (top → bottom):
    - Title + subtitle
    - Session label ("work" / "break")
    - Large MM:SS countdown with a progress bar
    - Work −/+, Start/Pause, Reset
    - Break −/+
    - "What is the Pomodoro Technique" button
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QFrame, QProgressBar,
)

from ..timer.controller import TimerController
from ..timer.engine import Direction, SessionType, TimerState, TimerStatus, format_time
from .help_dialog import HelpDialog
from .styles import session_color

START_LABEL = "▶"
PAUSE_LABEL = "⏸"
RESET_LABEL = "⟳"
PROGRESS_STEPS = 1000


class TimerWidget(QWidget):
    """Renders a ``TimerController``'s state and forwards button clicks."""

    def __init__(self, controller: TimerController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._controller = controller
        self._build_ui()
        self._connect_signals()
        self._refresh(controller.state)

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        card = QFrame(self)
        card.setObjectName("card")
        root.addWidget(card)

        layout = QVBoxLayout(card)
        layout.setContentsMargins(32, 24, 32, 28)
        layout.setSpacing(16)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        title = QLabel("Pomodoro Timer", card)
        title.setObjectName("title")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        subtitle = QLabel("A Timer For Pomodoro Technique.", card)
        subtitle.setObjectName("subtitle")
        subtitle.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(subtitle)

        # ── countdown ────────────────────────────────────────────────
        self._session_label = QLabel(card)
        self._session_label.setObjectName("sessionLabel")
        self._session_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._session_label)

        self._time_label = QLabel(card)
        self._time_label.setObjectName("timeLabel")
        self._time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._time_label)

        self._progress = QProgressBar(card)
        self._progress.setRange(0, PROGRESS_STEPS)
        self._progress.setTextVisible(False)
        self._progress.setFixedHeight(6)
        layout.addWidget(self._progress)

        # ── main controls ────────────────────────────────────────────
        btn_row = QHBoxLayout()
        btn_row.setSpacing(8)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._work_minus_btn = QPushButton("−", card)
        self._work_minus_btn.setToolTip("Shorter work interval")
        self._work_plus_btn = QPushButton("+", card)
        self._work_plus_btn.setToolTip("Longer work interval")
        self._start_pause_btn = QPushButton(START_LABEL, card)
        self._start_pause_btn.setToolTip("Start / pause")
        self._reset_btn = QPushButton(RESET_LABEL, card)
        self._reset_btn.setToolTip("Reset")

        for btn in (
            self._work_minus_btn, self._work_plus_btn,
            self._start_pause_btn, self._reset_btn,
        ):
            btn_row.addWidget(btn)
        layout.addLayout(btn_row)

        # ── break length ─────────────────────────────────────────────
        break_row = QHBoxLayout()
        break_row.setSpacing(8)
        break_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._break_minus_btn = QPushButton("−", card)
        self._break_minus_btn.setToolTip("Shorter break")
        self._break_caption = QLabel(card)
        self._break_caption.setObjectName("durationCaption")
        self._break_plus_btn = QPushButton("+", card)
        self._break_plus_btn.setToolTip("Longer break")

        break_row.addWidget(self._break_minus_btn)
        break_row.addWidget(self._break_caption)
        break_row.addWidget(self._break_plus_btn)
        layout.addLayout(break_row)

        self._help_btn = QPushButton("What is Pomodoro Technique", card)
        self._help_btn.setObjectName("helpButton")
        layout.addWidget(self._help_btn, alignment=Qt.AlignmentFlag.AlignCenter)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        c = self._controller
        self._start_pause_btn.clicked.connect(c.toggle)
        self._reset_btn.clicked.connect(c.reset)
        self._work_minus_btn.clicked.connect(
            lambda: c.adjust_duration(SessionType.WORK, Direction.DECREASE)
        )
        self._work_plus_btn.clicked.connect(
            lambda: c.adjust_duration(SessionType.WORK, Direction.INCREASE)
        )
        self._break_minus_btn.clicked.connect(
            lambda: c.adjust_duration(SessionType.BREAK, Direction.DECREASE)
        )
        self._break_plus_btn.clicked.connect(
            lambda: c.adjust_duration(SessionType.BREAK, Direction.INCREASE)
        )
        self._help_btn.clicked.connect(self.show_help)

        c.state_changed.connect(self._refresh)
        c.tick.connect(self._refresh_countdown)

    # ── slots ─────────────────────────────────────────────────────────────

    def show_help(self) -> None:
        HelpDialog(self).exec()

    def _refresh(self, state: TimerState) -> None:
        session = state.current_session
        self._session_label.setText(session.value)
        self._session_label.setStyleSheet(f"color: {session_color(session)};")
        self._refresh_countdown(state.current_time)

        running = state.timer_status == TimerStatus.RUNNING
        self._start_pause_btn.setText(PAUSE_LABEL if running else START_LABEL)

        self._work_minus_btn.setToolTip(
            f"Shorter work interval (now {state.work_duration // 60} min)"
        )
        self._work_plus_btn.setToolTip(
            f"Longer work interval (now {state.work_duration // 60} min)"
        )
        self._break_caption.setText(f"break {state.break_duration // 60} min")

    def _refresh_countdown(self, remaining: int) -> None:
        self._time_label.setText(format_time(remaining))
        pct = self._controller.engine.percent_complete
        self._progress.setValue(round(pct * PROGRESS_STEPS))

    # ── test / accessibility hooks ────────────────────────────────────────

    @property
    def time_text(self) -> str:
        return self._time_label.text()

    @property
    def session_text(self) -> str:
        return self._session_label.text()

    @property
    def progress_value(self) -> int:
        return self._progress.value()

    @property
    def start_pause_text(self) -> str:
        return self._start_pause_btn.text()

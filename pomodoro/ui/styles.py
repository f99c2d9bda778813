"""QSS stylesheet and session colours for the Pomodoro timer."""

from __future__ import annotations

from ..timer.engine import SessionType

# ── session accent colours ───────────────────────────────────────────────

SESSION_COLORS: dict[SessionType, str] = {
    SessionType.WORK:  "#FF6B6B",   # warm coral
    SessionType.BREAK: "#4ECDC4",   # cool teal
}

# ── default palette ──────────────────────────────────────────────────────

PALETTE: dict[str, str] = {
    "bg":           "#BFDBFE",
    "surface":      "#FFFFFF",
    "accent":       "#1E3A8A",
    "text":         "#111827",
    "text_muted":   "#6B7280",
    "border":       "#D1D5DB",
}


def session_color(session: SessionType) -> str:
    return SESSION_COLORS[session]


def build_stylesheet(palette: dict[str, str] | None = None) -> str:
    """Return the application-wide QSS string."""
    p = dict(PALETTE)
    if palette:
        p.update(palette)

    return f"""
        QMainWindow, QWidget#root {{
            background-color: {p['bg']};
        }}

        QFrame#card {{
            background-color: {p['surface']};
            border: 1px solid {p['border']};
            border-radius: 12px;
        }}

        QLabel {{
            color: {p['text']};
        }}

        QLabel#title {{
            font-size: 32px;
            font-weight: bold;
        }}

        QLabel#subtitle {{
            color: {p['text_muted']};
        }}

        QLabel#sessionLabel {{
            font-size: 22px;
            font-weight: 500;
        }}

        QLabel#timeLabel {{
            font-size: 88px;
            font-weight: bold;
        }}

        QLabel#durationCaption {{
            color: {p['text_muted']};
            font-size: 12px;
        }}

        QPushButton {{
            background-color: {p['surface']};
            color: {p['text']};
            border: 1px solid {p['border']};
            border-radius: 6px;
            min-width: 36px;
            min-height: 36px;
            font-size: 16px;
        }}

        QPushButton:hover {{
            border-color: {p['accent']};
        }}

        QPushButton#helpButton {{
            background-color: {p['accent']};
            color: {p['surface']};
            border: none;
            padding: 8px 16px;
        }}
    """

"""Application settings read from JSON.

Settings are stored at:
    ~/Library/Application Support/PomodoroTimer/settings.json

or wherever ``POMODORO_SETTINGS`` points.  They are read once at
startup; changes made in the window are not written back.

Usage::

    settings = load_settings()
    engine = TimerEngine(TimerState.initial(
        settings.work_duration, settings.break_duration,
    ))
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path

from .timer.engine import DEFAULT_BREAK_DURATION, DEFAULT_WORK_DURATION, MIN_DURATION

log = logging.getLogger(__name__)

APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "PomodoroTimer"
SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"
SETTINGS_ENV_VAR = "POMODORO_SETTINGS"


@dataclass
class Settings:
    """User-configurable starting durations."""

    work_duration: int = DEFAULT_WORK_DURATION     # seconds
    break_duration: int = DEFAULT_BREAK_DURATION

    def __post_init__(self) -> None:
        self.work_duration = max(MIN_DURATION, self.work_duration)
        self.break_duration = max(MIN_DURATION, self.break_duration)


def settings_path() -> Path:
    override = os.environ.get(SETTINGS_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return SETTINGS_PATH


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from disk, falling back to defaults."""
    path = path if path is not None else settings_path()
    if not path.exists():
        return Settings()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        log.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return Settings()
    if not isinstance(data, dict):
        log.warning("Ignoring settings file %s: expected a JSON object", path)
        return Settings()

    # Only use keys that exist in the dataclass, and only integer values
    filtered = {}
    for f in fields(Settings):
        value = data.get(f.name)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, int):
            log.warning("Ignoring %s=%r in %s: not an integer", f.name, value, path)
            continue
        filtered[f.name] = value
    return Settings(**filtered)

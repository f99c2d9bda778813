"""Shared pytest fixtures for Pomodoro Timer tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from pomodoro.timer.controller import TimerController
from pomodoro.timer.engine import TimerEngine, TimerState

from helpers import FakeScheduler


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture
def engine():
    """Fresh engine with default durations (25 / 5 min)."""
    return TimerEngine()


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def controller(qapp, scheduler):
    """Controller driven by a fake scheduler; ticks fire only on demand."""
    return TimerController(TimerEngine(TimerState.initial()), scheduler=scheduler)

"""Pomodoro Timer: a work/break countdown for the Pomodoro Technique."""

__version__ = "0.1.0"

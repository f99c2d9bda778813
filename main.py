#!/usr/bin/env python3
"""Launch the Pomodoro timer window (same as ``python -m pomodoro``)."""

from pomodoro.__main__ import main


if __name__ == "__main__":
    main()

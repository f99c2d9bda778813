"""Allow running the timer as a module: python -m pomodoro."""

import argparse
import logging
import sys

from PyQt6.QtWidgets import QApplication

from .app import PomodoroApp
from .settings import load_settings

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pomodoro-timer",
        description="A timer for the Pomodoro Technique.",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        type=str.upper,
        help="logging verbosity (default: WARNING)",
    )
    args, _qt_args = parser.parse_known_args(argv)
    return args


def main() -> None:
    args = parse_args(sys.argv[1:])
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv)
    app.setApplicationName("Pomodoro Timer")
    app.setOrganizationName("PomodoroTimer")

    window = PomodoroApp(load_settings())
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()

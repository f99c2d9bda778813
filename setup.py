"""setuptools / py2app setup for Pomodoro Timer.

Install for development:
    pip install -e ".[test]"

Build a macOS .app bundle:
    pip install py2app
    python setup.py py2app
"""

import sys

from setuptools import find_packages, setup

APP = ["main.py"]
DATA_FILES = []
OPTIONS = {
    "argv_emulation": False,
    "iconfile": None,
    "plist": {
        "CFBundleName": "PomodoroTimer",
        "CFBundleDisplayName": "Pomodoro Timer",
        "CFBundleIdentifier": "com.pomodorotimer.app",
        "CFBundleVersion": "0.1.0",
        "CFBundleShortVersionString": "0.1.0",
        "NSHighResolutionCapable": True,
        "LSMinimumSystemVersion": "13.0",
    },
}

# py2app is macOS-only; pull it in only when building the bundle
py2app_kwargs = {}
if "py2app" in sys.argv:
    py2app_kwargs = {
        "app": APP,
        "data_files": DATA_FILES,
        "options": {"py2app": OPTIONS},
        "setup_requires": ["py2app"],
    }

setup(
    name="pomodoro-timer",
    version="0.1.0",
    description="A work/break countdown timer for the Pomodoro Technique.",
    packages=find_packages(include=["pomodoro", "pomodoro.*"]),
    python_requires=">=3.10",
    install_requires=["PyQt6>=6.4"],
    extras_require={"test": ["pytest>=7"]},
    entry_points={
        "console_scripts": ["pomodoro-timer=pomodoro.__main__:main"],
    },
    **py2app_kwargs,
)

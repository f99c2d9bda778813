"""Static "What is the Pomodoro Technique" dialog."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QDialog, QDialogButtonBox, QLabel, QVBoxLayout, QWidget,
)

READ_MORE_URL = "https://todolist.com/productivity-method/pomodoro-technique"

STEPS: tuple[str, ...] = (
    "Select a single task to focus on.",
    "Set a timer for 25–30 min and work continuously until the timer goes off.",
    "Take a productive 5 min break: walk around, get a snack and relax.",
    "Repeat steps 2 and 3 for 4 rounds.",
    "Take a longer (20–30 min) break.",
)


def help_html() -> str:
    items = "".join(f"<li>{step}</li>" for step in STEPS)
    return (
        "<p><b>Pomodoro Technique</b> is a time management technique that "
        "uses a timer to divide work into intervals called Pomodoros. "
        "The timer is traditionally set for 25 minutes but can be "
        "customised to fit your needs. The basic steps are:</p>"
        f"<ol><b>{items}</b></ol>"
        f'<p><a href="{READ_MORE_URL}">Read more!</a></p>'
    )


class HelpDialog(QDialog):
    """Explains the technique.  Nothing here touches the timer."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("What is the Pomodoro Technique")
        self.setMinimumWidth(480)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 20, 24, 20)
        layout.setSpacing(12)

        heading = QLabel("<b>➡ Explanation of the Pomodoro Technique 🔥</b>", self)
        layout.addWidget(heading)

        self._body = QLabel(help_html(), self)
        self._body.setWordWrap(True)
        self._body.setTextFormat(Qt.TextFormat.RichText)
        self._body.setOpenExternalLinks(True)
        layout.addWidget(self._body)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Cancel
            | QDialogButtonBox.StandardButton.Ok,
            parent=self,
        )
        buttons.button(QDialogButtonBox.StandardButton.Ok).setText("Continue")
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    @property
    def body_text(self) -> str:
        return self._body.text()

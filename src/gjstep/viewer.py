# -----------------------------------------------------------------------------
# Transcript viewer model
# Purpose:
#   Scroll state over a finished StepLog: line-wise UP/DOWN, page-wise
#   LEFT/RIGHT, a title row and a "Lines a-b / n" footer. Rendering is left to
#   the caller (terminal pager in cli.py, Streamlit page in ui/app.py).
# -----------------------------------------------------------------------------

from __future__ import annotations
from typing import List, Sequence

from .config import VIEW_LINES

TITLE = "Gauss-Jordan Steps (UP/DOWN, CLEAR exit)"


class LogViewer:
    def __init__(self, lines: Sequence[str], lines_on_screen: int = VIEW_LINES):
        # Index-only access to the transcript; never mutated here
        self._lines = lines
        self.lines_on_screen = lines_on_screen
        self.top = 0

    @property
    def count(self) -> int:
        return len(self._lines)

    @property
    def title(self) -> str:
        return TITLE

    def up(self) -> None:
        if self.top > 0:
            self.top -= 1

    def down(self) -> None:
        if self.top + self.lines_on_screen < self.count:
            self.top += 1

    def page_up(self) -> None:
        self.top = max(self.top - self.lines_on_screen, 0)

    def page_down(self) -> None:
        self.top += self.lines_on_screen
        if self.top > self.count - self.lines_on_screen:
            self.top = self.count - self.lines_on_screen
        if self.top < 0:
            self.top = 0

    def visible(self) -> List[str]:
        # title and footer take two rows of the screen
        end = min(self.top + self.lines_on_screen - 2, self.count)
        return [self._lines[i] for i in range(self.top, end)]

    def footer(self) -> str:
        shown = len(self.visible())
        return f"Lines {self.top + 1}-{self.top + shown} / {self.count}"

    def handle(self, key: str) -> bool:
        """Apply a pager key; returns False when the viewer should close."""
        k = (key or "").strip().lower()
        if k in ("q", "clear", "quit", "exit"):
            return False
        if k in ("u", "up", "k"):
            self.up()
        elif k in ("d", "down", "j", ""):
            self.down()
        elif k in ("l", "left", "pgup"):
            self.page_up()
        elif k in ("r", "right", "pgdn"):
            self.page_down()
        return True

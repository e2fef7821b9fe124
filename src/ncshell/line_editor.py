from __future__ import annotations

from ncshell.scrollback import Scrollback
from ncshell.viewport import Viewport


class LineEditor:
    """Cursor-level editing of the current scrollback entry.

    Supports single-step cursor movement, insertion at the cursor, backspace
    and history navigation. The viewport owns the cursor column; the
    scrollback owns the text.
    """

    def __init__(self, scrollback: Scrollback, viewport: Viewport):
        self.scrollback = scrollback
        self.viewport = viewport

    @property
    def text(self) -> str:
        return self.scrollback.current()

    @property
    def cursor(self) -> int:
        return self.viewport.column

    def insert(self, ch: str):
        """Insert a character at the cursor position."""
        text = self.text
        col = self.viewport.column
        self.scrollback.set_current(text[:col] + ch + text[col:])
        self.viewport.column += len(ch)

    def backspace(self):
        """Delete the character before the cursor."""
        col = self.viewport.column
        if col > 0:
            text = self.text
            self.scrollback.set_current(text[:col - 1] + text[col:])
            self.viewport.column -= 1

    def move_left(self):
        if self.viewport.column > 0:
            self.viewport.column -= 1

    def move_right(self):
        if self.viewport.column < len(self.text):
            self.viewport.column += 1

    def history_older(self):
        """Show the next older entry with the cursor at its end."""
        self.scrollback.navigate_older()
        self.viewport.reset(self.text)

    def history_newer(self):
        """Show the next newer entry (or the draft) with the cursor at its end."""
        self.scrollback.navigate_newer()
        self.viewport.reset(self.text)

    def clear(self):
        """Drop the draft and return to it."""
        self.scrollback.reset_draft()
        self.viewport.reset(self.text)

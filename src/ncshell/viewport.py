"""Horizontal windowing of a single input line.

The viewport decides which slice of a (possibly very long) line is shown in
a fixed number of cells, and where the terminal cursor sits inside it. The
window chases the cursor by at most one cell per correction, so it has to be
corrected after every single edit or cursor move.
"""

from __future__ import annotations

from ncshell.constants import CONTINUATION_MARKER, DEFAULT_CURSOR_MARGIN


class Viewport:
    """Cursor column and visible window over the current line."""

    def __init__(self, line_size: int = 0, cursor_margin: int = DEFAULT_CURSOR_MARGIN):
        self.line_size = line_size
        self.cursor_margin = cursor_margin
        self.column = 0        # insert-before index into the line
        self.window_start = 0  # first visible character

    @property
    def preview_cursor(self) -> int:
        """Cursor offset from the left edge of the visible slice."""
        return self.column - self.window_start

    def home(self):
        self.column = 0
        self.window_start = 0

    def reset(self, text: str):
        """Put the cursor at the end of ``text`` and show as much of it as fits."""
        self.column = len(text)
        if self.column > self.line_size:
            self.window_start = self.column - self.line_size
        else:
            self.window_start = 0

    def correct(self, text: str):
        """Bring the window one step closer to containing the cursor."""
        # The line changed underneath us (history navigation, interrupt)
        if self.column > len(text):
            self.reset(text)

        if len(text) <= self.line_size:
            self.window_start = 0
            return

        cursor = self.preview_cursor
        left_margin_oob = cursor < self.cursor_margin
        right_margin_oob = self.line_size - cursor < self.cursor_margin
        preview_cursor_oob = cursor > self.line_size
        preview_length_oob = len(self.preview(text)) > self.line_size

        if self.window_start > 0 and left_margin_oob:
            self.window_start -= 1
        elif right_margin_oob and (preview_cursor_oob or preview_length_oob):
            self.window_start += 1

    def preview(self, text: str) -> str:
        """Return the visible slice of ``text`` with continuation markers."""
        shown = text[self.window_start:self.window_start + self.line_size]
        if self.window_start != 0:
            shown = CONTINUATION_MARKER + shown[1:]
        if self.window_start + self.line_size < len(text):
            shown += CONTINUATION_MARKER
        return shown

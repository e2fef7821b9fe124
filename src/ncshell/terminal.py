"""Curses-backed display, keyboard and geometry for the shell.

The screen is split into an output window covering every row but the last,
and the input row at the bottom of the main screen.
"""

from __future__ import annotations

import curses
import selectors
import sys

from ncshell.types import Geometry


class CursesTerminal:
    def __init__(self, stdscr, stdin=None):
        self.stdscr = stdscr
        curses.noecho()
        for visibility in (2, 1):
            # Not every terminal has a block cursor, or any cursor control
            try:
                curses.curs_set(visibility)
                break
            except curses.error:
                continue
        self.stdscr.keypad(True)
        self.stdscr.nodelay(True)

        rows, cols = self.stdscr.getmaxyx()
        self.output_win = curses.newwin(max(1, rows - 1), cols, 0, 0)

        self.sel = selectors.DefaultSelector()
        self.sel.register(stdin if stdin is not None else sys.stdin, selectors.EVENT_READ)

    @property
    def input_row(self) -> int:
        return self.stdscr.getmaxyx()[0] - 1

    def geometry(self) -> Geometry:
        """Current screen size; the terminal may have been resized since start."""
        rows, cols = self.stdscr.getmaxyx()
        out_rows, out_cols = self.output_win.getmaxyx()
        return Geometry(
            total_rows=rows,
            total_cols=cols,
            output_rows=out_rows,
            output_cols=out_cols,
        )

    def close(self):
        self.sel.close()

    # --- Input ---

    def wait_for_input(self, timeout: float | None = None) -> bool:
        """Block until stdin is readable or ``timeout`` seconds pass."""
        return bool(self.sel.select(timeout=timeout))

    def poll_key(self) -> int | None:
        """Return the next buffered keystroke, or None if there is none."""
        ch = self.stdscr.getch()
        if ch == -1:
            return None
        return ch

    # --- Input row drawing ---

    def move_cursor(self, row: int, col: int):
        rows, cols = self.stdscr.getmaxyx()
        row = min(max(row, 0), rows - 1)
        col = min(max(col, 0), cols - 1)
        try:
            self.stdscr.move(row, col)
        except curses.error:
            pass

    def clear_line(self):
        self.stdscr.clrtoeol()

    def draw_text(self, text: str):
        try:
            self.stdscr.addstr(text)
        except curses.error:
            # Writing the bottom-right cell moves the cursor off screen
            pass

    def refresh(self):
        self.stdscr.refresh()

    # --- Output window ---

    def draw_output(self, lines: list[str]):
        win = self.output_win
        win.erase()
        h, w = win.getmaxyx()
        for i, line in enumerate(lines[-h:]):
            try:
                win.addnstr(i, 0, line, w - 1)
            except curses.error:
                pass
        win.refresh()

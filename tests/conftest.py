from __future__ import annotations

import pytest

from ncshell.shell import Shell
from ncshell.types import Geometry


class FakeTerminal:
    """Minimal stand-in for CursesTerminal that records what would be drawn."""

    def __init__(self, rows: int = 10, cols: int = 40, keys=()):
        self.rows = rows
        self.cols = cols
        self.keys = list(keys)
        self.line = ""          # contents of the input row
        self.cursor = (0, 0)
        self.output: list[str] = []
        self.refreshes = 0
        self.closed = False

    @property
    def input_row(self) -> int:
        return self.rows - 1

    def geometry(self) -> Geometry:
        return Geometry(self.rows, self.cols, self.rows - 1, self.cols)

    def feed(self, *keys):
        for key in keys:
            if isinstance(key, str):
                self.keys.extend(ord(c) for c in key)
            else:
                self.keys.append(key)

    def poll_key(self):
        if not self.keys:
            return None
        return self.keys.pop(0)

    def move_cursor(self, row: int, col: int):
        self.cursor = (row, col)

    def clear_line(self):
        self.line = self.line[:self.cursor[1]]

    def draw_text(self, text: str):
        self.line += text

    def refresh(self):
        self.refreshes += 1

    def draw_output(self, lines):
        self.output = list(lines)

    def wait_for_input(self, timeout=None):
        return bool(self.keys)

    def close(self):
        self.closed = True


@pytest.fixture
def terminal():
    return FakeTerminal()


@pytest.fixture
def shell(terminal):
    sh = Shell(terminal, prompt="> ", cursor_margin=10)
    sh.update_input()
    return sh

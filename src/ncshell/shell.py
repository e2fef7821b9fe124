"""The shell session: keystroke dispatch, submission and redraws.

A ``Shell`` owns the scrollback, viewport, output buffer and command
registry, and talks to the screen only through its terminal collaborator
(see ``ncshell.terminal.CursesTerminal`` for the interface). Everything runs
on one thread. Interrupts requested from a signal handler are only acted on
between keystrokes.
"""

from __future__ import annotations

import curses
from typing import TYPE_CHECKING

from ncshell.commands import CommandRegistry, Handler
from ncshell.constants import (
    DEFAULT_CURSOR_MARGIN,
    DEFAULT_PROMPT,
    DELETE_KEYS,
    INTERRUPT_HINT,
    RESERVED_COMMANDS,
    SUBMIT_KEYS,
)
from ncshell.line_editor import LineEditor
from ncshell.output_buffer import OutputBuffer
from ncshell.scrollback import Scrollback
from ncshell.viewport import Viewport

if TYPE_CHECKING:
    from ncshell.debug_log import DebugLogger
    from ncshell.terminal import CursesTerminal


class ShellExit(Exception):
    """Ends the session; ``status`` becomes the process exit status."""

    def __init__(self, status: int = 0, reason: str = ""):
        super().__init__(reason or f"shell exited with status {status}")
        self.status = status
        self.reason = reason


class Shell:
    def __init__(self, terminal: "CursesTerminal", prompt: str = DEFAULT_PROMPT,
                 cursor_margin: int = DEFAULT_CURSOR_MARGIN,
                 logger: "DebugLogger | None" = None):
        self.terminal = terminal
        self.logger = logger
        self.geometry = terminal.geometry()

        self.scrollback = Scrollback()
        self.viewport = Viewport(cursor_margin=cursor_margin)
        self.editor = LineEditor(self.scrollback, self.viewport)
        self.output = OutputBuffer(self.geometry.output_rows, self.geometry.output_cols)
        self.commands = CommandRegistry()

        self.prompt = ""
        self._interrupt_pending = False
        self.set_prompt(prompt)

    # --- Setup ---

    def set_prompt(self, prompt: str):
        """Change the prompt and resize the input window to fit.

        Raises ShellExit(1) if the terminal is too narrow to keep the cursor
        margin on both sides of the cursor.
        """
        self.geometry = self.terminal.geometry()
        self.prompt = prompt
        self.viewport.line_size = self.geometry.total_cols - len(prompt) - 1
        required = len(prompt) + self.viewport.cursor_margin * 2 + 1
        if self.geometry.total_cols < required:
            raise ShellExit(
                1,
                f"Terminal is {self.geometry.total_cols} columns wide; "
                f"at least {required} are needed",
            )

    def register_command(self, name: str, handler: Handler) -> bool:
        return self.commands.register(name, handler)

    # --- Output ---

    def append_output(self, message: str):
        added = self.output.append(message)
        if self.logger:
            self.logger.log_output(added)
        self.update_output()

    # --- Input loop ---

    def request_interrupt(self):
        """Ask for an interrupt. Safe to call from a signal handler."""
        self._interrupt_pending = True

    def _deliver_interrupt(self):
        if self._interrupt_pending:
            self._interrupt_pending = False
            self.interrupt()

    def interrupt(self):
        """Drop the draft and return to it, hinting how to leave if it was empty."""
        if self.logger:
            self.logger.log_event("interrupt")
        if not self.scrollback.current():
            self.append_output(INTERRUPT_HINT)
        self.editor.clear()
        self.update_input()

    def process_input(self):
        """Handle every buffered keystroke, then return."""
        self._deliver_interrupt()
        while True:
            ch = self.terminal.poll_key()
            if ch is None:
                break
            self.handle_key(ch)
            self.update_input()
            self._deliver_interrupt()

    def handle_key(self, ch: int | None):
        if ch is None or ch == -1:
            return
        if self.logger:
            self.logger.log_key(ch)

        if ch in DELETE_KEYS:
            self.editor.backspace()
        elif ch in SUBMIT_KEYS:
            self.submit()
        elif ch == curses.KEY_DOWN:
            self.editor.history_newer()
        elif ch == curses.KEY_UP:
            self.editor.history_older()
        elif ch == curses.KEY_LEFT:
            self.editor.move_left()
        elif ch == curses.KEY_RIGHT:
            self.editor.move_right()
        elif 32 <= ch < 127:
            self.editor.insert(chr(ch))

    def submit(self):
        """Commit the current line and run it.

        Blank lines are ignored. ``exit`` and ``quit`` raise ShellExit(0)
        before the registry is consulted.
        """
        line = self.scrollback.submit()
        if line is None:
            return
        self.viewport.home()
        if self.logger:
            self.logger.log_command(line)

        if line.name.lower() in RESERVED_COMMANDS:
            raise ShellExit(0)
        try:
            found = self.commands.dispatch(line.name, line.args)
        except ShellExit:
            raise
        except Exception as e:
            if self.logger:
                self.logger.log_event(f"error in {line.name!r}: {e!r}")
            self.append_output(f"Error in '{line.name}': {e}")
            return
        if not found:
            if self.logger:
                self.logger.log_event(f"unknown command {line.name!r}")
            self.append_output(f"Unknown command: {line.name}")

    # --- Redraw ---

    def update_input(self):
        term = self.terminal
        row = term.input_row
        term.move_cursor(row, 0)
        term.clear_line()
        term.draw_text(self.prompt)

        text = self.scrollback.current()
        self.viewport.correct(text)

        term.draw_text(self.viewport.preview(text))
        term.move_cursor(row, len(self.prompt) + self.viewport.preview_cursor)
        term.refresh()

    def update_output(self):
        self.terminal.draw_output(self.output.lines)
        # Drawing the output window leaves the hardware cursor there
        self.terminal.move_cursor(self.terminal.input_row,
                                  len(self.prompt) + self.viewport.preview_cursor)
        self.terminal.refresh()

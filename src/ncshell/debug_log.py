from __future__ import annotations

import curses
import time
from pathlib import Path

from ncshell.types import CommandLine, ts_str


def _key_name(ch: int) -> str:
    try:
        return curses.keyname(ch).decode("ascii", errors="replace")
    except (ValueError, OverflowError, curses.error):
        return str(ch)


class DebugLogger:
    """Manages optional debug log files for keystrokes, commands, and output."""

    def __init__(self, directory: str | Path = "."):
        self.enabled = False
        self.directory = Path(directory)
        self._input_fh = None
        self._command_fh = None
        self._output_fh = None

    def start(self):
        self.directory.mkdir(parents=True, exist_ok=True)
        self._input_fh = open(self.directory / "ncshell_input.log", "a", encoding="utf-8")
        self._command_fh = open(self.directory / "ncshell_commands.log", "a", encoding="utf-8")
        self._output_fh = open(self.directory / "ncshell_output.log", "a", encoding="utf-8")
        self.enabled = True
        sep = f"\n{'='*60}\n  Session started: {time.strftime('%Y-%m-%d %H:%M:%S')}\n{'='*60}\n"
        for fh in (self._input_fh, self._command_fh, self._output_fh):
            fh.write(sep)
            fh.flush()

    def stop(self):
        self.enabled = False
        for fh in (self._input_fh, self._command_fh, self._output_fh):
            if fh:
                try:
                    fh.close()
                except OSError:
                    pass
        self._input_fh = self._command_fh = self._output_fh = None

    def toggle(self) -> bool:
        if self.enabled:
            self.stop()
        else:
            self.start()
        return self.enabled

    def log_key(self, ch: int):
        if not self.enabled or not self._input_fh:
            return
        self._input_fh.write(f"{ts_str(time.time())} | {ch:>4} {_key_name(ch)}\n")
        self._input_fh.flush()

    def log_command(self, line: CommandLine):
        if not self.enabled or not self._command_fh:
            return
        self._command_fh.write(
            f"{ts_str(time.time())} CMD | {line.name} {line.args!r}\n"
        )
        self._command_fh.flush()

    def log_event(self, text: str):
        if not self.enabled or not self._command_fh:
            return
        self._command_fh.write(f"{ts_str(time.time())} SYS | {text}\n")
        self._command_fh.flush()

    def log_output(self, lines: list[str]):
        if not self.enabled or not self._output_fh:
            return
        for line in lines:
            self._output_fh.write(f"{ts_str(time.time())} | {line}\n")
        self._output_fh.flush()

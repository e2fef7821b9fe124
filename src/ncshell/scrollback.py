from __future__ import annotations

from ncshell.commands import parse_command_line
from ncshell.types import CommandLine


class Scrollback:
    """Submitted command history plus one editable draft slot.

    ``entries[0]`` is the draft being typed; ``entries[1:]`` mirror the
    history log, most recent first. Navigating moves ``index`` through the
    entries. Edits made while viewing an older entry only live until the next
    submit, which rebuilds ``entries`` from the history log.
    """

    def __init__(self):
        self.history: list[str] = []
        self.entries: list[str] = [""]
        self.index = 0  # 0 means editing the draft

    def current(self) -> str:
        return self.entries[self.index]

    def set_current(self, text: str):
        self.entries[self.index] = text

    def navigate_older(self) -> bool:
        """Move one entry back in time. Returns True if the index moved."""
        if self.index + 1 < len(self.entries):
            self.index += 1
            return True
        return False

    def navigate_newer(self) -> bool:
        """Move one entry towards the draft. Returns True if the index moved."""
        if self.index > 0:
            self.index -= 1
            return True
        return False

    def submit(self) -> CommandLine | None:
        """Commit the current entry to history.

        Returns None (and changes nothing) when the entry is blank.
        """
        text = self.current().strip()
        if not text:
            return None
        self.history.insert(0, text)
        self.entries = [""] + self.history
        self.index = 0
        name, args = parse_command_line(text)
        return CommandLine(text=text, name=name, args=args)

    def reset_draft(self):
        self.entries[0] = ""
        self.index = 0

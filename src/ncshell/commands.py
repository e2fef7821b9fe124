"""Command registry and command-line parsing.

No terminal access here; handlers write their own output through the shell.
"""

from __future__ import annotations

from typing import Callable

Handler = Callable[[list[str]], None]


def parse_command_line(text: str) -> tuple[str, list[str]]:
    """Split a trimmed line into a command name and its arguments.

    Arguments are split on single spaces. There is no quoting or escaping, so
    runs of spaces produce empty arguments.
    """
    parts = text.split(" ")
    return parts[0], parts[1:]


class CommandRegistry:
    """Case-insensitive map of command names to handlers.

    The first registration of a name wins; later ones are ignored.
    """

    def __init__(self):
        self._handlers: dict[str, Handler] = {}

    def register(self, name: str, handler: Handler) -> bool:
        """Register ``handler`` under ``name``. Returns False if it was taken."""
        key = name.lower()
        if key in self._handlers:
            return False
        self._handlers[key] = handler
        return True

    def get(self, name: str) -> Handler | None:
        return self._handlers.get(name.lower())

    def dispatch(self, name: str, args: list[str]) -> bool:
        """Run the handler for ``name``. Returns False if there is none."""
        handler = self.get(name)
        if handler is None:
            return False
        handler(args)
        return True

    def names(self) -> list[str]:
        return sorted(self._handlers)

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._handlers

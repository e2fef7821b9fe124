"""Stock commands registered by the ncshell application."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ncshell.constants import RESERVED_COMMANDS

if TYPE_CHECKING:
    from ncshell.debug_log import DebugLogger
    from ncshell.shell import Shell


def register_builtins(shell: "Shell", logger: "DebugLogger | None" = None):
    """Register help, echo, history, prompt and (with a logger) debug."""

    def cmd_help(args: list[str]):
        names = shell.commands.names() + sorted(RESERVED_COMMANDS)
        shell.append_output("Commands: " + ", ".join(names))

    def cmd_echo(args: list[str]):
        shell.append_output(" ".join(args))

    def cmd_history(args: list[str]):
        history = shell.scrollback.history
        # Oldest first, like a shell's history builtin
        for n, text in enumerate(reversed(history), start=1):
            shell.append_output(f"{n:>4}  {text}")

    def cmd_prompt(args: list[str]):
        if not args:
            shell.append_output(f"Prompt is {shell.prompt!r}")
            return
        # Trailing space keeps the cursor off the prompt text
        shell.set_prompt(" ".join(args) + " ")

    shell.register_command("help", cmd_help)
    shell.register_command("echo", cmd_echo)
    shell.register_command("history", cmd_history)
    shell.register_command("prompt", cmd_prompt)

    if logger is not None:
        def cmd_debug(args: list[str]):
            state = logger.toggle()
            shell.append_output(f"Debug logging {'ON' if state else 'OFF'}")

        shell.register_command("debug", cmd_debug)

from __future__ import annotations

import signal

from ncshell.builtins import register_builtins
from ncshell.config import Config
from ncshell.debug_log import DebugLogger
from ncshell.shell import Shell, ShellExit
from ncshell.terminal import CursesTerminal

# How long to wait for a keystroke before giving pending interrupts a turn
POLL_TIMEOUT = 0.05


def run_shell(stdscr, config: Config, debug: bool = False) -> int:
    """Run an interactive session until exit/quit. Returns the exit status.

    A ShellExit with a non-zero status is re-raised so the caller can report
    its reason once curses has restored the terminal.
    """
    logger = DebugLogger(config.debug.directory)
    if debug or config.debug.enabled:
        logger.start()

    previous_handler = signal.getsignal(signal.SIGINT)
    terminal = None
    try:
        terminal = CursesTerminal(stdscr)
        shell = Shell(
            terminal,
            prompt=config.shell.prompt,
            cursor_margin=config.shell.cursor_margin,
            logger=logger,
        )
        # Only flags the interrupt; the shell acts on it between keystrokes
        signal.signal(signal.SIGINT, lambda signum, frame: shell.request_interrupt())

        register_builtins(shell, logger)
        shell.update_input()
        if config.shell.welcome:
            shell.append_output(config.shell.welcome)

        while True:
            terminal.wait_for_input(POLL_TIMEOUT)
            shell.process_input()
    except ShellExit as e:
        if e.reason:
            logger.log_event(e.reason)
        if e.status:
            raise
        return e.status
    except Exception as e:
        logger.log_event(f"fatal: {e!r}")
        raise
    finally:
        signal.signal(signal.SIGINT, previous_handler)
        if terminal is not None:
            terminal.close()
        logger.stop()

import argparse
import curses
import sys

from ncshell import __version__
from ncshell.app import run_shell
from ncshell.config import load_config
from ncshell.shell import ShellExit


def main():
    p = argparse.ArgumentParser(description="Full-screen curses command shell")
    p.add_argument("-v", "--version", action="version",
                   version=f"%(prog)s {__version__}")
    p.add_argument("-c", "--config", default="default",
                   help="Configuration name or path (searches ~/.ncshell/configs/, ./configs/, or use full path)")
    p.add_argument("-p", "--prompt", default=None,
                   help="Prompt string - overrides config")
    p.add_argument("-m", "--margin", type=int, default=None,
                   help="Cells kept between the cursor and the input window edges - overrides config")
    p.add_argument("-d", "--debug", action="store_true", default=False,
                   help="Enable debug logging to ncshell_*.log files")
    args = p.parse_args()

    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        p.error(str(e))

    # CLI arguments override config values
    if args.prompt is not None:
        config.shell.prompt = args.prompt
    if args.margin is not None:
        if args.margin < 0:
            p.error("--margin must not be negative")
        config.shell.cursor_margin = args.margin

    try:
        status = curses.wrapper(run_shell, config, debug=args.debug)
    except ShellExit as e:
        print(f"ncshell: {e}", file=sys.stderr)
        status = e.status
    sys.exit(status)

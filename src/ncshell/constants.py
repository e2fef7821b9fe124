import curses

# Raw key codes curses does not name
KEY_DEL = 127
KEY_CTRL_H = 8
KEY_LINE_FEED = 10
KEY_CARRIAGE_RETURN = 13

DELETE_KEYS = {curses.KEY_BACKSPACE, KEY_DEL, KEY_CTRL_H}
SUBMIT_KEYS = {curses.KEY_ENTER, KEY_LINE_FEED, KEY_CARRIAGE_RETURN}

# Drawn at either end of the input line when text is scrolled out of view
CONTINUATION_MARKER = "$"

DEFAULT_PROMPT = "> "
DEFAULT_CURSOR_MARGIN = 10

# Always end the session, whatever the registry holds
RESERVED_COMMANDS = {"exit", "quit"}

INTERRUPT_HINT = "Use 'exit' to end the shell."

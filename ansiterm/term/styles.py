"""
ANSI styling of text.

The functions here take a ``supports_color`` flag and return the message
unchanged when it is false, so output stays plain (and snapshot-testable)
on terminals that don't do ANSI.
"""

import enum
from types import MappingProxyType


BOLD = "\x1b[1m"
RESET_ALL = "\x1b[0m"
RESET_COLOR = "\x1b[39m"
RESET_BOLD = "\x1b[22m"
CLEAR = "\x1b[2J\x1b[H"


class TerminalColor(enum.Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    CYAN = "cyan"
    YELLOW = "yellow"
    MAGENTA = "magenta"
    GREY = "grey"


COLOR_CODES = MappingProxyType(
    {
        TerminalColor.RED: "\x1b[31m",
        TerminalColor.GREEN: "\x1b[32m",
        TerminalColor.BLUE: "\x1b[34m",
        TerminalColor.CYAN: "\x1b[36m",
        TerminalColor.MAGENTA: "\x1b[35m",
        TerminalColor.YELLOW: "\x1b[33m",
        TerminalColor.GREY: "\x1b[1;30m",
    }
)


def color_code(color):
    """Get the escape code that switches to the given color."""
    return COLOR_CODES[color]


def bolden(message, supports_color):
    """Make each line of the message bold."""
    if not supports_color or not message:
        return message
    result = ""
    for line in message.split("\n"):
        # Bold controls already in the line are redundant, and an embedded
        # reset would stop the boldness early. Remove them.
        line = line.replace(BOLD, "").replace(RESET_BOLD, "")
        result += f"{BOLD}{line}{RESET_BOLD}\n"
    return _strip_added_newline(message, result)


def colorize(message, color, supports_color):
    """Give each line of the message the given color.

    Color resets inside the message are followed by this color's code, so
    that a nested colored piece does not end the outer color.
    """
    if not supports_color or color is None or not message:
        return message
    code = COLOR_CODES[color]
    result = ""
    for line in message.split("\n"):
        line = line.replace(RESET_COLOR, RESET_COLOR + code)
        result += f"{code}{line}{RESET_COLOR}\n"
    return _strip_added_newline(message, result)


def clear_screen(supports_color):
    """Get the text that clears the screen.

    Without ANSI support, two newlines is the best we can do.
    """
    return CLEAR if supports_color else "\n\n"


def warning_mark(terminal):
    """Warning mark to use in stdout or stderr."""
    return terminal.bolden(terminal.colorize("[!]", TerminalColor.RED))


def success_mark(terminal):
    """Success mark to use in stdout."""
    return terminal.bolden(terminal.colorize("✓", TerminalColor.GREEN))


def _strip_added_newline(message, result):
    if not message.endswith("\n") and result.endswith("\n"):
        return result[:-1]
    return result

"""
Detect what the terminal can display.

The detection works on a ``PlatformFacts`` object rather than on the live
process, so that the rules can be tested for any platform.
"""

import os
import sys


# Windows Terminal sets this variable for every session it hosts.
# https://github.com/microsoft/terminal/blob/main/doc/user-docs/index.md
TERMINAL_HOST_MARKER = "WT_SESSION"


class PlatformFacts:
    """The platform facts that terminal capabilities are derived from."""

    def __init__(self, is_windows=False, environment=None, stdout_supports_ansi=False):
        self.is_windows = bool(is_windows)
        self.environment = dict(environment or {})
        self.stdout_supports_ansi = stdout_supports_ansi

    def __repr__(self):
        return (
            f"<PlatformFacts is_windows={self.is_windows} "
            f"stdout_supports_ansi={self.stdout_supports_ansi}>"
        )

    @classmethod
    def from_host(cls, stdout=None):
        """Get the facts for the current process."""
        stdout = stdout or sys.__stdout__
        is_windows = sys.platform.startswith("win")
        environment = dict(os.environ)
        return cls(
            is_windows=is_windows,
            environment=environment,
            stdout_supports_ansi=_stdout_supports_ansi(stdout, is_windows, environment),
        )


def _stdout_supports_ansi(stdout, is_windows, environment):
    if environment.get("NO_COLOR"):
        return False
    try:
        if not stdout.isatty():
            return False
    except (AttributeError, ValueError):
        return False  # No isatty() or a closed file
    if is_windows:
        from .raw_mode_windows import ENABLE_VIRTUAL_TERMINAL_PROCESSING, get_console_mode

        mode = get_console_mode(stdout.fileno())
        return bool(mode & ENABLE_VIRTUAL_TERMINAL_PROCESSING)
    term = environment.get("TERM", "")
    return bool(term) and term != "dumb"


def supports_color(facts):
    """Whether the terminal supports color escape codes.

    An unknown answer counts as no support.
    """
    return bool(facts.stdout_supports_ansi)


def supports_emoji(facts):
    """Whether the terminal can display emoji.

    Assume so when not on Windows. On Windows the classic console cannot,
    but Windows Terminal can.
    """
    return not facts.is_windows or TERMINAL_HOST_MARKER in facts.environment

"""
Utilities to work with the terminal and escape sequences.

Since it's the 2020s, we assume terminals that speak a sensible subset of
vt100 when they claim ANSI support, and plain text otherwise. We don't use
curses, because that's Unix only, and would require a whole separate
implementation for Windows.

There are a few parts where the code for Unix and Windows needs to differ,
namely switching the input to single-character mode, and reading stdin
asynchronously. This is why the RawModeController has implementations for
Unix and Windows.
"""

from .capabilities import PlatformFacts, supports_color, supports_emoji  # noqa
from .styles import TerminalColor, warning_mark, success_mark  # noqa
from .raw_mode import InteractionMode, RawModeController  # noqa
from .keystrokes import KeystrokeStream, StdinSource  # noqa
from .status import StatusPrinter  # noqa
from .terminal import Terminal, AnsiTerminal, StubTerminal  # noqa

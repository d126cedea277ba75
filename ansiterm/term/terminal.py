"""
The command line terminal, as seen by a command line tool.

There are two implementations of the ``Terminal`` interface: the
``AnsiTerminal`` for real use, and the ``StubTerminal`` for tests and other
situations without a user. The caller picks one and passes it to the code
that needs it.
"""

import io
import logging

from . import styles
from .capabilities import PlatformFacts, supports_color, supports_emoji
from .keystrokes import KeystrokeStream, StdinSource
from .raw_mode import RawModeController
from ..prompt import CharPrompt


logger = logging.getLogger("ansiterm")


class Terminal:
    """Base class for the command line terminal."""

    #: Whether we interact with the user via the terminal. Prompting is
    #: only allowed when this is set.
    uses_terminal_ui = False

    @property
    def supports_color(self):
        """Whether the current terminal supports color escape codes."""
        raise NotImplementedError()

    @property
    def supports_emoji(self):
        """Whether the current terminal can display emoji."""
        raise NotImplementedError()

    def bolden(self, message):
        raise NotImplementedError()

    def colorize(self, message, color):
        raise NotImplementedError()

    def clear_screen(self):
        raise NotImplementedError()

    def _set_single_char_mode(self, value):
        raise NotImplementedError()

    single_char_mode = property(
        None,
        lambda self, value: self._set_single_char_mode(value),
        None,
        "Write-only flag to turn single-character input mode on or off.",
    )

    @property
    def keystrokes(self):
        """The KeystrokeStream of the console.

        Useful when the console is in single-character mode.
        """
        raise NotImplementedError()

    async def prompt_for_char_input(
        self,
        accepted_characters,
        status,
        prompt=None,
        default_choice_index=None,
        display_accepted_characters=True,
    ):
        """Prompt the user to type one of the given characters.

        Re-prompts if a character is typed that is not in the list. If
        ``prompt`` is given, it is written before waiting for a keystroke
        each time, followed by the accepted characters if
        ``display_accepted_characters`` is true. Output goes to ``status``,
        which must have a ``print_status(message, emphasis, newline)``
        method.

        If ``default_choice_index`` is given, pressing Enter selects the
        character at that index.

        Raises RuntimeError if ``uses_terminal_ui`` is false, and ValueError
        for invalid arguments. Only one prompt should be active at a time.
        """
        raise NotImplementedError()


class AnsiTerminal(Terminal):
    """A terminal that uses ANSI escape codes for styling."""

    def __init__(self, stdin=None, platform=None, raw_mode=None, keystroke_source=None):
        self._platform = platform or PlatformFacts.from_host()
        self._raw_mode = raw_mode or RawModeController(stdin)
        self._keystroke_source = keystroke_source or StdinSource(stdin)
        self._keystrokes = None
        self.uses_terminal_ui = False

    @property
    def supports_color(self):
        return supports_color(self._platform)

    @property
    def supports_emoji(self):
        return supports_emoji(self._platform)

    def bolden(self, message):
        return styles.bolden(message, self.supports_color)

    def colorize(self, message, color):
        return styles.colorize(message, color, self.supports_color)

    def clear_screen(self):
        return styles.clear_screen(self.supports_color)

    def _set_single_char_mode(self, value):
        self._raw_mode.single_char_mode = value

    @property
    def keystrokes(self):
        if self._keystrokes is None:
            logger.info("keystroke stream created")
            self._keystrokes = KeystrokeStream(self._keystroke_source)
        return self._keystrokes

    async def prompt_for_char_input(
        self,
        accepted_characters,
        status,
        prompt=None,
        default_choice_index=None,
        display_accepted_characters=True,
    ):
        if not self.uses_terminal_ui:
            raise RuntimeError("cannot prompt without a terminal ui")
        session = CharPrompt(
            accepted_characters,
            prompt=prompt,
            default_choice_index=default_choice_index,
            display_accepted_characters=display_accepted_characters,
            bolden=self.bolden,
        )
        choice = None
        with self._raw_mode.single_char():
            while not session.accepts(choice):
                session.write_prompt(status)
                choice = await self.keystrokes.first()
                status.print_status(choice)
        return session.resolve(choice)


class StubTerminal(Terminal):
    """A terminal without a user: no styling, no input."""

    def __init__(self):
        self.uses_terminal_ui = False
        self._keystrokes = None

    @property
    def supports_color(self):
        return False

    @property
    def supports_emoji(self):
        return False

    def bolden(self, message):
        return message

    def colorize(self, message, color):
        return message

    def clear_screen(self):
        return "\n\n"

    def _set_single_char_mode(self, value):
        pass

    @property
    def keystrokes(self):
        if self._keystrokes is None:
            self._keystrokes = KeystrokeStream(_EmptySource())
        return self._keystrokes

    async def prompt_for_char_input(
        self,
        accepted_characters,
        status,
        prompt=None,
        default_choice_index=None,
        display_accepted_characters=True,
    ):
        raise io.UnsupportedOperation(
            "prompt_for_char_input is not supported by the stub terminal."
        )


class _EmptySource:
    async def read(self, n=-1):
        return b""

import sys
import enum
import logging
import contextlib


logger = logging.getLogger("ansiterm")


class InteractionMode(enum.Enum):
    COOPERATIVE = "cooperative"
    RAW_SINGLE_CHAR = "raw-single-char"


class RawModeController:
    """Base class to toggle single-character input mode on stdin.

    Instantiating this class produces a class corresponding with the
    current platform.

    In single-character mode, echo and line buffering are off, so each
    keystroke can be read as soon as it is typed. If stdin is not a
    terminal, or the device refuses the change, toggling is a no-op.

    Only one party should toggle the mode at a time; nothing here locks.
    """

    def __new__(cls, *args, **kwargs):
        # Select implementation, unless a specific subclass is asked for
        if cls is RawModeController:
            if sys.platform.startswith("win"):
                from .raw_mode_windows import WindowsRawMode as cls
            else:
                from .raw_mode_unix import UnixRawMode as cls
        return super().__new__(cls)

    def __init__(self, stdin=None):
        self._stdin = stdin or sys.__stdin__
        self._mode = InteractionMode.COOPERATIVE

    @property
    def mode(self):
        """The current InteractionMode, as confirmed by the device."""
        return self._mode

    def _set_single_char_mode(self, value):
        if not self.is_interactive():
            logger.debug("stdin is not a terminal, not changing input mode")
            return
        # The order matters: on Windows, echo can only be enabled
        # while line input is enabled.
        if value:
            ok = self._set_echo(False)
            ok = self._set_line_mode(False) and ok
            target = InteractionMode.RAW_SINGLE_CHAR
        else:
            ok = self._set_line_mode(True)
            ok = self._set_echo(True) and ok
            target = InteractionMode.COOPERATIVE
        # The mode only changes when the device accepted the change
        if ok:
            self._mode = target
        logger.debug(f"input mode is now {self._mode.value}")

    single_char_mode = property(
        None, _set_single_char_mode, None, "Write-only flag to enter or leave raw mode."
    )

    @contextlib.contextmanager
    def single_char(self):
        """Context manager for single-character mode.

        Cooperative mode is restored on exit, also when an error occurred.
        """
        self.single_char_mode = True
        try:
            yield self
        finally:
            self.single_char_mode = False

    def is_interactive(self):
        """Whether stdin is attached to a terminal."""
        try:
            return self._stdin.isatty()
        except (AttributeError, ValueError):
            return False  # No isatty() or a closed file

    # For subclasses to implement. These return whether the change succeeded.

    def _set_echo(self, enabled):
        raise NotImplementedError()

    def _set_line_mode(self, enabled):
        raise NotImplementedError()

import msvcrt
import ctypes
import logging
from ctypes import wintypes

from .raw_mode import RawModeController


logger = logging.getLogger("ansiterm")

KERNEL32 = ctypes.WinDLL("kernel32", use_last_error=True)  # type: ignore

ENABLE_LINE_INPUT = 0x0002
ENABLE_ECHO_INPUT = 0x0004
ENABLE_VIRTUAL_TERMINAL_PROCESSING = 0x0004


def get_console_mode(fd) -> int:
    """Get the console mode for a given file descriptor (for stdout or stdin)"""
    windows_filehandle = msvcrt.get_osfhandle(fd)  # type: ignore
    mode = wintypes.DWORD()
    KERNEL32.GetConsoleMode(windows_filehandle, ctypes.byref(mode))
    return mode.value


def set_console_mode(fd, mode: int) -> bool:
    """Set the console mode for a given file descriptor (for stdout or stdin)."""
    windows_filehandle = msvcrt.get_osfhandle(fd)  # type: ignore
    success = KERNEL32.SetConsoleMode(windows_filehandle, mode)
    return bool(success)


class WindowsRawMode(RawModeController):

    def _set_echo(self, enabled):
        return self._update_mode(ENABLE_ECHO_INPUT, enabled)

    def _set_line_mode(self, enabled):
        return self._update_mode(ENABLE_LINE_INPUT, enabled)

    def _update_mode(self, flag, enabled):
        try:
            fd = self._stdin.fileno()
            mode = get_console_mode(fd)
        except (OSError, ValueError) as err:
            logger.debug(f"cannot get console mode: {err}")
            return False
        mode = (mode | flag) if enabled else (mode & ~flag)
        if not set_console_mode(fd, mode):
            logger.debug(f"cannot set console mode, error {ctypes.get_last_error()}")
            return False
        return True

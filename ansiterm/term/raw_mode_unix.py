import tty  # Unix
import logging
import termios  # Unix

from .raw_mode import RawModeController


logger = logging.getLogger("ansiterm")


class UnixRawMode(RawModeController):

    def __init__(self, stdin=None):
        super().__init__(stdin)
        self._ori_cc = None

    def _set_echo(self, enabled):
        return self._update_lflag(termios.ECHO, enabled)

    def _set_line_mode(self, enabled):
        return self._update_lflag(termios.ICANON, enabled)

    def _update_lflag(self, flag, enabled):
        try:
            fd = self._stdin.fileno()
            attrs = termios.tcgetattr(fd)
        except (termios.error, OSError, ValueError) as err:
            logger.debug(f"cannot get terminal attributes: {err}")
            return False

        if enabled:
            attrs[tty.LFLAG] |= flag
        else:
            attrs[tty.LFLAG] &= ~flag

        cc = attrs[tty.CC]
        if flag == termios.ICANON:
            if not enabled:
                # VMIN defines the number of characters read at a time in
                # non-canonical mode. It seems to default to 1 on Linux, but on
                # Solaris and derived operating systems it defaults to 4. (This is
                # because the VMIN slot is the same as the VEOF slot, which
                # defaults to ASCII EOT = Ctrl-D = 4.) So we store the
                # original values, to put them back in canonical mode.
                self._ori_cc = cc[termios.VMIN], cc[termios.VTIME]
                cc[termios.VMIN] = 1
                cc[termios.VTIME] = 0
            elif self._ori_cc is not None:
                cc[termios.VMIN], cc[termios.VTIME] = self._ori_cc
                self._ori_cc = None

        try:
            termios.tcsetattr(fd, termios.TCSANOW, attrs)
        except termios.error as err:
            logger.debug(f"cannot set terminal attributes: {err}")
            return False
        return True

import sys


class StatusPrinter:
    """Writes status messages for the user, e.g. prompts and echoed keys.

    Code that prompts the user writes through this object rather than to
    stdout directly, so that output can be redirected or captured.
    """

    def __init__(self, terminal, file_out=None):
        self._terminal = terminal
        self._file_out = file_out or sys.stdout

    def print_status(self, message, emphasis=False, newline=True):
        if emphasis:
            message = self._terminal.bolden(message)
        if newline:
            message += "\n"
        self._file_out.write(message)
        self._file_out.flush()

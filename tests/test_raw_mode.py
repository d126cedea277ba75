import io
import os
import sys

import pytest

from ansiterm.term import InteractionMode, RawModeController


class FakeTty:
    def isatty(self):
        return True


class RecordingRawMode(RawModeController):
    def __init__(self, stdin=None):
        super().__init__(stdin or FakeTty())
        self.calls = []

    def _set_echo(self, enabled):
        self.calls.append(("echo", enabled))
        return True

    def _set_line_mode(self, enabled):
        self.calls.append(("line", enabled))
        return True


def test_platform_class_is_selected():
    controller = RawModeController(io.BytesIO())
    if sys.platform.startswith("win"):
        assert type(controller).__name__ == "WindowsRawMode"
    else:
        assert type(controller).__name__ == "UnixRawMode"
    assert isinstance(controller, RawModeController)
    assert controller.mode is InteractionMode.COOPERATIVE


def test_order_of_mode_changes():
    controller = RecordingRawMode()

    controller.single_char_mode = True
    assert controller.calls == [("echo", False), ("line", False)]
    assert controller.mode is InteractionMode.RAW_SINGLE_CHAR

    controller.calls.clear()
    controller.single_char_mode = False
    assert controller.calls == [("line", True), ("echo", True)]
    assert controller.mode is InteractionMode.COOPERATIVE


def test_single_char_mode_is_write_only():
    controller = RecordingRawMode()
    with pytest.raises(AttributeError):
        controller.single_char_mode


def test_non_interactive_stdin_is_left_alone():
    class NotATty(FakeTty):
        def isatty(self):
            return False

    for stdin in [NotATty(), io.BytesIO(), object()]:
        controller = RecordingRawMode(stdin)
        controller.single_char_mode = True
        assert controller.calls == []
        assert controller.mode is InteractionMode.COOPERATIVE


def test_mode_is_unchanged_when_device_refuses():
    class RefusingRawMode(RecordingRawMode):
        def _set_line_mode(self, enabled):
            super()._set_line_mode(enabled)
            return False

    controller = RefusingRawMode()
    controller.single_char_mode = True
    # Both changes are still attempted, in order
    assert controller.calls == [("echo", False), ("line", False)]
    assert controller.mode is InteractionMode.COOPERATIVE

    with controller.single_char():
        assert controller.mode is InteractionMode.COOPERATIVE
    assert controller.mode is InteractionMode.COOPERATIVE


def test_single_char_context_restores_on_error():
    controller = RecordingRawMode()

    with pytest.raises(ZeroDivisionError):
        with controller.single_char():
            assert controller.mode is InteractionMode.RAW_SINGLE_CHAR
            1 / 0

    assert controller.mode is InteractionMode.COOPERATIVE
    assert controller.calls[-2:] == [("line", True), ("echo", True)]


# %% On a real pseudo terminal


unix_only = pytest.mark.skipif(sys.platform.startswith("win"), reason="uses termios")


@pytest.fixture
def pty_stdin():
    master, slave = os.openpty()
    stdin = os.fdopen(slave, "rb", buffering=0)
    try:
        yield stdin
    finally:
        stdin.close()
        os.close(master)


@unix_only
def test_unix_raw_mode_on_pty(pty_stdin):
    import termios

    fd = pty_stdin.fileno()
    ori_attrs = termios.tcgetattr(fd)
    assert ori_attrs[3] & termios.ECHO
    assert ori_attrs[3] & termios.ICANON

    controller = RawModeController(pty_stdin)
    assert controller.is_interactive()

    controller.single_char_mode = True
    assert controller.mode is InteractionMode.RAW_SINGLE_CHAR
    attrs = termios.tcgetattr(fd)
    assert not attrs[3] & termios.ECHO
    assert not attrs[3] & termios.ICANON
    assert attrs[6][termios.VMIN] in (1, b"\x01")
    # Enter still produces a line feed
    assert attrs[0] & termios.ICRNL == ori_attrs[0] & termios.ICRNL

    controller.single_char_mode = False
    attrs = termios.tcgetattr(fd)
    assert attrs[3] & termios.ECHO
    assert attrs[3] & termios.ICANON
    assert attrs[3] == ori_attrs[3]
    assert attrs[6][termios.VMIN] == ori_attrs[6][termios.VMIN]


@unix_only
def test_unix_device_errors_are_swallowed():
    r, w = os.pipe()
    try:

        class PipeClaimingToBeTty:
            def isatty(self):
                return True

            def fileno(self):
                return r

        controller = RawModeController(PipeClaimingToBeTty())
        controller.single_char_mode = True
        assert controller.mode is InteractionMode.COOPERATIVE
        controller.single_char_mode = False
        assert controller.mode is InteractionMode.COOPERATIVE
    finally:
        os.close(r)
        os.close(w)

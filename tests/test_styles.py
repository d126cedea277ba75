import pytest

from ansiterm.term import AnsiTerminal, PlatformFacts, StubTerminal
from ansiterm.term.styles import (
    BOLD,
    CLEAR,
    COLOR_CODES,
    RESET_ALL,
    RESET_BOLD,
    RESET_COLOR,
    TerminalColor,
    bolden,
    clear_screen,
    color_code,
    colorize,
    success_mark,
    warning_mark,
)


TEXTS = ["", "a", "hello world", "a\nb", "a\n", "\n", "\n\nx\n", BOLD + "x" + RESET_BOLD]


def test_escape_codes():
    assert BOLD == "\x1b[1m"
    assert RESET_ALL == "\x1b[0m"
    assert RESET_COLOR == "\x1b[39m"
    assert RESET_BOLD == "\x1b[22m"
    assert CLEAR == "\x1b[2J\x1b[H"

    assert color_code(TerminalColor.RED) == "\x1b[31m"
    assert color_code(TerminalColor.GREEN) == "\x1b[32m"
    assert color_code(TerminalColor.BLUE) == "\x1b[34m"
    assert color_code(TerminalColor.CYAN) == "\x1b[36m"
    assert color_code(TerminalColor.MAGENTA) == "\x1b[35m"
    assert color_code(TerminalColor.YELLOW) == "\x1b[33m"
    assert color_code(TerminalColor.GREY) == "\x1b[1;30m"


def test_color_codes_are_total_and_fixed():
    assert set(COLOR_CODES) == set(TerminalColor)
    assert len(set(COLOR_CODES.values())) == len(TerminalColor)
    with pytest.raises(TypeError):
        COLOR_CODES[TerminalColor.RED] = "\x1b[91m"


def test_no_styling_without_color_support():
    for text in TEXTS:
        assert bolden(text, False) == text
        for color in TerminalColor:
            assert colorize(text, color, False) == text


def test_empty_string_is_kept():
    for supported in (True, False):
        assert bolden("", supported) == ""
        assert colorize("", TerminalColor.RED, supported) == ""


def test_bolden():
    assert bolden("a", True) == "\x1b[1ma\x1b[22m"
    assert bolden("a\nb", True) == "\x1b[1ma\x1b[22m\n\x1b[1mb\x1b[22m"

    # A trailing newline is kept, and results in an empty bold line
    assert bolden("a\n", True) == "\x1b[1ma\x1b[22m\n\x1b[1m\x1b[22m\n"


def test_bolden_removes_embedded_bold_controls():
    assert bolden("x" + RESET_BOLD + "y", True) == BOLD + "xy" + RESET_BOLD
    assert bolden(BOLD + "x" + RESET_BOLD + " y", True) == BOLD + "x y" + RESET_BOLD


def test_bolden_twice_is_same_as_once():
    # A trailing newline adds an empty bold line each time, which does not
    # change the rendered result, so we only compare the other cases.
    for text in TEXTS:
        if not text.endswith("\n"):
            once = bolden(text, True)
            assert bolden(once, True) == once


def test_no_newline_is_added():
    for text in TEXTS:
        if text and not text.endswith("\n"):
            assert not bolden(text, True).endswith("\n")
            for color in TerminalColor:
                assert not colorize(text, color, True).endswith("\n")


def test_colorize():
    assert colorize("a", TerminalColor.RED, True) == "\x1b[31ma\x1b[39m"
    assert colorize("a\nb", TerminalColor.GREEN, True) == "\x1b[32ma\x1b[39m\n\x1b[32mb\x1b[39m"
    assert colorize("a\n", TerminalColor.GREEN, True) == "\x1b[32ma\x1b[39m\n\x1b[32m\x1b[39m\n"
    assert colorize("a", None, True) == "a"


def test_colorize_nested():
    inner = colorize("b", TerminalColor.BLUE, True)
    outer = colorize("x" + inner + "y", TerminalColor.RED, True)
    # After the inner reset, the outer color is resumed
    assert outer == "\x1b[31mx\x1b[34mb\x1b[39m\x1b[31my\x1b[39m"


def test_clear_screen():
    assert clear_screen(True) == "\x1b[2J\x1b[H"
    assert clear_screen(False) == "\n\n"


def test_marks():
    terminal = StubTerminal()
    assert warning_mark(terminal) == "[!]"
    assert success_mark(terminal) == "✓"

    terminal = AnsiTerminal(platform=PlatformFacts(stdout_supports_ansi=True))
    assert warning_mark(terminal) == "\x1b[1m\x1b[31m[!]\x1b[39m\x1b[22m"
    assert success_mark(terminal) == "\x1b[1m\x1b[32m✓\x1b[39m\x1b[22m"

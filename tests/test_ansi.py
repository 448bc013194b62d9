import pytest

from busdodge.ansi import ansi_plain, ansi_print
from busdodge.unit import Color

RECOVER = "\x1b[0m"


@pytest.mark.parametrize("text", ["", None])
def test_ansi_print_empty(text):
    assert ansi_print(text, Color.RED, Color.BLUE, True, True) == ""


@pytest.mark.parametrize("text", ["", None])
def test_ansi_plain_empty(text):
    assert ansi_plain(text, True, True) == ""


def test_ansi_print_all_options():
    assert ansi_print("ID", Color.YELLOW, Color.RED, True, True) == (
        "\x1b[1;5;33;41mID" + RECOVER
    )


def test_ansi_print_background_only():
    assert ansi_print(" ", Color.NOCHANGE, Color.BLUE) == "\x1b[44m " + RECOVER


def test_ansi_print_no_options_keeps_bare_sequence():
    assert ansi_print("x") == "\x1b[mx" + RECOVER


def test_ansi_print_wraps_text():
    result = ansi_print("hello", Color.GREEN)
    assert result.startswith("\x1b[")
    assert result.endswith("hello" + RECOVER)
    assert "32" in result


def test_ansi_plain_without_options_has_no_prefix():
    assert ansi_plain("abc") == "abc" + RECOVER


def test_ansi_plain_highlight():
    assert ansi_plain("abc", hi=True) == "\x1b[1mabc" + RECOVER


def test_ansi_plain_matches_print_for_attributes():
    assert ansi_plain("abc", True, True) == ansi_print(
        "abc", Color.NOCHANGE, Color.NOCHANGE, True, True
    )
"""Tests for the terminal token reader and number formatting."""
import io

import pytest

from measurelab.console import INVALID_NUMBER_MESSAGE, Terminal, format_number
from measurelab.exceptions import InputClosedError


def _terminal(text: str):
    out = io.StringIO()
    return Terminal(stdin=io.StringIO(text), stdout=out), out


def test_ints_may_share_a_line():
    terminal, _ = _terminal("1 2\n3\n")
    assert terminal.ask_int("> ") == 1
    assert terminal.ask_int("> ") == 2
    assert terminal.ask_int("> ") == 3


def test_text_skips_blank_lines_and_trims():
    terminal, _ = _terminal("\n\n   Probe A  \n")
    assert terminal.ask_text("Name: ") == "Probe A"


def test_text_after_number_reads_next_line():
    terminal, _ = _terminal("5\nLab probe 2\n")
    assert terminal.ask_int("> ") == 5
    assert terminal.ask_text("Name: ") == "Lab probe 2"


def test_text_after_number_on_same_line():
    terminal, _ = _terminal("5 rest of line\n")
    assert terminal.ask_int("> ") == 5
    assert terminal.ask_text("Name: ") == "rest of line"


def test_malformed_int_discards_line_and_reprompts():
    terminal, out = _terminal("abc 7\n9\n")
    assert terminal.ask_int("Enter option: ") == 9
    output = out.getvalue()
    assert output.count("Enter option: ") == 2
    assert INVALID_NUMBER_MESSAGE in output


def test_numbers_accept_decimals_and_reject_non_finite():
    terminal, out = _terminal("nan\ninf\n-2.5\n")
    assert terminal.ask_number("Value: ") == -2.5
    assert out.getvalue().count(INVALID_NUMBER_MESSAGE) == 2


def test_choice_retries_until_valid():
    terminal, out = _terminal("0\n4\n2\n")
    assert terminal.ask_choice("Pick: ", range(1, 4), "Invalid choice. Please try again.") == 2
    assert out.getvalue().count("Invalid choice. Please try again.") == 2


def test_end_of_input_raises():
    terminal, _ = _terminal("")
    with pytest.raises(InputClosedError):
        terminal.ask_int("> ")
    with pytest.raises(EOFError):
        terminal.ask_text("> ")


def test_say_appends_newline():
    terminal, out = _terminal("")
    terminal.say("hello")
    terminal.say()
    assert out.getvalue() == "hello\n\n"


@pytest.mark.parametrize(
    "value, expected",
    [
        (50.0, "50"),
        (0.0, "0"),
        (0.5, "0.5"),
        (-12.25, "-12.25"),
        (1000000.0, "1e+06"),
        (123.4567, "123.457"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected

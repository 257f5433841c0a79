import io

import pytest

from missing_number.user_interface import (
    FORMAT_ERROR,
    ConsoleUserInterface,
    InputFormatError,
    is_yes,
    parse_numbers,
)


def _ui(text=""):
    out = io.StringIO()
    return ConsoleUserInterface(stdin=io.StringIO(text), stdout=out), out


def test_parse_numbers():
    assert parse_numbers("3 0 1\n") == [3, 0, 1]
    assert parse_numbers("  9\t6   4 ") == [9, 6, 4]
    assert parse_numbers("-2 0") == [-2, 0]
    assert parse_numbers("") == []


def test_parse_numbers_rejects_text():
    with pytest.raises(InputFormatError) as exc:
        parse_numbers("a b c")
    assert str(exc.value) == FORMAT_ERROR
    assert isinstance(exc.value, ValueError)


def test_get_numbers_writes_prompt():
    ui, out = _ui("3 0 1\n")
    assert ui.get_numbers_from_user() == [3, 0, 1]
    assert "Enter numbers separated by spaces" in out.getvalue()


def test_eof_gives_empty_sequence():
    ui, _ = _ui("")
    assert ui.get_numbers_from_user() == []


def test_display():
    ui, out = _ui()
    ui.display_result(2)
    ui.display_error("boom")
    assert out.getvalue().splitlines() == ["The missing number is: 2", "Error: boom"]


@pytest.mark.parametrize("answer,expected", [
    ("y", True), ("yes", True), (" YES \n", True), ("Y", True),
    ("n", False), ("no", False), ("", False), ("yep", False),
])
def test_is_yes(answer, expected):
    assert is_yes(answer) is expected


def test_ask_to_continue():
    ui, out = _ui("yes\nn\n")
    assert ui.ask_to_continue() is True
    assert ui.ask_to_continue() is False
    assert ui.ask_to_continue() is False  # EOF
    assert "(y/n)" in out.getvalue()

from typing import Optional, get_type_hints

import pytest

from descape_py.io.cursor import CodePointCursor
from descape_py.utils.string_utils import utf8_width, is_hex_digit, is_oct_digit, to_scalar


def test_advance_reports_byte_offsets() -> None:
    cursor = CodePointCursor("aé\U0001F600b")
    assert cursor.advance() == (0, "a")
    assert cursor.position == 1
    assert cursor.advance() == (1, "é")
    assert cursor.position == 3
    assert cursor.advance() == (3, "\U0001F600")
    assert cursor.position == 7
    assert cursor.advance() == (7, "b")
    assert cursor.position == 8
    assert cursor.advance() is None
    assert cursor.position == 8


def test_peek_does_not_consume() -> None:
    cursor = CodePointCursor("xy")
    assert cursor.peek() == "x"
    assert cursor.peek() == "x"
    assert cursor.position == 0
    assert cursor.index == 0
    cursor.advance()
    assert cursor.peek() == "y"
    assert cursor.index == 1


def test_empty_text_is_at_end() -> None:
    cursor = CodePointCursor("")
    assert cursor.at_end
    assert cursor.peek() is None
    assert cursor.advance() is None
    assert list(cursor) == []


def test_iteration_matches_utf8_offsets() -> None:
    text = "при вет 世界"
    offsets = [offset for offset, _ in CodePointCursor(text)]
    expected = []
    position = 0
    for char in text:
        expected.append(position)
        position += len(char.encode("utf-8"))
    assert offsets == expected


@pytest.mark.parametrize(("char", "width"), [
    ("A", 1),
    ("\x7f", 1),
    ("\x80", 2),
    ("\u07ff", 2),
    ("\u0800", 3),
    ("\uffff", 3),
    ("\U00010000", 4),
    ("\U0010FFFF", 4),
])
def test_utf8_width(char: str, width: int) -> None:
    assert utf8_width(char) == width


def test_digit_classes_are_ascii_only() -> None:
    assert is_hex_digit("f") and is_hex_digit("F") and is_hex_digit("9")
    assert not is_hex_digit("g")
    assert not is_hex_digit("_")
    assert not is_hex_digit("\u0661")  # ARABIC-INDIC DIGIT ONE
    assert not is_hex_digit(None)
    assert is_oct_digit("7")
    assert not is_oct_digit("8")
    assert not is_oct_digit(None)


def test_to_scalar_rejects_surrogates_and_out_of_range() -> None:
    assert to_scalar(0x41) == "A"
    assert to_scalar(0x10FFFF) == "\U0010FFFF"
    assert to_scalar(0xD800) is None
    assert to_scalar(0xDFFF) is None
    assert to_scalar(0x110000) is None


def test_digit_and_scalar_helpers_are_annotated() -> None:
    assert get_type_hints(is_hex_digit) == {"char": Optional[str], "return": bool}
    assert get_type_hints(is_oct_digit) == {"char": Optional[str], "return": bool}
    assert get_type_hints(to_scalar) == {"code": int, "return": Optional[str]}

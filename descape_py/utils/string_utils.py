"""
String utility functions.
"""

from typing import Optional

HEX_DIGITS = frozenset('0123456789abcdefABCDEF')
OCT_DIGITS = frozenset('01234567')

MAX_CODE_POINT = 0x10FFFF
SURROGATE_MIN = 0xD800
SURROGATE_MAX = 0xDFFF


def utf8_width(char: str) -> int:
    """
    Get the number of bytes a code point occupies in UTF-8.

    Args:
        char: A single code point

    Returns:
        Encoded width in bytes (1 to 4)
    """
    code = ord(char)
    if code < 0x80:
        return 1
    elif code < 0x800:
        return 2
    elif code < 0x10000:
        return 3
    return 4


def is_hex_digit(char: Optional[str]) -> bool:
    """Check for an ASCII hexadecimal digit (no Unicode digits, no '_')."""
    return char is not None and char in HEX_DIGITS


def is_oct_digit(char: Optional[str]) -> bool:
    """Check for an ASCII octal digit."""
    return char is not None and char in OCT_DIGITS


def to_scalar(code: int) -> Optional[str]:
    """
    Convert a numeric code point to a character.

    Args:
        code: Code point value

    Returns:
        The character, or None if the value is not a Unicode scalar value
    """
    if code < 0 or code > MAX_CODE_POINT:
        return None
    if SURROGATE_MIN <= code <= SURROGATE_MAX:
        return None
    return chr(code)

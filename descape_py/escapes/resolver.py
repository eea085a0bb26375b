"""
Escape resolvers.

A resolver decides what a single backslash occurrence means. It is called
with the byte offset of the code point that follows the backslash, that code
point, and the cursor positioned right after it. It may consume further code
points from the cursor (hex digits, brace bodies, ...); whatever it consumes
belongs to the escape and is not scanned again.

Custom resolvers are plain callables and can fall back on DefaultResolver for
the escapes they do not care about:

    default = DefaultResolver()

    def keep_dollar(index, char, cursor):
        if char == '$':
            return Replace('$')
        return default(index, char, cursor)
"""

from typing import TYPE_CHECKING, Callable, Optional, Protocol

from ..io.cursor import CodePointCursor
from ..utils.string_utils import is_hex_digit, is_oct_digit, to_scalar
from .outcome import EscapeOutcome, Replace, Reject
from .table import (
    SIMPLE_ESCAPES, EXTENDED_ESCAPES,
    HEX_MARKER, UNICODE_MARKER, BRACE_OPEN, BRACE_CLOSE,
    HEX_DIGIT_COUNT, UNICODE_DIGIT_COUNT, MAX_OCTAL_DIGITS,
)

if TYPE_CHECKING:
    from ..config import Config


class EscapeResolver(Protocol):
    """Anything callable as resolver(index, char, cursor) -> outcome."""

    def __call__(self, index: int, char: str, cursor: CodePointCursor) -> EscapeOutcome:
        ...


def _take_digits(cursor: CodePointCursor, limit: Optional[int], is_digit: Callable) -> str:
    """Consume up to `limit` digits (unbounded if None), stopping at the first non-digit."""
    digits = []
    while limit is None or len(digits) < limit:
        if not is_digit(cursor.peek()):
            break
        digits.append(cursor.advance()[1])
    return ''.join(digits)


def _body_offset(index: int, cursor: CodePointCursor) -> int:
    # Offset of the first body character; the marker itself if the input ends there
    return index if cursor.at_end else cursor.position


class DefaultResolver:
    """
    The standard escape table.

    Recognised escapes:
    - \\n \\r \\t \\b \\f and, unless extended is False, \\a \\v \\e
    - \\' \\" \\` \\\\
    - \\xNN (exactly two hex digits)
    - \\o, \\oo, \\ooo (octal, greedy up to three digits)
    - \\uXXXX (exactly four hex digits)
    - \\u{HEX} (one or more hex digits)

    Malformed numeric bodies are rejected at the first character after the
    x/u marker (the marker itself when the input ends there). Unknown escape
    characters are rejected at their own offset, or kept as themselves when
    lenient is True.

    Attributes:
        extended: Whether \\a, \\v and \\e are recognised
        lenient: Whether unknown escapes pass through instead of rejecting
    """

    def __init__(self, extended: bool = True, lenient: bool = False):
        self.extended = extended
        self.lenient = lenient

    @classmethod
    def from_config(cls, config: 'Config') -> 'DefaultResolver':
        """Build a resolver from configuration options."""
        return cls(extended=config.extended_escapes, lenient=config.lenient)

    def __call__(self, index: int, char: str, cursor: CodePointCursor) -> EscapeOutcome:
        replacement = SIMPLE_ESCAPES.get(char)
        if replacement is None and self.extended:
            replacement = EXTENDED_ESCAPES.get(char)
        if replacement is not None:
            return Replace(replacement)

        if char == HEX_MARKER:
            return self.resolve_hex(index, cursor)
        if char == UNICODE_MARKER:
            return self.resolve_unicode(index, cursor)
        if is_oct_digit(char):
            return self.resolve_octal(char, cursor)

        if self.lenient:
            return Replace(char)
        return Reject(index)

    # ========== Numeric Escapes ==========

    def resolve_hex(self, index: int, cursor: CodePointCursor) -> EscapeOutcome:
        """Resolve the body of \\xNN; index is the offset of the 'x'."""
        anchor = _body_offset(index, cursor)
        digits = _take_digits(cursor, HEX_DIGIT_COUNT, is_hex_digit)
        if len(digits) != HEX_DIGIT_COUNT:
            return Reject(anchor)
        # Always a single code point, even when several \x escapes spell out UTF-8
        return Replace(chr(int(digits, 16)))

    def resolve_unicode(self, index: int, cursor: CodePointCursor) -> EscapeOutcome:
        """Resolve the body of \\uXXXX or \\u{HEX}; index is the offset of the 'u'."""
        anchor = _body_offset(index, cursor)

        if cursor.peek() == BRACE_OPEN:
            cursor.advance()
            digits = _take_digits(cursor, None, is_hex_digit)
            if cursor.peek() != BRACE_CLOSE or not digits:
                return Reject(anchor)
            cursor.advance()
        else:
            digits = _take_digits(cursor, UNICODE_DIGIT_COUNT, is_hex_digit)
            if len(digits) != UNICODE_DIGIT_COUNT:
                return Reject(anchor)

        char = to_scalar(int(digits, 16))
        if char is None:
            return Reject(anchor)
        return Replace(char)

    def resolve_octal(self, first: str, cursor: CodePointCursor) -> EscapeOutcome:
        """Resolve \\o, \\oo or \\ooo given the first digit."""
        digits = first + _take_digits(cursor, MAX_OCTAL_DIGITS - 1, is_oct_digit)
        return Replace(chr(int(digits, 8)))

    def __repr__(self) -> str:
        return f"DefaultResolver(extended={self.extended}, lenient={self.lenient})"

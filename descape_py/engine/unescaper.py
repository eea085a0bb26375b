"""
Unescape engine.

Scans a string left to right for backslashes and hands each escape to a
resolver. Nothing is copied until the first backslash is found: strings
without escapes come back as Borrowed, wrapping the very object passed in.
Once an escape is seen the result is built as an Owned string, even if every
escape turns out to map onto itself.
"""

import logging

from ..errors import UnescapeError
from ..escapes.outcome import Elide, Reject, Replace
from ..escapes.resolver import DefaultResolver, EscapeResolver
from ..io.cursor import CodePointCursor
from .output import Borrowed, Owned, Unescaped

logger = logging.getLogger(__name__)

BACKSLASH = '\\'

_DEFAULT_RESOLVER = DefaultResolver()


def unescape(text: str) -> Unescaped:
    """
    Unescape a string using the standard escape table.

    Args:
        text: String containing backslash escapes

    Returns:
        Borrowed if the string had no escapes, otherwise Owned

    Raises:
        UnescapeError: If an escape is invalid

    Example:
        >>> unescape("Hello,\\\\nworld!")
        Owned('Hello,\\nworld!')
        >>> unescape("Uh oh! \\\\xJJ")
        Traceback (most recent call last):
          ...
        descape_py.errors.UnescapeError: invalid escape sequence at byte 9
    """
    return unescape_with(text, _DEFAULT_RESOLVER)


def unescape_with(text: str, resolver: EscapeResolver) -> Unescaped:
    """
    Unescape a string using a custom resolver.

    Args:
        text: String containing backslash escapes
        resolver: Callable deciding what each escape means

    Returns:
        Borrowed if the string had no backslashes, otherwise Owned

    Raises:
        UnescapeError: If the resolver rejects an escape, or the string ends
            with a lone backslash
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")

    cursor = CodePointCursor(text)
    parts = None

    for offset, char in cursor:
        if char != BACKSLASH:
            if parts is not None:
                parts.append(char)
            continue

        if parts is None:
            logger.debug("First escape at byte %d, copying %d chars", offset, cursor.index - 1)
            parts = [text[:cursor.index - 1]]

        following = cursor.advance()
        if following is None:
            logger.debug("Trailing backslash at byte %d", offset)
            raise UnescapeError(offset)

        index, escaped = following
        outcome = resolver(index, escaped, cursor)

        if isinstance(outcome, Replace):
            parts.append(outcome.char)
        elif isinstance(outcome, Elide):
            continue
        elif isinstance(outcome, Reject):
            _check_reject_index(text, offset, outcome.index)
            logger.debug("Escape at byte %d rejected at byte %d", offset, outcome.index)
            raise UnescapeError(outcome.index)
        else:
            raise TypeError(f"resolver returned {outcome!r}, expected Replace, Elide or Reject")

    if parts is None:
        return Borrowed(text)
    return Owned(''.join(parts))


def _check_reject_index(text: str, backslash: int, index: int) -> None:
    """Ensure a resolver-chosen error index lies inside the input, at or after the backslash."""
    size = len(text.encode('utf-8', errors='surrogatepass'))
    if not backslash <= index < size:
        raise RuntimeError(
            f"resolver rejected at byte {index}, outside [{backslash}, {size})"
        )

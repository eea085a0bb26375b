"""
Code point cursor with byte-offset positions.

This module provides a CodePointCursor class that walks a string one code
point at a time while tracking where each code point starts in the UTF-8
encoding of that string.
"""

from typing import Iterator, Optional, Tuple

from ..utils.string_utils import utf8_width


class CodePointCursor:
    """
    Forward-only reader over the code points of a string.

    Positions are byte offsets into the UTF-8 encoded text, so they stay
    meaningful to callers that think in terms of encoded buffers.

    Attributes:
        text: The string being read
    """

    def __init__(self, text: str):
        """
        Initialize a CodePointCursor.

        Args:
            text: The string to read
        """
        self.text = text
        self._index = 0
        self._position = 0

    # ========== Position and Length ==========

    @property
    def position(self) -> int:
        """Byte offset of the next code point (not yet consumed)."""
        return self._position

    @property
    def index(self) -> int:
        """Character index of the next code point."""
        return self._index

    @property
    def at_end(self) -> bool:
        """Whether every code point has been consumed."""
        return self._index >= len(self.text)

    # ========== Readers ==========

    def peek(self) -> Optional[str]:
        """Return the next code point without consuming it, or None at end."""
        if self._index >= len(self.text):
            return None
        return self.text[self._index]

    def advance(self) -> Optional[Tuple[int, str]]:
        """
        Consume the next code point.

        Returns:
            Tuple of (byte offset, code point), or None at end
        """
        if self._index >= len(self.text):
            return None
        char = self.text[self._index]
        offset = self._position
        self._index += 1
        self._position += utf8_width(char)
        return offset, char

    def __iter__(self) -> Iterator[Tuple[int, str]]:
        return self

    def __next__(self) -> Tuple[int, str]:
        item = self.advance()
        if item is None:
            raise StopIteration
        return item

    def __repr__(self) -> str:
        return f"CodePointCursor(index={self._index}, position={self._position})"

"""
Borrowed-or-owned unescape results.
"""


class Unescaped:
    """
    Result of unescaping a string.

    Either Borrowed (the input itself, returned when it held no escapes) or
    Owned (a newly built string). Compares equal to plain strings with the
    same text.
    """

    __slots__ = ('_text',)

    def __init__(self, text: str):
        self._text = text

    @property
    def text(self) -> str:
        """The unescaped text."""
        return self._text

    @property
    def is_borrowed(self) -> bool:
        return False

    @property
    def is_owned(self) -> bool:
        return False

    def into_owned(self) -> str:
        """Return the text as a plain string."""
        return self._text

    def __str__(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def __eq__(self, other) -> bool:
        if isinstance(other, Unescaped):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._text)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._text!r})"


class Borrowed(Unescaped):
    """The input string, untouched and uncopied."""

    __slots__ = ()

    @property
    def is_borrowed(self) -> bool:
        return True


class Owned(Unescaped):
    """A string built while processing at least one escape."""

    __slots__ = ()

    @property
    def is_owned(self) -> bool:
        return True

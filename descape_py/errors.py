"""
Exceptions raised while unescaping.
"""


class UnescapeError(ValueError):
    """
    Raised when a string contains an invalid escape sequence.

    Attributes:
        index: Byte offset (into the UTF-8 encoded input) of the failure
    """

    def __init__(self, index: int):
        super().__init__(f"invalid escape sequence at byte {index}")
        self.index = index

    def __eq__(self, other) -> bool:
        if isinstance(other, UnescapeError):
            return self.index == other.index
        return NotImplemented

    def __hash__(self) -> int:
        return hash((UnescapeError, self.index))

    def __reduce__(self):
        return (type(self), (self.index,))

    def __repr__(self) -> str:
        return f"UnescapeError({self.index})"

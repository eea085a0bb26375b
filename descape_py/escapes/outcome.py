"""
Outcomes a resolver can return for one escape occurrence.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Replace:
    """The escape expands to exactly one code point."""
    char: str

    def __post_init__(self):
        if not isinstance(self.char, str) or len(self.char) != 1:
            raise ValueError(f"Replace needs exactly one code point, got {self.char!r}")


@dataclass(frozen=True)
class Elide:
    """The escape produces nothing."""


@dataclass(frozen=True)
class Reject:
    """The escape is invalid; index is the byte offset to report."""
    index: int


ELIDE = Elide()

EscapeOutcome = Union[Replace, Elide, Reject]

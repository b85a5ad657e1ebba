"""
Core types for training and tokenization.
"""

from collections.abc import Hashable, Sequence
from typing import NamedTuple

type Symbol = Hashable
type Token = tuple[Symbol, ...]
type TokenPair = tuple[Token, Token]


class Span(NamedTuple):
    """Index range ``[start, start + length)`` into a tokenized sequence."""

    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length

    def of[T: Sequence](self, seq: T) -> T:
        """Return the slice of ``seq`` covered by this span."""
        return seq[self.start : self.end]

"""
Normalization of caller-supplied corpus items into weighted words.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .errors import CorpusError
from .types import Symbol

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Word:
    """One training example: a non-empty symbol sequence and its weight."""

    symbols: tuple[Symbol, ...]
    freq: int = 1

    def __len__(self) -> int:
        return len(self.symbols)


type CorpusItem = Word | Sequence[Symbol] | tuple[Sequence[Symbol], int]


def _is_weighted(item: object) -> bool:
    """Return whether ``item`` is a ``(sequence, freq)`` pair."""
    return (
        isinstance(item, tuple)
        and len(item) == 2
        and isinstance(item[0], Sequence)
        and isinstance(item[1], int)
        and not isinstance(item[1], bool)
    )


def collect_words(items: Iterable[CorpusItem]) -> list[Word]:
    """
    Turn corpus items into a list of ``Word`` with duplicates aggregated.

    Items may be plain symbol sequences (weight 1), ``(sequence, freq)``
    pairs, or ``Word`` instances. Empty sequences are dropped. Words keep the
    order of their first occurrence.

    :raises CorpusError: If a frequency is not a positive integer.
    """
    freqs: dict[tuple[Symbol, ...], int] = {}
    n_items = 0
    n_empty = 0

    for item in items:
        n_items += 1
        if isinstance(item, Word):
            symbols, freq = tuple(item.symbols), item.freq
        elif _is_weighted(item):
            seq, freq = item  # type: ignore[misc]
            symbols = tuple(seq)
        elif isinstance(item, Iterable):
            symbols, freq = tuple(item), 1
        else:
            raise CorpusError("corpus item is not a symbol sequence", item=item)

        if freq < 1:
            raise CorpusError("word frequency must be a positive integer", item=item)
        if not symbols:
            n_empty += 1
            continue
        freqs[symbols] = freqs.get(symbols, 0) + freq

    if n_empty:
        log.debug(f"dropped {n_empty} empty words")
    log.debug(f"collected {len(freqs)} distinct words from {n_items} items")

    return [Word(symbols, freq) for symbols, freq in freqs.items()]

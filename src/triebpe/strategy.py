"""Corpus segmentation strategies used by the merge rounds."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Final, Literal, override

from ._corpus import Word
from ._stats import PairStats
from .errors import StrategyError
from .types import Span, TokenPair
from .vocab import Vocabulary

log = logging.getLogger(__name__)

# =========================================================================================

# corpus tracking strategies


class CorpusStrategy(ABC):
    """
    Base strategy for tracking how each training word is currently segmented.

    A strategy answers two questions per merge round: which adjacent token
    pairs occur and how often (``count_pairs``), and how the corpus changes
    once a pair has been chosen (``commit``).
    """

    NAME: str = "base"
    # skip pairs whose concatenation is already a token when selecting
    excludes_known_tokens: bool = False

    def __init__(self, words: Iterable[Word]) -> None:
        self._words: tuple[Word, ...] = tuple(words)

    @property
    def words(self) -> tuple[Word, ...]:
        return self._words

    def __len__(self) -> int:
        return len(self._words)

    @abstractmethod
    def count_pairs(self, vocab: Vocabulary) -> PairStats:
        """Return weighted adjacent-pair counts for the current segmentation."""

    @abstractmethod
    def commit(self, pair: TokenPair, vocab: Vocabulary) -> None:
        """Rewrite every occurrence of ``pair`` as a single span."""

    @abstractmethod
    def segment(self, index: int, vocab: Vocabulary) -> list[Span]:
        """Return the current segmentation of word ``index``."""


class MaterializedCorpus(CorpusStrategy):
    """
    Strategy that keeps a span-length array per word.

    ``heads[w][i]`` holds the length of the span starting at ``i``; entries
    inside a span are stale and never read. A scan hops from span start to
    span start, and a commit only touches the recorded occurrences of the
    winning pair.
    """

    NAME = "materialized"

    def __init__(self, words: Iterable[Word]) -> None:
        super().__init__(words)
        self._heads: list[list[int]] = [[1] * len(w) for w in self._words]
        # pair -> (word index, span start) of each occurrence, in scan order
        self._occurrences: dict[TokenPair, list[tuple[int, int]]] | None = None

    @override
    def count_pairs(self, vocab: Vocabulary) -> PairStats:
        """Scan span starts of every word and record each pair's positions."""
        stats = PairStats()
        occurrences: dict[TokenPair, list[tuple[int, int]]] = {}

        for wi, word in enumerate(self._words):
            syms = word.symbols
            heads = self._heads[wi]
            n = len(syms)
            a = 0
            while True:
                b = a + heads[a]
                if b >= n:
                    break
                pair = (syms[a:b], syms[b : b + heads[b]])
                stats.add(*pair, freq=word.freq)
                occurrences.setdefault(pair, []).append((wi, a))
                a = b

        self._occurrences = occurrences
        return stats

    @override
    def commit(self, pair: TokenPair, vocab: Vocabulary) -> None:
        """
        Merge recorded occurrences left to right.

        Overlapping occurrences (``A A A`` for pair ``(A, A)``) are counted in
        ``count_pairs``, but only the first of two overlapping ones is merged.
        """
        if self._occurrences is None:
            self.count_pairs(vocab)
        assert self._occurrences is not None

        merged_len = len(pair[0]) + len(pair[1])
        n_merged = 0
        last_word, last_end = -1, 0
        for wi, pos in self._occurrences.get(pair, ()):
            if wi == last_word and pos < last_end:
                continue
            self._heads[wi][pos] = merged_len
            last_word, last_end = wi, pos + merged_len
            n_merged += 1

        # positions are only valid for the segmentation they were scanned from
        self._occurrences = None
        log.debug(f"merged {n_merged} occurrences")

    @override
    def segment(self, index: int, vocab: Vocabulary) -> list[Span]:
        heads = self._heads[index]
        n = len(heads)
        spans: list[Span] = []
        pos = 0
        while pos < n:
            spans.append(Span(pos, heads[pos]))
            pos += heads[pos]
        return spans


class RecomputedCorpus(CorpusStrategy):
    """
    Strategy that keeps no per-word state.

    Every round re-tokenizes each word with a fresh vocabulary snapshot and
    counts pairs on the result. Re-tokenizing cannot split a known token in
    two, so pairs that concatenate to a known token are skipped at selection.
    """

    NAME = "recomputed"
    excludes_known_tokens = True

    @override
    def count_pairs(self, vocab: Vocabulary) -> PairStats:
        """Tokenize every word from scratch and count adjacent span pairs."""
        tokenizer = vocab.snapshot()
        stats = PairStats()
        for word in self._words:
            syms = word.symbols
            spans = tokenizer.tokenize(syms)
            for left, right in zip(spans, spans[1:]):
                stats.add(left.of(syms), right.of(syms), freq=word.freq)
        return stats

    @override
    def commit(self, pair: TokenPair, vocab: Vocabulary) -> None:
        """Nothing to rewrite; the next round's snapshot carries the merge."""

    @override
    def segment(self, index: int, vocab: Vocabulary) -> list[Span]:
        return vocab.snapshot().tokenize(self._words[index].symbols)


StrategyName = Literal["materialized", "recomputed"]

_CORPUS_STRATEGIES: Final[dict[str, type[CorpusStrategy]]] = {
    MaterializedCorpus.NAME: MaterializedCorpus,
    RecomputedCorpus.NAME: RecomputedCorpus,
}


def list_strategies() -> list[str]:
    """Return available corpus strategy names."""
    return list(_CORPUS_STRATEGIES.keys())


def get_strategy(
    name: StrategyName | str, words: Iterable[Word]
) -> CorpusStrategy:
    """
    Create a corpus strategy over ``words``.

    :param name: ``"materialized"`` keeps span state per word, ``"recomputed"``
                 re-derives segmentation from a vocabulary snapshot each round.
    :param words: Normalized training words.
    :raises StrategyError: If the strategy name is unknown.
    """
    if name not in _CORPUS_STRATEGIES:
        raise StrategyError(
            "unknown corpus strategy",
            invalid_name=name,
            available=list_strategies(),
        )
    return _CORPUS_STRATEGIES[name](words)


__all__ = [
    "CorpusStrategy",
    "MaterializedCorpus",
    "RecomputedCorpus",
    "StrategyName",
    "get_strategy",
    "list_strategies",
]

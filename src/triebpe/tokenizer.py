"""
Inference-time tokenizer built from a vocabulary snapshot.
"""

import logging
import os
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor

from .parallel import ParallelMode, ParallelStrategy
from .trie import PrefixTrie
from .types import Span, Symbol

log = logging.getLogger(__name__)


class Tokenizer:
    """
    Greedy longest-prefix tokenizer over a frozen prefix index.

    The tokenizer owns its trie and never mutates it, so one instance can be
    shared across threads. Build instances with ``Vocabulary.snapshot()``
    rather than calling the constructor with a trie you keep mutating.

    Example:
       >>> vocab = Vocabulary.from_tokens(["ab", "a", "b", "c"])
       >>> tok = vocab.snapshot()
       >>> tok.split("abcab")
       ['ab', 'c', 'ab']
    """

    __slots__ = ("_trie",)

    def __init__(self, trie: PrefixTrie) -> None:
        self._trie = trie

    def tokenize(self, seq: Sequence[Symbol]) -> list[Span]:
        """
        Segment ``seq`` into spans by greedy longest-prefix match.

        A symbol that starts no known token is emitted as a length-1 span, so
        every input is consumed completely and no error is raised.

        :param seq: Any indexable sequence of symbols.
        :return: Spans whose concatenation covers ``seq`` exactly, in order.
        """
        spans: list[Span] = []
        n = len(seq)
        pos = 0
        while pos < n:
            length = self._trie.longest_prefix(seq, pos) or 1
            spans.append(Span(pos, length))
            pos += length
        return spans

    def split[T: Sequence](self, seq: T) -> list[T]:
        """Tokenize ``seq`` and return the covered slices instead of spans."""
        return [span.of(seq) for span in self.tokenize(seq)]

    def tokenize_batch(
        self,
        seqs: Iterable[Sequence[Symbol]],
        num_workers: int | None = None,
        parallel_mode: ParallelMode | ParallelStrategy = ParallelMode.AUTO,
    ) -> list[list[Span]]:
        """
        Tokenize many sequences with optional batch-level parallel processing.

        Parallelization happens across sequences, never within one, because a
        match at one position decides where the next one starts.

        :param seqs: Sequences to tokenize.
        :param num_workers: Worker count for batch mode; defaults to CPU count.
        :param parallel_mode: ``"auto"``, ``"batch"`` or ``"off"``.
        :return: One span list per input sequence, in input order.
        :raises StrategyError: If ``parallel_mode`` is not a known mode name.
        """
        mode = ParallelMode.get(parallel_mode)
        seqs = list(seqs)

        if num_workers is None:
            workers = os.cpu_count() or 1
        else:
            workers = max(1, num_workers)

        def process_batch() -> list[list[Span]]:
            """Tokenize all sequences concurrently at the batch level."""
            log.debug(f"tokenizing {len(seqs)} sequences with {workers} workers")
            with ThreadPoolExecutor(max_workers=workers) as pool:
                return list(pool.map(self.tokenize, seqs))

        match mode:
            case ParallelMode.OFF:
                return [self.tokenize(seq) for seq in seqs]
            case ParallelMode.BATCH:
                return process_batch()
            case ParallelMode.AUTO:
                if len(seqs) <= 1 or workers == 1:
                    return [self.tokenize(seq) for seq in seqs]
                return process_batch()

    def vocab_size(self) -> int:
        """Return the number of tokens known to this tokenizer."""
        return len(self._trie)

    def __contains__(self, token: object) -> bool:
        return token in self._trie

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(vocab_size={len(self._trie)})"

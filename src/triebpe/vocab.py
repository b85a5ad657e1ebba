"""
Growing token set with a prefix index kept in sync.
"""

import logging
from collections.abc import Iterable, Iterator, Sequence

from typing_extensions import deprecated

from ._sanitise import render_token
from .errors import VocabularyError
from .tokenizer import Tokenizer
from .trie import PrefixTrie
from .types import Symbol, Token

log = logging.getLogger(__name__)


class Vocabulary:
    """
    Set of tokens unique by value, plus the trie that indexes them.

    Tokens are only ever added. Insertion order is kept for inspection, the
    trie is extended incrementally on each new token.
    """

    def __init__(self) -> None:
        # token -> insertion rank
        self._tokens: dict[Token, int] = {}
        self._trie = PrefixTrie()

    @classmethod
    def from_tokens(cls, tokens: Iterable[Sequence[Symbol]]) -> "Vocabulary":
        """
        Rebuild a vocabulary from a flat collection of tokens.

        Order does not matter for tokenization; duplicates are ignored.
        """
        vocab = cls()
        for tok in tokens:
            vocab.insert(tok)
        return vocab

    def insert(self, token: Sequence[Symbol]) -> bool:
        """
        Add ``token`` if absent.

        :param token: Non-empty sequence of symbols, stored as a tuple.
        :return: ``True`` if the token was new, ``False`` for a no-op insert.
        :raises VocabularyError: If ``token`` is empty.
        """
        tok: Token = tuple(token)
        if not tok:
            raise VocabularyError("cannot insert an empty token", token=tok)
        if tok in self._tokens:
            log.debug(f"token {render_token(tok)} already in vocabulary")
            return False
        self._tokens[tok] = len(self._tokens)
        self._trie.insert(tok)
        return True

    def tokens(self) -> frozenset[Token]:
        """Return a read-only view of the current token set."""
        return frozenset(self._tokens)

    def snapshot(self) -> Tokenizer:
        """
        Freeze the current prefix index into a ``Tokenizer``.

        The tokenizer owns a deep copy of the trie, so later inserts into this
        vocabulary are not visible through it.
        """
        log.debug(f"snapshotting vocabulary with {len(self._tokens)} tokens")
        return Tokenizer(self._trie.copy())

    @deprecated("Use `Vocabulary.snapshot()` instead.")
    def build(self) -> Tokenizer:
        """Alias of ``snapshot()``."""
        return self.snapshot()

    def describe(self) -> list[str]:
        """Return one ``[rank] token`` line per token in insertion order."""
        return [f"[{rank}] {render_token(tok)}" for tok, rank in self._tokens.items()]

    def __contains__(self, token: object) -> bool:
        if isinstance(token, Sequence):
            return tuple(token) in self._tokens
        return False

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self._tokens)})"

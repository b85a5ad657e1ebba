"""
Prefix index over vocabulary tokens.
"""

from collections.abc import Iterable, Iterator, Sequence

from .types import Symbol, Token


class _TrieNode:
    __slots__ = ("kids", "term")

    def __init__(self) -> None:
        self.kids: dict[Symbol, _TrieNode] = {}
        self.term: bool = False

    def copy(self) -> "_TrieNode":
        node = _TrieNode()
        node.term = self.term
        # iterative: depth equals the longest token
        stack = [(self, node)]
        while stack:
            src, dst = stack.pop()
            for sym, kid in src.kids.items():
                new_kid = _TrieNode()
                new_kid.term = kid.term
                dst.kids[sym] = new_kid
                stack.append((kid, new_kid))
        return node


class PrefixTrie:
    """
    Trie answering "which tokens are a prefix of this sequence".

    Tokens are stored as paths of symbols; a node is terminal when the path
    from the root to it spells a token.
    """

    def __init__(self, tokens: Iterable[Token] = ()) -> None:
        self._root = _TrieNode()
        self._size = 0
        self._max_len = 0
        for tok in tokens:
            self.insert(tok)

    def insert(self, token: Sequence[Symbol]) -> bool:
        """
        Add ``token`` to the trie.

        :return: ``True`` if the token was new, ``False`` if already present.
        """
        node = self._root
        for sym in token:
            node = node.kids.setdefault(sym, _TrieNode())
        if node.term:
            return False
        node.term = True
        self._size += 1
        self._max_len = max(self._max_len, len(token))
        return True

    def prefixes(self, seq: Sequence[Symbol], start: int = 0) -> list[int]:
        """Return lengths of all tokens that are a prefix of ``seq[start:]``, ascending."""
        out: list[int] = []
        node = self._root
        j = start
        n = len(seq)
        while j < n:
            node = node.kids.get(seq[j])
            if node is None:
                break
            j += 1
            if node.term:
                out.append(j - start)
        return out

    def longest_prefix(self, seq: Sequence[Symbol], start: int = 0) -> int:
        """Return the length of the longest token prefixing ``seq[start:]``, or 0."""
        best = 0
        node = self._root
        j = start
        n = len(seq)
        while j < n:
            node = node.kids.get(seq[j])
            if node is None:
                break
            j += 1
            if node.term:
                best = j - start
        return best

    def copy(self) -> "PrefixTrie":
        """Return an independent deep copy."""
        other = PrefixTrie()
        other._root = self._root.copy()
        other._size = self._size
        other._max_len = self._max_len
        return other

    @property
    def max_token_len(self) -> int:
        return self._max_len

    def __contains__(self, token: object) -> bool:
        if not isinstance(token, Sequence):
            return False
        node = self._root
        for sym in token:
            node = node.kids.get(sym)
            if node is None:
                return False
        return node.term

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Token]:
        """Yield every stored token (depth-first, children in insertion order)."""
        stack: list[tuple[_TrieNode, Token]] = [(self._root, ())]
        while stack:
            node, path = stack.pop()
            if node.term:
                yield path
            for sym, kid in reversed(node.kids.items()):
                stack.append((kid, path + (sym,)))

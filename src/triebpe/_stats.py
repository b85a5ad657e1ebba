"""
Adjacent-pair frequency bookkeeping for one merge round.
"""

from collections import Counter
from collections.abc import Container
from dataclasses import dataclass

from .types import Token, TokenPair


@dataclass(frozen=True, slots=True)
class PairCandidate:
    """The pair chosen for a merge and its aggregate frequency."""

    pair: TokenPair
    freq: int

    @property
    def token(self) -> Token:
        return self.pair[0] + self.pair[1]


def _tie_break_key(pair: TokenPair) -> tuple[Token, int]:
    """Order equally frequent pairs: smallest concatenation, then shortest left token."""
    left, right = pair
    return left + right, len(left)


class PairStats:
    """
    Weighted counts of adjacent token pairs, rebuilt every round.

    Counts are plain integer sums, so partial counts gathered in any order
    combine to the same totals; determinism lives entirely in ``best``.
    """

    def __init__(self) -> None:
        self.counts: Counter[TokenPair] = Counter()

    def add(self, left: Token, right: Token, freq: int = 1) -> None:
        self.counts[(left, right)] += freq

    def update(self, other: "PairStats") -> None:
        """Fold another round's partial counts into this one."""
        self.counts.update(other.counts)

    def best(
        self, min_freq: int = 1, exclude: Container[Token] = ()
    ) -> PairCandidate | None:
        """
        Select the merge candidate.

        Highest aggregate frequency wins. Among equally frequent pairs the one
        whose concatenated token sorts first wins; if two pairs concatenate to
        the same token, the one with the shorter left token wins.

        :param min_freq: Pairs below this frequency are never selected.
        :param exclude: Concatenated tokens that must not be selected.
        :return: The winning candidate, or ``None`` if nothing qualifies.
        """
        top: PairCandidate | None = None
        top_key: tuple[Token, int] | None = None

        for pair, freq in self.counts.items():
            if freq < min_freq:
                continue
            if exclude and pair[0] + pair[1] in exclude:
                continue
            if top is not None and freq < top.freq:
                continue
            key = _tie_break_key(pair)
            if top is None or freq > top.freq or key < top_key:  # type: ignore[operator]
                top = PairCandidate(pair, freq)
                top_key = key

        return top

    def __len__(self) -> int:
        return len(self.counts)

    def __getitem__(self, pair: TokenPair) -> int:
        return self.counts[pair]

"""BPE training session: merge rounds over a corpus strategy."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from tqdm import tqdm
from typing_extensions import deprecated

from ._corpus import CorpusItem, Word, collect_words
from ._decorators import measure_time
from ._progress import _is_enabled
from ._sanitise import render_token
from .errors import TrainingError
from .strategy import CorpusStrategy, StrategyName, get_strategy
from .tokenizer import Tokenizer
from .types import Token, TokenPair
from .vocab import Vocabulary

log = logging.getLogger(__name__)


class MergeOutcome(str, Enum):
    """What a single merge round did."""

    SEEDED = "seeded"
    MERGED = "merged"
    CONVERGED = "converged"
    EMPTY = "empty"


@dataclass(frozen=True)
class MergeResult:
    """
    Result of one merge round.

    Truthy for ``SEEDED`` and ``MERGED``. ``CONVERGED`` (no pair reaches
    ``min_freq``) and ``EMPTY`` (no words) are falsy and mean training is done.
    """

    outcome: MergeOutcome
    pair: TokenPair | None = None
    freq: int = 0
    # tokens actually added to the vocabulary this round
    inserted: tuple[Token, ...] = ()

    @property
    def ok(self) -> bool:
        return self.outcome in (MergeOutcome.SEEDED, MergeOutcome.MERGED)

    @property
    def token(self) -> Token | None:
        """The merged token, ``None`` unless the outcome is ``MERGED``."""
        if self.pair is None:
            return None
        return self.pair[0] + self.pair[1]

    def __bool__(self) -> bool:
        return self.ok


@dataclass
class TrainingResult:
    """Results from one training run."""

    rounds: int
    n_merges: int
    converged: bool
    vocab_size: int


class BPETrainer:
    """
    Learns a vocabulary by repeated adjacent-pair merges over a corpus.

    The first round seeds the vocabulary with every distinct symbol; each
    later round adds the most frequent adjacent token pair as one token.

    Example:
       >>> trainer = BPETrainer(["ABCDCDABCDCDE"])
       >>> result = trainer.train(4)
       >>> tokenizer = trainer.snapshot()
       >>> ["".join(t) for t in tokenizer.split(list("ABCDCDABCDCDE"))]
       ['ABCD', 'CD', 'ABCD', 'CD', 'E']
    """

    def __init__(
        self,
        words: Iterable[CorpusItem],
        strategy: StrategyName | str = "materialized",
    ) -> None:
        """
        :param words: Symbol sequences, ``(sequence, freq)`` pairs or ``Word`` s.
        :param strategy: Corpus strategy name, see ``list_strategies()``.
        :raises CorpusError: If a word frequency is not positive.
        :raises StrategyError: If the strategy name is unknown.
        """
        self._corpus: CorpusStrategy = get_strategy(strategy, collect_words(words))
        self._vocab = Vocabulary()
        self._rounds = 0
        log.debug(
            f"trainer ready: {len(self._corpus)} words, strategy {self._corpus.NAME}"
        )

    @property
    def vocab(self) -> Vocabulary:
        return self._vocab

    @property
    def words(self) -> tuple[Word, ...]:
        return self._corpus.words

    @property
    def strategy(self) -> str:
        return self._corpus.NAME

    def tokens(self) -> frozenset[Token]:
        """Return the current token set."""
        return self._vocab.tokens()

    def merge(self, min_freq: int = 1) -> MergeResult:
        """
        Run one merge round.

        :param min_freq: Minimum aggregate frequency a pair needs to be merged.
        :return: Outcome of the round; falsy when training should stop.
        :raises TrainingError: If ``min_freq`` is less than 1.
        """
        if min_freq < 1:
            raise TrainingError("min_freq must be at least 1", min_freq=min_freq)

        if not len(self._corpus):
            log.info("corpus is empty, nothing to merge")
            return MergeResult(MergeOutcome.EMPTY)

        if not len(self._vocab):
            return self._seed()

        stats = self._corpus.count_pairs(self._vocab)
        exclude = self._vocab if self._corpus.excludes_known_tokens else ()
        best = stats.best(min_freq, exclude=exclude)
        log.debug(f"round {self._rounds + 1}: {len(stats)} distinct pairs")

        if best is None:
            log.info(
                f"converged after {self._rounds} rounds: "
                f"no pair reaches min_freq {min_freq}"
            )
            return MergeResult(MergeOutcome.CONVERGED)

        inserted = self._vocab.insert(best.token)
        self._corpus.commit(best.pair, self._vocab)
        self._rounds += 1

        return MergeResult(
            MergeOutcome.MERGED,
            pair=best.pair,
            freq=best.freq,
            inserted=(best.token,) if inserted else (),
        )

    def _seed(self) -> MergeResult:
        """Admit every distinct symbol as a length-1 token, in sorted order."""
        symbols = {sym for word in self._corpus.words for sym in word.symbols}
        inserted = tuple((sym,) for sym in sorted(symbols))
        for tok in inserted:
            self._vocab.insert(tok)
        self._rounds += 1
        log.info(f"seeded vocabulary with {len(inserted)} symbols")
        return MergeResult(MergeOutcome.SEEDED, inserted=inserted)

    @measure_time
    def train(
        self,
        n_rounds: int | None = None,
        *,
        min_freq: int = 1,
        vocab_size: int | None = None,
        verbose: bool = False,
        show_progress: bool = True,
    ) -> TrainingResult:
        """
        Run merge rounds until a bound is hit or no merge is justified.

        With neither ``n_rounds`` nor ``vocab_size`` given, training runs
        until convergence.

        :param n_rounds: Maximum successful rounds to run in this call,
                         counting the seed round if it happens here.
        :param min_freq: Minimum aggregate pair frequency for a merge.
        :param vocab_size: Stop once the vocabulary holds this many tokens.
        :param verbose: Log each learned merge when ``True``.
        :param show_progress: Display a tqdm progress bar when ``True``.
        :returns: Rounds and merges completed and whether training converged.
        :raises TrainingError: If ``min_freq`` < 1 or ``n_rounds`` is negative.
        """
        if min_freq < 1:
            raise TrainingError("min_freq must be at least 1", min_freq=min_freq)
        if n_rounds is not None and n_rounds < 0:
            raise TrainingError(f"round count must be non-negative: {n_rounds}")

        rounds = 0
        n_merges = 0
        converged = False

        with tqdm(
            total=n_rounds,
            desc="BPE rounds",
            unit="round",
            disable=not (show_progress and _is_enabled()),
        ) as bar:
            while n_rounds is None or rounds < n_rounds:
                if vocab_size is not None and len(self._vocab) >= vocab_size:
                    break

                result = self.merge(min_freq)
                if not result:
                    converged = True
                    break

                rounds += 1
                bar.update(1)

                if result.outcome is MergeOutcome.MERGED:
                    n_merges += 1
                    if verbose:
                        assert result.pair is not None
                        log.info(
                            "merge %d: %s + %s -> %s (freq %d)",
                            n_merges,
                            render_token(result.pair[0]),
                            render_token(result.pair[1]),
                            render_token(result.pair[0] + result.pair[1]),
                            result.freq,
                        )

        if converged and (n_rounds is not None or vocab_size is not None):
            log.warning(
                f"no more pairs to merge after {rounds} rounds "
                f"(requested rounds: {n_rounds}, vocab size: {vocab_size}) stopping early"
            )

        return TrainingResult(
            rounds=rounds,
            n_merges=n_merges,
            converged=converged,
            vocab_size=len(self._vocab),
        )

    def segmentation(self, index: int) -> list[Token]:
        """Return the current segmentation of training word ``index`` as tokens."""
        symbols = self._corpus.words[index].symbols
        return [span.of(symbols) for span in self._corpus.segment(index, self._vocab)]

    def snapshot(self) -> Tokenizer:
        """Freeze the learned vocabulary into a ``Tokenizer``."""
        return self._vocab.snapshot()

    @deprecated("Use `BPETrainer.snapshot()` instead.")
    def build(self) -> Tokenizer:
        """Alias of ``snapshot()``."""
        return self._vocab.snapshot()


__all__ = [
    "BPETrainer",
    "MergeOutcome",
    "MergeResult",
    "TrainingResult",
]

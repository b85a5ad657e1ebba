"""Unit tests for the corpus strategies behind merge rounds."""

import pytest

import triebpe as tb
from triebpe._corpus import collect_words
from triebpe.errors import StrategyError

A, B, C, D, E = (("A",), ("B",), ("C",), ("D",), ("E",))


@pytest.fixture
def seeded_vocab():
    return tb.Vocabulary.from_tokens([A, B, C, D, E])


@pytest.mark.parametrize("name", tb.list_strategies())
def test_initial_pair_counts(name, seeded_vocab):
    """Adjacent unigram pairs of "ABCDCDABCDCDE" are counted by value."""
    corpus = tb.get_strategy(name, collect_words(["ABCDCDABCDCDE"]))
    stats = corpus.count_pairs(seeded_vocab)
    assert dict(stats.counts) == {
        (A, B): 2,
        (B, C): 2,
        (C, D): 4,
        (D, C): 2,
        (D, A): 1,
        (D, E): 1,
    }


@pytest.mark.parametrize("name", tb.list_strategies())
def test_commit_then_count(name, seeded_vocab):
    corpus = tb.get_strategy(name, collect_words(["ABCDCDABCDCDE"]))
    corpus.count_pairs(seeded_vocab)
    seeded_vocab.insert(("C", "D"))
    corpus.commit((C, D), seeded_vocab)

    cd = ("C", "D")
    stats = corpus.count_pairs(seeded_vocab)
    assert dict(stats.counts) == {
        (A, B): 2,
        (B, cd): 2,
        (cd, cd): 2,
        (cd, A): 1,
        (cd, E): 1,
    }


def test_materialized_commit_without_fresh_counts(seeded_vocab):
    """Commit rescans when no counts exist for the current segmentation."""
    corpus = tb.MaterializedCorpus(collect_words(["ABAB"]))
    corpus.commit((A, B), seeded_vocab)
    assert corpus.segment(0, seeded_vocab) == [tb.Span(0, 2), tb.Span(2, 2)]


def test_materialized_commit_skips_unrecorded_pairs(seeded_vocab):
    corpus = tb.MaterializedCorpus(collect_words(["ABC"]))
    corpus.count_pairs(seeded_vocab)
    corpus.commit((C, A), seeded_vocab)
    assert corpus.segment(0, seeded_vocab) == [tb.Span(i, 1) for i in range(3)]


def test_only_recomputed_excludes_known_tokens():
    assert tb.RecomputedCorpus.excludes_known_tokens
    assert not tb.MaterializedCorpus.excludes_known_tokens


def test_weights_multiply_pair_counts(seeded_vocab):
    corpus = tb.get_strategy("materialized", collect_words([("AB", 7)]))
    assert corpus.count_pairs(seeded_vocab)[(A, B)] == 7


def test_get_strategy_unknown_name():
    with pytest.raises(StrategyError):
        tb.get_strategy("sampled", [])

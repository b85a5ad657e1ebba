"""Unit tests for pair statistics and deterministic merge selection."""

from triebpe._stats import PairStats

A, B, C = ("A",), ("B",), ("C",)


def test_highest_frequency_wins():
    stats = PairStats()
    stats.add(C, C, freq=1)
    stats.add(A, B, freq=2)
    stats.add(B, C, freq=5)
    best = stats.best()
    assert best.pair == (B, C)
    assert best.freq == 5
    assert best.token == ("B", "C")


def test_ties_resolve_to_smallest_concatenation():
    """Insertion order does not matter, only the tie-break order."""
    pairs = [(C, A), (B, A), (A, C)]
    for order in (pairs, pairs[::-1]):
        stats = PairStats()
        for left, right in order:
            stats.add(left, right, freq=3)
        assert stats.best().pair == (A, C)


def test_same_concatenation_prefers_shorter_left():
    stats = PairStats()
    stats.add(("A", "B"), C, freq=2)
    stats.add(A, ("B", "C"), freq=2)
    assert stats.best().pair == (A, ("B", "C"))


def test_min_freq_and_exclusions():
    stats = PairStats()
    stats.add(A, B, freq=4)
    stats.add(B, C, freq=2)
    assert stats.best(min_freq=5) is None
    assert stats.best(exclude={("A", "B")}).pair == (B, C)
    assert stats.best(min_freq=3, exclude={("A", "B")}) is None


def test_empty_stats_has_no_candidate():
    assert PairStats().best() is None


def test_partial_counts_combine_by_addition():
    left, right = PairStats(), PairStats()
    left.add(A, B, freq=2)
    right.add(A, B, freq=3)
    right.add(B, C)
    left.update(right)
    assert left[(A, B)] == 5
    assert left[(B, C)] == 1
    assert len(left) == 2

"""Unit tests for corpus normalization and supplier helpers."""

import pytest

from triebpe import Word
from triebpe._corpus import collect_words
from triebpe.corpus import chars, graphemes, read_lines, utf8_bytes
from triebpe.errors import CorpusError


# Word collection
# ---------------------------------------------------------------------------


def test_plain_sequences_get_weight_one():
    assert collect_words(["ab", ["x", "y"]]) == [
        Word(("a", "b"), 1),
        Word(("x", "y"), 1),
    ]


def test_duplicates_aggregate_in_first_seen_order():
    words = collect_words(["cd", ("ab", 2), "cd", Word(("a", "b"), 3)])
    assert words == [Word(("c", "d"), 2), Word(("a", "b"), 5)]


def test_empty_words_are_dropped():
    assert collect_words(["", [], ("", 4), "a"]) == [Word(("a",), 1)]


def test_two_symbol_word_is_not_mistaken_for_weighted():
    """A pair of symbols is only a weighted item when the second is an int."""
    assert collect_words([("a", "b")]) == [Word(("a", "b"), 1)]
    assert collect_words([(1, 2)]) == [Word((1, 2), 1)]


@pytest.mark.parametrize("item", [("ab", 0), ("ab", -2), Word(("a",), 0)])
def test_non_positive_frequency_raises(item):
    with pytest.raises(CorpusError):
        collect_words([item])


def test_non_sequence_item_raises():
    with pytest.raises(CorpusError):
        collect_words([42])


# Symbol splitters
# ---------------------------------------------------------------------------


def test_chars_and_bytes():
    assert chars("h\u00e9") == ("h", "\u00e9")
    assert utf8_bytes("h\u00e9") == (104, 195, 169)


def test_graphemes_keep_combining_marks():
    """An e followed by a combining acute accent is a single grapheme."""
    assert graphemes("e\u0301a") == ("e\u0301", "a")
    assert len(chars("e\u0301a")) == 3


def test_read_lines_skips_blank_lines(tmp_path):
    path = tmp_path / "corpus.txt"
    path.write_text("hello\n\n  \nab cd\r\nz", encoding="utf-8")
    assert list(read_lines(path)) == [tuple("hello"), tuple("ab cd"), ("z",)]
    assert list(read_lines(path, splitter=utf8_bytes))[-1] == (122,)

"""
Helpers for turning raw text into symbol sequences for training.

These live outside the training core: they decide what a symbol is, the
trainer only needs hashable, ordered symbols.
"""

import logging
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Final

import regex as re

log = logging.getLogger(__name__)

# extended grapheme cluster
GRAPHEME_PATTERN: Final = re.compile(r"\X")

type Splitter = Callable[[str], tuple]


def chars(text: str) -> tuple[str, ...]:
    """Split text into Unicode code points."""
    return tuple(text)


def graphemes(text: str) -> tuple[str, ...]:
    """Split text into user-perceived characters (extended grapheme clusters)."""
    return tuple(GRAPHEME_PATTERN.findall(text))


def utf8_bytes(text: str) -> tuple[int, ...]:
    """Split text into UTF-8 byte values."""
    return tuple(text.encode("utf-8"))


SPLITTERS: Final[dict[str, Splitter]] = {
    "chars": chars,
    "graphemes": graphemes,
    "bytes": utf8_bytes,
}


def read_lines(
    path: str | Path, splitter: Splitter = chars, encoding: str = "utf-8"
) -> Iterator[tuple]:
    """
    Yield one symbol sequence per non-blank line of a text file.

    Trailing newlines are stripped; other whitespace is kept as symbols.
    """
    path = Path(path)
    log.info(f"reading corpus from {path}")
    n = 0
    with path.open("r", encoding=encoding) as f:
        for line in f:
            line = line.rstrip("\r\n")
            if not line.strip():
                continue
            n += 1
            yield splitter(line)
    log.debug(f"read {n} lines from {path}")

"""
Utilities for converting tokens to displayable strings.
"""

import unicodedata
from collections.abc import Sequence


def _escape_ctrl_chars(s: str) -> str:
    """Replace all Unicode control characters with their escape sequences."""
    cleaned = []
    for c in s:
        # control category codes vary: Cc, Cf, Cn etc.
        # so check via first character
        if unicodedata.category(c)[0] != "C":
            cleaned.append(c)
        else:
            cleaned.append(f"\\u{ord(c):04x}")
    return "".join(cleaned)


def render_bytes(b: bytes) -> str:
    """
    Decode bytes as UTF-8 and escape control characters.

    Invalid UTF-8 sequences are replaced with the Unicode replacement character.
    """
    return _escape_ctrl_chars(b.decode("utf-8", errors="replace"))


def render_token(token: Sequence[object]) -> str:
    """
    Render a token for log lines and vocabulary listings.

    String symbols are joined, byte-valued ints are decoded as UTF-8, anything
    else falls back to a ``|``-separated repr of each symbol.
    """
    if all(isinstance(s, str) for s in token):
        return _escape_ctrl_chars("".join(token))  # type: ignore[arg-type]
    if all(isinstance(s, int) and 0 <= s < 256 for s in token):
        return render_bytes(bytes(token))  # type: ignore[arg-type]
    return "|".join(repr(s) for s in token)

"""Whitespace word chunking strategy."""

from __future__ import annotations

import re

WHITESPACE = re.compile(r"\s+")


def split_by_word(text: str) -> list[str]:
    """Split text on runs of whitespace.

    Leading or trailing whitespace yields empty strings at the edges.

    Example:
        >>> split_by_word("  one two\\tthree ")
        ['', 'one', 'two', 'three', '']
    """
    if not text:
        return []
    return WHITESPACE.split(text)

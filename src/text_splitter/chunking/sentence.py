"""Sentence chunking strategy.

A sentence is a maximal run of characters other than ``.``, ``!`` and ``?``
followed by one or more of them. This is a plain regex heuristic: it knows
nothing about abbreviations, decimals or locale rules.
"""

from __future__ import annotations

import re

SENTENCE = re.compile(r"[^.!?]+[.!?]+")


def split_by_sentence(text: str) -> list[str]:
    """Return every sentence found in ``text``, terminal punctuation included.

    Whitespace between sentences stays attached to the start of the next
    sentence. When the text contains no terminal punctuation at all, the
    whole text is returned as a single sentence. Otherwise any text after
    the last terminal punctuation run is dropped.

    Example:
        >>> split_by_sentence("Hi there. How are you?")
        ['Hi there.', ' How are you?']
        >>> split_by_sentence("Done. trailing words")
        ['Done.']
    """
    if not text:
        return []
    sentences = SENTENCE.findall(text)
    return sentences or [text]

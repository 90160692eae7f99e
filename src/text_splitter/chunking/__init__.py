"""Text chunking strategies.

Each strategy is a pure function from text to a list of fragments:

    - split_by_length: Fixed-size, non-overlapping chunks
    - split_by_paragraph: Split on blank lines
    - split_by_sentence: Sentences ending in ``.``, ``!`` or ``?``
    - split_by_word: Split on whitespace runs
    - split_by_regex: Split on a user-supplied regular expression

Boundary-based strategies follow standard split semantics and may return
empty strings; :func:`text_splitter.segmenter.process` removes them.
"""

from __future__ import annotations

from .length import split_by_length
from .paragraph import split_by_paragraph
from .regex_split import DEFAULT_SPLIT_PATTERN, split_by_regex
from .sentence import split_by_sentence
from .word import split_by_word

__all__ = [
    "DEFAULT_SPLIT_PATTERN",
    "split_by_length",
    "split_by_paragraph",
    "split_by_regex",
    "split_by_sentence",
    "split_by_word",
]

"""Segmenter/extractor: one text in, an ordered list of fragments out."""

from __future__ import annotations

from .chunking import (
    split_by_length,
    split_by_paragraph,
    split_by_regex,
    split_by_sentence,
    split_by_word,
)
from .extract import regex_extract
from .models import TransformConfig


def split_text(text: str, config: TransformConfig) -> list[str]:
    """Split ``text`` with ``config.split_method``, dropping empty fragments."""
    method = config.split_method
    if method == "length":
        fragments = split_by_length(text, config.length)
    elif method == "paragraph":
        fragments = split_by_paragraph(text)
    elif method == "sentence":
        fragments = split_by_sentence(text)
    elif method == "word":
        fragments = split_by_word(text)
    elif method == "regex":
        fragments = split_by_regex(
            text,
            config.split_regex,
            ignore_case=config.split_ignore_case,
            timeout=config.regex_timeout,
        )
    else:
        raise ValueError(f"Unknown split method: {method}")
    return [fragment for fragment in fragments if fragment != ""]


def extract_text(text: str, config: TransformConfig) -> list[str]:
    """Return the matches of ``config.regex`` in ``text``, empty matches included."""
    return regex_extract(
        text,
        config.regex,
        ignore_case=config.ignore_case,
        global_match=config.global_match,
        timeout=config.regex_timeout,
    )


def process(text: str, config: TransformConfig) -> list[str]:
    """Run the configured operation over ``text``.

    Args:
        text: The source text.
        config: Validated transformation parameters.

    Returns:
        Fragments in order of occurrence. For ``split`` empty fragments are
        removed; for ``extract`` every match is returned as is.

    Raises:
        PatternError: If a user pattern is malformed or times out.
        InvalidLengthError: For ``split``/``length`` with ``length < 1``.
    """
    if config.operation == "extract":
        return extract_text(text, config)
    return split_text(text, config)


__all__ = ["extract_text", "process", "split_text"]

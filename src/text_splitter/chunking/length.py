"""Fixed-length chunking strategy."""

from __future__ import annotations

from ..errors import InvalidLengthError


def split_by_length(text: str, length: int = 100) -> list[str]:
    """Split text into consecutive, non-overlapping chunks of ``length`` characters.

    Every chunk holds exactly ``length`` characters except the last, which
    holds the remainder. Lengths are counted in code points.

    Args:
        text: The text to split.
        length: Characters per chunk. Must be at least 1. Default: 100.

    Returns:
        List of chunks. Empty list if text is empty.

    Raises:
        InvalidLengthError: If ``length`` is not an integer >= 1.

    Example:
        >>> split_by_length("abcdef", length=4)
        ['abcd', 'ef']
    """
    if isinstance(length, bool) or not isinstance(length, int) or length < 1:
        raise InvalidLengthError(length)
    if not text:
        return []
    return [text[start : start + length] for start in range(0, len(text), length)]

"""User-defined regex chunking strategy."""

from __future__ import annotations

from ..patterns import DEFAULT_TIMEOUT, compile_pattern, split_on

DEFAULT_SPLIT_PATTERN = r"\n\n+"


def split_by_regex(
    text: str,
    pattern: str = DEFAULT_SPLIT_PATTERN,
    *,
    ignore_case: bool = False,
    timeout: float | None = DEFAULT_TIMEOUT,
) -> list[str]:
    """Split text on every non-overlapping match of ``pattern``.

    Capture groups in ``pattern`` are kept in the output the way
    ``re.split`` keeps them. Groups that did not take part in a match are
    dropped, empty strings are left for the caller to filter.

    Args:
        text: The text to split.
        pattern: Regular expression marking boundaries. Default: ``\\n\\n+``.
        ignore_case: Match case-insensitively. Default: False.
        timeout: Execution budget in seconds, ``None`` for unbounded.

    Raises:
        PatternError: If ``pattern`` does not compile.
        PatternTimeoutError: If matching exceeds ``timeout``.

    Example:
        >>> split_by_regex("a1b22c", r"\\d+")
        ['a', 'b', 'c']
    """
    compiled = compile_pattern(pattern, ignore_case=ignore_case)
    if not text:
        return []
    return [part for part in split_on(compiled, text, timeout=timeout) if part is not None]

"""Regex extraction.

Available tools:
    - regex_extract: Every substring of a text matching a pattern
"""

from __future__ import annotations

from .patterns import DEFAULT_TIMEOUT, compile_pattern, find_matches

DEFAULT_EXTRACT_PATTERN = "[aeiouáéíóúüAEIOUÁÉÍÓÚÜ]"


def regex_extract(
    text: str,
    pattern: str = DEFAULT_EXTRACT_PATTERN,
    *,
    ignore_case: bool = True,
    global_match: bool = True,
    timeout: float | None = DEFAULT_TIMEOUT,
) -> list[str]:
    """Extract every match of ``pattern`` from ``text``.

    Matches are returned in order of occurrence and never overlap: after
    each match the scan resumes right after the matched text. The full
    match is returned even when the pattern has capture groups. Empty
    matches are kept.

    Args:
        text: The source text to search within.
        pattern: The regular expression to match. Default: Spanish vowels.
        ignore_case: Match case-insensitively. Default: True.
        global_match: Return every match. When False only the first match
            is returned. Default: True.
        timeout: Execution budget in seconds, ``None`` for unbounded.

    Returns:
        A list of matched substrings. Empty list when nothing matches.

    Raises:
        PatternError: If ``pattern`` does not compile.
        PatternTimeoutError: If matching exceeds ``timeout``.

    Example:
        >>> regex_extract("hola mundo", "[aeiou]")
        ['o', 'a', 'u', 'o']
        >>> regex_extract("Code: python", r"code: (\\w+)")
        ['Code: python']
    """
    compiled = compile_pattern(pattern, ignore_case=ignore_case)
    return find_matches(compiled, text, timeout=timeout, first_only=not global_match)


__all__ = ["DEFAULT_EXTRACT_PATTERN", "regex_extract"]

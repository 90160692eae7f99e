"""Compilation and execution of user-supplied regular expressions.

User patterns run on the third-party ``regex`` engine, whose matching calls
accept a ``timeout`` argument. That bounds runaway backtracking on hostile
patterns such as ``(a+)+$``. Built-in patterns used by the fixed strategies
are trusted and stay on the standard ``re`` module.
"""

from __future__ import annotations

from functools import lru_cache

import regex

from .errors import PatternError, PatternTimeoutError

DEFAULT_TIMEOUT = 1.0


@lru_cache(maxsize=128)
def _compile(pattern: str, flags: int) -> regex.Pattern:
    return regex.compile(pattern, flags)


def compile_pattern(pattern: str, *, ignore_case: bool = False) -> regex.Pattern:
    """Compile ``pattern``, translating syntax errors into :class:`PatternError`.

    Args:
        pattern: The regular expression source.
        ignore_case: Compile with case-insensitive matching.

    Returns:
        The compiled pattern. Compiled objects are cached per
        ``(pattern, flags)``, so repeated records share one compilation.

    Raises:
        PatternError: If ``pattern`` is not a string or fails to compile.
    """
    if not isinstance(pattern, str):
        raise PatternError(repr(pattern), "pattern must be a string")
    flags = regex.IGNORECASE if ignore_case else 0
    try:
        return _compile(pattern, flags)
    except regex.error as exc:
        raise PatternError(pattern, str(exc)) from exc


def find_matches(
    compiled: regex.Pattern,
    text: str,
    *,
    timeout: float | None = DEFAULT_TIMEOUT,
    first_only: bool = False,
) -> list[str]:
    """Return the full text of every non-overlapping match, left to right.

    Unlike ``findall`` this always yields ``group(0)``, even when the
    pattern contains capture groups.
    """
    matches: list[str] = []
    try:
        for match in compiled.finditer(text, timeout=timeout):
            matches.append(match.group(0))
            if first_only:
                break
    except TimeoutError as exc:
        raise PatternTimeoutError(compiled.pattern, timeout or 0.0) from exc
    return matches


def split_on(
    compiled: regex.Pattern,
    text: str,
    *,
    timeout: float | None = DEFAULT_TIMEOUT,
) -> list[str | None]:
    """Split ``text`` on every match of ``compiled``.

    Captured groups appear in the result exactly as with ``re.split``;
    groups that did not participate come back as ``None``.
    """
    try:
        return compiled.split(text, timeout=timeout)
    except TimeoutError as exc:
        raise PatternTimeoutError(compiled.pattern, timeout or 0.0) from exc


__all__ = ["DEFAULT_TIMEOUT", "compile_pattern", "find_matches", "split_on"]

"""Error types raised by the text splitter.

All errors derive from :class:`TextSplitterError` so hosts can catch the
whole family at once. Value-shaped problems additionally subclass
``ValueError`` to stay compatible with callers that only know the builtins.
"""

from __future__ import annotations


class TextSplitterError(Exception):
    """Base class for every error raised by this package."""


class MissingFieldError(TextSplitterError, KeyError):
    """The configured text field is absent, empty, or not a string.

    The fan-out layer treats this as "nothing to do" and skips the record.
    """

    def __init__(self, field: str, reason: str = "missing") -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Text field {field!r} is {reason}")

    def __str__(self) -> str:
        # KeyError would repr() the message otherwise
        return str(self.args[0])


class PatternError(TextSplitterError, ValueError):
    """A user-supplied regular expression could not be compiled or run."""

    def __init__(self, pattern: str, message: str) -> None:
        self.pattern = pattern
        super().__init__(f"Invalid regex pattern {pattern!r}: {message}")


class PatternTimeoutError(PatternError):
    """A user-supplied regular expression exceeded its execution budget."""

    def __init__(self, pattern: str, timeout: float) -> None:
        self.pattern = pattern
        self.timeout = timeout
        # the pattern compiled fine, so skip the "Invalid regex pattern" prefix
        TextSplitterError.__init__(
            self, f"Regex pattern {pattern!r} timed out after {timeout}s"
        )


class InvalidLengthError(TextSplitterError, ValueError):
    """The chunk length for the ``length`` split method is below 1."""

    def __init__(self, length: object) -> None:
        self.length = length
        super().__init__(f"length must be a positive integer, got {length!r}")


class ConfigurationError(TextSplitterError, ValueError):
    """Parameter values could not be turned into a valid configuration."""


__all__ = [
    "ConfigurationError",
    "InvalidLengthError",
    "MissingFieldError",
    "PatternError",
    "PatternTimeoutError",
    "TextSplitterError",
]

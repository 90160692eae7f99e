"""Paragraph chunking strategy."""

from __future__ import annotations

import re

# A whitespace run holding at least two newlines, i.e. one or more blank lines.
PARAGRAPH_BOUNDARY = re.compile(r"\n\s*\n")


def split_by_paragraph(text: str) -> list[str]:
    """Split text at blank-line boundaries.

    Standard split semantics apply: leading, trailing or adjacent
    boundaries yield empty strings, which callers are expected to drop.

    Example:
        >>> split_by_paragraph("ab\\n\\ncd")
        ['ab', 'cd']
    """
    if not text:
        return []
    return PARAGRAPH_BOUNDARY.split(text)

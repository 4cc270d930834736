"""Display helpers derived from the document text and path."""

from __future__ import annotations

import re

NO_FILE_LABEL = 'No file'


def word_count(text: str) -> int:
    """Count whitespace-separated words; an empty or blank buffer has none."""
    return len(text.split())


def display_filename(path: str | None) -> str:
    """Last path segment after any ``/`` or ``\\`` separator."""
    if not path:
        return NO_FILE_LABEL
    return re.split(r'[/\\]', path)[-1]

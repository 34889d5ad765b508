"""Read-only word lookups against a built index."""

from __future__ import annotations

from word_index.index.models import QueryResult, TextIndex


def query(index: TextIndex, word: str) -> QueryResult:
    """Return occurrences of ``word``; unknown words yield an empty result."""
    return index.query(word)

"""Typed models for the in-memory word index."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass

EMPTY_LINE_NUMBERS: tuple[int, ...] = ()


@dataclass(slots=True, frozen=True)
class IndexSummary:
    """Size snapshot of a built index."""

    source: str
    line_count: int
    word_count: int
    truncated: bool


@dataclass(slots=True, frozen=True)
class QueryResult:
    """Occurrences of one word.

    ``line_numbers`` and ``lines`` are the tuples owned by the index that
    produced the result, not copies.
    """

    word: str
    line_numbers: tuple[int, ...]
    lines: tuple[str, ...]

    @property
    def count(self) -> int:
        """Return the number of distinct lines containing the word."""
        return len(self.line_numbers)

    def __iter__(self) -> Iterator[int]:
        return iter(self.line_numbers)

    def matches(self) -> Iterator[tuple[int, str]]:
        """Yield ``(line_number, text)`` pairs in ascending line order."""
        for line_number in self.line_numbers:
            yield line_number, self.lines[line_number]


@dataclass(slots=True, frozen=True)
class TextIndex:
    """Immutable word -> line numbers index over a line store."""

    source: str
    lines: tuple[str, ...]
    words: Mapping[str, tuple[int, ...]]
    truncated: bool = False

    def query(self, word: str) -> QueryResult:
        """Look up an exact, case-sensitive word."""
        return QueryResult(
            word=word,
            line_numbers=self.words.get(word, EMPTY_LINE_NUMBERS),
            lines=self.lines,
        )

    def summary(self) -> IndexSummary:
        """Return line and distinct word counts."""
        return IndexSummary(
            source=self.source,
            line_count=len(self.lines),
            word_count=len(self.words),
            truncated=self.truncated,
        )

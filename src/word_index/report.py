"""Plain-text rendering of query results."""

from __future__ import annotations

from typing import TextIO

from word_index.index.models import QueryResult


def make_plural(count: int, word: str, ending: str = "s") -> str:
    """Return ``word`` with ``ending`` appended unless ``count`` is exactly one."""
    return word if count == 1 else f"{word}{ending}"


def format_result(result: QueryResult) -> str:
    """Render the occurrence header followed by each matching line."""
    lines = [f"{result.word} occurs {result.count} {make_plural(result.count, 'time')}"]
    for line_number, text in result.matches():
        lines.append(f"\t(line {line_number + 1}) {text}")
    return "\n".join(lines) + "\n"


def write_result(result: QueryResult, out_stream: TextIO) -> None:
    """Write the rendered result to ``out_stream``."""
    out_stream.write(format_result(result))

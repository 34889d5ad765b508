"""Build an inverted word index from a line source."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from types import MappingProxyType
from typing import TextIO

from word_index.index.models import TextIndex


class IndexSourceError(Exception):
    """Raised when the index source cannot be opened."""

    def __init__(self, reason: str, hint: str) -> None:
        super().__init__(reason)
        self.reason = reason
        self.hint = hint


def tokenize(line: str) -> list[str]:
    """Split a line on runs of whitespace."""
    return line.split()


def build_index(
    lines: Iterable[str],
    source: str = "<memory>",
    trace: TextIO | None = None,
) -> TextIndex:
    """Consume ``lines`` once and return the frozen index.

    A read error raised while iterating ends the build early; the lines read
    so far are kept and the index is marked ``truncated``.
    """
    store: list[str] = []
    postings: dict[str, set[int]] = {}
    truncated = False
    iterator = iter(lines)
    while True:
        try:
            raw_line = next(iterator)
        except StopIteration:
            break
        except (OSError, UnicodeDecodeError):
            truncated = True
            break
        line_number = len(store)
        text = _strip_newline(raw_line)
        store.append(text)
        for token in tokenize(text):
            if trace is not None:
                trace.write(f"{token}\n")
            postings.setdefault(token, set()).add(line_number)

    words = {word: tuple(sorted(numbers)) for word, numbers in postings.items()}
    return TextIndex(
        source=source,
        lines=tuple(store),
        words=MappingProxyType(words),
        truncated=truncated,
    )


def build_index_from_path(
    path: Path,
    encoding: str = "utf-8",
    trace: TextIO | None = None,
) -> TextIndex:
    """Open ``path`` and index it line by line."""
    try:
        handle = path.open("r", encoding=encoding)
    except OSError as exc:
        raise IndexSourceError(
            reason=f"Unable to open index source '{path}': {exc.strerror or exc}.",
            hint="Check that the file exists and is readable, or set [source] path.",
        ) from exc
    except LookupError as exc:
        raise IndexSourceError(
            reason=f"Unknown source encoding '{encoding}'.",
            hint="Set [source] encoding to a codec name Python recognizes.",
        ) from exc
    with handle:
        return build_index(handle, source=str(path), trace=trace)


def _strip_newline(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line

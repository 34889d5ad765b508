"""Interactive prompt/query/report loop."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from word_index.config import StartupOverrides, WordIndexConfig, load_effective_config
from word_index.index import QueryResult, TextIndex, build_index_from_path
from word_index.logging import AuditLogUnavailableError, JsonlAuditLogger
from word_index.report import write_result

PROMPT = "enter word to look for, or q to quit: "
QUIT_TOKEN = "q"


def read_tokens(in_stream: TextIO) -> Iterator[str]:
    """Yield whitespace-delimited tokens across lines until input is exhausted."""
    while True:
        try:
            line = in_stream.readline()
        except (OSError, UnicodeDecodeError):
            return
        if not line:
            return
        yield from line.split()


class InteractiveSession:
    """Answers word lookups against one built index."""

    def __init__(
        self,
        index: TextIndex,
        audit_logger: JsonlAuditLogger | None = None,
        err_stream: TextIO | None = None,
    ) -> None:
        self._index = index
        self._audit_logger = audit_logger
        self._err_stream = err_stream if err_stream is not None else sys.stderr

    @property
    def index(self) -> TextIndex:
        return self._index

    def lookup(self, word: str) -> QueryResult:
        """Query the index and audit the lookup when enabled.

        An audit write failure disables the audit log for the rest of the
        session; the lookup itself still succeeds.
        """
        result = self._index.query(word)
        if self._audit_logger is not None:
            try:
                self._audit_logger.record("query", word=word, match_count=result.count)
            except AuditLogUnavailableError as exc:
                self._audit_logger = None
                self._err_stream.write(f"warning: {exc.reason} Audit log disabled.\n")
        return result

    def serve(self, in_stream: TextIO, out_stream: TextIO) -> int:
        """Prompt for words until ``q`` or end of input; return queries answered."""
        tokens = read_tokens(in_stream)
        answered = 0
        while True:
            out_stream.write(PROMPT)
            out_stream.flush()
            word = next(tokens, None)
            if word is None or word == QUIT_TOKEN:
                break
            write_result(self.lookup(word), out_stream)
            out_stream.write("\n")
            out_stream.flush()
            answered += 1
        return answered


def create_session(
    work_dir: str | Path = ".",
    overrides: StartupOverrides | None = None,
    err_stream: TextIO | None = None,
) -> InteractiveSession:
    """Load config, build the index and return a ready session.

    Raises ``IndexSourceError`` when the configured source cannot be opened and
    ``AuditLogUnavailableError`` when an enabled audit log cannot be written.
    """
    config = load_effective_config(Path(work_dir), overrides)
    return create_session_from_config(config, err_stream=err_stream)


def create_session_from_config(
    config: WordIndexConfig, err_stream: TextIO | None = None
) -> InteractiveSession:
    """Build the index described by ``config``."""
    err = err_stream if err_stream is not None else sys.stderr
    audit_logger = JsonlAuditLogger(config.audit.path) if config.audit.enabled else None
    index = build_index_from_path(
        config.source.path,
        encoding=config.source.encoding,
        trace=err if config.trace_enabled else None,
    )
    if audit_logger is not None:
        summary = index.summary()
        audit_logger.record(
            "index.build",
            line_count=summary.line_count,
            word_count=summary.word_count,
            truncated=summary.truncated,
        )
    return InteractiveSession(index=index, audit_logger=audit_logger, err_stream=err)

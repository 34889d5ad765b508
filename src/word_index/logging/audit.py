"""Structured JSONL audit log utilities."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from pathlib import Path


@dataclass(slots=True, frozen=True)
class AuditEvent:
    """Sanitized record of one build or query."""

    timestamp: str
    event: str
    ok: bool
    metadata: dict[str, object]


def utc_timestamp() -> str:
    """Return an ISO-8601 UTC timestamp."""
    return datetime.now(tz=UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def sanitize_arguments(arguments: dict[str, object]) -> dict[str, object]:
    """Drop free-text values so queried words never reach the log."""
    sanitized: dict[str, object] = {}
    for key in sorted(arguments.keys()):
        value = arguments[key]
        if isinstance(value, (int, float, bool)) or value is None:
            sanitized[key] = value
            continue
        if isinstance(value, str):
            sanitized[f"{key}_present"] = bool(value)
            sanitized[f"{key}_length"] = len(value)
            continue
        if isinstance(value, (list, tuple)):
            sanitized[f"{key}_type"] = "list"
            sanitized[f"{key}_length"] = len(value)
            continue
        sanitized[f"{key}_type"] = type(value).__name__
    return sanitized


class AuditLogUnavailableError(Exception):
    """Raised when the audit log path cannot be created or written."""

    def __init__(self, reason: str, hint: str) -> None:
        super().__init__(reason)
        self.reason = reason
        self.hint = hint


class JsonlAuditLogger:
    """Append-only JSONL audit logger."""

    def __init__(self, path: Path) -> None:
        self._path = path
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise _unavailable(path, exc) from exc

    @property
    def path(self) -> Path:
        """Return on-disk JSONL path."""
        return self._path

    def append(self, event: AuditEvent) -> None:
        """Append an event as one JSON object per line."""
        try:
            with self._path.open("a", encoding="utf-8") as handle:
                handle.write(json.dumps(asdict(event), sort_keys=True))
                handle.write("\n")
        except OSError as exc:
            raise _unavailable(self._path, exc) from exc

    def record(self, event: str, ok: bool = True, **arguments: object) -> AuditEvent:
        """Sanitize ``arguments``, append them as ``event`` and return the entry."""
        entry = AuditEvent(
            timestamp=utc_timestamp(),
            event=event,
            ok=ok,
            metadata=sanitize_arguments(arguments),
        )
        self.append(entry)
        return entry


def _unavailable(path: Path, exc: OSError) -> AuditLogUnavailableError:
    return AuditLogUnavailableError(
        reason=f"Unable to write audit log '{path}': {exc.strerror or exc}.",
        hint="Point [audit] path at a writable location or disable the audit log.",
    )

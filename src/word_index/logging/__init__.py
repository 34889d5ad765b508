"""Structured logging utilities."""

from .audit import (
    AuditEvent,
    AuditLogUnavailableError,
    JsonlAuditLogger,
    sanitize_arguments,
    utc_timestamp,
)

__all__ = [
    "AuditEvent",
    "AuditLogUnavailableError",
    "JsonlAuditLogger",
    "sanitize_arguments",
    "utc_timestamp",
]

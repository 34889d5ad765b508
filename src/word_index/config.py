"""Configuration loading and deterministic merge order."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

CONFIG_FILE_NAME = "word_index.toml"
DEFAULT_SOURCE_PATH = Path(__file__).resolve().with_name("cli.py")
DEFAULT_ENCODING = "utf-8"
DEFAULT_AUDIT_RELATIVE_PATH = Path(".word_index") / "audit.jsonl"


@dataclass(slots=True, frozen=True)
class SourceConfig:
    """File the index is built from."""

    path: Path
    encoding: str


@dataclass(slots=True, frozen=True)
class AuditConfig:
    """JSONL audit log settings."""

    enabled: bool
    path: Path


@dataclass(slots=True, frozen=True)
class WordIndexConfig:
    """Fully merged runtime configuration."""

    work_dir: Path
    source: SourceConfig
    trace_enabled: bool
    audit: AuditConfig


@dataclass(slots=True, frozen=True)
class StartupOverrides:
    """Optional programmatic overrides applied at highest precedence."""

    source_path: Path | None = None
    trace_enabled: bool | None = None
    audit_path: Path | None = None


def default_config(work_dir: Path) -> WordIndexConfig:
    """Build default config for a given working directory."""
    resolved = work_dir.resolve()
    return WordIndexConfig(
        work_dir=resolved,
        source=SourceConfig(path=DEFAULT_SOURCE_PATH, encoding=DEFAULT_ENCODING),
        trace_enabled=False,
        audit=AuditConfig(enabled=False, path=resolved / DEFAULT_AUDIT_RELATIVE_PATH),
    )


def load_config_file(work_dir: Path) -> dict[str, object]:
    """Load optional word_index.toml from the working directory."""
    config_path = work_dir / CONFIG_FILE_NAME
    if not config_path.exists():
        return {}
    with config_path.open("rb") as handle:
        payload = tomllib.load(handle)
    if not isinstance(payload, dict):
        raise ValueError(f"{CONFIG_FILE_NAME} must contain a top-level table.")
    return payload


def _get_table(payload: dict[str, object], key: str) -> dict[str, object]:
    value = payload.get(key, {})
    if not isinstance(value, dict):
        raise ValueError(f"Config section '{key}' must be a table.")
    return value


def _optional_bool(value: object, name: str, default: bool) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ValueError(f"Config field '{name}' must be a boolean.")
    return value


def _optional_string(value: object, name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str) or not value:
        raise ValueError(f"Config field '{name}' must be a non-empty string.")
    return value


def merge_config(
    base: WordIndexConfig, payload: dict[str, object], overrides: StartupOverrides
) -> WordIndexConfig:
    """Merge defaults, config file, then startup overrides."""
    source_payload = _get_table(payload, "source")
    trace_payload = _get_table(payload, "trace")
    audit_payload = _get_table(payload, "audit")

    source_path = base.source.path
    raw_source_path = _optional_string(source_payload.get("path"), "source.path")
    if raw_source_path is not None:
        source_path = (base.work_dir / raw_source_path).resolve()
    encoding = base.source.encoding
    raw_encoding = _optional_string(source_payload.get("encoding"), "source.encoding")
    if raw_encoding is not None:
        encoding = raw_encoding

    audit_path = base.audit.path
    raw_audit_path = _optional_string(audit_payload.get("path"), "audit.path")
    if raw_audit_path is not None:
        audit_path = (base.work_dir / raw_audit_path).resolve()

    merged = WordIndexConfig(
        work_dir=base.work_dir,
        source=SourceConfig(path=source_path, encoding=encoding),
        trace_enabled=_optional_bool(
            trace_payload.get("enabled"), "trace.enabled", base.trace_enabled
        ),
        audit=AuditConfig(
            enabled=_optional_bool(audit_payload.get("enabled"), "audit.enabled", base.audit.enabled),
            path=audit_path,
        ),
    )
    return apply_startup_overrides(merged, overrides)


def apply_startup_overrides(
    config: WordIndexConfig, overrides: StartupOverrides
) -> WordIndexConfig:
    """Apply startup overrides at highest precedence.

    Setting ``audit_path`` also enables the audit log.
    """
    source = config.source
    if overrides.source_path is not None:
        source = SourceConfig(path=overrides.source_path.resolve(), encoding=source.encoding)
    audit = config.audit
    if overrides.audit_path is not None:
        audit = AuditConfig(enabled=True, path=overrides.audit_path.resolve())
    trace_enabled = (
        overrides.trace_enabled if overrides.trace_enabled is not None else config.trace_enabled
    )
    return WordIndexConfig(
        work_dir=config.work_dir,
        source=source,
        trace_enabled=trace_enabled,
        audit=audit,
    )


def load_effective_config(
    work_dir: Path, overrides: StartupOverrides | None = None
) -> WordIndexConfig:
    """Load effective config using merge order defaults -> file -> overrides."""
    resolved = work_dir.resolve()
    base = default_config(resolved)
    payload = load_config_file(resolved)
    return merge_config(base, payload, overrides or StartupOverrides())

from __future__ import annotations

from pathlib import Path

from word_index.config import (
    DEFAULT_SOURCE_PATH,
    StartupOverrides,
    load_effective_config,
)


def test_defaults_index_the_entry_module_source(tmp_path: Path) -> None:
    config = load_effective_config(tmp_path)

    assert config.source.path == DEFAULT_SOURCE_PATH
    assert DEFAULT_SOURCE_PATH.name == "cli.py"
    assert DEFAULT_SOURCE_PATH.exists()
    assert config.source.encoding == "utf-8"
    assert config.trace_enabled is False
    assert config.audit.enabled is False
    assert config.audit.path == tmp_path.resolve() / ".word_index" / "audit.jsonl"


def test_merge_order_defaults_then_file_then_overrides(tmp_path: Path) -> None:
    (tmp_path / "word_index.toml").write_text(
        "\n".join(
            [
                "[source]",
                'path = "docs/notes.txt"',
                'encoding = "latin-1"',
                "",
                "[trace]",
                "enabled = true",
                "",
                "[audit]",
                "enabled = true",
                'path = "logs/audit.jsonl"',
            ]
        ),
        encoding="utf-8",
    )
    config = load_effective_config(tmp_path, StartupOverrides(trace_enabled=False))

    assert config.source.path == (tmp_path / "docs" / "notes.txt").resolve()
    assert config.source.encoding == "latin-1"
    assert config.trace_enabled is False
    assert config.audit.enabled is True
    assert config.audit.path == (tmp_path / "logs" / "audit.jsonl").resolve()


def test_overrides_take_highest_precedence(tmp_path: Path) -> None:
    (tmp_path / "word_index.toml").write_text(
        '[source]\npath = "from_file.txt"\n', encoding="utf-8"
    )
    override_source = tmp_path / "override.txt"
    override_audit = tmp_path / "custom" / "audit.jsonl"

    config = load_effective_config(
        tmp_path,
        StartupOverrides(source_path=override_source, audit_path=override_audit),
    )

    assert config.source.path == override_source.resolve()
    assert config.audit.enabled is True
    assert config.audit.path == override_audit.resolve()


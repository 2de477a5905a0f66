"""Tests for formatting and writing the generated module."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import pytest

from buildergen.errors import WriteError
from buildergen.writer import ModuleWriter, find_format_config

SOURCE = "export function Number(options) {\nreturn typebox.Type.Number(options);\n}\n"


def test_write_formats_with_defaults(tmp_path: Path) -> None:
    target = tmp_path / "builder.js"

    written = asyncio.run(ModuleWriter().write(target, SOURCE))

    assert written == target
    content = target.read_text(encoding="utf-8")
    assert "\n  return typebox.Type.Number(options);\n" in content
    assert content.endswith("}\n")


def test_write_overwrites_existing_file(tmp_path: Path) -> None:
    target = tmp_path / "builder.js"
    target.write_text("stale content", encoding="utf-8")

    asyncio.run(ModuleWriter().write(target, SOURCE))

    assert "stale content" not in target.read_text(encoding="utf-8")


def test_write_uses_project_format_config(tmp_path: Path) -> None:
    (tmp_path / ".jsbeautifyrc").write_text(json.dumps({"indent_size": 4}), encoding="utf-8")
    output_dir = tmp_path / "lib"
    output_dir.mkdir()
    target = output_dir / "builder.js"

    asyncio.run(ModuleWriter().write(target, SOURCE))

    assert "\n    return typebox.Type.Number(options);\n" in target.read_text(encoding="utf-8")


def test_explicit_format_options_skip_project_config(tmp_path: Path) -> None:
    (tmp_path / ".jsbeautifyrc").write_text("not json", encoding="utf-8")

    formatted = ModuleWriter(format_options={"indent_size": 8}).format(SOURCE, tmp_path / "builder.js")

    assert "\n        return typebox.Type.Number(options);\n" in formatted


def test_invalid_project_format_config_raises(tmp_path: Path) -> None:
    (tmp_path / ".jsbeautifyrc").write_text("not json", encoding="utf-8")

    with pytest.raises(WriteError):
        ModuleWriter().format(SOURCE, tmp_path / "builder.js")


def test_write_does_not_create_parent_directories(tmp_path: Path) -> None:
    target = tmp_path / "missing" / "builder.js"

    with pytest.raises(WriteError):
        asyncio.run(ModuleWriter(format_options={}).write(target, SOURCE))

    assert not target.parent.exists()


def test_find_format_config_walks_up(tmp_path: Path) -> None:
    config = tmp_path / ".jsbeautifyrc"
    config.write_text("{}", encoding="utf-8")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)

    assert find_format_config(nested) == config.resolve()


def test_formatter_failure_raises_write_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def broken(content, options):
        raise ValueError("invalid literal for int() with base 10: 'wide'")

    monkeypatch.setattr("buildergen.writer.jsbeautifier.beautify", broken)
    target = tmp_path / "builder.js"

    with pytest.raises(WriteError, match="Failed to format"):
        asyncio.run(ModuleWriter(format_options={"indent_size": "wide"}).write(target, SOURCE))

    assert not target.exists()

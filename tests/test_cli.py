"""CLI parser and command behaviour tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from buildergen.cli import _build_parser, main
from tests._fixtures.declarations import DeclarationBuilder


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "generate"])
    assert args.verbose is True
    assert args.command == "generate"


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["generate", "--verbose"])
    assert args.verbose is True
    assert args.command == "generate"


def test_cli_generate_defaults() -> None:
    parser = _build_parser()
    args = parser.parse_args(["generate"])
    assert args.config == "."
    assert args.output is None
    assert args.verbose is False


def _write_config(declarations: DeclarationBuilder, body: str) -> Path:
    config_file = declarations.root / ".buildergen.yml"
    config_file.write_text(body, encoding="utf-8")
    return config_file


def test_generate_writes_module(declarations: DeclarationBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    declarations.write_default()
    (declarations.root / "lib").mkdir()
    _write_config(declarations, "library_dir: types\noutput: lib/builder.js\n")

    main(["generate", "--config", str(declarations.root)])

    output = declarations.root / "lib" / "builder.js"
    assert "export function Object(properties, options, extra)" in output.read_text(encoding="utf-8")
    assert "Builder module written to" in capsys.readouterr().out


def test_generate_honours_output_override(declarations: DeclarationBuilder, tmp_path: Path) -> None:
    declarations.write_default()
    config_file = _write_config(declarations, "library_dir: types\n")
    target = tmp_path / "override.js"

    main(["generate", "--config", str(config_file), "--output", str(target)])

    assert target.exists()


def test_generate_exits_when_sources_are_missing(
    declarations: DeclarationBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    _write_config(declarations, "library_dir: types\nroot_files: [absent.d.mts]\n")

    with pytest.raises(SystemExit) as excinfo:
        main(["generate", "--config", str(declarations.root)])

    assert excinfo.value.code == 1
    assert "buildergen generate failed" in capsys.readouterr().err


def test_cli_logging_flags_on_either_side_of_command(tmp_path: Path) -> None:
    parser = _build_parser()
    log_file = tmp_path / "run.log"

    before = parser.parse_args(["--quiet", "--log-file", str(log_file), "generate"])
    after = parser.parse_args(["generate", "-q", "--log-file", str(log_file)])

    for args in (before, after):
        assert args.quiet is True
        assert args.verbose is False
        assert args.log_file == log_file

"""Formats and persists the generated module."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, Dict, Optional

import jsbeautifier

from .errors import WriteError
from .logging import get_logger

FORMAT_CONFIG_FILENAME = ".jsbeautifyrc"

DEFAULT_FORMAT_OPTIONS: Dict[str, Any] = {
    "indent_size": 2,
    "end_with_newline": True,
    "preserve_newlines": True,
    "max_preserve_newlines": 2,
}


class ModuleWriter:
    """Beautifies JavaScript output and writes it to disk in a single step."""

    def __init__(self, format_options: Optional[Dict[str, Any]] = None) -> None:
        self._format_options = format_options
        self.logger = get_logger("writer")

    def format(self, content: str, path: Path) -> str:
        options = dict(DEFAULT_FORMAT_OPTIONS)
        if self._format_options is not None:
            options.update(self._format_options)
        else:
            options.update(self._project_options(path))

        beautifier_options = jsbeautifier.default_options()
        for key, value in options.items():
            setattr(beautifier_options, key.replace("-", "_"), value)
        try:
            return jsbeautifier.beautify(content, beautifier_options)
        except Exception as exc:
            raise WriteError(f"Failed to format {path}: {exc}") from exc

    async def write(self, path: Path, content: str) -> Path:
        """Format ``content`` and overwrite ``path``; the parent directory must exist."""
        formatted = self.format(content, path)
        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(None, _write_text, path, formatted)
        except OSError as exc:
            raise WriteError(f"Failed to write {path}: {exc}") from exc
        self.logger.debug("Wrote %d bytes to %s", len(formatted.encode("utf-8")), path)
        return path

    def _project_options(self, path: Path) -> Dict[str, Any]:
        config_file = find_format_config(path.parent)
        if config_file is None:
            return {}
        try:
            loaded = json.loads(config_file.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise WriteError(f"Failed to read {config_file}: {exc}") from exc
        if not isinstance(loaded, dict):
            raise WriteError(f"{config_file} must contain a JSON object")
        self.logger.debug("Using formatting options from %s", config_file)
        return loaded


def find_format_config(start: Path) -> Optional[Path]:
    """Return the nearest .jsbeautifyrc at or above ``start``."""
    current = start.expanduser().resolve()
    for directory in (current, *current.parents):
        candidate = directory / FORMAT_CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def _write_text(path: Path, content: str) -> None:
    path.write_text(content, encoding="utf-8")


__all__ = ["DEFAULT_FORMAT_OPTIONS", "FORMAT_CONFIG_FILENAME", "ModuleWriter", "find_format_config"]

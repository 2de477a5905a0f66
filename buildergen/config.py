"""Configuration loading for buildergen (.buildergen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".buildergen.yml"

DEFAULT_LIBRARY_DIR = "node_modules/@sinclair/typebox/build/import/type/type"
DEFAULT_ROOT_FILES: tuple[str, ...] = ("json.d.mts", "javascript.d.mts")
DEFAULT_BUILDERS: tuple[str, ...] = ("JavaScriptTypeBuilder", "JsonTypeBuilder")
DEFAULT_OUTPUT = "lib/builder.js"
DEFAULT_NAMESPACE = "typebox"
DEFAULT_MODULE = "@sinclair/typebox"
DEFAULT_INSTANCE = "Type"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


def default_template_path() -> Path:
    """Return the module template bundled with the package."""
    return Path(__file__).parent / "rendering" / "templates" / "builder.js.j2"


@dataclass
class GeneratorConfig:
    """Represents the settings defined in .buildergen.yml."""

    root: Path
    library_dir: Path
    root_files: List[Path]
    output: Path
    builders: List[str] = field(default_factory=lambda: list(DEFAULT_BUILDERS))
    template: Path = field(default_factory=default_template_path)
    namespace: str = DEFAULT_NAMESPACE
    module: str = DEFAULT_MODULE
    instance: str = DEFAULT_INSTANCE
    internal_types: List[str] = field(default_factory=list)

    @classmethod
    def defaults(cls, root: Path) -> "GeneratorConfig":
        library_dir = root / DEFAULT_LIBRARY_DIR
        return cls(
            root=root,
            library_dir=library_dir,
            root_files=[library_dir / name for name in DEFAULT_ROOT_FILES],
            output=root / DEFAULT_OUTPUT,
        )


def load_config(config_path: Path) -> GeneratorConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return GeneratorConfig.defaults(root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    library_dir_str = _as_str(data.get("library_dir")) or DEFAULT_LIBRARY_DIR
    library_dir = root / library_dir_str

    root_file_names = _as_str_list(data.get("root_files")) or list(DEFAULT_ROOT_FILES)
    root_files = [library_dir / name for name in root_file_names]

    builders = _as_str_list(data.get("builders")) or list(DEFAULT_BUILDERS)

    template_str = _as_str(data.get("template"))
    template = root / template_str if template_str else default_template_path()

    output_str = _as_str(data.get("output")) or DEFAULT_OUTPUT

    return GeneratorConfig(
        root=root,
        library_dir=library_dir,
        root_files=root_files,
        builders=builders,
        template=template,
        output=root / output_str,
        namespace=_as_str(data.get("namespace")) or DEFAULT_NAMESPACE,
        module=_as_str(data.get("module")) or DEFAULT_MODULE,
        instance=_as_str(data.get("instance")) or DEFAULT_INSTANCE,
        internal_types=_as_str_list(data.get("internal_types")),
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}

    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = ["CONFIG_FILENAME", "ConfigError", "GeneratorConfig", "default_template_path", "load_config"]

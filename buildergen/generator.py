"""Declaration analysis and module synthesis for the configured builder classes."""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

from .config import GeneratorConfig
from .declarations import SourceLoader, build_methods, collect_declarations, find_builders, method_names
from .declarations.loader import Program
from .logging import get_logger
from .models import BuilderClass, Method, Source
from .rendering import TemplateRenderer
from .types import InternalTypeRegistry, InternalTypeRegistryBuilder, TypePatcher
from .writer import ModuleWriter


class ProgramGenerator:
    """Loads the builder declarations once and renders the wrapper module from them.

    Construction runs the whole analysis: sources are parsed, builder classes
    filtered, methods collected and merged, and the internal type registry
    built. Rendering and writing only read the results.
    """

    def __init__(
        self,
        config: GeneratorConfig,
        *,
        loader: SourceLoader | None = None,
        writer: ModuleWriter | None = None,
    ) -> None:
        self.config = config
        self.logger = get_logger("generator")
        self._writer = writer or ModuleWriter()

        self._program: Program = (loader or SourceLoader()).load(config.root_files)
        self._builders: Tuple[BuilderClass, ...] = tuple(find_builders(self._program, config.builders))
        if not self._builders:
            self.logger.warning(
                "No builder classes named %s found in %d root sources",
                ", ".join(config.builders),
                len(self._program.root_sources),
            )

        declarations = collect_declarations(self._builders)
        self._internal_types = self._build_registry(method_names(declarations))
        self._methods: Tuple[Method, ...] = tuple(build_methods(declarations))

        self._renderer = TemplateRenderer(
            config.template,
            TypePatcher(self._internal_types, config.namespace),
            module=config.module,
            instance=config.instance,
        )

    @property
    def sources(self) -> Tuple[Source, ...]:
        return tuple(self._program.root_sources)

    @property
    def builders(self) -> Tuple[BuilderClass, ...]:
        return self._builders

    @property
    def methods(self) -> Tuple[Method, ...]:
        return self._methods

    @property
    def internal_types(self) -> InternalTypeRegistry:
        return self._internal_types

    def _build_registry(self, names: List[str]) -> InternalTypeRegistry:
        builder = InternalTypeRegistryBuilder()
        builder.add_all(self.config.internal_types)
        for source in self._program.root_sources:
            added = builder.scan_options(source.text)
            self.logger.debug("Found %d Options types in %s", len(added), Path(source.path).name)
        builder.derive_from_methods(names)
        return builder.build()

    def render(self) -> str:
        """Render the module, unformatted."""
        return self._renderer.render(self._methods)

    async def write_to_file(self, path: str | Path | None = None) -> Path:
        """Render, format and overwrite ``path`` (the configured output by default)."""
        target = Path(path) if path is not None else self.config.output
        return await self._writer.write(target, self.render())


__all__ = ["ProgramGenerator"]

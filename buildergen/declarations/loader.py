"""Tree-sitter powered loading of TypeScript declaration sources."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser

from ..errors import SourceLoadError
from ..logging import get_logger
from ..models import Source

_LANGUAGE = Language(tree_sitter_typescript.language_typescript())


class Program:
    """The loaded declaration sources plus node-to-text resolution over them."""

    def __init__(self, sources: Sequence[Source], root_files: Iterable[str]) -> None:
        self._sources = tuple(sources)
        self._by_path: Dict[str, Source] = {source.path: source for source in self._sources}
        self._root_files = frozenset(root_files)

    @property
    def sources(self) -> tuple[Source, ...]:
        return self._sources

    @property
    def root_sources(self) -> List[Source]:
        return [source for source in self._sources if self.is_root(source)]

    def is_root(self, source: Source) -> bool:
        return source.path in self._root_files

    def source(self, path: str | Path) -> Optional[Source]:
        return self._by_path.get(_normalise(path))

    @staticmethod
    def text(node: Node, source: Source) -> str:
        return source.data[node.start_byte : node.end_byte].decode("utf-8", errors="ignore")


class SourceLoader:
    """Parses an ordered list of declaration files into a :class:`Program`."""

    def __init__(self) -> None:
        self._parser = Parser(_LANGUAGE)
        self.logger = get_logger("loader")

    def load(self, root_files: Sequence[str | Path]) -> Program:
        paths: List[str] = []
        for root_file in root_files:
            path = _normalise(root_file)
            if path not in paths:
                paths.append(path)

        sources = [self._parse(path) for path in paths]
        self.logger.debug("Loaded %d declaration sources", len(sources))
        return Program(sources, paths)

    def _parse(self, path: str) -> Source:
        try:
            text = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceLoadError(path, str(exc)) from exc

        data = text.encode("utf-8")
        tree = self._parser.parse(data)
        if tree.root_node.has_error:
            line = _first_error_line(tree.root_node)
            raise SourceLoadError(path, f"syntax error near line {line}")
        return Source(path=path, text=text, data=data, tree=tree)


def _normalise(path: str | Path) -> str:
    return str(Path(path).expanduser().resolve())


def _first_error_line(node: Node) -> int:
    stack = [node]
    while stack:
        current = stack.pop()
        if current.type == "ERROR" or current.is_missing:
            return current.start_point[0] + 1
        stack.extend(reversed(current.children))
    return node.start_point[0] + 1


__all__ = ["Program", "SourceLoader"]

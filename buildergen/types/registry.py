"""Vocabulary of type names that belong to the schema library's own namespace."""

from __future__ import annotations

import re
from typing import Dict, Iterable, Iterator, List, Tuple

from ..logging import get_logger

BASE_INTERNAL_TYPES: Tuple[str, ...] = (
    "Static",
    "TSchema",
    "TMappedResult",
    "TEnumKey",
    "TEnumValue",
    "TTemplateLiteral",
    "TMappedKey",
    "TLiteralValue",
    "TMappedFunction",
    "TMapped",
    "TProperties",
    "TIndexPropertyKeys",
    "TTemplateLiteralKind",
)

# A word ending in "Options" followed by a single space, e.g. "export interface ObjectOptions extends".
OPTIONS_PATTERN = re.compile(r"\w+Options ")

TYPE_PREFIX = "T"

logger = get_logger("registry")


class InternalTypeRegistry:
    """Immutable, ordered set of internal type tokens."""

    def __init__(self, tokens: Iterable[str]) -> None:
        self._tokens = tuple(dict.fromkeys(tokens))
        self._members = frozenset(self._tokens)

    @property
    def tokens(self) -> Tuple[str, ...]:
        return self._tokens

    def __contains__(self, token: object) -> bool:
        return token in self._members

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return f"InternalTypeRegistry({len(self._tokens)} tokens)"


class InternalTypeRegistryBuilder:
    """Append-only accumulator that produces one :class:`InternalTypeRegistry`."""

    def __init__(self, seed: Iterable[str] = BASE_INTERNAL_TYPES) -> None:
        self._tokens: Dict[str, None] = {}
        self.add_all(seed)

    def __contains__(self, token: object) -> bool:
        return token in self._tokens

    def __len__(self) -> int:
        return len(self._tokens)

    def add(self, token: str) -> bool:
        """Register ``token``; returns False when empty or already present."""
        token = token.strip()
        if not token or token in self._tokens:
            return False
        self._tokens[token] = None
        return True

    def add_all(self, tokens: Iterable[str]) -> int:
        return sum(1 for token in tokens if self.add(token))

    def scan_options(self, text: str) -> List[str]:
        """Register every unique ``<Word>Options `` occurrence found in ``text``."""
        added = [match for match in dict.fromkeys(m.strip() for m in OPTIONS_PATTERN.findall(text)) if self.add(match)]
        if not added:
            logger.debug("No new Options types found in source text")
        return added

    def derive_from_methods(self, names: Iterable[str]) -> List[str]:
        """Register the ``T``-prefixed type constructor name of every method."""
        return [candidate for candidate in (f"{TYPE_PREFIX}{name}" for name in names) if self.add(candidate)]

    def build(self) -> InternalTypeRegistry:
        return InternalTypeRegistry(self._tokens)


__all__ = [
    "BASE_INTERNAL_TYPES",
    "InternalTypeRegistry",
    "InternalTypeRegistryBuilder",
    "OPTIONS_PATTERN",
]

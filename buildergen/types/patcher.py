"""Qualification of internal type names inside rendered type expressions."""

from __future__ import annotations

import re
from typing import Optional, Pattern

from .registry import InternalTypeRegistry


class TypePatcher:
    """Rewrites registered tokens into ``<namespace>.<Token>`` references."""

    def __init__(self, registry: InternalTypeRegistry, namespace: str) -> None:
        self.registry = registry
        self.namespace = namespace
        self._pattern = self._compile(registry)

    @staticmethod
    def _compile(registry: InternalTypeRegistry) -> Optional[Pattern[str]]:
        if not len(registry):
            return None
        alternation = "|".join(re.escape(token) for token in sorted(registry, key=len, reverse=True))
        # Whole identifiers only. A single leading dot is a member access; a spread is not.
        return re.compile(rf"(?<![\w$])(?<![^.]\.)(?<!^\.)(?:{alternation})(?![\w$])")

    def qualify(self, token: str) -> str:
        return f"{self.namespace}.{token}"

    def patch(self, value: str) -> str:
        if self._pattern is None:
            return value.strip()

        def _replace(match: re.Match[str]) -> str:
            token = match.group(0)
            return self.qualify(token) if token in self.registry else token

        return self._pattern.sub(_replace, value).strip()

    __call__ = patch


__all__ = ["TypePatcher"]

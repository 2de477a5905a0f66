"""Internal type vocabulary and type-expression patching."""

from .patcher import TypePatcher
from .registry import BASE_INTERNAL_TYPES, InternalTypeRegistry, InternalTypeRegistryBuilder

__all__ = [
    "BASE_INTERNAL_TYPES",
    "InternalTypeRegistry",
    "InternalTypeRegistryBuilder",
    "TypePatcher",
]

"""Declaration loading and builder method collection."""

from .collector import build_methods, collect_declarations, find_builders, group_by_name, method_names
from .loader import Program, SourceLoader

__all__ = [
    "Program",
    "SourceLoader",
    "build_methods",
    "collect_declarations",
    "find_builders",
    "group_by_name",
    "method_names",
]

"""Core data models shared across buildergen components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass
class Source:
    """A parsed declaration file."""

    path: str
    text: str
    data: bytes = field(repr=False)
    tree: Any = field(repr=False)


@dataclass
class BuilderClass:
    """A top-level class declaration whose name is in the builder allow-list."""

    name: str
    source: Source = field(repr=False)
    node: Any = field(repr=False)


@dataclass(frozen=True)
class TypeParameter:
    """A generic type parameter, e.g. ``T extends TSchema = TAny``."""

    name: str
    constraint: Optional[str] = None
    default: Optional[str] = None


@dataclass(frozen=True)
class Parameter:
    """A named parameter of a method declaration."""

    name: str
    type: Optional[str] = None
    optional: bool = False
    rest: bool = False


@dataclass(frozen=True)
class MethodDeclaration:
    """A single named method member (one overload) of a builder class."""

    builder: str
    name: str
    parameters: Tuple[Parameter, ...] = ()
    type_parameters: Tuple[TypeParameter, ...] = ()
    return_type: Optional[str] = None


class Method:
    """All the overloads of a builder method, merged under a single name."""

    @staticmethod
    def init(name: str) -> "Method":
        return Method(name)

    def __init__(self, name: str) -> None:
        if not name:
            raise ValueError("Method name must not be empty")
        self.name = name
        self.declarations: List[MethodDeclaration] = []
        self.parameters: List[str] = []
        self._first_parameters: Dict[str, Parameter] = {}

    def __repr__(self) -> str:
        return f"Method(name={self.name!r}, overloads={len(self.declarations)}, parameters={self.parameters!r})"

    @property
    def description(self) -> str:
        return f"Creates a schema for a `{self.name}` type."

    def add_declarations(self, *declarations: MethodDeclaration) -> None:
        self.declarations.extend(declarations)

    def merge_parameters(self) -> List[str]:
        """Pool parameter names across overloads in discovery order, first occurrence wins."""
        merged: List[str] = []
        first: Dict[str, Parameter] = {}
        for declaration in self.declarations:
            for parameter in declaration.parameters:
                if parameter.name in first:
                    continue
                first[parameter.name] = parameter
                merged.append(parameter.name)
        self.parameters = merged
        self._first_parameters = first
        return merged

    def parameter(self, name: str) -> Parameter:
        return self._first_parameters[name]

    def is_optional(self, name: str) -> bool:
        """Optional when first declared optional or when some overload omits it."""
        if self.parameter(name).optional:
            return True
        return any(
            all(parameter.name != name for parameter in declaration.parameters)
            for declaration in self.declarations
        )

    def is_rest(self, name: str) -> bool:
        """A rest parameter stays variadic only while it closes the merged list."""
        return self.parameter(name).rest and self.parameters[-1] == name

    @property
    def rendered_parameters(self) -> List[str]:
        return [f"...{name}" if self.is_rest(name) else name for name in self.parameters]


@dataclass(frozen=True)
class TemplateData:
    """Per-method view handed to the module template."""

    name: str
    comment: str
    params: str


__all__ = [
    "BuilderClass",
    "Method",
    "MethodDeclaration",
    "Parameter",
    "Source",
    "TemplateData",
    "TypeParameter",
]

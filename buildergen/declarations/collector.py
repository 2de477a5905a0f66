"""Builder class discovery and method collection over a loaded program."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Set, Tuple

from tree_sitter import Node

from ..logging import get_logger
from ..models import BuilderClass, Method, MethodDeclaration, Parameter, Source, TypeParameter
from .loader import Program

_WRAPPER_TYPES = {"export_statement", "ambient_declaration"}
_CLASS_TYPES = {"class_declaration", "abstract_class_declaration"}
_METHOD_TYPES = {"method_signature", "method_definition", "abstract_method_signature"}
_HIDDEN_ACCESSIBILITY = {"private", "protected"}
_ACCESSOR_KEYWORDS = {"get", "set"}

logger = get_logger("collector")


def find_builders(program: Program, builder_names: Iterable[str]) -> List[BuilderClass]:
    """Return the named top-level classes of root sources that are in the allow-list."""
    allowed = set(builder_names)
    builders: List[BuilderClass] = []
    for source in program.root_sources:
        for node in _top_level_declarations(source.tree.root_node):
            if node.type not in _CLASS_TYPES:
                continue
            name_node = node.child_by_field_name("name")
            if name_node is None:
                continue
            name = Program.text(name_node, source)
            if name in allowed:
                builders.append(BuilderClass(name=name, source=source, node=node))
    return builders


def collect_declarations(builders: Sequence[BuilderClass]) -> List[MethodDeclaration]:
    """Flatten the named method members of every builder, in discovery order."""
    declarations: List[MethodDeclaration] = []
    for builder in builders:
        body = builder.node.child_by_field_name("body")
        if body is None:
            continue
        for member in body.named_children:
            if member.type not in _METHOD_TYPES:
                continue
            declaration = _method_declaration(builder, member)
            if declaration is not None:
                declarations.append(declaration)
    return declarations


def method_names(declarations: Iterable[MethodDeclaration]) -> List[str]:
    """Unique method names, sorted alphabetically (case-insensitive, then by code point)."""
    return sorted({declaration.name for declaration in declarations}, key=lambda name: (name.casefold(), name))


def group_by_name(declarations: Iterable[MethodDeclaration]) -> Dict[str, List[MethodDeclaration]]:
    grouped: Dict[str, List[MethodDeclaration]] = defaultdict(list)
    for declaration in declarations:
        grouped[declaration.name].append(declaration)
    return grouped


def build_methods(declarations: Sequence[MethodDeclaration]) -> List[Method]:
    """Merge overload declarations into one :class:`Method` per unique name."""
    groupings = group_by_name(declarations)
    methods: List[Method] = []
    for name in method_names(declarations):
        group = groupings.get(name)
        if not group:
            logger.warning("No declarations found for method %s; skipping", name)
            continue
        method = Method.init(name)
        method.add_declarations(*group)
        method.merge_parameters()
        methods.append(method)
    return methods


def _top_level_declarations(root: Node) -> Iterator[Node]:
    for child in root.named_children:
        node: Optional[Node] = child
        while node is not None and node.type in _WRAPPER_TYPES:
            node = _unwrap(node)
        if node is not None:
            yield node


def _unwrap(node: Node) -> Optional[Node]:
    declaration = node.child_by_field_name("declaration")
    if declaration is not None:
        return declaration
    for child in node.named_children:
        if child.type not in {"comment", "decorator"}:
            return child
    return None


def _method_declaration(builder: BuilderClass, member: Node) -> Optional[MethodDeclaration]:
    source = builder.source
    name_node = member.child_by_field_name("name")
    if name_node is None or name_node.type != "property_identifier":
        return None

    for child in member.children:
        if child.type == "accessibility_modifier" and Program.text(child, source) in _HIDDEN_ACCESSIBILITY:
            return None
        if not child.is_named and child.type in _ACCESSOR_KEYWORDS and child.start_byte < name_node.start_byte:
            return None

    parameters_node = member.child_by_field_name("parameters")
    type_parameters_node = member.child_by_field_name("type_parameters")
    return_node = member.child_by_field_name("return_type")

    return MethodDeclaration(
        builder=builder.name,
        name=Program.text(name_node, source),
        parameters=tuple(_parameters(parameters_node, source)) if parameters_node is not None else (),
        type_parameters=(
            tuple(_type_parameters(type_parameters_node, source)) if type_parameters_node is not None else ()
        ),
        return_type=_annotation_text(return_node, source),
    )


def _parameters(node: Node, source: Source) -> Iterator[Parameter]:
    formals: List[Tuple[Node, Optional[Node], bool]] = []
    for child in node.named_children:
        if child.type not in {"required_parameter", "optional_parameter"}:
            continue
        pattern = child.child_by_field_name("pattern")
        if pattern is None or pattern.type == "this":
            continue
        rest = pattern.type == "rest_pattern"
        if rest:
            pattern = next(iter(pattern.named_children), None)
        formals.append((child, pattern, rest))

    taken = {
        Program.text(pattern, source)
        for _, pattern, _ in formals
        if pattern is not None and pattern.type == "identifier"
    }
    for position, (child, pattern, rest) in enumerate(formals):
        if pattern is not None and pattern.type == "identifier":
            name = Program.text(pattern, source)
        else:
            # Binding patterns still occupy a position, so they get a placeholder name.
            name = _placeholder(position, taken)
        yield Parameter(
            name=name,
            type=_annotation_text(_type_annotation(child), source),
            optional=child.type == "optional_parameter",
            rest=rest,
        )


def _placeholder(position: int, taken: Set[str]) -> str:
    name = f"arg{position}"
    while name in taken:
        name = f"_{name}"
    taken.add(name)
    return name


def _type_parameters(node: Node, source: Source) -> Iterator[TypeParameter]:
    for child in node.named_children:
        if child.type != "type_parameter":
            continue
        name_node = child.child_by_field_name("name")
        if name_node is None:
            continue
        yield TypeParameter(
            name=Program.text(name_node, source),
            constraint=_inner_type_text(child.child_by_field_name("constraint"), source),
            default=_inner_type_text(child.child_by_field_name("value"), source),
        )


def _type_annotation(parameter: Node) -> Optional[Node]:
    annotation = parameter.child_by_field_name("type")
    if annotation is not None:
        return annotation
    return next((child for child in parameter.named_children if child.type == "type_annotation"), None)


def _annotation_text(node: Optional[Node], source: Source) -> Optional[str]:
    """Text of a ``: Type`` annotation without its leading colon."""
    if node is None:
        return None
    text = Program.text(node, source).strip()
    if text.startswith(":"):
        text = text[1:]
    return _collapse(text)


def _inner_type_text(node: Optional[Node], source: Source) -> Optional[str]:
    """Text of the type wrapped by an ``extends X`` constraint or ``= X`` default."""
    if node is None or not node.named_children:
        return None
    return _collapse(Program.text(node.named_children[-1], source))


def _collapse(text: str) -> Optional[str]:
    collapsed = " ".join(text.split())
    return collapsed or None


__all__ = ["build_methods", "collect_declarations", "find_builders", "group_by_name", "method_names"]

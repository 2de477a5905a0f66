"""Fixed tokens and tag builders for JSDoc documentation blocks."""

from __future__ import annotations

from typing import Callable, List, Optional

from ..models import Method, Parameter, TypeParameter

START = "/**"
END = " */"
EMPTY_LINE = " *"
UNKNOWN_TYPE = "*"


def description(text: str) -> str:
    return f" * {text}"


def template(name: str, constraint: Optional[str] = None, default: Optional[str] = None) -> str:
    constraint_part = f"{{{constraint}}} " if constraint else ""
    if default:
        return f" * @template {constraint_part}[{name}={default}]"
    return f" * @template {constraint_part}{name}"


def param(type_: str, name: str, *, optional: bool = False) -> str:
    rendered_name = f"[{name}]" if optional else name
    return f" * @param {{{type_}}} {rendered_name}"


def returns(type_: str) -> str:
    return f" * @returns {{{type_}}}"


def block(method: Method, patch: Callable[[str], str]) -> str:
    """Documentation block for ``method``; type text is passed through ``patch``."""
    tags: List[str] = []
    first = method.declarations[0] if method.declarations else None

    if first is not None:
        tags.extend(_template_tag(type_parameter, patch) for type_parameter in first.type_parameters)

    for name in method.parameters:
        parameter = method.parameter(name)
        type_ = _parameter_type(parameter, patch, variadic=method.is_rest(name))
        tags.append(param(type_, name, optional=method.is_optional(name)))

    if first is not None and first.return_type:
        tags.append(returns(patch(first.return_type)))

    lines = [START, description(method.description)]
    if tags:
        lines.append(EMPTY_LINE)
        lines.extend(tags)
    lines.append(END)
    return "\n".join(lines)


def _template_tag(type_parameter: TypeParameter, patch: Callable[[str], str]) -> str:
    return template(
        type_parameter.name,
        patch(type_parameter.constraint) if type_parameter.constraint else None,
        patch(type_parameter.default) if type_parameter.default else None,
    )


def _parameter_type(parameter: Parameter, patch: Callable[[str], str], *, variadic: bool) -> str:
    if not parameter.type:
        return UNKNOWN_TYPE
    rendered = patch(parameter.type)
    if variadic and rendered.endswith("[]"):
        return f"...{rendered[:-2]}"
    return rendered


__all__ = ["END", "EMPTY_LINE", "START", "block", "description", "param", "returns", "template"]

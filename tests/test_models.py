"""Tests for the merged method model."""

from __future__ import annotations

import pytest

from buildergen.models import Method, MethodDeclaration, Parameter


def _method(*declarations: MethodDeclaration) -> Method:
    method = Method.init(declarations[0].name)
    method.add_declarations(*declarations)
    method.merge_parameters()
    return method


def test_merge_parameters_first_occurrence_wins() -> None:
    method = _method(
        MethodDeclaration(builder="A", name="Object", parameters=(Parameter("props", type="T"),)),
        MethodDeclaration(
            builder="B",
            name="Object",
            parameters=(Parameter("options", optional=True), Parameter("props", type="U")),
        ),
    )

    assert method.parameters == ["props", "options"]
    assert method.parameter("props").type == "T"


def test_merge_parameters_is_idempotent() -> None:
    method = _method(
        MethodDeclaration(builder="A", name="Object", parameters=(Parameter("props"),)),
        MethodDeclaration(builder="B", name="Object", parameters=(Parameter("props"), Parameter("options"))),
    )

    assert method.merge_parameters() == method.merge_parameters() == ["props", "options"]


def test_parameter_is_optional_when_an_overload_omits_it() -> None:
    method = _method(
        MethodDeclaration(builder="A", name="Object", parameters=(Parameter("props"),)),
        MethodDeclaration(builder="B", name="Object", parameters=(Parameter("props"), Parameter("options"))),
    )

    assert method.is_optional("props") is False
    assert method.is_optional("options") is True


def test_rendered_parameters_keep_rest_marker() -> None:
    method = _method(
        MethodDeclaration(
            builder="A",
            name="Union",
            parameters=(Parameter("first"), Parameter("schemas", rest=True)),
        )
    )

    assert method.rendered_parameters == ["first", "...schemas"]


def test_rest_parameter_followed_by_later_overload_parameters_is_not_variadic() -> None:
    method = _method(
        MethodDeclaration(builder="A", name="Union", parameters=(Parameter("schemas", type="TSchema[]", rest=True),)),
        MethodDeclaration(
            builder="A",
            name="Union",
            parameters=(Parameter("first", type="TSchema"), Parameter("options", type="SchemaOptions", optional=True)),
        ),
    )

    assert method.rendered_parameters == ["schemas", "first", "options"]
    assert not method.is_rest("schemas")


def test_description_names_the_method() -> None:
    assert Method("Number").description == "Creates a schema for a `Number` type."


def test_method_name_must_not_be_empty() -> None:
    with pytest.raises(ValueError):
        Method("")

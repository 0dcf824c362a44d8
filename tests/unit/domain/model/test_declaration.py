"""Tests for domain/model/declaration.py."""

import pytest

from decorlift.domain.exceptions import UnrecognizedDeclarationShapeError
from decorlift.domain.model.declaration import (
    DeclarationShape,
    LiteralMethodDeclaration,
    MethodDeclaration,
    get_declaration_context,
    get_declaration_shape,
    get_member_kind,
)
from decorlift.domain.model.descriptor import MemberKind
from decorlift.domain.model.objects import PlainObject
from decorlift.domain.model.target import ContainerKind
from tests.factories import (
    impl,
    make_accessor,
    make_class,
    make_class_declaration,
    make_literal_accessor,
    make_literal_method,
    make_method,
)


class TestGetDeclarationShape:
    """Tests for exhaustive shape classification."""

    @pytest.mark.parametrize(
        ("factory", "expected"),
        [
            (make_class_declaration, DeclarationShape.CLASS),
            (make_method, DeclarationShape.METHOD),
            (make_accessor, DeclarationShape.ACCESSOR),
            (make_literal_method, DeclarationShape.LITERAL_METHOD),
            (make_literal_accessor, DeclarationShape.LITERAL_ACCESSOR),
        ],
    )
    def test_shapes(self, factory: object, expected: DeclarationShape) -> None:
        assert get_declaration_shape(factory()) is expected  # type: ignore[operator]

    def test_static_method_is_still_method(self) -> None:
        assert get_declaration_shape(make_method(is_static=True)) is DeclarationShape.METHOD

    def test_unknown_object_raises(self) -> None:
        with pytest.raises(UnrecognizedDeclarationShapeError, match="dict") as exc_info:
            get_declaration_shape({"name": "x"})
        assert exc_info.value.got is dict

    def test_unknown_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            get_declaration_shape(42)


class TestGetMemberKind:
    """Tests for shape → member kind mapping."""

    def test_class_has_no_member_kind(self) -> None:
        assert get_member_kind(DeclarationShape.CLASS) is None

    def test_methods(self) -> None:
        assert get_member_kind(DeclarationShape.METHOD) is MemberKind.METHOD
        assert get_member_kind(DeclarationShape.LITERAL_METHOD) is MemberKind.METHOD

    def test_accessors(self) -> None:
        assert get_member_kind(DeclarationShape.ACCESSOR) is MemberKind.ACCESSOR
        assert get_member_kind(DeclarationShape.LITERAL_ACCESSOR) is MemberKind.ACCESSOR


class TestGetDeclarationContext:
    """Tests for context construction."""

    def test_class(self) -> None:
        decl = make_class_declaration()
        context = get_declaration_context(decl)
        assert context.is_class
        assert context.owner is decl.constructor

    def test_static_member(self) -> None:
        foo = make_class()
        context = get_declaration_context(make_accessor(owner=foo, is_static=True))
        assert context.is_static
        assert context.owner is foo
        assert context.container is ContainerKind.CLASS_BODY

    def test_literal_member(self) -> None:
        literal = PlainObject()
        context = get_declaration_context(make_literal_method(literal=literal))
        assert context.container is ContainerKind.OBJECT_LITERAL
        assert context.owner is literal


class TestDeclarationFailFirst:
    """Tests for FAIL-FIRST validation on declarations."""

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="declaration name must not be empty"):
            make_method(name="")

    def test_none_owner_raises(self) -> None:
        with pytest.raises(TypeError, match="owner must not be None"):
            MethodDeclaration(name="x", implementation=impl, owner=None)  # type: ignore[arg-type]

    def test_none_literal_raises(self) -> None:
        with pytest.raises(TypeError, match="literal must not be None"):
            LiteralMethodDeclaration(name="x", implementation=impl, literal=None)  # type: ignore[arg-type]

    def test_plain_list_decorators_raises(self) -> None:
        with pytest.raises(TypeError, match="DecoratorList or None"):
            make_method(decorator_list=["readonly"])  # type: ignore[arg-type]

    def test_is_frozen(self) -> None:
        decl = make_method()
        with pytest.raises(AttributeError):
            decl.name = "other"  # type: ignore[misc]

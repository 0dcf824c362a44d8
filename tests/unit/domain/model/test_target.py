"""Tests for domain/model/target.py."""

import pytest

from decorlift.domain.model.objects import ClassConstructor, PlainObject
from decorlift.domain.model.target import (
    ContainerKind,
    DeclarationContext,
    Target,
    TargetKind,
    resolve_target,
)


class TestResolveTarget:
    """Tests for target resolution rules."""

    def test_class_targets_constructor(self) -> None:
        foo = ClassConstructor("Foo")
        target = resolve_target(DeclarationContext(owner=foo, is_class=True))
        assert target.kind is TargetKind.CONSTRUCTOR
        assert target.owner is foo

    def test_instance_member_targets_prototype(self) -> None:
        foo = ClassConstructor("Foo")
        target = resolve_target(DeclarationContext(owner=foo))
        assert target.kind is TargetKind.PROTOTYPE
        assert target.owner is foo.prototype
        assert not target.is_static

    def test_static_member_targets_constructor(self) -> None:
        foo = ClassConstructor("Foo")
        target = resolve_target(DeclarationContext(owner=foo, is_static=True))
        assert target.kind is TargetKind.STATIC
        assert target.owner is foo
        assert target.is_static

    def test_literal_member_targets_literal(self) -> None:
        literal = PlainObject()
        target = resolve_target(DeclarationContext(owner=literal, container=ContainerKind.OBJECT_LITERAL))
        assert target.kind is TargetKind.LITERAL
        assert target.owner is literal

    def test_instance_member_without_prototype_raises(self) -> None:
        with pytest.raises(TypeError, match="must have a prototype"):
            resolve_target(DeclarationContext(owner=PlainObject()))

    def test_static_and_instance_owners_differ(self) -> None:
        foo = ClassConstructor("Foo")
        static = resolve_target(DeclarationContext(owner=foo, is_static=True))
        instance = resolve_target(DeclarationContext(owner=foo))
        assert static.owner is not instance.owner


class TestDeclarationContextFailFirst:
    """Tests for FAIL-FIRST validation in DeclarationContext."""

    def test_none_owner_raises(self) -> None:
        with pytest.raises(TypeError, match="owner must not be None"):
            DeclarationContext(owner=None)

    def test_static_literal_raises(self) -> None:
        with pytest.raises(ValueError, match="object-literal"):
            DeclarationContext(owner=PlainObject(), container=ContainerKind.OBJECT_LITERAL, is_static=True)

    def test_static_class_raises(self) -> None:
        with pytest.raises(ValueError, match="cannot be static"):
            DeclarationContext(owner=ClassConstructor("Foo"), is_class=True, is_static=True)


class TestTarget:
    """Tests for Target."""

    def test_property_owner_on_class_target_raises(self) -> None:
        target = Target(kind=TargetKind.CONSTRUCTOR, owner=ClassConstructor("Foo"))
        with pytest.raises(TypeError, match="rebound"):
            _ = target.property_owner

    def test_is_frozen(self) -> None:
        target = Target(kind=TargetKind.LITERAL, owner=PlainObject())
        with pytest.raises(AttributeError):
            target.kind = TargetKind.STATIC  # type: ignore[misc]

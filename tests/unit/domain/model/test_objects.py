"""Tests for domain/model/objects.py."""

import pytest

from decorlift.domain.exceptions import PropertyRedefinitionError, ReadOnlyPropertyError
from decorlift.domain.model.descriptor import ABSENT, PropertyDescriptor
from decorlift.domain.model.objects import ClassConstructor, PlainObject
from decorlift.domain.ports.property_owner import PropertyOwner, PrototypeHolder
from tests.factories import impl


class TestPlainObjectProperties:
    """Tests for own properties and prototype lookup."""

    def test_missing_own_property_is_absent(self) -> None:
        assert PlainObject().get_own_property("x") is ABSENT

    def test_define_and_read(self) -> None:
        obj = PlainObject()
        desc = PropertyDescriptor(value=42, writable=True, configurable=True)
        obj.define_property("x", desc)
        assert obj.get_own_property("x") is desc
        assert obj.get("x") == 42

    def test_lookup_walks_prototype_chain(self) -> None:
        proto = PlainObject()
        proto.define_property("x", PropertyDescriptor(value=1))
        child = PlainObject(proto=proto)
        assert child.get_own_property("x") is ABSENT
        assert child.get("x") == 1

    def test_getter_receives_receiver(self) -> None:
        proto = PlainObject()
        proto.define_property("me", PropertyDescriptor(get=lambda receiver: receiver))
        child = PlainObject(proto=proto)
        assert child.get("me") is child

    def test_missing_property_raises(self) -> None:
        with pytest.raises(AttributeError, match="no property"):
            PlainObject().get("x")

    def test_enumerable_keys(self) -> None:
        obj = PlainObject()
        obj.define_property("hidden", PropertyDescriptor(value=1, enumerable=False))
        obj.define_property("shown", PropertyDescriptor(value=2, enumerable=True))
        assert obj.own_keys() == ("hidden", "shown")
        assert obj.enumerable_keys() == ("shown",)

    def test_satisfies_property_owner(self) -> None:
        assert isinstance(PlainObject(), PropertyOwner)


class TestPlainObjectRedefinition:
    """Tests for configurable enforcement."""

    def test_redefine_configurable(self) -> None:
        obj = PlainObject()
        obj.define_property("x", PropertyDescriptor(value=1, configurable=True))
        obj.define_property("x", PropertyDescriptor(value=2))
        assert obj.get("x") == 2

    def test_redefine_non_configurable_raises(self) -> None:
        obj = PlainObject()
        obj.define_property("x", PropertyDescriptor(value=1, configurable=False))
        with pytest.raises(PropertyRedefinitionError, match="'x'"):
            obj.define_property("x", PropertyDescriptor(value=2))

    def test_identical_redefinition_allowed(self) -> None:
        obj = PlainObject()
        desc = PropertyDescriptor(value=1, configurable=False)
        obj.define_property("x", desc)
        obj.define_property("x", PropertyDescriptor(value=1, configurable=False))


class TestPlainObjectAssignment:
    """Tests for set()."""

    def test_set_new_property_is_enumerable_data(self) -> None:
        obj = PlainObject()
        obj.set("x", 5)
        assert obj.get_own_property("x") == PropertyDescriptor(
            value=5, enumerable=True, configurable=True, writable=True
        )

    def test_set_readonly_raises(self) -> None:
        obj = PlainObject()
        obj.define_property("x", PropertyDescriptor(value=1, writable=False))
        with pytest.raises(ReadOnlyPropertyError):
            obj.set("x", 2)

    def test_set_calls_setter_with_receiver(self) -> None:
        seen: list[tuple[object, object]] = []
        obj = PlainObject()
        obj.define_property("x", PropertyDescriptor(set=lambda r, v: seen.append((r, v))))
        obj.set("x", 3)
        assert seen == [(obj, 3)]

    def test_set_getter_only_raises(self) -> None:
        obj = PlainObject()
        obj.define_property("x", PropertyDescriptor(get=lambda r: 1))
        with pytest.raises(ReadOnlyPropertyError):
            obj.set("x", 2)

    def test_set_shadows_inherited_writable(self) -> None:
        proto = PlainObject()
        proto.define_property("x", PropertyDescriptor(value=1, writable=True))
        child = PlainObject(proto=proto)
        child.set("x", 2)
        assert child.get("x") == 2
        assert proto.get("x") == 1


class TestClassConstructor:
    """Tests for ClassConstructor."""

    def test_prototype_constructor_backlink(self) -> None:
        foo = ClassConstructor("Foo")
        assert foo.prototype.get("constructor") is foo
        assert foo.prototype.enumerable_keys() == ()

    def test_construct_uses_prototype_and_initializer(self) -> None:
        def initializer(instance: PlainObject, value: int) -> None:
            instance.set("value", value)

        foo = ClassConstructor("Foo", initializer=initializer)
        foo.prototype.define_property("name", PropertyDescriptor(value=impl))
        instance = foo(7)
        assert instance.proto is foo.prototype
        assert instance.get("value") == 7
        assert instance.invoke("name") == "impl"

    def test_parent_chains_statics_and_prototype(self) -> None:
        base = ClassConstructor("Base")
        base.define_property("create", PropertyDescriptor(value=impl))
        child = ClassConstructor("Child", parent=base)
        assert child.get("create") is impl
        assert child.prototype.proto is base.prototype

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="class name must not be empty"):
            ClassConstructor("")

    def test_satisfies_prototype_holder(self) -> None:
        assert isinstance(ClassConstructor("Foo"), PrototypeHolder)

    def test_is_callable(self) -> None:
        assert callable(ClassConstructor("Foo"))

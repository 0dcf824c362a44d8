"""Minimal runtime object model honoring the descriptor contract.

Targets are owned by the surrounding declaration machinery. This model
exists so that machinery (and tests) has something to install on:
own properties keyed by name, a prototype chain, getters/setters
invoked with the receiver.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from decorlift.domain.exceptions import PropertyRedefinitionError, ReadOnlyPropertyError
from decorlift.domain.model.descriptor import ABSENT, PropertyDescriptor

if TYPE_CHECKING:
    from decorlift.domain.model.descriptor import Absent


class PlainObject:
    """Object with own properties and an optional prototype.

    Attributes:
        proto: Next object in the prototype chain, None at the root
    """

    def __init__(self, proto: PlainObject | None = None) -> None:
        """Initialize empty object.

        Args:
            proto: Prototype to inherit from
        """
        self.proto = proto
        self._properties: dict[str, PropertyDescriptor] = {}

    def define_property(self, name: str, descriptor: PropertyDescriptor) -> None:
        """Define or replace own property.

        Raises:
            PropertyRedefinitionError: Existing property is non-configurable
                and the new descriptor differs
        """
        current = self._properties.get(name)
        if current is not None and not current.configurable and current != descriptor:
            raise PropertyRedefinitionError(name)
        self._properties[name] = descriptor

    def get_own_property(self, name: str) -> PropertyDescriptor | Absent:
        """Own descriptor or ABSENT. Prototype chain is not consulted."""
        return self._properties.get(name, ABSENT)

    def lookup(self, name: str) -> PropertyDescriptor | Absent:
        """Descriptor found along the prototype chain, or ABSENT."""
        obj: PlainObject | None = self
        while obj is not None:
            descriptor = obj.get_own_property(name)
            if descriptor is not ABSENT:
                return descriptor
            obj = obj.proto
        return ABSENT

    def own_keys(self) -> tuple[str, ...]:
        """Own property names in definition order."""
        return tuple(self._properties)

    def enumerable_keys(self) -> tuple[str, ...]:
        """Own enumerable property names in definition order."""
        return tuple(name for name, d in self._properties.items() if d.enumerable)

    def get(self, name: str) -> object:
        """Read property value, invoking getter with self as receiver.

        Raises:
            AttributeError: Property not found or accessor without getter
        """
        descriptor = self.lookup(name)
        if descriptor is ABSENT:
            raise AttributeError(f"{self!r} has no property {name!r}")
        if descriptor.is_accessor:
            if descriptor.get is ABSENT:
                raise AttributeError(f"property {name!r} has no getter")
            return descriptor.get(self)
        return descriptor.value

    def set(self, name: str, value: object) -> None:
        """Assign property value.

        Own data property: replaced if writable.
        Accessor anywhere on the chain: setter called with self as receiver.
        Otherwise: new enumerable, writable, configurable own data property.

        Raises:
            ReadOnlyPropertyError: Non-writable or setter-less target
        """
        descriptor = self.lookup(name)
        if descriptor is not ABSENT and descriptor.is_accessor:
            if descriptor.set is ABSENT:
                raise ReadOnlyPropertyError(name)
            descriptor.set(self, value)
            return
        if descriptor is not ABSENT and descriptor.writable is False:
            raise ReadOnlyPropertyError(name)

        own = self.get_own_property(name)
        if own is ABSENT:
            self.define_property(
                name,
                PropertyDescriptor(value=value, enumerable=True, configurable=True, writable=True),
            )
        else:
            self._properties[name] = own.replace(value=value)

    def invoke(self, name: str, *args: object, **kwargs: object) -> object:
        """Call method property with self as receiver."""
        method = self.get(name)
        if not callable(method):
            raise TypeError(f"property {name!r} is not callable")
        return method(self, *args, **kwargs)

    def __repr__(self) -> str:
        """Short form listing own keys."""
        return f"{type(self).__name__}({', '.join(self._properties)})"


class ClassConstructor(PlainObject):
    """Class object: static members live on it, instance members on prototype.

    Callable: calling constructs an instance, so class decorators may
    return either another ClassConstructor or any callable factory.

    Attributes:
        name: Class name (not the binding name; decorators may rebind)
        prototype: Object shared by all instances
        parent: Superclass constructor, None for base classes
    """

    def __init__(
        self,
        name: str,
        *,
        initializer: Callable[..., object] | None = None,
        parent: ClassConstructor | None = None,
    ) -> None:
        """Initialize class with fresh prototype.

        Args:
            name: Class name (must not be empty)
            initializer: Called as initializer(instance, *args, **kwargs) on construct
            parent: Superclass; statics and prototype chain inherit from it

        Raises:
            ValueError: Empty name
        """
        if not name:
            raise ValueError("class name must not be empty")

        super().__init__(proto=parent)
        self.name = name
        self.parent = parent
        self._initializer = initializer
        self.prototype = PlainObject(proto=parent.prototype if parent is not None else None)
        self.prototype.define_property(
            "constructor",
            PropertyDescriptor(value=self, enumerable=False, configurable=True, writable=True),
        )

    def construct(self, *args: object, **kwargs: object) -> PlainObject:
        """Create instance whose prototype is self.prototype."""
        instance = PlainObject(proto=self.prototype)
        if self._initializer is not None:
            self._initializer(instance, *args, **kwargs)
        return instance

    def __call__(self, *args: object, **kwargs: object) -> PlainObject:
        """Alias for construct()."""
        return self.construct(*args, **kwargs)

    def __repr__(self) -> str:
        """Class name form."""
        return f"<class {self.name}>"

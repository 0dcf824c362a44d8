"""Property owner port: anything a descriptor can be installed on."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from decorlift.domain.model.descriptor import Absent, PropertyDescriptor


@runtime_checkable
class PropertyOwner(Protocol):
    """Contract for target owners.

    The declaration machinery owns these objects; this core only
    reads prior descriptors and defines final ones.
    PlainObject and ClassConstructor satisfy it; hosts may bring their own.
    """

    def define_property(self, name: str, descriptor: PropertyDescriptor) -> None:
        """Define or replace own property."""
        ...

    def get_own_property(self, name: str) -> PropertyDescriptor | Absent:
        """Own descriptor or ABSENT."""
        ...


@runtime_checkable
class PrototypeHolder(PropertyOwner, Protocol):
    """Class-like owner: instance members install on its prototype."""

    prototype: PropertyOwner

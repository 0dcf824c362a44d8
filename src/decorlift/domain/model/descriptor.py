"""Property descriptor value object and default-descriptor rules.

A descriptor is either a DATA descriptor (value/writable) or an
ACCESSOR descriptor (get/set), never both. A descriptor carrying only
flags is GENERIC and is never installed for a declaration.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum, auto

from decorlift.domain.exceptions import MalformedDescriptorError


class Absent(Enum):
    """Explicit "no descriptor" marker.

    Distinct from None (decorator returned no replacement) and from any
    falsy descriptor-like value. Single member: ABSENT.
    """

    ABSENT = "ABSENT"

    def __repr__(self) -> str:
        """Render as bare marker name."""
        return "ABSENT"


ABSENT = Absent.ABSENT


class MemberKind(Enum):
    """Kind of decorated member declaration."""

    METHOD = auto()
    ACCESSOR = auto()


class DescriptorKind(Enum):
    """Shape of a descriptor derived from which fields are present."""

    DATA = auto()
    ACCESSOR = auto()
    GENERIC = auto()


# Keys accepted by PropertyDescriptor.from_mapping()
DESCRIPTOR_FIELDS = frozenset({"value", "get", "set", "enumerable", "configurable", "writable"})


@dataclass(frozen=True, slots=True)
class PropertyDescriptor:
    """How a named property is attached to a target object.

    Immutable: decorators produce a new descriptor via replace().
    ABSENT means "field omitted" for value, get, set and writable, so a
    data descriptor may legitimately hold None as its value.

    Attributes:
        value: Data value (usually the method implementation)
        get: Getter, called with the receiver
        set: Setter, called with the receiver and new value
        enumerable: Property shows up in enumeration
        configurable: Property may be redefined
        writable: Data value may be reassigned (data descriptors only)
    """

    value: object = ABSENT
    get: Callable[..., object] | Absent = ABSENT
    set: Callable[..., object] | Absent = ABSENT
    enumerable: bool = False
    configurable: bool = False
    writable: bool | Absent = ABSENT

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        has_data = self.value is not ABSENT or self.writable is not ABSENT
        has_accessor = self.get is not ABSENT or self.set is not ABSENT
        if has_data and has_accessor:
            raise MalformedDescriptorError("cannot mix value/writable with get/set")
        if self.get is not ABSENT and not callable(self.get):
            raise MalformedDescriptorError(f"get must be callable, got {type(self.get).__name__}")
        if self.set is not ABSENT and not callable(self.set):
            raise MalformedDescriptorError(f"set must be callable, got {type(self.set).__name__}")
        for flag in ("enumerable", "configurable"):
            if not isinstance(getattr(self, flag), bool):
                raise MalformedDescriptorError(f"{flag} must be bool")
        if self.writable is not ABSENT and not isinstance(self.writable, bool):
            raise MalformedDescriptorError("writable must be bool")

    @property
    def kind(self) -> DescriptorKind:
        """Derived descriptor shape."""
        if self.get is not ABSENT or self.set is not ABSENT:
            return DescriptorKind.ACCESSOR
        if self.value is not ABSENT or self.writable is not ABSENT:
            return DescriptorKind.DATA
        return DescriptorKind.GENERIC

    @property
    def is_data(self) -> bool:
        """True if data descriptor."""
        return self.kind is DescriptorKind.DATA

    @property
    def is_accessor(self) -> bool:
        """True if accessor descriptor."""
        return self.kind is DescriptorKind.ACCESSOR

    def replace(self, **changes: object) -> PropertyDescriptor:
        """Return new descriptor with fields changed. Original untouched."""
        return dataclasses.replace(self, **changes)  # type: ignore[arg-type]

    def to_dict(self) -> dict[str, object]:
        """Present fields only. Omitted fields are left out, flags always included."""
        result: dict[str, object] = {}
        if self.value is not ABSENT:
            result["value"] = self.value
        if self.writable is not ABSENT:
            result["writable"] = self.writable
        if self.get is not ABSENT:
            result["get"] = self.get
        if self.set is not ABSENT:
            result["set"] = self.set
        result["enumerable"] = self.enumerable
        result["configurable"] = self.configurable
        return result

    @classmethod
    def from_mapping(cls, fields: Mapping[str, object]) -> PropertyDescriptor:
        """Build descriptor from a mapping of descriptor fields.

        Raises:
            MalformedDescriptorError: Unknown keys or mixed data/accessor fields
        """
        unknown = set(fields) - DESCRIPTOR_FIELDS
        if unknown:
            raise MalformedDescriptorError(f"unknown descriptor fields: {sorted(unknown)}")
        return cls(
            value=fields.get("value", ABSENT),
            get=fields.get("get", ABSENT),  # type: ignore[arg-type]
            set=fields.get("set", ABSENT),  # type: ignore[arg-type]
            enumerable=fields.get("enumerable", False),  # type: ignore[arg-type]
            configurable=fields.get("configurable", False),  # type: ignore[arg-type]
            writable=fields.get("writable", ABSENT),  # type: ignore[arg-type]
        )


@dataclass(frozen=True, slots=True)
class AccessorPair:
    """Getter/setter implementation of an accessor declaration.

    At least one of get/set must be present.
    """

    get: Callable[..., object] | None = None
    set: Callable[..., object] | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.get is None and self.set is None:
            raise MalformedDescriptorError("accessor requires a getter or a setter")


def build_default_descriptor(
    kind: MemberKind,
    implementation: Callable[..., object] | AccessorPair,
) -> PropertyDescriptor:
    """Build the descriptor an undecorated declaration would install.

    Shared by decorated and undecorated paths so both get identical defaults:
        METHOD:   enumerable=False, configurable=True, writable=True
        ACCESSOR: enumerable=True,  configurable=True

    Args:
        kind: Member kind
        implementation: Callable for METHOD, AccessorPair for ACCESSOR

    Returns:
        Default PropertyDescriptor

    Raises:
        MalformedDescriptorError: Implementation does not fit kind
    """
    match kind:
        case MemberKind.METHOD:
            if isinstance(implementation, AccessorPair) or not callable(implementation):
                raise MalformedDescriptorError(
                    f"method implementation must be callable, got {type(implementation).__name__}"
                )
            return PropertyDescriptor(
                value=implementation,
                enumerable=False,
                configurable=True,
                writable=True,
            )
        case MemberKind.ACCESSOR:
            if not isinstance(implementation, AccessorPair):
                raise MalformedDescriptorError(
                    f"accessor implementation must be AccessorPair, got {type(implementation).__name__}"
                )
            return PropertyDescriptor(
                get=ABSENT if implementation.get is None else implementation.get,
                set=ABSENT if implementation.set is None else implementation.set,
                enumerable=True,
                configurable=True,
            )


def coerce_descriptor(result: object, *, name: str) -> PropertyDescriptor | Absent:
    """Normalize a member decorator's replacement value.

    Accepted: PropertyDescriptor, ABSENT, Mapping of descriptor fields.
    Anything else (a class, a bare function, a number) is type confusion.

    Raises:
        MalformedDescriptorError: Result is not descriptor-like
    """
    if isinstance(result, PropertyDescriptor) or result is ABSENT:
        return result
    if isinstance(result, Mapping):
        try:
            return PropertyDescriptor.from_mapping(result)
        except MalformedDescriptorError as e:
            raise MalformedDescriptorError(e.reason, name=name) from e
    raise MalformedDescriptorError(
        f"decorator returned {type(result).__name__}, expected descriptor",
        name=name,
    )


def check_member_kind(descriptor: PropertyDescriptor, kind: MemberKind, *, name: str) -> None:
    """Verify final descriptor carries the fields its declaration kind requires.

    Raises:
        MalformedDescriptorError: METHOD without value, ACCESSOR without get/set
    """
    match kind:
        case MemberKind.METHOD:
            if not descriptor.is_data:
                raise MalformedDescriptorError(
                    f"method requires a data descriptor, got {descriptor.kind.name.lower()}",
                    name=name,
                )
        case MemberKind.ACCESSOR:
            if not descriptor.is_accessor:
                raise MalformedDescriptorError(
                    f"accessor requires get/set, got {descriptor.kind.name.lower()}",
                    name=name,
                )

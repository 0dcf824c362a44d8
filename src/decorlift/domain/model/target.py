"""Target resolution: which object a decorated declaration installs on."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from decorlift.domain.ports.property_owner import PropertyOwner


class TargetKind(Enum):
    """Kind of install target.

    CONSTRUCTOR:
        Class-level decoration. The class binding is replaced.
    PROTOTYPE:
        Instance methods/accessors. Installed on constructor.prototype.
    STATIC:
        Static methods/accessors. Installed on the constructor itself.
    LITERAL:
        Object-literal methods/accessors. Installed on the literal.
    """

    CONSTRUCTOR = auto()
    PROTOTYPE = auto()
    STATIC = auto()
    LITERAL = auto()


class ContainerKind(Enum):
    """Syntactic container of a member declaration."""

    CLASS_BODY = auto()
    OBJECT_LITERAL = auto()


@dataclass(frozen=True, slots=True)
class DeclarationContext:
    """Where a declaration sits, enough to resolve its target.

    Attributes:
        owner: Constructor (class and class-body members) or literal object
        container: Class body or object literal
        is_class: Declaration is the class itself
        is_static: Static class member
    """

    owner: object
    container: ContainerKind = ContainerKind.CLASS_BODY
    is_class: bool = False
    is_static: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.owner is None:
            raise TypeError("owner must not be None")
        if self.container is ContainerKind.OBJECT_LITERAL and (self.is_class or self.is_static):
            raise ValueError("object-literal members cannot be classes or static")
        if self.is_class and self.is_static:
            raise ValueError("class declaration cannot be static")


@dataclass(frozen=True, slots=True)
class Target:
    """Resolved install target.

    Static and instance members differ only in owner identity,
    never in composition logic.

    Attributes:
        kind: Target kind
        owner: Object the final descriptor/constructor belongs to
    """

    kind: TargetKind
    owner: object

    @property
    def is_static(self) -> bool:
        """True for static class members."""
        return self.kind is TargetKind.STATIC

    @property
    def property_owner(self) -> PropertyOwner:
        """Owner typed as PropertyOwner (member targets only)."""
        if self.kind is TargetKind.CONSTRUCTOR:
            raise TypeError("class targets are rebound, not installed on")
        return self.owner  # type: ignore[return-value]


def resolve_target(context: DeclarationContext) -> Target:
    """Resolve install target from declaration context.

    Pure function. Shared by decorated and undecorated declarations.

    Args:
        context: Declaration context

    Returns:
        Target whose owner is the constructor, its prototype or the literal

    Raises:
        TypeError: Instance member owner has no prototype
    """
    if context.is_class:
        return Target(kind=TargetKind.CONSTRUCTOR, owner=context.owner)
    if context.container is ContainerKind.OBJECT_LITERAL:
        return Target(kind=TargetKind.LITERAL, owner=context.owner)
    if context.is_static:
        return Target(kind=TargetKind.STATIC, owner=context.owner)

    prototype = getattr(context.owner, "prototype", None)
    if prototype is None:
        raise TypeError(f"instance member owner must have a prototype, got {type(context.owner).__name__}")
    return Target(kind=TargetKind.PROTOTYPE, owner=prototype)

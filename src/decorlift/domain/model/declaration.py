"""Decorated declarations: tagged union of the five recognized shapes.

Each variant carries exactly the fields its target resolution and
default-descriptor rules need. get_declaration_shape() is the single
exhaustive classification point.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from decorlift.domain.exceptions import UnrecognizedDeclarationShapeError
from decorlift.domain.model.decorator import DecoratorList
from decorlift.domain.model.descriptor import AccessorPair, MemberKind
from decorlift.domain.model.objects import ClassConstructor, PlainObject
from decorlift.domain.model.target import ContainerKind, DeclarationContext


class DeclarationShape(Enum):
    """Terminal shapes recognized by the dispatcher."""

    CLASS = "class"
    METHOD = "method"
    ACCESSOR = "accessor"
    LITERAL_METHOD = "literal method"
    LITERAL_ACCESSOR = "literal accessor"


def _check_name(name: str) -> None:
    if not name:
        raise ValueError("declaration name must not be empty")


def _check_decorators(decorators: object) -> None:
    if decorators is not None and not isinstance(decorators, DecoratorList):
        raise TypeError(f"decorators must be DecoratorList or None, got {type(decorators).__name__}")


@dataclass(frozen=True, slots=True)
class ClassDeclaration:
    """Decorated class.

    Attributes:
        name: Binding name the final constructor is bound to
        constructor: Class object built by the surrounding machinery
        decorators: Decorator list, None if undecorated
    """

    name: str
    constructor: ClassConstructor
    decorators: DecoratorList | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        _check_name(self.name)
        _check_decorators(self.decorators)
        if self.constructor is None:
            raise TypeError("constructor must not be None")


@dataclass(frozen=True, slots=True)
class MethodDeclaration:
    """Class-body method, instance or static.

    Attributes:
        name: Property name
        implementation: Method body, called with receiver first
        owner: Class constructor the method belongs to
        is_static: Static method (installs on constructor, not prototype)
        decorators: Decorator list, None if undecorated
    """

    name: str
    implementation: Callable[..., object]
    owner: ClassConstructor
    is_static: bool = False
    decorators: DecoratorList | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        _check_name(self.name)
        _check_decorators(self.decorators)
        if self.owner is None:
            raise TypeError("owner must not be None")


@dataclass(frozen=True, slots=True)
class AccessorDeclaration:
    """Class-body getter/setter pair, instance or static.

    Attributes:
        name: Property name
        accessor: Getter and/or setter
        owner: Class constructor the accessor belongs to
        is_static: Static accessor
        decorators: Decorator list, None if undecorated
    """

    name: str
    accessor: AccessorPair
    owner: ClassConstructor
    is_static: bool = False
    decorators: DecoratorList | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        _check_name(self.name)
        _check_decorators(self.decorators)
        if self.owner is None:
            raise TypeError("owner must not be None")


@dataclass(frozen=True, slots=True)
class LiteralMethodDeclaration:
    """Object-literal method.

    Attributes:
        name: Property name
        implementation: Method body
        literal: Object literal under construction
        decorators: Decorator list, None if undecorated
    """

    name: str
    implementation: Callable[..., object]
    literal: PlainObject
    decorators: DecoratorList | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        _check_name(self.name)
        _check_decorators(self.decorators)
        if self.literal is None:
            raise TypeError("literal must not be None")


@dataclass(frozen=True, slots=True)
class LiteralAccessorDeclaration:
    """Object-literal getter/setter pair.

    Attributes:
        name: Property name
        accessor: Getter and/or setter
        literal: Object literal under construction
        decorators: Decorator list, None if undecorated
    """

    name: str
    accessor: AccessorPair
    literal: PlainObject
    decorators: DecoratorList | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        _check_name(self.name)
        _check_decorators(self.decorators)
        if self.literal is None:
            raise TypeError("literal must not be None")


Declaration = (
    ClassDeclaration
    | MethodDeclaration
    | AccessorDeclaration
    | LiteralMethodDeclaration
    | LiteralAccessorDeclaration
)

MemberDeclaration = MethodDeclaration | AccessorDeclaration | LiteralMethodDeclaration | LiteralAccessorDeclaration


def get_declaration_shape(declaration: object) -> DeclarationShape:
    """Classify declaration.

    Exhaustive match on Declaration union.

    Raises:
        UnrecognizedDeclarationShapeError: Not one of the five variants
    """
    match declaration:
        case ClassDeclaration():
            return DeclarationShape.CLASS
        case MethodDeclaration():
            return DeclarationShape.METHOD
        case AccessorDeclaration():
            return DeclarationShape.ACCESSOR
        case LiteralMethodDeclaration():
            return DeclarationShape.LITERAL_METHOD
        case LiteralAccessorDeclaration():
            return DeclarationShape.LITERAL_ACCESSOR
        case _:
            raise UnrecognizedDeclarationShapeError(type(declaration))


def get_member_kind(shape: DeclarationShape) -> MemberKind | None:
    """Member kind of shape, None for classes."""
    match shape:
        case DeclarationShape.CLASS:
            return None
        case DeclarationShape.METHOD | DeclarationShape.LITERAL_METHOD:
            return MemberKind.METHOD
        case DeclarationShape.ACCESSOR | DeclarationShape.LITERAL_ACCESSOR:
            return MemberKind.ACCESSOR


def get_declaration_context(declaration: Declaration) -> DeclarationContext:
    """Build target-resolution context for declaration."""
    match declaration:
        case ClassDeclaration(constructor=constructor):
            return DeclarationContext(owner=constructor, is_class=True)
        case MethodDeclaration(owner=owner, is_static=is_static) | AccessorDeclaration(
            owner=owner, is_static=is_static
        ):
            return DeclarationContext(owner=owner, is_static=is_static)
        case LiteralMethodDeclaration(literal=literal) | LiteralAccessorDeclaration(literal=literal):
            return DeclarationContext(owner=literal, container=ContainerKind.OBJECT_LITERAL)
        case _:
            raise UnrecognizedDeclarationShapeError(type(declaration))

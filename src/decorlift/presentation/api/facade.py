"""Facade and fluent builders for desugaring declarations.

Desugarer wires evaluator, dispatcher and binding environment together.
ClassBuilder / LiteralBuilder play the surrounding declaration machinery:
members are processed in source order, undecorated members are installed
with the same default descriptors the decorated path starts from.

Example:
    lift = Desugarer(scope={"readonly": readonly, "sealed": sealed})
    foo = (
        lift.define_class("Foo")
        .method("name", name_impl, decorators=["readonly"])
        .static_method("create", create_impl)
        .build(decorators=["sealed"])
    )
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, MutableMapping
from typing import TYPE_CHECKING

from decorlift.application.services.dispatcher import DeclarationDispatcher, build_member_default
from decorlift.application.services.planner import plan
from decorlift.domain.model.configuration import DesugarConfig
from decorlift.domain.model.declaration import (
    AccessorDeclaration,
    ClassDeclaration,
    LiteralAccessorDeclaration,
    LiteralMethodDeclaration,
    MethodDeclaration,
    get_declaration_context,
)
from decorlift.domain.model.decorator import DecoratorExpression, DecoratorList
from decorlift.domain.model.descriptor import AccessorPair
from decorlift.domain.model.objects import ClassConstructor, PlainObject
from decorlift.domain.model.target import resolve_target
from decorlift.infrastructure.adapters.chain_evaluator import ChainEvaluator
from decorlift.infrastructure.adapters.namespace_evaluator import NamespaceEvaluator
from decorlift.infrastructure.adapters.thunk_evaluator import ThunkEvaluator

if TYPE_CHECKING:
    from decorlift.domain.model.declaration import Declaration, MemberDeclaration
    from decorlift.domain.model.operations import DesugarPlan
    from decorlift.domain.model.result import DesugarResult
    from decorlift.domain.ports.expression_evaluator import ExpressionEvaluatorPort

DecoratorsArg = DecoratorList | Iterable[DecoratorExpression | str] | None


def to_decorator_list(decorators: DecoratorsArg) -> DecoratorList | None:
    """Normalize decorators argument. Empty iterables mean undecorated."""
    if decorators is None or isinstance(decorators, DecoratorList):
        return decorators
    if isinstance(decorators, str):
        return DecoratorList.of(decorators)
    items = tuple(decorators)
    if not items:
        return None
    return DecoratorList.of(*items)


def default_evaluator(scope: Mapping[str, object] | None) -> ExpressionEvaluatorPort:
    """Thunks first, then scope lookup if a scope is given."""
    if scope is None:
        return ThunkEvaluator()
    return ChainEvaluator(ThunkEvaluator(), NamespaceEvaluator(scope))


class Desugarer:
    """Entry point for desugaring decorated declarations.

    Attributes:
        environment: Binding environment class declarations rebind into
    """

    def __init__(
        self,
        evaluator: ExpressionEvaluatorPort | None = None,
        *,
        scope: Mapping[str, object] | None = None,
        environment: MutableMapping[str, object] | None = None,
        config: DesugarConfig | None = None,
    ) -> None:
        """Initialize desugarer.

        Args:
            evaluator: Expression evaluator. Default: thunks, then scope lookup
            scope: Names visible to decorator source text (ignored if evaluator given)
            environment: Binding environment. Default: new dict
            config: Desugar configuration. Uses defaults if None.
        """
        self.environment: MutableMapping[str, object] = environment if environment is not None else {}
        self._config = config or DesugarConfig()
        self._dispatcher = DeclarationDispatcher(
            evaluator if evaluator is not None else default_evaluator(scope),
            config=self._config,
        )

    def run(self, declaration: Declaration) -> DesugarResult:
        """Desugar one declaration.

        Raises:
            UnrecognizedDeclarationShapeError: Unknown declaration type
            EvaluationError: Decorator expression or function raised
            MalformedDescriptorError: Invalid replacement or final descriptor
        """
        return self._dispatcher.dispatch(declaration, self.environment)

    def run_all(self, declarations: Iterable[Declaration]) -> tuple[DesugarResult, ...]:
        """Desugar declarations in source order.

        First failure propagates; declarations already processed keep
        their installs, later ones are not processed.
        """
        return tuple(self.run(declaration) for declaration in declarations)

    def plan(self, declaration: Declaration) -> DesugarPlan:
        """Lower declaration without executing anything."""
        return plan(declaration)

    def define_class(
        self,
        name: str,
        *,
        initializer: Callable[..., object] | None = None,
        parent: ClassConstructor | None = None,
    ) -> ClassBuilder:
        """Start class declaration."""
        return ClassBuilder(self, ClassConstructor(name, initializer=initializer, parent=parent))

    def define_literal(self, proto: PlainObject | None = None) -> LiteralBuilder:
        """Start object-literal declaration."""
        return LiteralBuilder(self, PlainObject(proto=proto))


def desugar(
    declaration: Declaration,
    evaluator: ExpressionEvaluatorPort | None = None,
    *,
    scope: Mapping[str, object] | None = None,
    environment: MutableMapping[str, object] | None = None,
    config: DesugarConfig | None = None,
) -> DesugarResult:
    """Desugar a single declaration with a one-off Desugarer.

    Args:
        declaration: Declaration to desugar
        evaluator: Expression evaluator. Default: thunks, then scope lookup
        scope: Names visible to decorator source text
        environment: Binding environment for class rebinding
        config: Desugar configuration

    Returns:
        DesugarResult
    """
    desugarer = Desugarer(evaluator, scope=scope, environment=environment, config=config)
    return desugarer.run(declaration)


def _install_undecorated(declaration: MemberDeclaration) -> None:
    target = resolve_target(get_declaration_context(declaration))
    target.property_owner.define_property(declaration.name, build_member_default(declaration))


class ClassBuilder:
    """Collects class members in source order, desugars on build().

    Members are processed before the class decorators, in the order
    they were added, as the class body would be evaluated.
    """

    def __init__(self, desugarer: Desugarer, constructor: ClassConstructor) -> None:
        """Initialize builder for constructor."""
        self._desugarer = desugarer
        self._constructor = constructor
        self._members: list[MethodDeclaration | AccessorDeclaration] = []
        self.results: list[DesugarResult] = []

    @property
    def constructor(self) -> ClassConstructor:
        """Class object members install on (before class decorators run)."""
        return self._constructor

    def method(
        self,
        name: str,
        implementation: Callable[..., object],
        *,
        decorators: DecoratorsArg = None,
        static: bool = False,
    ) -> ClassBuilder:
        """Add method."""
        self._members.append(
            MethodDeclaration(
                name=name,
                implementation=implementation,
                owner=self._constructor,
                is_static=static,
                decorators=to_decorator_list(decorators),
            )
        )
        return self

    def static_method(
        self,
        name: str,
        implementation: Callable[..., object],
        *,
        decorators: DecoratorsArg = None,
    ) -> ClassBuilder:
        """Add static method."""
        return self.method(name, implementation, decorators=decorators, static=True)

    def accessor(
        self,
        name: str,
        *,
        get: Callable[..., object] | None = None,
        set: Callable[..., object] | None = None,  # noqa: A002
        decorators: DecoratorsArg = None,
        static: bool = False,
    ) -> ClassBuilder:
        """Add getter/setter pair."""
        self._members.append(
            AccessorDeclaration(
                name=name,
                accessor=AccessorPair(get=get, set=set),
                owner=self._constructor,
                is_static=static,
                decorators=to_decorator_list(decorators),
            )
        )
        return self

    def build(self, *, decorators: DecoratorsArg = None, bind_as: str | None = None) -> object:
        """Desugar members, then the class itself.

        Args:
            decorators: Class decorators
            bind_as: Binding name. Default: class name

        Returns:
            Final binding (decorators may replace the constructor)
        """
        for member in self._members:
            if member.decorators is None:
                _install_undecorated(member)
                continue
            self.results.append(self._desugarer.run(member))

        name = bind_as or self._constructor.name
        declaration = ClassDeclaration(
            name=name,
            constructor=self._constructor,
            decorators=to_decorator_list(decorators),
        )
        if declaration.decorators is None:
            self._desugarer.environment[name] = self._constructor
        else:
            self.results.append(self._desugarer.run(declaration))
        return self._desugarer.environment[name]


class LiteralBuilder:
    """Collects object-literal members in source order, desugars on build().

    Decorated members are not pre-installed: their decorators see ABSENT
    for a new name. A member whose decorators all decline still ends up
    installed with its default descriptor.
    """

    def __init__(self, desugarer: Desugarer, literal: PlainObject) -> None:
        """Initialize builder for literal."""
        self._desugarer = desugarer
        self._literal = literal
        self._members: list[LiteralMethodDeclaration | LiteralAccessorDeclaration] = []
        self.results: list[DesugarResult] = []

    def method(
        self,
        name: str,
        implementation: Callable[..., object],
        *,
        decorators: DecoratorsArg = None,
    ) -> LiteralBuilder:
        """Add method."""
        self._members.append(
            LiteralMethodDeclaration(
                name=name,
                implementation=implementation,
                literal=self._literal,
                decorators=to_decorator_list(decorators),
            )
        )
        return self

    def accessor(
        self,
        name: str,
        *,
        get: Callable[..., object] | None = None,
        set: Callable[..., object] | None = None,  # noqa: A002
        decorators: DecoratorsArg = None,
    ) -> LiteralBuilder:
        """Add getter/setter pair."""
        self._members.append(
            LiteralAccessorDeclaration(
                name=name,
                accessor=AccessorPair(get=get, set=set),
                literal=self._literal,
                decorators=to_decorator_list(decorators),
            )
        )
        return self

    def build(self) -> PlainObject:
        """Desugar members in order and return the literal."""
        for member in self._members:
            if member.decorators is None:
                _install_undecorated(member)
                continue
            self.results.append(self._desugarer.run(member))
        return self._literal

"""Declaration-kind dispatcher: the single desugaring entry point.

Classifies a declaration into one of five shapes, builds the initial
fold value, resolves the target, then runs evaluate → compose → install
identically for every shape:

    Class                   CONSTRUCTOR   the constructor itself
    Instance method/acc.    PROTOTYPE     default descriptor
    Static method/acc.      STATIC        default descriptor
    Literal method/acc.     LITERAL       default descriptor when the name is
                                          already defined, else ABSENT

A literal member whose fold ends at ABSENT still gets its default
descriptor installed, as an undecorated member would.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from decorlift.application.services.composer import CompositionEngine
from decorlift.application.services.evaluator import DecoratorEvaluator
from decorlift.application.services.installer import Installer
from decorlift.domain.model.configuration import DesugarConfig
from decorlift.domain.model.declaration import (
    AccessorDeclaration,
    ClassDeclaration,
    LiteralAccessorDeclaration,
    LiteralMethodDeclaration,
    MethodDeclaration,
    get_declaration_context,
    get_declaration_shape,
    get_member_kind,
)
from decorlift.domain.model.descriptor import ABSENT, MemberKind, build_default_descriptor
from decorlift.domain.model.result import DesugarResult
from decorlift.domain.model.target import TargetKind, resolve_target
from decorlift.domain.model.trace import StepKind, TraceStep

if TYPE_CHECKING:
    from collections.abc import MutableMapping

    from decorlift.domain.model.declaration import Declaration, MemberDeclaration
    from decorlift.domain.model.descriptor import PropertyDescriptor
    from decorlift.domain.model.target import Target
    from decorlift.domain.ports.expression_evaluator import ExpressionEvaluatorPort

logger = logging.getLogger(__name__)


def build_member_default(declaration: MemberDeclaration) -> PropertyDescriptor:
    """Default descriptor built from the declaration's own implementation."""
    match declaration:
        case MethodDeclaration(implementation=implementation) | LiteralMethodDeclaration(
            implementation=implementation
        ):
            return build_default_descriptor(MemberKind.METHOD, implementation)
        case AccessorDeclaration(accessor=accessor) | LiteralAccessorDeclaration(accessor=accessor):
            return build_default_descriptor(MemberKind.ACCESSOR, accessor)


def build_initial_value(declaration: Declaration, target: Target) -> object:
    """Initial fold value for declaration.

    Classes fold the constructor. Class-body members fold the default
    descriptor. Literal members fold ABSENT for a new name; redefining
    a name folds the default descriptor of the new implementation, never
    the descriptor being replaced.
    """
    match declaration:
        case ClassDeclaration(constructor=constructor):
            return constructor
        case MethodDeclaration() | AccessorDeclaration():
            return build_member_default(declaration)
        case LiteralMethodDeclaration(name=name) | LiteralAccessorDeclaration(name=name):
            if target.property_owner.get_own_property(name) is ABSENT:
                return ABSENT
            return build_member_default(declaration)


class DeclarationDispatcher:
    """Drives evaluator, composer and installer for one declaration at a time.

    Declarations are processed strictly sequentially. A failure aborts
    only the declaration being processed; earlier installs stay.
    """

    def __init__(
        self,
        evaluator: ExpressionEvaluatorPort,
        *,
        config: DesugarConfig | None = None,
    ) -> None:
        """Initialize dispatcher.

        Args:
            evaluator: Expression evaluator for decorator expressions
            config: Desugar configuration. Uses defaults if None.
        """
        self._config = config or DesugarConfig()
        self._evaluator = DecoratorEvaluator(evaluator)
        self._composer = CompositionEngine(self._config)
        self._installer = Installer(self._config)

    def dispatch(
        self,
        declaration: Declaration,
        environment: MutableMapping[str, object],
    ) -> DesugarResult:
        """Desugar one declaration.

        Args:
            declaration: Decorated (or undecorated) declaration
            environment: Binding environment for class rebinding

        Returns:
            DesugarResult. Undecorated declarations are bypassed.

        Raises:
            UnrecognizedDeclarationShapeError: Unknown declaration type
            EvaluationError: Decorator expression or function raised
            MalformedDescriptorError: Invalid replacement or final descriptor
            ValueError: Decorator list longer than max_decorators
        """
        shape = get_declaration_shape(declaration)
        target = resolve_target(get_declaration_context(declaration))
        name = declaration.name
        initial = build_initial_value(declaration, target)

        if declaration.decorators is None:
            logger.debug("%s %r has no decorators, bypassed", shape.value, name)
            return DesugarResult(
                name=name,
                shape=shape,
                target=target,
                initial=initial,
                final=initial,
                installed=False,
                bypassed=True,
            )

        decorators = declaration.decorators
        max_decorators = self._config.max_decorators
        if max_decorators is not None and len(decorators) > max_decorators:
            raise ValueError(f"{name!r} has {len(decorators)} decorators, max is {max_decorators}")

        functions = self._evaluator.evaluate(decorators)
        steps = [
            TraceStep(kind=StepKind.EVALUATE, index=f.index, source=f.expression.source)
            for f in functions
            if not f.expression.ambient
        ]

        member_kind = get_member_kind(shape)
        if member_kind is None:
            composition = self._composer.compose_class(functions, initial)
            final = composition.value
            self._installer.rebind(environment, name, final)
            installed = True
            steps.extend(composition.steps)
            steps.append(TraceStep(kind=StepKind.REBIND))
        else:
            composition = self._composer.compose_member(
                functions,
                target.owner,
                name,
                initial,  # type: ignore[arg-type]
            )
            steps.extend(composition.steps)
            final = composition.value
            if final is ABSENT and target.kind is TargetKind.LITERAL:
                logger.debug("fold for literal member %r ended at ABSENT, installing default", name)
                final = build_member_default(declaration)  # type: ignore[arg-type]
            installed = self._installer.install(
                target,
                name,
                final,  # type: ignore[arg-type]
                member_kind,
            )
            steps.append(TraceStep(kind=StepKind.INSTALL if installed else StepKind.SKIP_INSTALL))

        return DesugarResult(
            name=name,
            shape=shape,
            target=target,
            initial=initial,
            final=final,
            installed=installed,
            steps=tuple(steps) if self._config.record_trace else (),
        )

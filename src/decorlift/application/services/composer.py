"""Composition engine: fold decorator functions over an initial value.

Application order is reverse textual order: with
    @D1
    @D2
    decl
the result is D1(D2(initial)). A decorator returning None leaves the
current value unchanged, at every step, so it never erases the work
of a decorator applied before it.

Descriptors are immutable; each step yields a new value.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from decorlift.domain.exceptions import EvaluationError, MalformedDescriptorError
from decorlift.domain.model.configuration import DesugarConfig
from decorlift.domain.model.decorator import AmbientDecorator
from decorlift.domain.model.descriptor import coerce_descriptor
from decorlift.domain.model.trace import StepKind, TraceStep

if TYPE_CHECKING:
    from decorlift.domain.model.decorator import DecoratorFunction
    from decorlift.domain.model.descriptor import Absent, PropertyDescriptor

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Composition:
    """Fold output.

    Attributes:
        value: Final value (descriptor, ABSENT or constructor)
        steps: APPLY / SKIP_AMBIENT steps in application order
    """

    value: object
    steps: tuple[TraceStep, ...]


class CompositionEngine:
    """Folds evaluated decorators over a descriptor or constructor.

    Stateless: the folded value is owned by a single compose call.
    Static and instance members go through the same fold; only the
    owner passed in differs.
    """

    def __init__(self, config: DesugarConfig | None = None) -> None:
        """Initialize engine.

        Args:
            config: Desugar configuration. Uses defaults if None.
        """
        self._config = config or DesugarConfig()

    def compose_member(
        self,
        decorators: Sequence[DecoratorFunction],
        owner: object,
        name: str,
        initial: PropertyDescriptor | Absent,
    ) -> Composition:
        """Fold member-shape decorators: D(owner, name, descriptor).

        Args:
            decorators: Evaluated decorators in textual order
            owner: Target owner (prototype, constructor or literal)
            name: Property name
            initial: Default descriptor, prior descriptor or ABSENT

        Returns:
            Composition with final descriptor or ABSENT

        Raises:
            EvaluationError: A decorator raised
            MalformedDescriptorError: A decorator returned a non-descriptor
        """
        return self._fold(
            decorators,
            initial,
            call=lambda fn, current: fn(owner, name, current),
            normalize=lambda result: coerce_descriptor(result, name=name),
        )

    def compose_class(
        self,
        decorators: Sequence[DecoratorFunction],
        constructor: object,
    ) -> Composition:
        """Fold class-shape decorators: D(constructor).

        Args:
            decorators: Evaluated decorators in textual order
            constructor: Declared class constructor

        Returns:
            Composition with final constructor

        Raises:
            EvaluationError: A decorator raised
            MalformedDescriptorError: Replacement is not callable (when required)
        """
        return self._fold(
            decorators,
            constructor,
            call=lambda fn, current: fn(current),
            normalize=self._normalize_constructor,
        )

    def _normalize_constructor(self, result: object) -> object:
        if self._config.require_callable_class_result and not callable(result):
            raise MalformedDescriptorError(
                f"class decorator returned {type(result).__name__}, expected constructor"
            )
        return result

    def _fold(
        self,
        decorators: Sequence[DecoratorFunction],
        initial: object,
        *,
        call: Callable[[Callable[..., object], object], object],
        normalize: Callable[[object], object],
    ) -> Composition:
        current = initial
        steps: list[TraceStep] = []

        for decorator in reversed(decorators):
            index, expression = decorator.index, decorator.expression
            if isinstance(decorator, AmbientDecorator):
                logger.debug("skipping ambient decorator #%d @%s", index, expression.source)
                steps.append(TraceStep(kind=StepKind.SKIP_AMBIENT, index=index, source=expression.source))
                continue

            function = decorator.function
            if not callable(function):
                error = TypeError(f"{type(function).__name__} object is not callable")
                raise EvaluationError(error, index=index, source=expression.source, phase="apply")

            logger.debug("applying decorator #%d @%s", index, expression.source)
            try:
                result = call(function, current)
            except MalformedDescriptorError:
                raise
            except Exception as e:
                raise EvaluationError(e, index=index, source=expression.source, phase="apply") from e

            replaced = result is not None
            if replaced:
                current = normalize(result)
            steps.append(
                TraceStep(kind=StepKind.APPLY, index=index, source=expression.source, replaced=replaced)
            )

        return Composition(value=current, steps=tuple(steps))

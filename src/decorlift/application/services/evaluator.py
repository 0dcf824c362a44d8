"""Decorator expression evaluator: expressions → decorator functions.

Evaluates every expression exactly once, in textual order, before any
decorator is applied. Evaluation order and application order are
independent: composer.py applies in reverse.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from decorlift.domain.exceptions import EvaluationError
from decorlift.domain.model.decorator import AmbientDecorator, DecoratorFunction, ResolvedDecorator

if TYPE_CHECKING:
    from decorlift.domain.model.decorator import DecoratorList
    from decorlift.domain.ports.expression_evaluator import ExpressionEvaluatorPort

logger = logging.getLogger(__name__)


class DecoratorEvaluator:
    """Evaluates a DecoratorList through an ExpressionEvaluatorPort.

    Stateless between evaluate() calls.
    """

    def __init__(self, evaluator: ExpressionEvaluatorPort) -> None:
        """Initialize with expression evaluator.

        Args:
            evaluator: Port used once per non-ambient expression

        Raises:
            TypeError: If evaluator is None
        """
        if evaluator is None:
            raise TypeError("evaluator must not be None")

        self._evaluator = evaluator

    def evaluate(self, decorators: DecoratorList) -> tuple[DecoratorFunction, ...]:
        """Evaluate decorator list in textual order.

        Ambient expressions are not evaluated: they yield AmbientDecorator.
        Fail-fast: first failure aborts, later expressions are not evaluated.

        Args:
            decorators: Decorator list

        Returns:
            Decorator functions in textual order (same indices as list)

        Raises:
            EvaluationError: Expression raised or could not be parsed
                (ExpressionSyntaxError kept as original)
        """
        functions: list[DecoratorFunction] = []

        for index, expression in enumerate(decorators):
            if expression.ambient:
                logger.debug("decorator #%d @%s is ambient, not evaluated", index, expression.source)
                functions.append(AmbientDecorator(index=index, expression=expression))
                continue

            logger.debug("evaluating decorator #%d @%s", index, expression.source)
            try:
                value = self._evaluator.evaluate(expression)
            except Exception as e:
                raise EvaluationError(e, index=index, source=expression.source, phase="evaluate") from e

            functions.append(ResolvedDecorator(index=index, expression=expression, function=value))

        return tuple(functions)

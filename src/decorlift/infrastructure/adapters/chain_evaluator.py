"""Chain evaluator adapter: first evaluator that accepts wins."""

from __future__ import annotations

from typing import TYPE_CHECKING

from decorlift.domain.exceptions import ExpressionSyntaxError
from decorlift.domain.ports.expression_evaluator import ExpressionEvaluatorPort

if TYPE_CHECKING:
    from decorlift.domain.model.decorator import DecoratorExpression


class ChainEvaluator(ExpressionEvaluatorPort):
    """Delegates to the first evaluator whose accepts() is True."""

    def __init__(self, *evaluators: ExpressionEvaluatorPort) -> None:
        """Initialize with evaluators in priority order.

        Raises:
            ValueError: No evaluators given
        """
        if not evaluators:
            raise ValueError("at least one evaluator required")

        self._evaluators = evaluators

    def accepts(self, expression: DecoratorExpression) -> bool:
        """True if any evaluator accepts."""
        return any(e.accepts(expression) for e in self._evaluators)

    def evaluate(self, expression: DecoratorExpression) -> object:
        """Evaluate with first accepting evaluator.

        Raises:
            ExpressionSyntaxError: No evaluator accepts expression
        """
        for evaluator in self._evaluators:
            if evaluator.accepts(expression):
                return evaluator.evaluate(expression)
        raise ExpressionSyntaxError(source=expression.source, reason="no evaluator accepts expression")

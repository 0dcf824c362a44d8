"""Thunk evaluator adapter: expressions carrying a pre-bound thunk.

The host pipeline closes over its own expression evaluator and hands
each DecoratorExpression a zero-argument thunk.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from decorlift.domain.ports.expression_evaluator import ExpressionEvaluatorPort

if TYPE_CHECKING:
    from decorlift.domain.model.decorator import DecoratorExpression


class ThunkEvaluator(ExpressionEvaluatorPort):
    """Evaluates expression.thunk(). Stateless."""

    def accepts(self, expression: DecoratorExpression) -> bool:
        """True if expression carries a thunk."""
        return expression.thunk is not None

    def evaluate(self, expression: DecoratorExpression) -> object:
        """Call the thunk once.

        Raises:
            TypeError: Expression has no thunk
        """
        if expression.thunk is None:
            raise TypeError(f"expression {expression.source!r} has no thunk")
        return expression.thunk()

"""Expression evaluator port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from decorlift.domain.model.decorator import DecoratorExpression


class ExpressionEvaluatorPort(ABC):
    """Port for evaluating a decorator expression to a value.

    Host pipeline or infrastructure layer must provide implementation.
    Called exactly once per non-ambient expression.
    """

    @abstractmethod
    def accepts(self, expression: DecoratorExpression) -> bool:
        """Check whether this evaluator can evaluate expression.

        Args:
            expression: Decorator expression

        Returns:
            True if evaluate() is applicable
        """
        ...

    @abstractmethod
    def evaluate(self, expression: DecoratorExpression) -> object:
        """Evaluate expression to a value (normally a decorator function).

        Args:
            expression: Decorator expression

        Returns:
            Evaluated value

        Raises:
            ExpressionSyntaxError: Expression cannot be parsed
            Exception: Anything the expression itself raises
        """
        ...

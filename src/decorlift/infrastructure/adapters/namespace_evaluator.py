"""Namespace evaluator adapter: evaluate decorator source against a scope.

Parses the expression with Python AST (mode="eval") and evaluates the
subset decorator expressions are written in: names, attribute access,
calls (with *args / **kwargs), constants, tuples, lists, dicts,
subscripts and unary +/-/not. Anything else is rejected before any
part of the expression is evaluated.

Name lookups go through scope[name], once per occurrence, so a
recording mapping observes evaluation order.
"""

from __future__ import annotations

import ast
import functools
from typing import TYPE_CHECKING

from decorlift.domain.exceptions import ExpressionSyntaxError
from decorlift.domain.ports.expression_evaluator import ExpressionEvaluatorPort

if TYPE_CHECKING:
    from collections.abc import Mapping

    from decorlift.domain.model.decorator import DecoratorExpression

_SUPPORTED_NODES = (
    ast.Expression,
    ast.Constant,
    ast.Name,
    ast.Load,
    ast.Attribute,
    ast.Call,
    ast.keyword,
    ast.Starred,
    ast.Tuple,
    ast.List,
    ast.Dict,
    ast.Subscript,
    ast.UnaryOp,
    ast.UAdd,
    ast.USub,
    ast.Not,
)


@functools.lru_cache(maxsize=512)
def parse_expression(source: str) -> ast.expr:
    """Parse and validate decorator expression source.

    Args:
        source: Expression text (without leading "@")

    Returns:
        Expression body node

    Raises:
        ExpressionSyntaxError: Invalid syntax or unsupported construct
    """
    try:
        tree = ast.parse(source.strip(), mode="eval")
    except SyntaxError as e:
        raise ExpressionSyntaxError(source=source, reason=e.msg or "invalid syntax") from e

    for node in ast.walk(tree):
        if not isinstance(node, _SUPPORTED_NODES):
            raise ExpressionSyntaxError(
                source=source,
                reason=f"unsupported expression: {type(node).__name__}",
            )
    return tree.body


class NamespaceEvaluator(ExpressionEvaluatorPort):
    """Evaluates expression source against a name → value scope.

    Example:
        evaluator = NamespaceEvaluator({"F": color_factory, "G": sealed})
        evaluator.evaluate(DecoratorExpression(source='F("color")'))
    """

    def __init__(self, scope: Mapping[str, object]) -> None:
        """Initialize with scope.

        Args:
            scope: Names visible to decorator expressions

        Raises:
            TypeError: If scope is None
        """
        if scope is None:
            raise TypeError("scope must not be None")

        self._scope = scope

    def accepts(self, expression: DecoratorExpression) -> bool:
        """Any expression with source text is accepted; syntax is checked on evaluate."""
        return True

    def evaluate(self, expression: DecoratorExpression) -> object:
        """Evaluate expression source.

        Raises:
            ExpressionSyntaxError: Invalid or unsupported syntax
            NameError: Name not in scope
            Exception: Anything raised by evaluated calls/attributes
        """
        node = parse_expression(expression.source)
        return self._eval(node, expression.source)

    def _eval(self, node: ast.expr, source: str) -> object:
        match node:
            case ast.Constant(value=value):
                return value
            case ast.Name(id=name):
                try:
                    return self._scope[name]
                except KeyError:
                    raise NameError(f"name {name!r} is not defined") from None
            case ast.Attribute(value=value, attr=attr):
                return getattr(self._eval(value, source), attr)
            case ast.Call(func=func, args=args, keywords=keywords):
                function = self._eval(func, source)
                positional: list[object] = []
                for arg in args:
                    if isinstance(arg, ast.Starred):
                        positional.extend(self._eval(arg.value, source))  # type: ignore[call-overload]
                    else:
                        positional.append(self._eval(arg, source))
                named: dict[str, object] = {}
                for kw in keywords:
                    if kw.arg is None:
                        named.update(self._eval(kw.value, source))  # type: ignore[call-overload]
                    else:
                        named[kw.arg] = self._eval(kw.value, source)
                return function(*positional, **named)  # type: ignore[operator]
            case ast.Tuple(elts=elts):
                return tuple(self._eval(e, source) for e in elts)
            case ast.List(elts=elts):
                return [self._eval(e, source) for e in elts]
            case ast.Dict(keys=keys, values=values):
                result: dict[object, object] = {}
                for key, value in zip(keys, values, strict=True):
                    if key is None:
                        result.update(self._eval(value, source))  # type: ignore[call-overload]
                    else:
                        result[self._eval(key, source)] = self._eval(value, source)
                return result
            case ast.Subscript(value=value, slice=index):
                return self._eval(value, source)[self._eval(index, source)]  # type: ignore[index]
            case ast.UnaryOp(op=ast.USub(), operand=operand):
                return -self._eval(operand, source)  # type: ignore[operator]
            case ast.UnaryOp(op=ast.UAdd(), operand=operand):
                return +self._eval(operand, source)  # type: ignore[operator]
            case ast.UnaryOp(op=ast.Not(), operand=operand):
                return not self._eval(operand, source)
            case _:
                raise ExpressionSyntaxError(
                    source=source,
                    reason=f"{type(node).__name__} not allowed here",
                )

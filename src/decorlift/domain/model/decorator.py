"""Decorator expression, decorator list and evaluated decorator values."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Position of a decorator expression in source.

    Attributes:
        line: Line number (1-based, must be > 0)
        column: Column number (0-based, must be >= 0)
    """

    line: int
    column: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")
        if self.column < 0:
            raise ValueError(f"column must be >= 0, got {self.column}")

    def __str__(self) -> str:
        """Format as line:column."""
        return f"{self.line}:{self.column}"


@dataclass(frozen=True, slots=True)
class DecoratorExpression:
    """Source-level decorator expression, evaluated exactly once.

    Attributes:
        source: Expression text as written after "@" (e.g., 'F("color")')
        thunk: Pre-bound zero-argument evaluation supplied by the host pipeline
        ambient: Static-analysis-only annotation, never evaluated nor applied
        span: Source position, None if unknown
    """

    source: str
    thunk: Callable[[], object] | None = None
    ambient: bool = False
    span: SourceSpan | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.source:
            raise ValueError("decorator source must not be empty")
        if self.thunk is not None and not callable(self.thunk):
            raise TypeError(f"thunk must be callable, got {type(self.thunk).__name__}")
        if self.ambient and self.thunk is not None:
            raise ValueError("ambient decorator expressions are never evaluated, thunk not allowed")


@dataclass(frozen=True, slots=True)
class DecoratorList:
    """Ordered, non-empty decorator expressions of one declaration.

    Order is textual (top-to-bottom). Evaluation follows it,
    application reverses it.
    """

    expressions: tuple[DecoratorExpression, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.expressions, tuple):
            raise TypeError(f"expressions must be tuple, got {type(self.expressions).__name__}")
        if not self.expressions:
            raise ValueError("decorator list must not be empty")

    @classmethod
    def of(cls, *items: DecoratorExpression | str) -> DecoratorList:
        """Build list from expressions or bare source strings."""
        return cls(
            tuple(item if isinstance(item, DecoratorExpression) else DecoratorExpression(source=item) for item in items)
        )

    def __iter__(self) -> Iterator[DecoratorExpression]:
        return iter(self.expressions)

    def __len__(self) -> int:
        return len(self.expressions)


@dataclass(frozen=True, slots=True)
class ResolvedDecorator:
    """Evaluated decorator function, ready to apply.

    Factories are already resolved: function is what F("color") returned.

    Attributes:
        index: Position in its list (0-based, textual order)
        expression: Expression it was evaluated from
        function: Evaluated value, expected to be callable
    """

    index: int
    expression: DecoratorExpression
    function: object


@dataclass(frozen=True, slots=True)
class AmbientDecorator:
    """Non-evaluating decorator: carried for static metadata, never executed.

    Attributes:
        index: Position in its list (0-based, textual order)
        expression: Ambient expression
    """

    index: int
    expression: DecoratorExpression


DecoratorFunction = ResolvedDecorator | AmbientDecorator

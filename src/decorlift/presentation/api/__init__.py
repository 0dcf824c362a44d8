"""Public API for desugaring.

Public exports:
    Desugarer: Entry point wiring evaluator, dispatcher and environment
    ClassBuilder/LiteralBuilder: Fluent declaration builders
"""

from decorlift.presentation.api.facade import (
    ClassBuilder,
    Desugarer,
    LiteralBuilder,
    default_evaluator,
    desugar,
    to_decorator_list,
)

__all__ = [
    "ClassBuilder",
    "Desugarer",
    "LiteralBuilder",
    "default_evaluator",
    "desugar",
    "to_decorator_list",
]

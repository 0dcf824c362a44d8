"""Infrastructure adapters implementing domain ports."""

from decorlift.infrastructure.adapters.chain_evaluator import ChainEvaluator
from decorlift.infrastructure.adapters.namespace_evaluator import NamespaceEvaluator, parse_expression
from decorlift.infrastructure.adapters.thunk_evaluator import ThunkEvaluator

__all__ = [
    "ChainEvaluator",
    "NamespaceEvaluator",
    "ThunkEvaluator",
    "parse_expression",
]

"""Domain ports: interfaces implemented outside the domain."""

from decorlift.domain.ports.expression_evaluator import ExpressionEvaluatorPort
from decorlift.domain.ports.property_owner import PropertyOwner, PrototypeHolder

__all__ = [
    "ExpressionEvaluatorPort",
    "PropertyOwner",
    "PrototypeHolder",
]

"""decorlift - decorator desugaring transform.

Evaluates decorator expressions once in textual order, folds the
resulting functions over the default descriptor (or class constructor)
in reverse order, and installs the result on the right target.
"""

__version__ = "0.1.0"

from decorlift.domain.exceptions import (
    DecorLiftError,
    EvaluationError,
    MalformedDescriptorError,
    UnrecognizedDeclarationShapeError,
)
from decorlift.domain.model.descriptor import ABSENT, PropertyDescriptor
from decorlift.presentation.api.facade import Desugarer, desugar

__all__ = [
    "ABSENT",
    "DecorLiftError",
    "Desugarer",
    "EvaluationError",
    "MalformedDescriptorError",
    "PropertyDescriptor",
    "UnrecognizedDeclarationShapeError",
    "__version__",
    "desugar",
]

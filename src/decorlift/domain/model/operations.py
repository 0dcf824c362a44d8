"""Abstract operation sequence a decorated declaration lowers to.

Not source text: evaluate X, build initial value, apply Y,
install Z / rebind W. Produced by the planner, mirrored by execution.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from decorlift.domain.model.declaration import DeclarationShape
    from decorlift.domain.model.target import TargetKind


@dataclass(frozen=True, slots=True)
class EvaluateOp:
    """Evaluate decorator expression #index once."""

    index: int
    source: str


@dataclass(frozen=True, slots=True)
class BuildInitialOp:
    """Build initial fold value (default descriptor, prior descriptor or constructor)."""

    shape: DeclarationShape
    target: TargetKind


@dataclass(frozen=True, slots=True)
class ApplyOp:
    """Apply evaluated decorator #index to the current value."""

    index: int
    source: str


@dataclass(frozen=True, slots=True)
class InstallOp:
    """Define final descriptor on target unless ABSENT."""

    target: TargetKind
    name: str


@dataclass(frozen=True, slots=True)
class RebindOp:
    """Bind declaration name to final constructor."""

    name: str


Operation = EvaluateOp | BuildInitialOp | ApplyOp | InstallOp | RebindOp


def describe_operation(op: Operation) -> str:
    """One-line human form.

    Exhaustive match on Operation union.
    """
    match op:
        case EvaluateOp(index=index, source=source):
            return f"evaluate #{index} @{source}"
        case BuildInitialOp(shape=shape, target=target):
            return f"build initial {shape.value} value for {target.name.lower()} target"
        case ApplyOp(index=index, source=source):
            return f"apply #{index} @{source}"
        case InstallOp(target=target, name=name):
            return f"install {name!r} on {target.name.lower()} target"
        case RebindOp(name=name):
            return f"rebind {name!r}"


@dataclass(frozen=True, slots=True)
class DesugarPlan:
    """Lowered form of one decorated declaration.

    Attributes:
        name: Declaration name
        shape: Declaration shape
        operations: Operations in execution order
        ambient: Sources of ambient decorators (carried, never executed)
    """

    name: str
    shape: DeclarationShape
    operations: tuple[Operation, ...]
    ambient: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")

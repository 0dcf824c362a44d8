"""Execution trace of one desugared declaration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StepKind(Enum):
    """What happened at a trace step."""

    EVALUATE = "EVALUATE"
    APPLY = "APPLY"
    SKIP_AMBIENT = "SKIP_AMBIENT"
    INSTALL = "INSTALL"
    SKIP_INSTALL = "SKIP_INSTALL"
    REBIND = "REBIND"


@dataclass(frozen=True, slots=True)
class TraceStep:
    """Single executed step.

    Attributes:
        kind: Step kind
        index: Decorator position (textual order), None for install/rebind
        source: Decorator source, None for install/rebind
        replaced: APPLY only: decorator returned a replacement
    """

    kind: StepKind
    index: int | None = None
    source: str | None = None
    replaced: bool | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.index is not None and self.index < 0:
            raise ValueError(f"index must be >= 0, got {self.index}")
        if self.kind is StepKind.APPLY and self.replaced is None:
            raise ValueError("APPLY step requires replaced")
        if self.kind is not StepKind.APPLY and self.replaced is not None:
            raise ValueError(f"{self.kind.value} step cannot carry replaced")

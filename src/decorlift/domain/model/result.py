"""Outcome of desugaring one declaration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from decorlift.domain.model.declaration import DeclarationShape
    from decorlift.domain.model.target import Target
    from decorlift.domain.model.trace import TraceStep


@dataclass(frozen=True, slots=True)
class DesugarResult:
    """Result of desugar(): final value plus what was done with it.

    Invariant: bypassed results install nothing and have no steps.

    Attributes:
        name: Declaration name
        shape: Declaration shape
        target: Resolved target
        initial: Fold input (descriptor, ABSENT or constructor)
        final: Fold output (descriptor, ABSENT or constructor)
        installed: Descriptor defined / name rebound
        bypassed: Declaration had no decorators, core did nothing
        steps: Executed steps (empty if trace disabled)
    """

    name: str
    shape: DeclarationShape
    target: Target
    initial: object
    final: object
    installed: bool
    bypassed: bool = False
    steps: tuple[TraceStep, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.bypassed and (self.installed or self.steps):
            raise ValueError("bypassed result cannot install or carry steps")

    @property
    def replaced(self) -> bool:
        """Final value differs from initial (identity)."""
        return self.final is not self.initial

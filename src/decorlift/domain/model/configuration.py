"""Desugaring configuration.

Defaults give the strict behavior: descriptors must keep their
declaration kind, class decorators must return something callable.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DesugarConfig:
    """Configuration DTO.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        strict_member_kinds: Final descriptor must match declaration kind
            (method → data descriptor, accessor → get/set). False allows
            decorators to turn a method into an accessor and vice versa.
        require_callable_class_result: Class decorator replacements must be
            callable. False accepts any non-None replacement.
        record_trace: Collect TraceSteps in DesugarResult.
        max_decorators: Reject decorator lists longer than this. None = unlimited.
    """

    strict_member_kinds: bool = True
    require_callable_class_result: bool = True
    record_trace: bool = True
    max_decorators: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_decorators is not None and self.max_decorators < 1:
            raise ValueError(f"max_decorators must be >= 1, got {self.max_decorators}")

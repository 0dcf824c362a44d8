"""Base reporter class and shared value formatting.

Concrete reporters inherit from BaseReporter.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from decorlift.domain.model.descriptor import ABSENT, PropertyDescriptor

if TYPE_CHECKING:
    from decorlift.domain.model.operations import DesugarPlan
    from decorlift.domain.model.result import DesugarResult


def format_callable(value: object) -> str:
    """Qualified name for functions/classes, repr otherwise."""
    name = getattr(value, "__qualname__", None) or getattr(value, "__name__", None)
    if isinstance(name, str):
        return name
    return repr(value)


def format_value(value: object) -> str:
    """Human form of a fold value: descriptor, ABSENT or constructor."""
    if value is ABSENT:
        return "ABSENT"
    if isinstance(value, PropertyDescriptor):
        parts = []
        for key, field in value.to_dict().items():
            rendered = field if isinstance(field, bool) else format_callable(field)
            parts.append(f"{key}: {rendered}")
        return "{" + ", ".join(parts) + "}"
    return format_callable(value)


class BaseReporter(ABC):
    """Base class for reporters.

    Concrete reporters implement report() and report_plan().

    Example:
        class MyReporter(BaseReporter):
            def report(self, result: DesugarResult) -> None:
                print(f"{result.name}: installed={result.installed}")

            def report_plan(self, plan: DesugarPlan) -> None:
                print(len(plan.operations))
    """

    @abstractmethod
    def report(self, result: DesugarResult) -> None:
        """Report desugaring result.

        Args:
            result: Result of one declaration
        """

    @abstractmethod
    def report_plan(self, plan: DesugarPlan) -> None:
        """Report lowered operation sequence.

        Args:
            plan: Plan of one declaration
        """

"""JSON reporter for machine-readable output.

Stdlib-only reporter for JSON output.
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

from decorlift.application.reporters._base import BaseReporter, format_value
from decorlift.domain.model.operations import (
    ApplyOp,
    BuildInitialOp,
    EvaluateOp,
    InstallOp,
    RebindOp,
)

if TYPE_CHECKING:
    from decorlift.domain.model.operations import DesugarPlan, Operation
    from decorlift.domain.model.result import DesugarResult


class JSONReporter(BaseReporter):
    """JSON reporter for machine-readable output.

    Callables are rendered by qualified name; descriptors by their
    present fields.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, result: DesugarResult) -> None:
        """Report desugaring result as JSON."""
        self._dump(self.result_to_dict(result))

    def report_plan(self, plan: DesugarPlan) -> None:
        """Report plan as JSON."""
        self._dump(self.plan_to_dict(plan))

    def _dump(self, data: dict[str, object]) -> None:
        json.dump(data, self._output, indent=self._indent)
        self._output.write("\n")

    def result_to_dict(self, result: DesugarResult) -> dict[str, object]:
        """Convert DesugarResult to JSON-serializable dict."""
        return {
            "name": result.name,
            "shape": result.shape.value,
            "target": result.target.kind.name,
            "initial": format_value(result.initial),
            "final": format_value(result.final),
            "installed": result.installed,
            "bypassed": result.bypassed,
            "steps": [
                {
                    "kind": step.kind.value,
                    "index": step.index,
                    "source": step.source,
                    "replaced": step.replaced,
                }
                for step in result.steps
            ],
        }

    def plan_to_dict(self, plan: DesugarPlan) -> dict[str, object]:
        """Convert DesugarPlan to JSON-serializable dict."""
        return {
            "name": plan.name,
            "shape": plan.shape.value,
            "operations": [self._operation_to_dict(op) for op in plan.operations],
            "ambient": list(plan.ambient),
        }

    def _operation_to_dict(self, op: Operation) -> dict[str, object]:
        match op:
            case EvaluateOp(index=index, source=source):
                return {"op": "evaluate", "index": index, "source": source}
            case BuildInitialOp(shape=shape, target=target):
                return {"op": "build_initial", "shape": shape.value, "target": target.name}
            case ApplyOp(index=index, source=source):
                return {"op": "apply", "index": index, "source": source}
            case InstallOp(target=target, name=name):
                return {"op": "install", "target": target.name, "name": name}
            case RebindOp(name=name):
                return {"op": "rebind", "name": name}

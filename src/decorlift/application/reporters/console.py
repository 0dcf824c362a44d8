"""Console reporter: DesugarResult / DesugarPlan → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from decorlift.application.reporters._base import format_value
from decorlift.domain.model.operations import describe_operation
from decorlift.domain.model.trace import StepKind

if TYPE_CHECKING:
    from decorlift.domain.model.operations import DesugarPlan
    from decorlift.domain.model.result import DesugarResult
    from decorlift.domain.model.trace import TraceStep


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        show_steps: Show trace step table.
        show_values: Show initial and final fold values.
        width: Console width in characters.
    """

    show_steps: bool = True
    show_values: bool = True
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def _console(self, output: StringIO) -> Console:
        return Console(file=output, force_terminal=True, highlight=False, width=self._config.width)

    def report(self, result: DesugarResult) -> str:
        """Format desugaring result as rich formatted string."""
        output = StringIO()
        console = self._console(output)

        console.print()
        console.rule(f"[bold]{result.shape.value.upper()} {escape(result.name)}[/bold]")
        console.print()

        status = "[green]installed[/green]" if result.installed else "[yellow]not installed[/yellow]"
        if result.bypassed:
            status = "[dim]bypassed (no decorators)[/dim]"
        console.print(f"[bold]Target:[/bold] {result.target.kind.name.lower()}  {status}")

        if self._config.show_values:
            console.print(f"[bold]Initial:[/bold] {escape(format_value(result.initial))}")
            console.print(f"[bold]Final:[/bold]   {escape(format_value(result.final))}")
        console.print()

        if self._config.show_steps and result.steps:
            console.print(self._steps_table(result.steps))
            console.print()

        return output.getvalue()

    def report_plan(self, plan: DesugarPlan) -> str:
        """Format plan as numbered operation list."""
        output = StringIO()
        console = self._console(output)

        console.print()
        console.rule(f"[bold]PLAN {plan.shape.value.upper()} {escape(plan.name)}[/bold]")
        console.print()

        if not plan.operations:
            console.print("[dim]no decorators, nothing to desugar[/dim]")
        for number, op in enumerate(plan.operations, start=1):
            console.print(f"  {number:>2}. {describe_operation(op)}", markup=False)

        if plan.ambient:
            console.print()
            console.print(f"[dim]ambient (not executed): {escape(', '.join(plan.ambient))}[/dim]")
        console.print()

        return output.getvalue()

    def _steps_table(self, steps: tuple[TraceStep, ...]) -> Table:
        table = Table(show_header=True, header_style="bold", box=None)
        table.add_column("Step", style="cyan")
        table.add_column("#", style="dim")
        table.add_column("Decorator")
        table.add_column("Outcome", style="green")

        for step in steps:
            index = "-" if step.index is None else str(step.index)
            source = "-" if step.source is None else escape(f"@{step.source}")
            table.add_row(step.kind.value, index, source, self._outcome(step))

        return table

    def _outcome(self, step: TraceStep) -> str:
        match step.kind:
            case StepKind.APPLY:
                return "replaced" if step.replaced else "kept"
            case StepKind.SKIP_AMBIENT:
                return "not executed"
            case _:
                return ""

"""Terminal reporter with rich output formatting."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from covgroup.models import OverallCoverageBreakdown, ParseGroupResult

_GOOD_RATIO = 0.8
_FAIR_RATIO = 0.5


def _ratio_color(ratio: float) -> str:
    """Return a Rich color name for a coverage ratio."""
    if ratio >= _GOOD_RATIO:
        return "green"
    if ratio >= _FAIR_RATIO:
        return "yellow"
    return "red"


class TerminalReporter:
    """Render coverage breakdowns as rich tables."""

    def __init__(self, console: Console | None = None, *, precision: int = 1) -> None:
        self.console = console or Console()
        self.precision = precision

    def _percent(self, ratio: float) -> str:
        color = _ratio_color(ratio)
        return f"[{color}]{ratio * 100:.{self.precision}f}%[/{color}]"

    def print_breakdown(self, breakdown: OverallCoverageBreakdown) -> None:
        table = Table(title="Total coverage")
        table.add_column("Measure", style="bold")
        table.add_column("Covered", justify="right")
        table.add_column("Total", justify="right")
        table.add_column("Coverage", justify="right")

        table.add_row(
            "Lines",
            str(breakdown.total_covered_lines),
            str(breakdown.total_lines),
            self._percent(breakdown.percent_by_lines),
        )
        table.add_row(
            "Statements",
            str(breakdown.total_covered_statements),
            str(breakdown.total_statements),
            self._percent(breakdown.percent_by_statements),
        )
        self.console.print(table)

    def print_groups(self, groups: ParseGroupResult) -> None:
        """Print one table per group, keys in sorted order."""
        for name, ratios in groups.items():
            table = Table(title=f"Coverage by {name}")
            table.add_column("Key", overflow="fold")
            table.add_column("Statements", justify="right")
            for key in sorted(ratios):
                table.add_row(escape(key), self._percent(ratios[key]))
            if not ratios:
                table.add_row("[dim]no files[/dim]", "")
            self.console.print(table)

    def print_error(self, message: str) -> None:
        self.console.print(f"[red]Error:[/red] {escape(message)}")

    def print_failures(self, failures: list[str]) -> None:
        for failure in failures:
            self.console.print(f"[red]✗[/red] {escape(failure)}")

    def print_success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {escape(message)}")

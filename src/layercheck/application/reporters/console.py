"""Console reporter: CheckResult -> rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from layercheck.domain.model.check_result import CheckResult
    from layercheck.domain.model.verdict import Verdict


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        verbose: Also render the per-unit layer table.
        show_warnings: Render unknown-layer warnings.
        color: Emit ANSI styles.
        width: Console width in characters.
    """

    verbose: bool = False
    show_warnings: bool = True
    color: bool = True
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
        self._config = config or ConsoleConfig()

    def report(self, result: CheckResult) -> str:
        """Format check result as rich formatted string.

        Args:
            result: Check result to format.

        Returns:
            Formatted string with colors and tables.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
        )

        self._render_header(console, result)

        if self._config.verbose and result.units:
            self._render_units(console, result)

        if result.violations:
            self._render_violations(console, result.violations)

        if self._config.show_warnings and result.warnings:
            self._render_warnings(console, result)

        if result.issues:
            self._render_issues(console, result)

        return output.getvalue()

    def _render_header(self, console: Console, result: CheckResult) -> None:
        console.print()
        console.rule("[bold]LAYER CHECK[/bold]")
        console.print()

        status = "[green]PASSED[/green]" if result.passed else "[red]FAILED[/red]"
        stats = result.stats
        console.print(
            f"[bold]Status:[/bold] {status}  "
            f"[bold]Packages:[/bold] {stats.units_analyzed}  "
            f"[bold]Edges:[/bold] {stats.edges_evaluated}  "
            f"[bold]Violations:[/bold] {result.violation_count}  "
            f"[bold]Errors:[/bold] {len(result.issues)}"
        )
        console.print()

    def _render_units(self, console: Console, result: CheckResult) -> None:
        table = Table(title="PACKAGES", title_justify="left")
        table.add_column("Package", style="cyan")
        table.add_column("Layer")
        table.add_column("Depends on layers")
        table.add_column("External", justify="right")

        for unit in result.units:
            table.add_row(
                escape(unit.path),
                escape(unit.layer),
                escape(", ".join(unit.layer_deps)),
                str(len(unit.external_deps)),
            )

        console.print(table)
        console.print()

    def _render_violations(self, console: Console, violations: tuple[Verdict, ...]) -> None:
        table = Table(title="[bold red]VIOLATIONS[/bold red]", title_justify="left")
        table.add_column("Kind", style="red")
        table.add_column("Package", style="cyan")
        table.add_column("Layer")
        table.add_column("Dependency", style="yellow")
        table.add_column("Rule", style="dim")

        for verdict in violations:
            rule = f"#{verdict.rule_index} {verdict.rule}" if verdict.rule else ""
            table.add_row(
                verdict.kind.name,
                escape(verdict.unit),
                escape(verdict.layer),
                escape(verdict.target),
                escape(rule),
            )

        console.print(table)
        console.print()

    def _render_warnings(self, console: Console, result: CheckResult) -> None:
        console.print(f"[bold yellow]WARNINGS[/bold yellow] ({len(result.warnings)})")
        for diagnostic in result.warnings:
            console.print(f"  {escape(diagnostic.message)}")
        console.print()

    def _render_issues(self, console: Console, result: CheckResult) -> None:
        console.print(f"[bold red]ERRORS[/bold red] ({len(result.issues)})")
        for issue in result.issues:
            console.print(f"  {escape(str(issue))}")
        console.print()

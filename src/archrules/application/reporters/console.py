"""Console reporter: AssertionResult -> rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from archrules.application.reporters._base import BaseReporter
from archrules.application.reporters.snippet import violation_sample

if TYPE_CHECKING:
    from pathlib import Path

    from archrules.domain.model.assertion_result import AssertionResult
    from archrules.domain.model.violation import RuleViolation


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        project_root: Base for reading source excerpts. None = no excerpts.
        max_violations: Max violations to display. None = unlimited.
        width: Console width in characters.
    """

    project_root: Path | None = None
    max_violations: int | None = None
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_violations is not None and self.max_violations < 0:
            raise ValueError(f"max_violations must be >= 0, got {self.max_violations}")
        if self.width <= 0:
            raise ValueError(f"width must be > 0, got {self.width}")


class ConsoleReporter(BaseReporter):
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, result: AssertionResult) -> str:
        """Format rule result as rich formatted string.

        Args:
            result: Evaluated rule or layer check

        Returns:
            Formatted string with colors and panels
        """
        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self._config.width)

        self._render_header(console, result)

        shown = result.violations
        if self._config.max_violations is not None:
            shown = shown[: self._config.max_violations]
        for violation in shown:
            console.print(self._render_violation(violation))

        hidden = len(result.violations) - len(shown)
        if hidden:
            console.print(f"[dim]... {hidden} more violations not shown[/dim]", highlight=False)
            console.print()

        return output.getvalue()

    def _render_header(self, console: Console, result: AssertionResult) -> None:
        """Render header with verdict."""
        console.print()
        if result.passed:
            console.rule("[bold green]ARCHITECTURE RULE PASSED[/bold green]")
        else:
            console.rule("[bold red]ARCHITECTURE RULE FAILED[/bold red]")
        console.print()
        console.print(Text(f"Expected {result.expected}"))
        if not result.passed:
            console.print(f"[bold]Violations:[/bold] {result.violation_count}")
        console.print()

    def _render_violation(self, violation: RuleViolation) -> Panel:
        """Render one violation as a panel with optional source excerpt."""
        parts: list[Text] = [Text(violation.message, style="bold")]

        excerpt = None
        if self._config.project_root is not None:
            excerpt = violation_sample(violation, self._config.project_root)
        if excerpt is not None:
            sample, (offset, length) = excerpt
            code = Text(sample)
            code.stylize("bold red underline", offset, offset + max(length, 1))
            parts.append(Text())
            parts.append(code)
            parts.append(Text(f"^ {violation.label}", style="red"))

        if violation.suggestion:
            parts.append(Text())
            parts.append(Text(f"help: {violation.suggestion}", style="cyan"))

        return Panel(
            Group(*parts),
            title=f"[yellow]{violation.kind.name}[/yellow]",
            subtitle=violation.location,
            title_align="left",
            subtitle_align="left",
        )

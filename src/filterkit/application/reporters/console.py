"""Console reporter: ProbeResult → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from filterkit.application.probe import ProbeResult


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        width: Console width in columns (must be > 0).
        color: Emit ANSI styling. False = plain text in the table.
        max_rows: Max sample rows to display. None = unlimited.
        show_summary: Show per-filter pass counts below the table.
        true_style: rich style for True outcomes.
        false_style: rich style for False outcomes.
    """

    width: int = 120
    color: bool = True
    max_rows: int | None = None
    show_summary: bool = True
    true_style: str = "green"
    false_style: str = "red"

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width <= 0:
            raise ValueError(f"width must be > 0, got {self.width}")
        if self.max_rows is not None and self.max_rows < 0:
            raise ValueError(f"max_rows must be >= 0, got {self.max_rows}")


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

    def report(self, result: ProbeResult) -> str:
        """Format probe result as rich formatted string.

        Args:
            result: Probe result to format.

        Returns:
            Formatted string with a sample × filter table.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
        )

        self._render_header(console, result)
        self._render_table(console, result)

        if self._config.show_summary:
            self._render_summary(console, result)

        return output.getvalue()

    def _render_header(self, console: Console, result: ProbeResult) -> None:
        """Render header with sizes."""
        console.print()
        console.rule("[bold]FILTER PROBE[/bold]")
        console.print()
        console.print(
            f"[bold]Filters:[/bold] {len(result.filter_names)}  "
            f"[bold]Samples:[/bold] {len(result.rows)}"
        )
        console.print()

    def _render_table(self, console: Console, result: ProbeResult) -> None:
        """Render one row per sample, one column per filter."""
        table = Table(show_header=True, header_style="bold")
        table.add_column("sample")
        for name in result.filter_names:
            table.add_column(escape(name))

        rows = result.rows
        if self._config.max_rows is not None:
            rows = rows[: self._config.max_rows]

        for row in rows:
            cells = [escape(repr(row.sample))]
            cells.extend(self._format_outcome(row.outcomes[name]) for name in result.filter_names)
            table.add_row(*cells)

        console.print(table)

        hidden = len(result.rows) - len(rows)
        if hidden:
            console.print(f"[dim]... {hidden} more[/dim]")
        console.print()

    def _render_summary(self, console: Console, result: ProbeResult) -> None:
        """Render pass counts for boolean filters."""
        total = len(result.rows)
        for name in result.filter_names:
            outcomes = [row.outcomes[name] for row in result.rows]
            if all(isinstance(outcome, bool) for outcome in outcomes):
                console.print(f"  {escape(name)}: {result.pass_count(name)}/{total} passed")
            else:
                console.print(f"  {escape(name)}: {total} values")
        console.print()

    def _format_outcome(self, outcome: object) -> str:
        """Style bools, print strings bare, repr everything else."""
        match outcome:
            case bool():
                style = self._config.true_style if outcome else self._config.false_style
                return f"[{style}]{outcome}[/{style}]"
            case str():
                return escape(outcome)
            case _:
                return escape(repr(outcome))

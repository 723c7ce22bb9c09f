"""Console reporter: AssertionResult → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from membercheck.domain.model.assertion_result import AssertionResult
    from membercheck.domain.model.member import MemberDescriptor


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        width: Console width in characters.
        color: Emit ANSI styles (False for plain text, e.g. captured output).
        show_markers: Add a column listing attached markers.
    """

    width: int = 120
    color: bool = False
    show_markers: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


class ConsoleReporter:
    """Console reporter: renders failing members as a rich table.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, result: AssertionResult, title: str = "membercheck") -> str:
        """Format assertion result.

        Args:
            result: Evaluation result.
            title: Heading, typically the test node id.

        Returns:
            Formatted string (table of failing members, or a pass line).
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
        )

        console.rule(f"[bold]{escape(title)}[/bold]")
        if result.passed:
            console.print(f"[green]PASS[/green] {result.checked} member(s) checked")
        else:
            console.print(
                f"[bold red]FAIL[/bold red] {result.failing_count} of "
                f"{result.checked} member(s) failed"
            )
            console.print(self._build_table(result.failing))

        return output.getvalue()

    def _build_table(self, failing: tuple[MemberDescriptor, ...]) -> Table:
        """Build table with one row per failing member."""
        table = Table(show_header=True, header_style="bold")
        table.add_column("#", justify="right")
        table.add_column("Member")
        table.add_column("Type")
        table.add_column("Visibility")
        if self._config.show_markers:
            table.add_column("Markers")

        for i, member in enumerate(failing, start=1):
            row = [
                str(i),
                member.qualified_name,
                member.declared_type,
                member.visibility.name.lower(),
            ]
            if self._config.show_markers:
                row.append(", ".join(type(m).__name__ for m in member.markers) or "-")
            table.add_row(*row)

        return table

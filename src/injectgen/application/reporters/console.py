"""Console reporter: GenerationReport → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from injectgen.domain.model.report import GenerationReport


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        show_skipped: List types without injected members.
        width: Console width in characters.
        color: Emit ANSI color codes.
    """

    show_skipped: bool = False
    width: int = 100
    color: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


class ConsoleReporter:
    """Console reporter: renders a generation report with rich.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, report: GenerationReport) -> str:
        """Format generation report.

        Args:
            report: Report to format

        Returns:
            Formatted string
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
        )

        console.print(
            f"[bold]injectgen[/bold]: {report.generated_count} generated, "
            f"{len(report.skipped)} skipped, {report.total} examined"
        )

        if report.generated:
            table = Table(show_header=True, header_style="bold")
            table.add_column("Generated file", style="green")
            table.add_column("Declared in")
            table.add_column("Lines", justify="right")
            for source in report.generated:
                table.add_row(
                    source.file_name,
                    str(source.declaring_file) if source.declaring_file is not None else "-",
                    str(source.text.count("\n")),
                )
            console.print(table)

        if self._config.show_skipped and report.skipped:
            console.print("[dim]Skipped (no injected members):[/dim]")
            for name in report.skipped:
                console.print(f"  [dim]{name}[/dim]")

        return output.getvalue()

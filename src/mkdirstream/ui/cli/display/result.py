"""src/mkdirstream/ui/cli/display/result.py
What: Render user-facing summaries for directory creation runs.
Why: Keep console output formatting consistent across the interface.
"""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.table import Table

from mkdirstream.ui.cli.models import EnsureResult


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console if console is not None else Console(stderr=True)

    def show_results(self, results: list[EnsureResult], quiet: bool = False) -> None:
        """Display a summary table; failures are shown even when quiet.

        Args:
            results: Results of the run.
            quiet: Whether to suppress non-error output.
        """
        failures = [result for result in results if not result.success]
        if quiet and not failures:
            return

        if not quiet:
            table = Table(title="Directory Summary", show_header=False)
            table.add_column("Metric", style="cyan")
            table.add_column("Value", justify="right")
            table.add_row("Total directories", str(len(results)))
            table.add_row("Ensured", f"[green]{len(results) - len(failures)}[/green]")
            table.add_row("Failed", f"[red]{len(failures)}[/red]")
            self.console.print(table)

        for failure in failures:
            self.console.print(f"[red]✗[/red] {failure.path}: {failure.error_message}")


__all__ = ["ResultDisplay"]

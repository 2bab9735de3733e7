"""Console output formatting for the ft-sync CLI."""

import json
from typing import Any

from rich.console import Console
from rich.table import Table
from rich.text import Text


class OutputFormatter:
    """Writes user-facing output through rich consoles.

    Informational messages are suppressed in quiet mode and in JSON mode
    (so JSON output stays machine readable). Warnings and errors always go
    to stderr.
    """

    def __init__(self, json_output: bool = False, quiet: bool = False):
        """Initialize output formatter.

        Args:
            json_output: Emit results as JSON instead of text
            quiet: Suppress non-essential output
        """
        self.json_output = json_output
        self.quiet = quiet
        self.console = Console(highlight=False)
        self.err_console = Console(stderr=True, highlight=False)

    @property
    def _silent(self) -> bool:
        return self.quiet or self.json_output

    def print(self, message: str = "") -> None:
        """Print text verbatim (no markup, no wrapping)."""
        self.console.out(message, highlight=False)

    def info(self, message: str) -> None:
        """Print an informational message."""
        if not self._silent:
            self.console.print(message, markup=False, soft_wrap=True)

    def success(self, message: str) -> None:
        """Print a success message in green."""
        if not self._silent:
            self.console.print(message, style="green", markup=False, soft_wrap=True)

    def warning(self, message: str) -> None:
        """Print a warning to stderr."""
        self.err_console.print(
            f"Warning: {message}", style="yellow", markup=False, soft_wrap=True
        )

    def error(self, message: str) -> None:
        """Print an error to stderr."""
        self.err_console.print(
            f"Error: {message}", style="bold red", markup=False, soft_wrap=True
        )

    def output_json(self, data: Any) -> None:
        """Print data as indented JSON."""
        self.console.out(json.dumps(data, indent=2), highlight=False)

    def print_summary(self, title: str, items: list[tuple[str, str]]) -> None:
        """Print a two-column summary table.

        Args:
            title: Table title
            items: (label, value) rows
        """
        if self._silent:
            return
        table = Table(title=title, show_header=False)
        table.add_column("Item", style="bold")
        table.add_column("Value")
        for label, value in items:
            table.add_row(label, Text(value))
        self.console.print(table)

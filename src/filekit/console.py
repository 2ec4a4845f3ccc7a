"""Console output for the command line."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm
from rich.table import Table

if TYPE_CHECKING:
    from filekit.path import Path
    from filekit.types import PathInfo


class Output:
    """Rich-formatted output for filekit commands."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize output.

        Args:
            console: Console to print to. Defaults to stdout.
        """
        self.console = console or Console()

    def confirm(self, message: str, default: bool = False) -> bool:
        """Show confirmation prompt.

        Args:
            message: Confirmation message.
            default: Default response.

        Returns:
            User's response.
        """
        return Confirm.ask(message, default=default, console=self.console)

    def show_paths(self, paths: list[Path], empty_message: str = "No paths found") -> None:
        """Print one path per line.

        Args:
            paths: Paths to print.
            empty_message: Shown when there is nothing to print.
        """
        if not paths:
            self.console.print(f"[yellow]{empty_message}[/yellow]")
            return
        for path in paths:
            style = "bold blue" if path.is_directory else ""
            self.console.print(path.raw, style=style, markup=False, highlight=False)

    def show_path_info(self, info: PathInfo) -> None:
        """Display a path's derived values as a table."""
        table = Table(title=escape(info.raw), show_header=False)
        table.add_column("Field", style="cyan")
        table.add_column("Value")

        table.add_row("Components", escape(" | ".join(info.components)))
        table.add_row("Parent", escape(info.parent))
        table.add_row("Extension", escape(info.extension) or "-")
        table.add_row("Standardized", escape(info.standardized))
        table.add_row("Resolved", escape(info.resolved))
        table.add_row("Absolute", escape(info.absolute))
        table.add_row("Is absolute", _yes_no(info.is_absolute))
        table.add_row("Exists", _yes_no(info.exists))
        table.add_row("Is directory", _yes_no(info.is_directory))

        self.console.print(table)

    def show_directories(self, rows: list[tuple[str, str, list[Path]]]) -> None:
        """Display standard directories.

        Args:
            rows: (kind, scope, paths) triples. Kinds without paths are
                shown as unavailable.
        """
        table = Table(title="Standard Directories")
        table.add_column("Kind", style="cyan")
        table.add_column("Scope")
        table.add_column("Path")

        for kind, scope, paths in rows:
            value = "\n".join(escape(p.raw) for p in paths) if paths else "[dim]unavailable[/dim]"
            table.add_row(kind, scope, value)

        self.console.print(table)

    def show_success(self, message: str) -> None:
        """Show success message."""
        self.console.print(f"[green]✓[/green] {message}")

    def show_error(self, message: str) -> None:
        """Show error message."""
        self.console.print(f"[red]✗[/red] {message}")

    def show_warning(self, message: str) -> None:
        """Show warning message."""
        self.console.print(f"[yellow]![/yellow] {message}")


def _yes_no(value: bool) -> str:
    return "[green]yes[/green]" if value else "[dim]no[/dim]"

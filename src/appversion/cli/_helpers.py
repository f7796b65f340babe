"""Console output helpers for the CLI."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..version import Version

console = Console()


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]Error:[/red] {escape(message)}")


def print_config_help() -> None:
    """Print help on configuring a current version."""
    console.print("Pass a version argument or configure one in pyproject.toml:")
    console.print(
        """
[dim]# pyproject.toml[/dim]
\\[tool.appversion]
current = "1.0.0"
"""
    )
    console.print("Or create [cyan]appversion.toml[/cyan]:")
    console.print(
        """
\\[appversion]
current = "1.0.0"
"""
    )


def version_table(version: Version) -> Table:
    """Build a table listing the components of a version.

    Args:
        version: Version to describe.

    Returns:
        Rich table with one row per component.
    """
    table = Table(title=f"Version {version}")
    table.add_column("Component", style="cyan")
    table.add_column("Value", style="green", justify="right")

    table.add_row("major", str(version.major))
    table.add_row("minor", str(version.minor))
    table.add_row("patch", str(version.patch))
    return table

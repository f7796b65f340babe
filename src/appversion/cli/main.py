"""Command-line interface for appversion."""

from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from .._version import __version__
from ..exceptions import VersionError
from ..version import Version
from ._helpers import (
    console,
    print_config_help,
    print_error,
    print_success,
    version_table,
)
from .config import load_config

app = typer.Typer(help="Parse, bump and compare semantic versions")

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        ...,
        "--config",
        "-c",
        help="Path to config file (pyproject.toml or appversion.toml)",
    ),
]


class Part(str, Enum):
    """Version component that can be bumped."""

    major = "major"
    minor = "minor"
    patch = "patch"


VersionArgument = Annotated[
    str | None,
    typer.Argument(help="Version string (default: current version from config)"),
]


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"appversion {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the appversion version and exit",
        ),
    ] = False,
) -> None:
    """Parse, bump and compare semantic versions."""


def _resolve_version(version: str | None, config: Path | None) -> Version:
    """Parse the given version, falling back to the configured one.

    Args:
        version: Version string passed on the command line, if any.
        config: Explicit config file path, if any.

    Returns:
        The resolved version.

    Raises:
        typer.Exit: If no version was given and none is configured.
    """
    if version is not None:
        return Version.parse(version)

    current = load_config(config).current
    if current is None:
        print_error("No version given and no current version configured")
        print_config_help()
        raise typer.Exit(1)
    return current


@app.command()
def show(version: VersionArgument = None, config: ConfigOption = None) -> None:
    """Show the components of a version."""
    try:
        ver = _resolve_version(version, config)
        console.print(version_table(ver))
    except VersionError as e:
        print_error(str(e))
        raise typer.Exit(1) from e


@app.command()
def bump(
    part: Annotated[Part, typer.Argument(help="Component to increment")],
    version: VersionArgument = None,
    config: ConfigOption = None,
) -> None:
    """Print a version with one component incremented."""
    try:
        ver = _resolve_version(version, config)
        bumped = ver.bump(part.value)
    except VersionError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    console.print(str(bumped))


@app.command()
def compatible(
    first: Annotated[str, typer.Argument(help="First version")],
    second: Annotated[str, typer.Argument(help="Second version")],
) -> None:
    """Check whether two versions are compatible (same major version)."""
    try:
        a, b = Version.parse(first), Version.parse(second)
    except VersionError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    if a.is_compatible(b):
        print_success(f"v{a} is compatible with v{b}")
        raise typer.Exit(0)

    console.print(f"[red]✗[/red] v{a} is not compatible with v{b}")
    raise typer.Exit(1)


@app.command()
def compare(
    first: Annotated[str, typer.Argument(help="First version")],
    second: Annotated[str, typer.Argument(help="Second version")],
) -> None:
    """Compare two versions."""
    try:
        a, b = Version.parse(first), Version.parse(second)
    except VersionError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    if a < b:
        symbol = "<"
    elif a > b:
        symbol = ">"
    else:
        symbol = "=="
    console.print(f"{a} {symbol} {b}")


if __name__ == "__main__":
    app()

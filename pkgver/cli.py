"""
pkgver.cli — Command-line interface for the manifest version resolver.

Usage:
    pkgver show [PATH]           Print the package segment for PATH (default: .)
    pkgver show --plain [PATH]   Print only the version, e.g. ``v1.2.3``
    pkgver probe [PATH]          Show which manifests were tried and which won
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pkgver.core.models import PackageConfig
from pkgver.manifests import MANIFEST_CANDIDATES, probe as probe_manifests, resolve
from pkgver.segment import render_segment

console = Console()

_DIRECTORY = click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path)


def _setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s — %(message)s",
        datefmt="%H:%M:%S",
    )


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """pkgver — show the current package version of a project."""
    _setup_logging(verbose)


# ---------------------------------------------------------------------------
# show
# ---------------------------------------------------------------------------

@main.command()
@click.argument("path", default=".", type=_DIRECTORY)
@click.option("--plain", is_flag=True, help="Print the bare version without styling.")
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Config file (default: $PKGVER_CONFIG or the user config dir).",
)
def show(path: Path, plain: bool, config_path: Path | None) -> None:
    """Print the package version of PATH. Exits 1 when none is found."""
    version = resolve(path)
    if version is None:
        sys.exit(1)

    if plain:
        click.echo(version)
        return

    segment = render_segment(version, PackageConfig.load(config_path))
    if segment is not None:
        console.print(segment)


# ---------------------------------------------------------------------------
# probe
# ---------------------------------------------------------------------------

@main.command()
@click.argument("path", default=".", type=_DIRECTORY)
def probe(path: Path) -> None:
    """Show every candidate manifest and how it was handled."""
    report = probe_manifests(path)

    table = Table(title=f"Manifests — {escape(str(path))}")
    table.add_column("#", style="dim", width=3)
    table.add_column("File", style="cyan")
    table.add_column("Format")
    table.add_column("Status")

    for i, candidate in enumerate(MANIFEST_CANDIDATES, start=1):
        if candidate.file_name in report.skipped:
            status = "[dim]skipped[/dim]"
        elif candidate.file_name == report.selected:
            status = "[green]selected[/green]"
        else:
            status = "[dim]not reached[/dim]"
        table.add_row(str(i), candidate.file_name, candidate.format.value, status)

    console.print(table)

    if report.version is not None:
        console.print(f"[green]✓[/green] Version: [bold]{escape(report.version)}[/bold]")
    elif report.found_manifest:
        console.print(f"[yellow]![/yellow] {report.selected} has no usable version")
    else:
        console.print("[yellow]![/yellow] No manifest found")


if __name__ == "__main__":
    main()

"""CLI entry point: narcheck.

Subcommands:
    narcheck check dependency-tree.txt           # check a `mvn dependency:tree` dump
    narcheck check tree.json --json              # JSON tree in, JSON report out
    narcheck formats                             # list supported graph formats
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from narcheck.check import check_file
from narcheck.config import CheckSettings
from narcheck.core.logging import setup_logging
from narcheck.exceptions import DuplicateDependenciesError, GraphBuildError, PreconditionError
from narcheck.loaders import LOADER_REGISTRY
from narcheck.report import advice

EXIT_DUPLICATES = 1
EXIT_ERROR = 2


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(verbose: bool) -> None:
    """narcheck: detect dependencies packaged twice by a NAR and its parent NAR."""
    setup_logging("DEBUG" if verbose else None)


@main.command("check")
@click.argument("graph_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--format",
    "graph_format",
    type=click.Choice(sorted(LOADER_REGISTRY)),
    default=None,
    help="Graph file format (default: by file extension)",
)
@click.option("--bundle-type", default=None, help="Artifact type of nested bundles (default: nar)")
@click.option("--json", "json_output", is_flag=True, help="Output a JSON report")
def check(
    graph_file: Path,
    graph_format: str | None,
    bundle_type: str | None,
    json_output: bool,
) -> None:
    """Check a resolved dependency graph for duplicate compile dependencies."""
    settings = CheckSettings.from_env(
        graph_format=graph_format,
        bundle_type=bundle_type,
        json_output=json_output,
    )

    try:
        result = check_file(graph_file, settings)
    except DuplicateDependenciesError as e:
        result = e.result
    except (GraphBuildError, PreconditionError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_ERROR)

    if settings.json_output:
        click.echo(result.to_json())
    elif result.conflicts:
        for block in result.render():
            click.echo(block)
        click.echo(advice(result.scope))
    else:
        click.echo("No duplicate dependencies found.")

    if result.conflicts:
        sys.exit(EXIT_DUPLICATES)


@main.command("formats")
def formats() -> None:
    """List supported dependency graph formats."""
    for name, loader in sorted(LOADER_REGISTRY.items()):
        click.echo(f"  {name:10s}  {', '.join(loader.file_patterns)}")


if __name__ == "__main__":
    main()

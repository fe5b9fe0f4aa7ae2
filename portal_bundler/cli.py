"""Click CLI with build and deps subcommands."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import click

from portal_bundler.config import build_config
from portal_bundler.errors import BundleError
from portal_bundler.pipeline import run_build, run_walk

_entrypoint_option = click.option(
    "--entrypoint", "entrypoint", required=True, type=click.Path(path_type=Path),
    help="Entry TypeScript file",
)
_root_option = click.option(
    "--root", "project_root", type=click.Path(file_okay=False, path_type=Path),
    help="Project root for node_modules lookups (default: current directory)",
)
_external_option = click.option(
    "--external", "-x", multiple=True,
    help="Module name provided by the runtime; its imports are kept as-is (repeatable)",
)


def _relative(path: Path, root: Path) -> str:
    return Path(os.path.relpath(path, root)).as_posix()


@click.group()
@click.version_option(version="0.1.0")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def cli(verbose: bool):
    """portal-bundler: flatten a TypeScript import graph into one file."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


@cli.command()
@_entrypoint_option
@click.option("--outDir", "--out-dir", "out_dir", required=True, type=click.Path(path_type=Path), help="Output directory")
@_root_option
@_external_option
def build(entrypoint: Path, out_dir: Path, project_root: Path | None, external: tuple[str, ...]):
    """Bundle ENTRYPOINT and its imports into bundle.ts and bundle.strings.json."""
    try:
        config = build_config(entrypoint, out_dir, project_root, external)
        click.echo("Starting dependency graph build...")
        result = run_build(config)
    except BundleError as e:
        raise click.ClickException(str(e))

    root = config.project_root
    click.echo(f"Found {len(result.order)} file(s) in dependency tree.")
    click.echo(click.style("\nBuild complete!", fg="green"))
    click.echo(f"  Code:    {_relative(config.bundle_path, root)}")
    click.echo(
        f"  Strings: {_relative(config.resource_path, root)} "
        f"({len(result.resources)} keys merged)"
    )


@cli.command()
@_entrypoint_option
@_root_option
@_external_option
def deps(entrypoint: Path, project_root: Path | None, external: tuple[str, ...]):
    """Print the build order for ENTRYPOINT without writing anything."""
    try:
        config = build_config(entrypoint, Path("."), project_root, external)
        order = run_walk(config)
    except BundleError as e:
        raise click.ClickException(str(e))

    root = config.project_root
    for index, path in enumerate(order.paths, 1):
        click.echo(f"{index:>4}  {_relative(path, root)}")

    if order.unresolved:
        click.echo(click.style("\nUnresolved:", fg="yellow"))
        for item in order.unresolved:
            click.echo(f"  {item.specifier}  ({_relative(item.importer, root)})")

    if order.cycles:
        click.echo(click.style("\nCycles:", fg="red"))
        for cycle in order.cycles:
            click.echo("  " + " -> ".join(_relative(p, root) for p in cycle))


def main():
    cli()


if __name__ == "__main__":
    main()

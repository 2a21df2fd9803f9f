"""Main CLI entry point using Typer.

This module defines the top-level CLI commands:
- rpak-manifest build: Scan an export tree and write the build manifest
"""
from __future__ import annotations

from pathlib import Path  # noqa: TC003 - Typer requires runtime access
from typing import Annotated

import typer
from rich.console import Console

from rpak_manifest import __version__

app = typer.Typer(
    name="rpak-manifest",
    help="rpak-manifest - RePak build manifest compiler",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"rpak-manifest {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version", "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output."),
    ] = False,
) -> None:
    """rpak-manifest - RePak build manifest compiler.

    Use 'rpak-manifest COMMAND --help' for information on specific commands.
    """
    ctx.obj = {"verbose": verbose}


@app.command()
def build(
    ctx: typer.Context,
    root: Annotated[
        Path | None,
        typer.Argument(help="Root folder of the exported assets."),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write manifest to this file."),
    ] = None,
    skip_list: Annotated[
        Path | None,
        typer.Option("--skip-list", "-s", help="File listing already packaged assets."),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Run log file (truncated on start)."),
    ] = None,
    name: Annotated[
        str | None,
        typer.Option("--name", "-n", help="Pak name written to the manifest."),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Build and summarize without writing the manifest."),
    ] = False,
) -> None:
    """Build the RePak manifest for an exported asset tree.

    Examples:
        rpak-manifest build ./exports/mymod

        rpak-manifest build ./exports/mymod --output build/mymod.json

        rpak-manifest build ./exports/mymod --dry-run
    """
    from rpak_manifest.cli.commands.build import run_build  # noqa: PLC0415

    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    run_build(
        root=root,
        output=output,
        skip_list=skip_list,
        log_file=log_file,
        name=name,
        dry_run=dry_run,
        verbose=verbose,
    )


if __name__ == "__main__":
    app()

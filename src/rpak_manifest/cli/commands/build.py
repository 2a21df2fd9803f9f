"""Build command implementation."""
from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from rpak_manifest.cli.config import get_config
from rpak_manifest.manifest.builder import ManifestBuilder
from rpak_manifest.manifest.discovery import AssetScanner
from rpak_manifest.manifest.serialization import manifest_fingerprint, write_manifest
from rpak_manifest.runlog import open_run_log
from rpak_manifest.skiplist import load_skip_set

if TYPE_CHECKING:
    from pathlib import Path

    from rpak_manifest.manifest.model import EntryGroups, ManifestDocument

console = Console()
err_console = Console(stderr=True)


def run_build(
    *,
    root: Path | None,
    output: Path | None = None,
    skip_list: Path | None = None,
    log_file: Path | None = None,
    name: str | None = None,
    dry_run: bool = False,
    verbose: bool = False,
) -> None:
    """Execute build command.

    Args:
        root: Root folder of the exported assets.
        output: Manifest path (config default if None).
        skip_list: Skip list path (config default if None).
        log_file: Run log path (config default if None).
        name: Pak name (config default if None).
        dry_run: Build and summarize without writing the manifest.
        verbose: Log at DEBUG level.
    """
    if root is None:
        err_console.print(
            "[red]✗[/red] Please provide the folder path as a command-line argument."
        )
        raise SystemExit(2)

    if not root.is_dir():
        err_console.print(f"[red]✗[/red] Directory not found: {root}")
        raise SystemExit(1)

    try:
        config = get_config()
    except ValidationError as e:
        err_console.print("[red]✗[/red] Invalid configuration")
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            err_console.print(f"  - {field}: {error['msg']}")
        raise SystemExit(1) from None

    root_path = root.resolve()
    output_path = output or config.output_path
    log_path = log_file or config.log_path
    level = "DEBUG" if verbose else config.log_level

    document: ManifestDocument | None = None
    groups: EntryGroups | None = None
    try:
        with open_run_log(log_path, level=level) as log:
            try:
                skip_set = load_skip_set(skip_list or config.skip_list_path, log)

                scanner = AssetScanner(root_path, skip_set=skip_set, log=log)
                groups = scanner.scan()

                builder = ManifestBuilder(
                    name=name or config.pak_name,
                    compress_level=config.compress_level,
                    compress_workers=config.compress_workers,
                )
                document = builder.build(groups)

                if dry_run:
                    log.info(
                        "dry_run_complete",
                        entries=len(document.files),
                        fingerprint=manifest_fingerprint(document),
                    )
                else:
                    fingerprint = write_manifest(document, output_path)
                    log.info(
                        "manifest_written",
                        output=str(output_path.resolve()),
                        entries=len(document.files),
                        fingerprint=fingerprint,
                    )
            except Exception as e:
                log.error("manifest_generation_failed", error=str(e), exc_info=True)
                document = None
    except OSError as e:
        err_console.print(f"[red]✗[/red] Cannot write run log {log_path}: {e}")
        raise SystemExit(1) from None

    if document is None or groups is None:
        err_console.print("[red]✗[/red] Manifest generation failed, see the run log")
        raise SystemExit(1)

    _print_summary(document, groups)
    if dry_run:
        console.print(
            "[blue]i[/blue] Dry run complete. Run without --dry-run to write the manifest."
        )
    else:
        console.print(f"[green]✓[/green] Manifest written to {output_path}")


def _print_summary(document: ManifestDocument, groups: EntryGroups) -> None:
    """Print manifest summary.

    Args:
        document: The assembled manifest.
        groups: Entries collected per group.
    """
    table = Table(title="Manifest Summary")
    table.add_column("Group", style="cyan")
    table.add_column("Entries", justify="right")

    for group, count in groups.counts().items():
        if count:
            table.add_row(group, str(count))

    table.add_row("[bold]Total[/bold]", f"[bold]{len(document.files)}[/bold]")
    console.print(table)

# topmark:header:start
#
#   project      : DataRecorder
#   file         : mismatches.py
#   file_relpath : src/datarecorder/cli/commands/mismatches.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DataRecorder `mismatches` commands: inspect and remove mismatch directories."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from datarecorder.cli.options import get_settings

if TYPE_CHECKING:
    from pathlib import Path

    from datarecorder.mismatch import MismatchStore


@click.group(name="mismatches", help="Inspect or remove mismatch artifact directories.")
def mismatches_group() -> None:
    """Group for mismatch directory commands."""


@mismatches_group.command(name="list", help="List mismatch directories and their files.")
@click.pass_context
def list_command(ctx: click.Context) -> None:
    """Print each mismatch directory, followed by its files (indented)."""
    store: MismatchStore = get_settings(ctx).mismatch_store()
    directories: list[Path] = store.existing()
    if not directories:
        click.echo(f"No mismatch directories in {store.root}")
        return
    for directory in directories:
        click.echo(click.style(str(directory), bold=True))
        for entry in sorted(directory.iterdir()):
            click.echo(f"  {entry.name}")


@mismatches_group.command(name="clean", help="Remove all mismatch directories.")
@click.pass_context
def clean_command(ctx: click.Context) -> None:
    """Remove every mismatch directory and report how many were removed."""
    store: MismatchStore = get_settings(ctx).mismatch_store()
    removed: int = store.clean()
    click.echo(f"Removed {removed} mismatch director{'y' if removed == 1 else 'ies'}")

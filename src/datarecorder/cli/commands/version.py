# topmark:header:start
#
#   project      : DataRecorder
#   file         : version.py
#   file_relpath : src/datarecorder/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DataRecorder `version` command."""

from __future__ import annotations

import click

from datarecorder.constants import DATARECORDER_VERSION


@click.command(
    name="version",
    help="Show the current version of DataRecorder.",
)
def version_command() -> None:
    """Print the DataRecorder version installed in the active environment."""
    click.echo(DATARECORDER_VERSION)

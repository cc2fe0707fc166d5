# topmark:header:start
#
#   project      : DataRecorder
#   file         : init_visualizer.py
#   file_relpath : src/datarecorder/cli/commands/init_visualizer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DataRecorder `init-visualizer` command.

Installs the bundled diff template as ``<DIR>/visualizer/recording_diff.html``.
Once present, recorders running anywhere below ``DIR`` render an HTML diff for
every mismatch.
"""

from __future__ import annotations

from pathlib import Path

import click

from datarecorder.cli.errors import RecorderCantCreateError, RecorderIOError
from datarecorder.constants import DEFAULT_VISUALIZER_RELPATH
from datarecorder.errors import RecordingIOError
from datarecorder.render import load_bundled_template
from datarecorder.utils.file import write_text


@click.command(
    name="init-visualizer",
    help="Install the HTML diff template into DIR (default: current directory).",
)
@click.argument(
    "directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
)
@click.option("--force", is_flag=True, default=False, help="Overwrite an existing template.")
def init_visualizer_command(directory: Path, force: bool) -> None:
    """Write the bundled template below ``directory``.

    Args:
        directory (Path): Project directory receiving ``visualizer/recording_diff.html``.
        force (bool): Overwrite an existing file.

    Raises:
        RecorderCantCreateError: The template exists and ``--force`` was not given.
        RecorderIOError: The template could not be written.
    """
    target: Path = directory / DEFAULT_VISUALIZER_RELPATH
    if target.exists() and not force:
        raise RecorderCantCreateError(f"{target} already exists (use --force to overwrite)")

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        write_text(target, load_bundled_template())
    except (OSError, RecordingIOError) as exc:
        raise RecorderIOError(str(exc)) from exc
    click.echo(f"Wrote {target}")

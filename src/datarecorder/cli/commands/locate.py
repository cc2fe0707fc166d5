# topmark:header:start
#
#   project      : DataRecorder
#   file         : locate.py
#   file_relpath : src/datarecorder/cli/commands/locate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DataRecorder `locate` command.

Runs the same upward search the recorder uses for recording directories and the
diff visualizer, which helps explain why a test picked (or missed) a path.
"""

from __future__ import annotations

from pathlib import Path

import click

from datarecorder.cli.errors import RecorderFileNotFoundError
from datarecorder.cli.options import get_settings
from datarecorder.errors import PathResolutionError
from datarecorder.paths import find_upward


@click.command(
    name="locate",
    help="Search PATH in the working directory and its ancestors.",
)
@click.argument("path", required=False)
@click.option(
    "--start",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory to start from (default: current directory).",
)
@click.pass_context
def locate_command(ctx: click.Context, path: str | None, start: Path | None) -> None:
    """Print the first match for PATH (default: the configured visualizer path).

    Args:
        ctx (click.Context): Click context holding the settings.
        path (str | None): Relative path to search for.
        start (Path | None): Directory to start the search from.

    Raises:
        RecorderFileNotFoundError: Nothing matched; the message lists every
            searched location.
    """
    target: str = path or get_settings(ctx).visualizer
    try:
        found: Path = find_upward(target, start)
    except PathResolutionError as exc:
        raise RecorderFileNotFoundError(str(exc)) from exc
    click.echo(str(found))

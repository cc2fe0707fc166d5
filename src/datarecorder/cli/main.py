# topmark:header:start
#
#   project      : DataRecorder
#   file         : main.py
#   file_relpath : src/datarecorder/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DataRecorder command-line interface.

Group-level options are processed once; logging and the discovered project
settings are placed into ``ctx.obj`` for the subcommands.
"""

from __future__ import annotations

import click

from datarecorder.cli.commands.init_visualizer import init_visualizer_command
from datarecorder.cli.commands.locate import locate_command
from datarecorder.cli.commands.mismatches import mismatches_group
from datarecorder.cli.commands.version import version_command
from datarecorder.cli.errors import RecorderConfigError
from datarecorder.cli.options import common_verbose_options, resolve_verbosity
from datarecorder.config.logging import get_logger, resolve_env_log_level, setup_logging
from datarecorder.config.settings import RecorderSettings
from datarecorder.errors import ConfigurationError

logger = get_logger(__name__)


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    help="DataRecorder: golden-file recording helper.",
)
@common_verbose_options
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int) -> None:
    """Entry point for the DataRecorder CLI."""
    ctx.ensure_object(dict)

    # The environment wins when no verbosity flag was given
    level: int = resolve_verbosity(verbose, quiet)
    if not verbose and not quiet:
        level = resolve_env_log_level() or level
    setup_logging(level=level)

    if "settings" not in ctx.obj:
        try:
            ctx.obj["settings"] = RecorderSettings.discover()
        except ConfigurationError as exc:
            raise RecorderConfigError(str(exc)) from exc
    logger.debug("Settings: %s", ctx.obj["settings"])


cli.add_command(version_command)

cli.add_command(locate_command)

cli.add_command(mismatches_group)

cli.add_command(init_visualizer_command)

if __name__ == "__main__":
    cli()

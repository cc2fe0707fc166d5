# topmark:header:start
#
#   project      : DataRecorder
#   file         : options.py
#   file_relpath : src/datarecorder/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click options and context helpers for the DataRecorder CLI."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, TypeVar

import click

from datarecorder.cli.errors import RecorderUsageError
from datarecorder.config.logging import TRACE_LEVEL

if TYPE_CHECKING:
    from datarecorder.config.settings import RecorderSettings

F = TypeVar("F", bound=Callable[..., object])


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from ``-v``/``-q`` counts.

    Args:
        verbose_count: Number of times ``-v`` was passed.
        quiet_count: Number of times ``-q`` was passed.

    Returns:
        The logging level: WARNING by default, INFO/DEBUG/TRACE for one, two,
        three or more ``-v``, ERROR for any ``-q``.

    Raises:
        RecorderUsageError: Both flags were used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise RecorderUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return logging.ERROR
    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    return logging.WARNING


def common_verbose_options(f: F) -> F:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log errors.",
    )(f)
    return f


def get_settings(ctx: click.Context) -> RecorderSettings:
    """Return the settings stored on the Click context by the group callback."""
    ctx.ensure_object(dict)
    settings: RecorderSettings = ctx.obj["settings"]
    return settings

# topmark:header:start
#
#   project      : DataRecorder
#   file         : errors.py
#   file_relpath : src/datarecorder/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the DataRecorder CLI.

Raise these in commands to exit with a standardized message and exit code.
"""

from __future__ import annotations

import click

from datarecorder.cli.exit_codes import ExitCode


class RecorderCliError(click.ClickException):
    """Base class for all DataRecorder CLI errors."""

    exit_code = ExitCode.FAILURE


class RecorderUsageError(RecorderCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class RecorderConfigError(RecorderCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class RecorderFileNotFoundError(RecorderCliError):
    """Error when a searched path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class RecorderCantCreateError(RecorderCliError):
    """Error when an output file already exists or cannot be created."""

    exit_code = ExitCode.CANT_CREATE


class RecorderIOError(RecorderCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR

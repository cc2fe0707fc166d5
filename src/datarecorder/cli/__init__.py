# topmark:header:start
#
#   project      : DataRecorder
#   file         : __init__.py
#   file_relpath : src/datarecorder/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DataRecorder CLI package.

The console script entry point is defined in ``pyproject.toml`` as::

    [project.scripts]
    datarecorder = "datarecorder.cli.main:cli"

All subcommands live in [`datarecorder.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time

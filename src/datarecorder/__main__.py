# topmark:header:start
#
#   project      : DataRecorder
#   file         : __main__.py
#   file_relpath : src/datarecorder/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running DataRecorder via ``python -m datarecorder``.

Delegates to :func:`datarecorder.cli.main.cli`, the console script entry point.
"""

from __future__ import annotations

from datarecorder.cli.main import cli

if __name__ == "__main__":
    cli()

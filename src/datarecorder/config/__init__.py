# topmark:header:start
#
#   project      : DataRecorder
#   file         : __init__.py
#   file_relpath : src/datarecorder/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for DataRecorder: logging setup and project-level settings.

Settings live in [`datarecorder.config.settings`][]; logging helpers in
[`datarecorder.config.logging`][].
"""

from __future__ import annotations

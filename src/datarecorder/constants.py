# topmark:header:start
#
#   project      : DataRecorder
#   file         : constants.py
#   file_relpath : src/datarecorder/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DataRecorder Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

DATARECORDER_VERSION: str = get_version("datarecorder")

# Relative path searched upward from the cwd to enable the HTML diff handler
DEFAULT_VISUALIZER_RELPATH: str = "visualizer/recording_diff.html"

# Bundled copy of the diff template inside the package
TEMPLATE_PACKAGE: str = "datarecorder.templates"
TEMPLATE_NAME: str = "recording_diff.html"

# Extension of filenames derived from the test identity
DEFAULT_RECORDING_EXTENSION: str = ".data"

# Mismatch directories: <temp>/<prefix><n>
MISMATCH_DIR_PREFIX: str = "cppmismatch-"
MAX_MISMATCH_SLOTS: int = 10_000
MAX_ALLOCATION_RETRIES: int = 16

# Project configuration
CONFIG_FILE_NAME: str = "datarecorder.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
TOOL_SECTION: str = "datarecorder"

ENV_RECORDING_DIR: str = "DATARECORDER_RECORDING_DIR"
ENV_VISUALIZER: str = "DATARECORDER_VISUALIZER"
ENV_TMPDIR: str = "DATARECORDER_TMPDIR"

# topmark:header:start
#
#   project      : DataRecorder
#   file         : __init__.py
#   file_relpath : src/datarecorder/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DataRecorder package.

DataRecorder is a golden-file testing helper. The first ``record()`` of a value
stores it as a recording; later calls compare against it and raise a
`MismatchError` (with an optional HTML diff) when the value changed.
"""

from __future__ import annotations

from datarecorder.errors import (
    ConfigurationError,
    DataRecorderError,
    DirectoryAllocationError,
    MismatchError,
    PathResolutionError,
    RecordingIOError,
    TemplateError,
)
from datarecorder.filter_json import FilterJson, redact_json, replace_keys
from datarecorder.mismatch import Mismatch, MismatchHandler, MismatchStore
from datarecorder.paths import find_upward
from datarecorder.recorder import DataRecorder
from datarecorder.render import RenderedDiff, render_diff

__all__: list[str] = [
    "ConfigurationError",
    "DataRecorder",
    "DataRecorderError",
    "DirectoryAllocationError",
    "FilterJson",
    "Mismatch",
    "MismatchError",
    "MismatchHandler",
    "MismatchStore",
    "PathResolutionError",
    "RecordingIOError",
    "RenderedDiff",
    "TemplateError",
    "find_upward",
    "redact_json",
    "render_diff",
    "replace_keys",
]

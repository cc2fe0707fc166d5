# topmark:header:start
#
#   project      : DataRecorder
#   file         : errors.py
#   file_relpath : src/datarecorder/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by DataRecorder.

Usage:
    Configuration, path and I/O problems abort a ``record()`` call immediately.
    A data mismatch is reported through `MismatchError`, which also derives from
    ``AssertionError`` so pytest reports it as an ordinary test failure rather
    than an error. Failures while writing mismatch artifacts keep their own
    types so callers can tell "comparison failed" apart from "comparison failed
    and the artifacts could not be written".
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


class DataRecorderError(Exception):
    """Base class for all DataRecorder errors."""


class ConfigurationError(DataRecorderError, ValueError):
    """Error for unset/empty recording directory or a malformed filename."""


class PathResolutionError(DataRecorderError):
    """Error raised when an upward path search finds no match.

    Attributes:
        target (str): The relative path that was searched for.
        searched_paths (list[Path]): Every candidate path tried, nearest first.
    """

    def __init__(self, target: str, searched_paths: Sequence[Path]) -> None:
        self.target = target
        self.searched_paths: list[Path] = list(searched_paths)
        trail = "\n".join(f"  {p}" for p in self.searched_paths)
        super().__init__(f"Could not find '{target}'. Searched paths:\n{trail}")


class RecordingIOError(DataRecorderError):
    """Error for open/read/write failures on recording or artifact files.

    Attributes:
        path (Path): The file the operation failed on.
        errno (int | None): The OS error code, when available.
    """

    def __init__(self, message: str, path: Path, errno: int | None = None) -> None:
        self.path = path
        self.errno = errno
        super().__init__(f"{message}: {path} (errno={errno})")


class TemplateError(DataRecorderError):
    """Error for a diff template that lacks one of its text slots."""


class DirectoryAllocationError(DataRecorderError):
    """Error when a mismatch directory cannot be created."""


class MismatchError(DataRecorderError, AssertionError):
    """Recorded data and new data differ.

    Attributes:
        recording_data (str): Content of the recording file.
        mismatch_data (str): The newly produced data.
        recording_path (Path | None): Where the recording lives.
        mismatch_path (Path | None): Copy of ``mismatch_data`` in the mismatch directory.
        html_diff (Path | None): Rendered HTML diff, when the diff handler ran.
    """

    def __init__(
        self,
        recording_data: str,
        mismatch_data: str,
        *,
        recording_path: Path | None = None,
        mismatch_path: Path | None = None,
        html_diff: Path | None = None,
    ) -> None:
        self.recording_data = recording_data
        self.mismatch_data = mismatch_data
        self.recording_path = recording_path
        self.mismatch_path = mismatch_path
        self.html_diff = html_diff
        super().__init__(self._format())

    def _format(self) -> str:
        lines: list[str] = ["Mismatch found"]
        if self.recording_path is not None:
            lines.append(f"recording_path: {self.recording_path}")
        if self.mismatch_path is not None:
            lines.append(f"mismatch_path: {self.mismatch_path}")
        if self.html_diff is not None:
            lines.append(f"html_diff: {self.html_diff}")
        lines.append(f"recording_data:\n{self.recording_data}")
        lines.append(f"mismatch_data:\n{self.mismatch_data}")
        return "\n".join(lines)

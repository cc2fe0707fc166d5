# topmark:header:start
#
#   project      : DataRecorder
#   file         : file.py
#   file_relpath : src/datarecorder/utils/file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exact text file I/O for recordings and mismatch artifacts.

Text is read with ``newline=""`` and written as encoded bytes so content
round-trips verbatim with no newline translation on any platform. OS and
encoding failures are re-raised as `RecordingIOError` carrying the path (and
the errno for OS failures).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from datarecorder.config.logging import get_logger
from datarecorder.errors import RecordingIOError

if TYPE_CHECKING:
    from pathlib import Path

    from datarecorder.config.logging import DataRecorderLogger

logger: DataRecorderLogger = get_logger(__name__)


def read_text(path: Path) -> str:
    """Return the full content of ``path``.

    Raises:
        RecordingIOError: The file could not be opened or read, or is not
            valid UTF-8.
    """
    try:
        with open(path, encoding="utf-8", newline="") as fh:
            data = fh.read()
    except UnicodeDecodeError as exc:
        raise RecordingIOError(f"File is not valid UTF-8 ({exc.reason})", path) from exc
    except OSError as exc:
        raise RecordingIOError("Could not open file for reading", path, exc.errno) from exc
    logger.trace("Read %d characters from %s", len(data), path)
    return data


def write_text(path: Path, data: str) -> None:
    """Write ``data`` to ``path`` as UTF-8, truncating any previous content.

    The text is encoded before the file is opened, so data that cannot be
    encoded leaves an existing file untouched and creates no new one.

    Raises:
        RecordingIOError: ``data`` is not encodable as UTF-8, or the file could
            not be opened or written.
    """
    try:
        payload: bytes = data.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise RecordingIOError(f"Data is not encodable as UTF-8 ({exc.reason})", path) from exc
    try:
        with open(path, "wb") as fh:
            fh.write(payload)
    except OSError as exc:
        raise RecordingIOError("Could not write to file", path, exc.errno) from exc
    logger.trace("Wrote %d bytes to %s", len(payload), path)

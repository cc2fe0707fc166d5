# topmark:header:start
#
#   project      : DataRecorder
#   file         : paths.py
#   file_relpath : src/datarecorder/paths.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Upward path resolution.

Tests are run from arbitrary subdirectories of a project (the project root, a
``build/`` directory, an IDE-chosen folder). These helpers locate a
project-relative artifact such as ``test/recordings`` by walking from the
working directory up to the filesystem root and returning the first candidate
that exists.

Given a cwd of ``/home/user/project/build``, ``find_upward("test/recordings")``
tries, in order:

- ``/home/user/project/build/test/recordings``
- ``/home/user/project/test/recordings``
- ``/home/user/test/recordings``
- ``/home/test/recordings``
- ``/test/recordings``
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from datarecorder.config.logging import get_logger
from datarecorder.errors import ConfigurationError, PathResolutionError

if TYPE_CHECKING:
    from os import PathLike

    from datarecorder.config.logging import DataRecorderLogger

logger: DataRecorderLogger = get_logger(__name__)


def iter_upward(start: Path) -> list[Path]:
    """Return ``start`` followed by each of its ancestors up to the root."""
    cur: Path = start.absolute()
    chain: list[Path] = [cur]
    while cur.parent != cur:
        cur = cur.parent
        chain.append(cur)
    return chain


def find_upward(relative_path: str | PathLike[str], start: Path | None = None) -> Path:
    """Find ``relative_path`` in ``start`` or the nearest ancestor containing it.

    Args:
        relative_path (str | PathLike[str]): Path to look for. An absolute path
            bypasses the walk and is only checked for existence.
        start (Path | None): Directory to start from; defaults to the cwd.

    Returns:
        Path: The first existing candidate.

    Raises:
        PathResolutionError: No candidate exists. The error carries every
            attempted path.
    """
    target = Path(relative_path)
    if target.is_absolute():
        if target.exists():
            return target
        raise PathResolutionError(str(relative_path), [target])

    searched: list[Path] = []
    for directory in iter_upward(start or Path.cwd()):
        candidate: Path = directory / target
        searched.append(candidate)
        if candidate.exists():
            logger.trace("Found '%s' at %s", relative_path, candidate)
            return candidate

    logger.debug("'%s' not found in %d locations", relative_path, len(searched))
    raise PathResolutionError(str(relative_path), searched)


def resolve_recording_dir(raw: str | PathLike[str], start: Path | None = None) -> Path:
    """Resolve a recording directory the way ``DataRecorder.set_recording_dir`` expects.

    Args:
        raw (str | PathLike[str]): Absolute directory, or a path relative to the
            cwd or to one of its ancestors.
        start (Path | None): Directory to start the upward search from.

    Returns:
        Path: Absolute path of an existing directory.

    Raises:
        ConfigurationError: ``raw`` is empty or does not name a directory.
        PathResolutionError: A relative ``raw`` was not found upward.
    """
    if not str(raw):
        raise ConfigurationError("Recording path must not be empty")

    path = Path(raw)
    if not path.is_absolute():
        path = find_upward(path, start)

    if not path.is_dir():
        raise ConfigurationError(f"Recording path is not a directory: {path}")
    return path.absolute()

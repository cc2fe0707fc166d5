# topmark:header:start
#
#   project      : DataRecorder
#   file         : handlers.py
#   file_relpath : src/datarecorder/handlers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in mismatch handlers.

A handler receives a `Mismatch` and returns the exception ``record()`` raises.
Errors raised *inside* a handler (artifact I/O, bad template) propagate as their
own type instead of being folded into the mismatch report.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from datarecorder.config.logging import get_logger
from datarecorder.errors import MismatchError
from datarecorder.render import render_diff

if TYPE_CHECKING:
    from pathlib import Path

    from datarecorder.config.logging import DataRecorderLogger
    from datarecorder.mismatch import Mismatch, MismatchHandler
    from datarecorder.render import RenderedDiff

logger: DataRecorderLogger = get_logger(__name__)


def default_mismatch_handler(mismatch: Mismatch) -> MismatchError:
    """Report both data variants verbatim, without writing artifacts."""
    return MismatchError(mismatch.recording_data, mismatch.mismatch_data)


def diff_mismatch_handler(template_path: Path, mismatch: Mismatch) -> MismatchError:
    """Render an HTML diff for ``mismatch`` and report where it was written.

    Args:
        template_path (Path): The diff-visualization template.
        mismatch (Mismatch): The failed comparison.

    Returns:
        MismatchError: Error carrying the data and the artifact paths.
    """
    logger.debug("Using diff mismatch handler with %s", template_path)
    rendered: RenderedDiff = render_diff(template_path, mismatch)
    return MismatchError(
        mismatch.recording_data,
        mismatch.mismatch_data,
        recording_path=mismatch.recording_path,
        mismatch_path=rendered.mismatch_path,
        html_diff=rendered.html_path,
    )


def make_diff_handler(template_path: Path) -> MismatchHandler:
    """Bind `diff_mismatch_handler` to ``template_path``."""

    def _handler(mismatch: Mismatch) -> MismatchError:
        return diff_mismatch_handler(template_path, mismatch)

    return _handler

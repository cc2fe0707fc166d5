# topmark:header:start
#
#   project      : DataRecorder
#   file         : render.py
#   file_relpath : src/datarecorder/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HTML diff rendering for mismatches.

A diff-visualization template is an HTML page whose script holds two JavaScript
template literals, one for the recorded ("old") text and one for the new text.
Rendering fills both literals and writes the page into the mismatch directory
next to a raw copy of the new data.

Slot grammar (what template authors must provide)::

    const oldText = `...`;
    const newText = `...`;

Whitespace around ``const``, the name and ``=`` is free; the body runs up to the
first backtick and the slot ends with a backtick followed by ``;``. Every
occurrence of a slot is filled; the surrounding markers are kept verbatim.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from importlib.resources import files
from typing import TYPE_CHECKING

from datarecorder.config.logging import get_logger
from datarecorder.constants import TEMPLATE_NAME, TEMPLATE_PACKAGE
from datarecorder.errors import TemplateError
from datarecorder.utils.file import read_text, write_text

if TYPE_CHECKING:
    from pathlib import Path

    from datarecorder.config.logging import DataRecorderLogger
    from datarecorder.mismatch import Mismatch

logger: DataRecorderLogger = get_logger(__name__)

OLD_TEXT_SLOT: str = "oldText"
NEW_TEXT_SLOT: str = "newText"

_SLOT_RE: re.Pattern[str] = re.compile(
    rf"(const\s+({OLD_TEXT_SLOT}|{NEW_TEXT_SLOT})\s*=\s*`)([^`]*)(`;)"
)


@dataclass(frozen=True)
class RenderedDiff:
    """Artifacts written for one mismatch.

    Attributes:
        html_path (Path): The filled-in diff page.
        mismatch_path (Path): Raw copy of the mismatching data.
    """

    html_path: Path
    mismatch_path: Path


def escape_template_literal(text: str) -> str:
    """Escape ``text`` so a JavaScript template literal reproduces it literally.

    Backslashes and backticks are backslash-escaped, and every ``${`` gets a
    leading backslash so it is never interpolated, terminated or not. ``</``
    becomes ``<\\/`` so data containing ``</script>`` cannot close the inline
    script; the literal still evaluates to ``</``.
    """
    text = text.replace("\\", "\\\\").replace("`", "\\`")
    return text.replace("${", "\\${").replace("</", "<\\/")


def fill_slots(template: str, old_text: str, new_text: str) -> str:
    """Return ``template`` with both text slots filled.

    Args:
        template (str): Template content.
        old_text (str): Text for the ``oldText`` slot (escaped here).
        new_text (str): Text for the ``newText`` slot (escaped here).

    Returns:
        str: The rendered content.

    Raises:
        TemplateError: One of the slots does not occur in ``template``.
    """
    values: dict[str, str] = {
        OLD_TEXT_SLOT: escape_template_literal(old_text),
        NEW_TEXT_SLOT: escape_template_literal(new_text),
    }
    seen: set[str] = set()

    def _fill(m: re.Match[str]) -> str:
        name: str = m.group(2)
        seen.add(name)
        return m.group(1) + values[name] + m.group(4)

    # One pass so text placed in the first slot is never re-matched
    rendered: str = _SLOT_RE.sub(_fill, template)

    missing = [name for name in (OLD_TEXT_SLOT, NEW_TEXT_SLOT) if name not in seen]
    if missing:
        raise TemplateError(f"Template has no slot for: {', '.join(missing)}")
    return rendered


def render_diff(template_path: Path, mismatch: Mismatch) -> RenderedDiff:
    """Render ``template_path`` for ``mismatch`` into its mismatch directory.

    Writes ``<mismatch_dir>/<template filename>`` (the filled page) and
    ``<mismatch_dir>/<recording filename>`` (the unescaped new data).

    Args:
        template_path (Path): The diff-visualization template.
        mismatch (Mismatch): The failed comparison.

    Returns:
        RenderedDiff: Paths of the written artifacts.

    Raises:
        RecordingIOError: The template could not be read or an artifact not written.
        TemplateError: The template lacks a slot.
    """
    template: str = read_text(template_path)
    content: str = fill_slots(template, mismatch.recording_data, mismatch.mismatch_data)

    html_path: Path = mismatch.mismatch_dir / template_path.name
    write_text(html_path, content)

    mismatch_path: Path = mismatch.mismatch_dir / mismatch.recording_path.name
    write_text(mismatch_path, mismatch.mismatch_data)

    logger.debug("Rendered diff %s (mismatch data at %s)", html_path, mismatch_path)
    return RenderedDiff(html_path=html_path, mismatch_path=mismatch_path)


def load_bundled_template() -> str:
    """Return the diff template shipped with the package."""
    return files(TEMPLATE_PACKAGE).joinpath(TEMPLATE_NAME).read_text(encoding="utf-8")

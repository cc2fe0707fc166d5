# topmark:header:start
#
#   project      : DataRecorder
#   file         : test_render.py
#   file_relpath : tests/test_render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HTML diff rendering: escaping, slot filling and written artifacts."""

from __future__ import annotations

from pathlib import Path

import pytest

from datarecorder.errors import MismatchError, RecordingIOError, TemplateError
from datarecorder.handlers import default_mismatch_handler, diff_mismatch_handler
from datarecorder.mismatch import Mismatch
from datarecorder.render import (
    RenderedDiff,
    escape_template_literal,
    fill_slots,
    load_bundled_template,
    render_diff,
)

TEMPLATE = """<script>
  const oldText = `placeholder old`;
  const   newText=`placeholder new`;
</script>
"""


@pytest.mark.parametrize(
    ("raw", "escaped"),
    [
        ("plain text", "plain text"),
        ("${name}", "\\${name}"),
        ("a ${x} b ${y}", "a \\${x} b \\${y}"),
        ("$x {y} ${}", "$x {y} \\${}"),
        ("price ${ unterminated", "price \\${ unterminated"),
        ("tick ` tock", "tick \\` tock"),
        ("c:\\temp", "c:\\\\temp"),
        ("<p></script><b>", "<p><\\/script><b>"),
        ("a < b / c", "a < b / c"),
    ],
)
def test_escape_template_literal(raw: str, escaped: str) -> None:
    """Placeholders, backticks, backslashes and closing tags are escaped; the rest is kept."""
    assert escape_template_literal(raw) == escaped


def test_fill_slots_keeps_script_closed() -> None:
    """Markup in the data cannot end the template's inline script early."""
    rendered: str = fill_slots(TEMPLATE, "<p></script><b>", "</SCRIPT>")

    assert rendered.count("</script>") == 1
    assert "`<p><\\/script><b>`;" in rendered


def test_fill_slots_keeps_markers() -> None:
    """Bodies are replaced while the surrounding declarations stay verbatim."""
    rendered: str = fill_slots(TEMPLATE, "old ${v}", "new")

    assert "const oldText = `old \\${v}`;" in rendered
    assert "const   newText=`new`;" in rendered
    assert "placeholder" not in rendered
    assert rendered.startswith("<script>\n") and rendered.endswith("</script>\n")


def test_fill_slots_does_not_rematch_inserted_text() -> None:
    """Text that looks like a slot is not itself filled."""
    rendered: str = fill_slots(TEMPLATE, "const newText = `x`;", "NEW")

    assert rendered.count("`NEW`;") == 1


@pytest.mark.parametrize(
    "template",
    [
        "const oldText = ``;",
        "const newText = ``;",
        "<html></html>",
    ],
)
def test_fill_slots_requires_both_slots(template: str) -> None:
    """A template lacking a slot is rejected."""
    with pytest.raises(TemplateError):
        fill_slots(template, "a", "b")


def _mismatch(tmp_path: Path, recording: str, new: str) -> Mismatch:
    mismatch_dir: Path = tmp_path / "cppmismatch-0"
    mismatch_dir.mkdir()
    return Mismatch(
        recording_data=recording,
        mismatch_data=new,
        mismatch_dir=mismatch_dir,
        recording_path=tmp_path / "recordings" / "suite_case.data",
    )


def test_render_diff_writes_artifacts(tmp_path: Path) -> None:
    """The page and the raw new data land in the mismatch directory."""
    template: Path = tmp_path / "diff.html"
    template.write_text(TEMPLATE, encoding="utf-8")
    mismatch: Mismatch = _mismatch(tmp_path, "a\n", "b ${x}\n")

    rendered: RenderedDiff = render_diff(template, mismatch)

    assert rendered.html_path == mismatch.mismatch_dir / "diff.html"
    assert rendered.mismatch_path == mismatch.mismatch_dir / "suite_case.data"
    assert rendered.mismatch_path.read_text(encoding="utf-8") == "b ${x}\n"
    assert "`b \\${x}\n`;" in rendered.html_path.read_text(encoding="utf-8")


def test_render_diff_missing_template(tmp_path: Path) -> None:
    """An unreadable template is an I/O error."""
    mismatch: Mismatch = _mismatch(tmp_path, "a", "b")

    with pytest.raises(RecordingIOError) as excinfo:
        render_diff(tmp_path / "absent.html", mismatch)
    assert excinfo.value.errno is not None


def test_diff_handler_reports_paths(tmp_path: Path) -> None:
    """The diff handler's error names the recording, the copy and the page."""
    template: Path = tmp_path / "recording_diff.html"
    template.write_text(TEMPLATE, encoding="utf-8")
    mismatch: Mismatch = _mismatch(tmp_path, "a", "b")

    error: MismatchError = diff_mismatch_handler(template, mismatch)

    assert error.recording_path == mismatch.recording_path
    assert error.mismatch_path == mismatch.mismatch_dir / "suite_case.data"
    assert error.html_diff == mismatch.mismatch_dir / "recording_diff.html"
    message: str = str(error)
    for part in ("recording_path:", "mismatch_path:", "html_diff:"):
        assert part in message


def test_default_handler_carries_data_only(tmp_path: Path) -> None:
    """The plain handler reports both variants and nothing else."""
    mismatch: Mismatch = _mismatch(tmp_path, "old", "new")

    error: MismatchError = default_mismatch_handler(mismatch)

    assert (error.recording_data, error.mismatch_data) == ("old", "new")
    assert error.recording_path is None
    assert list(mismatch.mismatch_dir.iterdir()) == []
    assert "old" in str(error) and "new" in str(error)


def test_bundled_template_has_both_slots() -> None:
    """The shipped template satisfies the slot grammar."""
    rendered: str = fill_slots(load_bundled_template(), "left", "right")

    assert "const oldText = `left`;" in rendered
    assert "const newText = `right`;" in rendered

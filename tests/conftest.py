# topmark:header:start
#
#   project      : DataRecorder
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the DataRecorder test suite.

Provides an isolated project directory as the working directory, a mismatch
store rooted inside ``tmp_path`` (so tests never touch the real temp dir), and a
factory for recorders with a fixed test identity.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from datarecorder.config import logging
from datarecorder.constants import ENV_RECORDING_DIR, ENV_TMPDIR, ENV_VISUALIZER
from datarecorder.mismatch import MismatchStore
from datarecorder.recorder import DataRecorder

RecorderFactory = Callable[..., DataRecorder]

SLOT_TEMPLATE = """<html><script>
const oldText = ``;
const newText = ``;
</script></html>
"""


@pytest.fixture(autouse=True)
def clean_recorder_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure no developer-exported DATARECORDER_* variable leaks into tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to remove environment variables.
    """
    for name in (logging.LOG_LEVEL_ENV, ENV_RECORDING_DIR, ENV_VISUALIZER, ENV_TMPDIR):
        monkeypatch.delenv(name, raising=False)


def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level so failing tests show every recorder decision.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create ``proj/test/recordings`` and make ``proj`` the working directory.

    Args:
        tmp_path (Path): Pytest temporary directory.
        monkeypatch (pytest.MonkeyPatch): Used to change the working directory.

    Returns:
        Path: The project root.
    """
    root: Path = tmp_path / "proj"
    (root / "test" / "recordings").mkdir(parents=True)
    monkeypatch.chdir(root)
    return root


@pytest.fixture
def store(tmp_path: Path) -> MismatchStore:
    """A mismatch store rooted in a private temp directory.

    Args:
        tmp_path (Path): Pytest temporary directory.

    Returns:
        MismatchStore: Store allocating below ``tmp_path / "tmp"``.
    """
    root: Path = tmp_path / "tmp"
    root.mkdir()
    return MismatchStore(root)


@pytest.fixture
def make_recorder(project: Path, store: MismatchStore) -> RecorderFactory:
    """Return a factory for recorders writing to ``test/recordings``.

    Args:
        project (Path): Project root (the cwd).
        store (MismatchStore): Private mismatch store.

    Returns:
        RecorderFactory: ``make(suite="suite", case="case") -> DataRecorder``.
    """

    def _make(suite: str = "suite", case: str = "case") -> DataRecorder:
        recorder = DataRecorder(store=store, test_identity=lambda: (suite, case))
        recorder.set_recording_dir("test/recordings")
        return recorder

    return _make


@pytest.fixture
def visualizer(project: Path) -> Path:
    """Install a minimal diff template at ``visualizer/recording_diff.html``.

    Args:
        project (Path): Project root (the cwd).

    Returns:
        Path: The template path.
    """
    path: Path = project / "visualizer" / "recording_diff.html"
    path.parent.mkdir()
    path.write_text(SLOT_TEMPLATE, encoding="utf-8")
    return path

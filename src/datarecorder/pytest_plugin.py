# topmark:header:start
#
#   project      : DataRecorder
#   file         : pytest_plugin.py
#   file_relpath : src/datarecorder/pytest_plugin.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""pytest integration.

Registered through the ``pytest11`` entry point, this plugin provides the
``data_recorder`` fixture: a `DataRecorder` named after the requesting test and
pointed at the project's configured recording directory (if any)::

    def test_report(data_recorder):
        data_recorder.record(build_report())
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from datarecorder.config.settings import RecorderSettings
from datarecorder.recorder import DataRecorder

if TYPE_CHECKING:
    from datarecorder.recorder import TestIdentity


def node_identity(node: pytest.Item) -> tuple[str, str]:
    """Return ``(suite, case)`` for a collected test item.

    The suite is the enclosing class name, or the module name for plain test
    functions.
    """
    cls = getattr(node, "cls", None)
    suite: str = cls.__name__ if cls is not None else Path(str(node.path)).stem
    return suite, node.name


@pytest.fixture
def data_recorder_settings() -> RecorderSettings:
    """Settings discovered from the nearest project config and the environment."""
    return RecorderSettings.discover()


@pytest.fixture
def data_recorder(
    request: pytest.FixtureRequest, data_recorder_settings: RecorderSettings
) -> DataRecorder:
    """A recorder for the requesting test.

    The recording directory is taken from ``recording_dir`` in the project
    settings when configured; otherwise the test must call
    ``set_recording_dir()`` itself.
    """
    item: pytest.Item = request.node

    def _identity() -> tuple[str, str]:
        return node_identity(item)

    identity: TestIdentity = _identity
    recorder = DataRecorder(settings=data_recorder_settings, test_identity=identity)
    if data_recorder_settings.recording_dir is not None:
        recorder.set_recording_dir(data_recorder_settings.recording_dir)
    return recorder

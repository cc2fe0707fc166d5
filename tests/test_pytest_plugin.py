# topmark:header:start
#
#   project      : DataRecorder
#   file         : test_pytest_plugin.py
#   file_relpath : tests/test_pytest_plugin.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""pytest plugin: the ``data_recorder`` fixture and node-based filenames."""

from __future__ import annotations

from pathlib import Path

import pytest

from datarecorder.config.settings import RecorderSettings
from datarecorder.errors import MismatchError
from datarecorder.recorder import DataRecorder


@pytest.fixture
def data_recorder_settings(tmp_path: Path) -> RecorderSettings:
    """Point the plugin at private recording and mismatch directories."""
    recordings: Path = tmp_path / "recordings"
    recordings.mkdir()
    mismatches: Path = tmp_path / "tmp"
    mismatches.mkdir()
    return RecorderSettings(
        recording_dir=recordings,
        mismatch_root=mismatches,
        visualizer="datarecorder-no-visualizer-4e1d/recording_diff.html",
    )


def test_fixture_names_recording_after_module_and_test(
    data_recorder: DataRecorder, tmp_path: Path
) -> None:
    """Plain test functions use the module name as the suite."""
    assert data_recorder.recording_path == (
        tmp_path / "recordings"
        / "test_pytest_plugin_test_fixture_names_recording_after_module_and_test.data"
    )


def test_fixture_records_then_compares(data_recorder: DataRecorder, tmp_path: Path) -> None:
    """The fixture behaves like a configured recorder."""
    data_recorder.record("first\n")
    data_recorder.record("first\n")

    with pytest.raises(MismatchError):
        data_recorder.record("second\n")
    assert (tmp_path / "tmp" / "cppmismatch-0").is_dir()
    assert data_recorder.recording_path.read_text(encoding="utf-8") == "first\n"


@pytest.mark.parametrize("variant", ["a b", "c/d"])
def test_parametrized_ids_are_sanitized(data_recorder: DataRecorder, variant: str) -> None:
    """Brackets, spaces and slashes from test ids do not reach the filename."""
    name: str = data_recorder.recording_path.name

    assert "/" not in name and "[" not in name and " " not in name
    assert name.endswith(".data")
    assert variant  # keeps the parameter in the test id


class TestClassBased:
    """Tests inside a class use the class name as the suite."""

    def test_suite_is_class_name(self, data_recorder: DataRecorder) -> None:
        """The filename starts with the class name."""
        assert data_recorder.recording_filename is None
        assert data_recorder.recording_path.name == "TestClassBased_test_suite_is_class_name.data"


def test_without_recording_dir_the_recorder_is_unconfigured(
    pytestconfig: pytest.Config,
) -> None:
    """Settings without ``recording_dir`` leave the directory for the test to set."""
    recorder = DataRecorder(settings=RecorderSettings())

    assert recorder.recording_dir is None
    assert pytestconfig.pluginmanager.hasplugin("datarecorder")

# topmark:header:start
#
#   project      : DataRecorder
#   file         : test_cli.py
#   file_relpath : tests/cli/test_cli.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: version, locate, mismatches and init-visualizer."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import Result

from datarecorder.cli.exit_codes import ExitCode
from datarecorder.config.settings import RecorderSettings
from datarecorder.constants import DATARECORDER_VERSION, DEFAULT_VISUALIZER_RELPATH
from datarecorder.render import load_bundled_template

RunCli = Callable[..., Result]

pytestmark = pytest.mark.cli


def test_version_prints_installed_version(run_cli: RunCli) -> None:
    """`version` prints the package version and nothing else."""
    result = run_cli(["version"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.output.strip() == DATARECORDER_VERSION


def test_verbose_and_quiet_are_exclusive(run_cli: RunCli) -> None:
    """Combining ``-v`` and ``-q`` is a usage error."""
    result = run_cli(["-v", "-q", "version"])

    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
    assert "mutually exclusive" in result.output


def test_locate_finds_ancestor_match(run_cli: RunCli, tmp_path: Path) -> None:
    """`locate` walks up from the working directory."""
    (tmp_path / "test" / "recordings").mkdir(parents=True)

    result = run_cli(["locate", "test/recordings"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert Path(result.output.strip()) == tmp_path / "test" / "recordings"


def test_locate_defaults_to_visualizer(run_cli: RunCli, tmp_path: Path) -> None:
    """Without PATH the configured visualizer location is searched."""
    template: Path = tmp_path / DEFAULT_VISUALIZER_RELPATH
    template.parent.mkdir()
    template.write_text("", encoding="utf-8")

    result = run_cli(["locate"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert Path(result.output.strip()) == template


def test_locate_not_found_lists_trail(run_cli: RunCli, tmp_path: Path) -> None:
    """A failed search exits with FILE_NOT_FOUND and names searched paths."""
    result = run_cli(["locate", "datarecorder-nowhere-91b2"])

    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output
    assert str(tmp_path / "proj" / "datarecorder-nowhere-91b2") in result.output
    assert str(tmp_path / "datarecorder-nowhere-91b2") in result.output


def test_mismatches_list_empty(run_cli: RunCli, cli_settings: RecorderSettings) -> None:
    """An empty store is reported as such."""
    result = run_cli(["mismatches", "list"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert f"No mismatch directories in {cli_settings.mismatch_root}" in result.output


def test_mismatches_list_and_clean(run_cli: RunCli, cli_settings: RecorderSettings) -> None:
    """Directories and their files are listed, then removed by `clean`."""
    store = cli_settings.mismatch_store()
    first: Path = store.allocate()
    (first / "suite_case.data").write_text("x", encoding="utf-8")
    store.allocate()

    listed = run_cli(["mismatches", "list"])

    assert listed.exit_code == ExitCode.SUCCESS, listed.output
    assert str(first) in listed.output
    assert "  suite_case.data" in listed.output
    assert str(store.slot(1)) in listed.output

    cleaned = run_cli(["mismatches", "clean"])

    assert cleaned.exit_code == ExitCode.SUCCESS, cleaned.output
    assert "Removed 2 mismatch directories" in cleaned.output
    assert store.existing() == []


def test_init_visualizer_writes_bundled_template(run_cli: RunCli, tmp_path: Path) -> None:
    """The bundled template lands at ``visualizer/recording_diff.html``."""
    result = run_cli(["init-visualizer"])

    target: Path = tmp_path / "proj" / DEFAULT_VISUALIZER_RELPATH
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "Wrote" in result.output
    assert target.read_text(encoding="utf-8") == load_bundled_template()


def test_init_visualizer_refuses_overwrite(run_cli: RunCli, tmp_path: Path) -> None:
    """An existing template is kept unless ``--force`` is given."""
    target: Path = tmp_path / "proj" / DEFAULT_VISUALIZER_RELPATH
    target.parent.mkdir(parents=True)
    target.write_text("custom", encoding="utf-8")

    refused = run_cli(["init-visualizer"])

    assert refused.exit_code == ExitCode.CANT_CREATE, refused.output
    assert target.read_text(encoding="utf-8") == "custom"

    forced = run_cli(["init-visualizer", "--force"])

    assert forced.exit_code == ExitCode.SUCCESS, forced.output
    assert target.read_text(encoding="utf-8") == load_bundled_template()

# topmark:header:start
#
#   project      : DataRecorder
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running DataRecorder in a controlled working directory.

`run_cli` changes the process working directory to a temporary project before
invoking the Click CLI and injects explicit settings into Click's context object,
so no configuration file from the developer's checkout is ever discovered.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator, Sequence
from pathlib import Path

import pytest
from click.testing import CliRunner, Result

from datarecorder.cli.main import cli
from datarecorder.config.settings import RecorderSettings

RunCli = Callable[..., Result]


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Undo the logging setup performed by the CLI group callback."""
    root: logging.Logger = logging.getLogger()
    level: int = root.level
    handlers: list[logging.Handler] = root.handlers[:]
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def cli_settings(tmp_path: Path) -> RecorderSettings:
    """Settings whose mismatch directories live under ``tmp_path / "tmp"``.

    Args:
        tmp_path (Path): Pytest temporary directory.

    Returns:
        RecorderSettings: Settings injected into every CLI invocation.
    """
    root: Path = tmp_path / "tmp"
    root.mkdir()
    return RecorderSettings(mismatch_root=root)


@pytest.fixture
def run_cli(tmp_path: Path, cli_settings: RecorderSettings) -> RunCli:
    """Return a runner invoking the CLI from ``tmp_path / "proj"``.

    Args:
        tmp_path (Path): Pytest temporary directory.
        cli_settings (RecorderSettings): Settings injected into ``ctx.obj``.

    Returns:
        RunCli: ``run(argv) -> click.testing.Result``.
    """
    project: Path = tmp_path / "proj"
    project.mkdir()

    def _run(argv: Sequence[str]) -> Result:
        runner = CliRunner()
        cwd: str = os.getcwd()
        try:
            os.chdir(project)
            return runner.invoke(cli, list(argv), obj={"settings": cli_settings})
        finally:
            os.chdir(cwd)

    return _run

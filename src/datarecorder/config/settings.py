# topmark:header:start
#
#   project      : DataRecorder
#   file         : settings.py
#   file_relpath : src/datarecorder/config/settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Project-level recorder settings.

Settings are read from the nearest configuration file found walking upward from
a start directory:

* ``datarecorder.toml`` (top-level keys), or
* ``pyproject.toml`` with a ``[tool.datarecorder]`` table.

When both exist in the same directory, ``datarecorder.toml`` wins. Example::

    [tool.datarecorder]
    recording_dir = "test/recordings"
    visualizer = "visualizer/recording_diff.html"
    mismatch_root = "build/mismatches"

Relative ``recording_dir`` and ``mismatch_root`` values are anchored at the
directory holding the config file. Environment variables override file values:
``DATARECORDER_RECORDING_DIR``, ``DATARECORDER_VISUALIZER`` and
``DATARECORDER_TMPDIR``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from datarecorder.config.logging import get_logger
from datarecorder.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_VISUALIZER_RELPATH,
    ENV_RECORDING_DIR,
    ENV_TMPDIR,
    ENV_VISUALIZER,
    MAX_ALLOCATION_RETRIES,
    MAX_MISMATCH_SLOTS,
    MISMATCH_DIR_PREFIX,
    PYPROJECT_FILE_NAME,
    TOOL_SECTION,
)
from datarecorder.errors import ConfigurationError
from datarecorder.mismatch import MismatchStore
from datarecorder.paths import iter_upward

if TYPE_CHECKING:
    from collections.abc import Mapping

    from datarecorder.config.logging import DataRecorderLogger

logger: DataRecorderLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed content; empty on any read or parse failure.

    Notes:
        Errors are logged, not raised: a broken unrelated ``pyproject.toml``
        must not break recording.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        data_any: Any = tomlkit.parse(text).unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def _section_from(path: Path) -> TomlTable | None:
    data: TomlTable = load_toml_dict(path)
    if path.name == PYPROJECT_FILE_NAME:
        tool: Any = data.get("tool", {})
        section: Any = tool.get(TOOL_SECTION) if isinstance(tool, dict) else None
        return cast("TomlTable", section) if isinstance(section, dict) else None
    return data


def discover_config_file(start: Path) -> tuple[Path, TomlTable] | None:
    """Return the nearest config file at or above ``start`` and its settings table."""
    for directory in iter_upward(start):
        for name in (CONFIG_FILE_NAME, PYPROJECT_FILE_NAME):
            candidate: Path = directory / name
            if not candidate.is_file():
                continue
            section = _section_from(candidate)
            if section is not None:
                logger.debug("Using recorder settings from %s", candidate)
                return candidate, section
    return None


def _expect(table: Mapping[str, Any], key: str, kind: type, source: Path) -> Any:
    value: Any = table.get(key)
    # TOML booleans are ints to isinstance
    if isinstance(value, bool) and kind is not bool:
        raise ConfigurationError(f"'{key}' in {source} must be a {kind.__name__}, got bool")
    if value is not None and not isinstance(value, kind):
        raise ConfigurationError(
            f"'{key}' in {source} must be a {kind.__name__}, got {type(value).__name__}"
        )
    return value


@dataclass(frozen=True)
class RecorderSettings:
    """Defaults applied to recorders created by the pytest plugin and the CLI.

    Attributes:
        recording_dir (Path | None): Directory holding recordings; relative
            values are searched upward from the cwd.
        visualizer (str): Path searched upward to enable the HTML diff handler.
        mismatch_root (Path | None): Parent of mismatch directories; None means
            the system temp dir.
        mismatch_prefix (str): Mismatch directory name prefix.
        max_mismatch_slots (int): Highest mismatch index scanned.
        max_allocation_retries (int): Lost creation races tolerated.
        config_file (Path | None): File the settings were read from.
    """

    recording_dir: Path | None = None
    visualizer: str = DEFAULT_VISUALIZER_RELPATH
    mismatch_root: Path | None = None
    mismatch_prefix: str = MISMATCH_DIR_PREFIX
    max_mismatch_slots: int = MAX_MISMATCH_SLOTS
    max_allocation_retries: int = MAX_ALLOCATION_RETRIES
    config_file: Path | None = None

    @classmethod
    def from_toml_dict(cls, table: Mapping[str, Any], config_file: Path) -> RecorderSettings:
        """Build settings from a ``[tool.datarecorder]``-style table.

        Raises:
            ConfigurationError: A key holds a value of the wrong type.
        """
        base: Path = config_file.parent
        settings = cls(config_file=config_file)

        recording_dir = _expect(table, "recording_dir", str, config_file)
        if recording_dir:
            settings = replace(settings, recording_dir=base / recording_dir)
        visualizer = _expect(table, "visualizer", str, config_file)
        if visualizer:
            settings = replace(settings, visualizer=visualizer)
        mismatch_root = _expect(table, "mismatch_root", str, config_file)
        if mismatch_root:
            settings = replace(settings, mismatch_root=base / mismatch_root)
        prefix = _expect(table, "mismatch_prefix", str, config_file)
        if prefix:
            settings = replace(settings, mismatch_prefix=prefix)
        slots = _expect(table, "max_mismatch_slots", int, config_file)
        if slots is not None:
            settings = replace(settings, max_mismatch_slots=slots)
        retries = _expect(table, "max_allocation_retries", int, config_file)
        if retries is not None:
            settings = replace(settings, max_allocation_retries=retries)
        return settings

    def with_env(self, environ: Mapping[str, str] | None = None) -> RecorderSettings:
        """Return a copy with environment overrides applied."""
        env: Mapping[str, str] = os.environ if environ is None else environ
        settings = self
        if env.get(ENV_RECORDING_DIR):
            settings = replace(settings, recording_dir=Path(env[ENV_RECORDING_DIR]))
        if env.get(ENV_VISUALIZER):
            settings = replace(settings, visualizer=env[ENV_VISUALIZER])
        if env.get(ENV_TMPDIR):
            settings = replace(settings, mismatch_root=Path(env[ENV_TMPDIR]))
        return settings

    @classmethod
    def discover(cls, start: Path | None = None) -> RecorderSettings:
        """Load settings from the nearest config file and the environment.

        Args:
            start (Path | None): Directory to search from; defaults to the cwd.

        Returns:
            RecorderSettings: Discovered settings, or defaults plus env overrides.
        """
        found = discover_config_file(start or Path.cwd())
        settings = cls.from_toml_dict(found[1], found[0]) if found else cls()
        return settings.with_env()

    def mismatch_store(self) -> MismatchStore:
        """Return a `MismatchStore` configured from these settings."""
        return MismatchStore(
            self.mismatch_root,
            prefix=self.mismatch_prefix,
            max_slots=self.max_mismatch_slots,
            max_retries=self.max_allocation_retries,
        )

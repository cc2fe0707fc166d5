# topmark:header:start
#
#   project      : DataRecorder
#   file         : recorder.py
#   file_relpath : src/datarecorder/recorder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Record data on the first run and compare against the recording afterwards.

Example:
    ```python
    recorder = DataRecorder()
    recorder.set_recording_dir("test/recordings")
    recorder.record(render_report())  # raises MismatchError on a difference
    ```

Protocol of ``record(data)``:

1. The recording directory must be set (`ConfigurationError` otherwise).
2. The filename (default ``<suite>_<case>.data`` from the current test) and the
   mismatch handler are resolved once and memoized. Without a custom handler,
   the HTML diff handler is chosen when ``visualizer/recording_diff.html`` is
   found upward from the cwd, the plain handler otherwise.
3. A missing recording is created with ``data`` verbatim: a missing baseline is
   not a failure.
4. An existing recording is read and compared by exact string equality. On a
   difference a mismatch directory is allocated, the handler is invoked once,
   and the exception it returns is raised. The recording itself is never
   overwritten.
"""

from __future__ import annotations

import os
import re
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Callable

from datarecorder.config.logging import get_logger
from datarecorder.config.settings import RecorderSettings
from datarecorder.constants import DEFAULT_RECORDING_EXTENSION
from datarecorder.errors import ConfigurationError, PathResolutionError
from datarecorder.handlers import default_mismatch_handler, make_diff_handler
from datarecorder.mismatch import Mismatch
from datarecorder.paths import find_upward, resolve_recording_dir
from datarecorder.utils.file import read_text, write_text

if TYPE_CHECKING:
    from collections.abc import Sequence
    from os import PathLike

    from datarecorder.config.logging import DataRecorderLogger
    from datarecorder.mismatch import MismatchHandler, MismatchStore

logger: DataRecorderLogger = get_logger(__name__)

# Returns the (suite, case) names of the running test.
TestIdentity = Callable[[], "tuple[str, str]"]

_UNSAFE_FILENAME_CHARS: re.Pattern[str] = re.compile(r"[^\w.-]")


def pytest_current_test() -> tuple[str, str]:
    """Return ``(suite, case)`` for the test pytest is currently running.

    Parses ``PYTEST_CURRENT_TEST`` (``tests/test_mod.py::TestCls::test_x (call)``).
    The suite is the innermost class, or the module name for plain test functions.

    Raises:
        ConfigurationError: No test is running.
    """
    current: str = os.environ.get("PYTEST_CURRENT_TEST", "")
    nodeid: str = current.rsplit(" (", 1)[0]
    parts: list[str] = nodeid.split("::")
    if len(parts) < 2:
        raise ConfigurationError(
            "Cannot derive a recording filename outside a running test; "
            "call set_recording_filename() instead"
        )
    suite: str = parts[-2] if len(parts) > 2 else Path(parts[0]).stem
    return suite, parts[-1]


def validate_recording_filename(filename: str) -> None:
    """Check that ``filename`` is a bare name with a non-empty extension.

    ``".x"`` is accepted; ``""``, ``"name"`` and ``"name."`` are not.

    Raises:
        ConfigurationError: The filename is malformed.
    """
    _, dot, extension = filename.rpartition(".")
    if not dot or not extension:
        raise ConfigurationError(
            f"Recording filename must have an extension (e.g. '.json'): {filename!r}"
        )
    if "/" in filename or "\\" in filename:
        raise ConfigurationError(f"Recording filename must not contain a path: {filename!r}")


class HandlerState(Enum):
    """Whether the mismatch handler has been chosen yet."""

    UNRESOLVED = "unresolved"
    RESOLVED = "resolved"


class DataRecorder:
    """Golden-file recorder for a single recording.

    Args:
        settings (RecorderSettings | None): Visualizer lookup path and mismatch
            directory layout. Defaults to built-in settings (no file I/O).
        test_identity (TestIdentity | None): Source of ``(suite, case)`` names for
            the default filename. Defaults to `pytest_current_test`.
        store (MismatchStore | None): Allocator for mismatch directories.
            Defaults to ``settings.mismatch_store()``.
    """

    def __init__(
        self,
        *,
        settings: RecorderSettings | None = None,
        test_identity: TestIdentity | None = None,
        store: MismatchStore | None = None,
    ) -> None:
        self.settings: RecorderSettings = settings or RecorderSettings()
        self.store: MismatchStore = store or self.settings.mismatch_store()
        self._test_identity: TestIdentity = test_identity or pytest_current_test
        self._recording_dir: Path | None = None
        self._recording_filename: str | None = None
        self._on_mismatch: MismatchHandler | None = None
        self._handler_state: HandlerState = HandlerState.UNRESOLVED

    @property
    def recording_dir(self) -> Path | None:
        """The resolved recording directory, if set."""
        return self._recording_dir

    @property
    def recording_filename(self) -> str | None:
        """The recording filename, if set or already derived."""
        return self._recording_filename

    @property
    def handler_state(self) -> HandlerState:
        """Resolution state of the mismatch handler."""
        return self._handler_state

    @property
    def recording_path(self) -> Path:
        """``recording_dir / recording_filename``, deriving the filename if needed.

        Raises:
            ConfigurationError: The recording directory is not set.
        """
        if self._recording_dir is None:
            raise ConfigurationError(
                "Recording directory is not set; call set_recording_dir() first"
            )
        if self._recording_filename is None:
            self._recording_filename = self.testname_as_filename()
            logger.debug("Recording filename not set, using %s", self._recording_filename)
        return self._recording_dir / self._recording_filename

    def set_recording_dir(self, recording_dir: str | PathLike[str]) -> None:
        """Set the directory that holds the recording.

        Absolute paths are used as is. Relative paths are searched upward from
        the cwd (see [`datarecorder.paths.find_upward`][]). The directory must
        already exist.

        Single-component names such as ``"recordings"`` are searched upward
        too: they are not pinned to ``cwd / name``. A test run from a
        subdirectory therefore finds ``recordings/`` in an ancestor, and a
        ``recordings/`` in the cwd shadows any further up.

        Raises:
            ConfigurationError: The path is empty or not a directory.
            PathResolutionError: A relative path was not found upward.
        """
        self._recording_dir = resolve_recording_dir(recording_dir)
        logger.debug("Recording directory set to %s", self._recording_dir)

    def set_recording_filename(self, filename: str) -> None:
        """Set the recording filename instead of deriving it from the test name.

        Raises:
            ConfigurationError: The filename has no extension or contains a path.
        """
        validate_recording_filename(filename)
        self._recording_filename = filename

    def on_mismatch(self, handler: MismatchHandler) -> None:
        """Use ``handler`` instead of the default mismatch handler."""
        self._on_mismatch = handler
        self._handler_state = HandlerState.RESOLVED

    def testname_as_filename(self) -> str:
        """Return ``<suite>_<case>.data`` for the running test.

        Characters that are unsafe in filenames (path separators, brackets from
        parametrized test ids, whitespace) are replaced with ``_``.

        Raises:
            ConfigurationError: The suite or case name is empty.
        """
        suite, case = self._test_identity()
        if not suite or not case:
            raise ConfigurationError(
                f"Test identity must be non-empty (suite={suite!r}, case={case!r})"
            )
        name = f"{suite}_{case}"
        return _UNSAFE_FILENAME_CHARS.sub("_", name) + DEFAULT_RECORDING_EXTENSION

    def record(self, data: str | Sequence[str]) -> None:
        """Record ``data``, or compare it with the existing recording.

        A sequence of strings is recorded as its lines, each followed by a
        newline (including the last).

        Raises:
            ConfigurationError: The recording directory is not set or the
                filename cannot be derived.
            RecordingIOError: The recording could not be read or written.
            DirectoryAllocationError: No mismatch directory could be created.
            BaseException: Whatever the mismatch handler returned (by default
                `MismatchError`), when the data differs.
        """
        error = self.check(data)
        if error is not None:
            raise error

    def check(self, data: str | Sequence[str]) -> BaseException | None:
        """Like `record`, but return the mismatch handler's result instead of raising it.

        Returns:
            BaseException | None: None when the recording was created or matched.
        """
        text: str = data if isinstance(data, str) else "".join(f"{line}\n" for line in data)

        recording_path: Path = self.recording_path
        handler: MismatchHandler = self._resolve_handler()

        if not recording_path.exists():
            logger.debug("Recording file does not exist, creating %s", recording_path)
            write_text(recording_path, text)
            return None

        logger.debug("Recording file already exists: %s", recording_path)
        recording_data: str = read_text(recording_path)
        if text == recording_data:
            logger.debug("No mismatch found")
            return None

        mismatch = Mismatch(
            recording_data=recording_data,
            mismatch_data=text,
            mismatch_dir=self.store.allocate(),
            recording_path=recording_path,
        )
        logger.info("Mismatch found for %s (artifacts: %s)", recording_path, mismatch.mismatch_dir)
        return handler(mismatch)

    def _resolve_handler(self) -> MismatchHandler:
        if self._handler_state is HandlerState.UNRESOLVED:
            self._on_mismatch = self._default_handler()
            self._handler_state = HandlerState.RESOLVED
        if self._on_mismatch is None:
            raise ConfigurationError("Mismatch handler not set")
        return self._on_mismatch

    def _default_handler(self) -> MismatchHandler:
        try:
            visualizer: Path = find_upward(self.settings.visualizer)
        except PathResolutionError as exc:
            logger.debug("Using default mismatch handler (no %s found)", exc.target)
            return default_mismatch_handler
        logger.debug("Using diff visualizer %s", visualizer)
        return make_diff_handler(visualizer)

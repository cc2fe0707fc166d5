# topmark:header:start
#
#   project      : DataRecorder
#   file         : mismatch.py
#   file_relpath : src/datarecorder/mismatch.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Mismatch values and the numbered artifact directories that hold their evidence.

Each failed comparison gets a fresh ``<temp>/cppmismatch-<n>`` directory, where
``n`` is the lowest unused integer. The directories outlive the test process so
a human can inspect them afterwards.
"""

from __future__ import annotations

import re
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Callable

from datarecorder.config.logging import get_logger
from datarecorder.constants import MAX_ALLOCATION_RETRIES, MAX_MISMATCH_SLOTS, MISMATCH_DIR_PREFIX
from datarecorder.errors import DirectoryAllocationError

if TYPE_CHECKING:
    from datarecorder.config.logging import DataRecorderLogger

logger: DataRecorderLogger = get_logger(__name__)


@dataclass(frozen=True)
class Mismatch:
    """One failed comparison, handed to the mismatch handler.

    Attributes:
        recording_data (str): Data stored in the recording.
        mismatch_data (str): Data that was produced.
        mismatch_dir (Path): Freshly allocated directory for artifacts.
        recording_path (Path): Where the recording is stored.
    """

    recording_data: str
    mismatch_data: str
    mismatch_dir: Path
    recording_path: Path


# A mismatch handler maps a mismatch to the exception ``record()`` raises.
MismatchHandler = Callable[[Mismatch], BaseException]


class MismatchStore:
    """Allocate, list and clean numbered mismatch directories.

    Args:
        root (Path | None): Parent directory; defaults to the system temp dir.
        prefix (str): Directory name prefix.
        max_slots (int): Highest index scanned before giving up.
        max_retries (int): Lost creation races tolerated before giving up.
    """

    def __init__(
        self,
        root: Path | None = None,
        *,
        prefix: str = MISMATCH_DIR_PREFIX,
        max_slots: int = MAX_MISMATCH_SLOTS,
        max_retries: int = MAX_ALLOCATION_RETRIES,
    ) -> None:
        self.root: Path = root if root is not None else Path(tempfile.gettempdir())
        self.prefix = prefix
        self.max_slots = max_slots
        self.max_retries = max_retries

    def slot(self, n: int) -> Path:
        """Return the directory path for index ``n``."""
        return self.root / f"{self.prefix}{n}"

    def allocate(self) -> Path:
        """Create and return the lowest-numbered free mismatch directory.

        Existing slots are skipped. Creation uses ``mkdir(exist_ok=False)`` so a
        slot taken by a concurrent process between the existence check and the
        creation is detected and the scan moves on to the next slot.

        Returns:
            Path: The newly created directory.

        Raises:
            DirectoryAllocationError: Creation failed, the scan reached
                ``max_slots``, or more than ``max_retries`` races were lost.
        """
        races = 0
        for n in range(self.max_slots):
            candidate: Path = self.slot(n)
            if candidate.exists():
                continue
            try:
                candidate.mkdir(exist_ok=False)
            except FileExistsError:
                races += 1
                logger.debug("Lost race for %s (%d/%d)", candidate, races, self.max_retries)
                if races > self.max_retries:
                    raise DirectoryAllocationError(
                        f"Gave up allocating a mismatch directory in {self.root} "
                        f"after {races} concurrent creation conflicts"
                    ) from None
                continue
            except OSError as exc:
                raise DirectoryAllocationError(
                    f"Could not create directory {candidate}: {exc}"
                ) from exc
            logger.debug("Allocated mismatch directory %s", candidate)
            return candidate

        raise DirectoryAllocationError(
            f"No free mismatch directory in {self.root} below index {self.max_slots}"
        )

    def existing(self) -> list[Path]:
        """Return allocated mismatch directories ordered by index."""
        if not self.root.is_dir():
            return []
        pattern = re.compile(rf"^{re.escape(self.prefix)}(\d+)$")
        found: list[tuple[int, Path]] = []
        for entry in self.root.iterdir():
            m = pattern.match(entry.name)
            if m and entry.is_dir():
                found.append((int(m.group(1)), entry))
        return [p for _, p in sorted(found)]

    def clean(self) -> int:
        """Remove every allocated mismatch directory.

        Returns:
            int: Number of directories removed.
        """
        removed = 0
        for directory in self.existing():
            shutil.rmtree(directory)
            logger.debug("Removed mismatch directory %s", directory)
            removed += 1
        return removed

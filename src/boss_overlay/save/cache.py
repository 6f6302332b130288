"""
Single-entry cache of reconciled save snapshots.

Only one save file is watched per session, so a single slot keyed by
(path, modification time) is enough to skip redundant converter runs.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .models import Boss


def file_modified_at(path: Path) -> Optional[int]:
    """Return the file's modification time in nanoseconds, or None if unavailable."""
    try:
        return os.stat(path).st_mtime_ns
    except OSError:
        return None


@dataclass(frozen=True)
class SaveSnapshotCacheEntry:
    """Reconciled boss list for one version of a save file."""
    path: Path
    modified_at: int
    bosses: List[Boss]


class SaveSnapshotCache:
    """Memoizes the reconciled boss list of the watched save."""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._entry: Optional[SaveSnapshotCacheEntry] = None

    def get(self, path: Path) -> Optional[List[Boss]]:
        """Return the cached list if the file is unchanged since it was stored.

        Args:
            path: Save file path

        Returns:
            Cached bosses, or None on a miss (other path, changed or missing file)
        """
        entry = self._entry
        if entry is None or entry.path != Path(path):
            return None

        if file_modified_at(Path(path)) != entry.modified_at:
            return None

        self.logger.debug("Using cached boss list (file unchanged)")
        return list(entry.bosses)

    def put(self, path: Path, modified_at: int, bosses: List[Boss]) -> None:
        """Store or replace the cached snapshot."""
        self._entry = SaveSnapshotCacheEntry(
            path=Path(path), modified_at=modified_at, bosses=list(bosses)
        )

    def invalidate(self) -> None:
        """Drop the cached snapshot unconditionally."""
        if self._entry is not None:
            self.logger.debug("Save snapshot cache invalidated")
        self._entry = None

    @property
    def entry(self) -> Optional[SaveSnapshotCacheEntry]:
        """Current cache entry (read-only view)."""
        return self._entry

"""
Save file watcher.

Watches the active save with QFileSystemWatcher and turns every notification
into a reconciliation pass: cache lookup or conversion, reconciliation,
override merge, kill diff and emission through Qt signals.

Notifications are queued and drained by a single consumer, so a pass always
finishes (successfully or with the placeholder fallback) before the next one
starts. Queued passes are not coalesced: each one re-reads the file.
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Deque, List, Optional

from PySide6.QtCore import QFileSystemWatcher, QObject, Signal

from ..catalog.service import CatalogService
from ..overrides.merge import merge_overrides
from ..overrides.store import ManualOverrideStore
from ..save.cache import SaveSnapshotCache, file_modified_at
from ..save.converter import ConverterError, SaveConverter
from ..save.models import Boss
from ..save.reconciler import placeholder_bosses, reconcile
from .differ import find_newly_killed, needing_info


class WatchState(Enum):
    """Lifecycle of a SaveWatcher."""
    IDLE = "idle"
    WATCHING = "watching"
    RECONCILING = "reconciling"
    EMITTING = "emitting"
    STOPPED = "stopped"


class UpdateTrigger(Enum):
    """What started a reconciliation pass."""
    READY = "ready"
    CHANGE = "change"
    REFRESH = "refresh"


@dataclass(frozen=True)
class WatchUpdate:
    """Result of one reconciliation pass."""
    trigger: UpdateTrigger
    bosses: List[Boss]
    newly_killed: List[Boss] = field(default_factory=list)


class SaveWatcher(QObject):
    """Watches one save file and emits reconciled boss lists.

    The snapshot cache and the previously emitted list are owned by the
    watcher; nothing else mutates them.

    Signals:
        bosses_updated(list): full boss list after every pass
        bosses_killed(list): non-empty newly-killed subset, change passes only
        unknown_bosses_killed(list): newly killed bosses that still need info
    """

    bosses_updated = Signal(object)
    bosses_killed = Signal(object)
    unknown_bosses_killed = Signal(object)

    def __init__(
        self,
        catalog: CatalogService,
        overrides: ManualOverrideStore,
        converter: SaveConverter,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        self.catalog = catalog
        self.overrides = overrides
        self.converter = converter

        self._cache = SaveSnapshotCache()
        self._previous: List[Boss] = []
        self._pending: Deque[UpdateTrigger] = deque()
        self._draining = False

        self._file_watcher: Optional[QFileSystemWatcher] = None
        self._save_path: Optional[Path] = None
        self._state = WatchState.IDLE
        self._last_update: Optional[WatchUpdate] = None

    # === STATE ===

    @property
    def state(self) -> WatchState:
        """Current lifecycle state."""
        return self._state

    @property
    def save_path(self) -> Optional[Path]:
        """Save file being watched, if any."""
        return self._save_path

    @property
    def last_update(self) -> Optional[WatchUpdate]:
        """Result of the most recent pass."""
        return self._last_update

    @property
    def cache(self) -> SaveSnapshotCache:
        """Snapshot cache (read access for diagnostics)."""
        return self._cache

    # === WATCH CONTROL ===

    def watch(self, save_path: str | Path) -> None:
        """Start watching a save file, replacing any previous target.

        Performs the initial ready pass immediately; it is emitted without
        kill detection.
        """
        if self._save_path is not None:
            self.unwatch()

        self._save_path = Path(save_path)
        self._previous = []
        self._last_update = None

        self._file_watcher = QFileSystemWatcher(self)
        if not self._file_watcher.addPath(str(self._save_path)):
            self.logger.warning(f"Could not register file watch on {self._save_path}")
        self._file_watcher.fileChanged.connect(self._on_file_changed)

        self._state = WatchState.WATCHING
        self.logger.info(f"Watching save file: {self._save_path}")

        self._enqueue(UpdateTrigger.READY)

    def unwatch(self) -> None:
        """Stop watching; queued passes are dropped."""
        if self._file_watcher is not None:
            self._file_watcher.fileChanged.disconnect(self._on_file_changed)
            self._file_watcher.deleteLater()
            self._file_watcher = None

        if self._save_path is not None:
            self.logger.info(f"Stopped watching: {self._save_path}")

        self._pending.clear()
        self._save_path = None
        self._previous = []
        self._state = WatchState.STOPPED

    def notify_changed(self) -> None:
        """Queue a change-triggered pass (reports kills)."""
        self._enqueue(UpdateTrigger.CHANGE)

    def refresh(self) -> None:
        """Queue a forced pass; never reports kills."""
        if self._save_path is None:
            self.logger.debug("Refresh requested with no active watch")
            return
        self.logger.info("Manual refresh triggered")
        self._enqueue(UpdateTrigger.REFRESH)

    def invalidate_cache(self) -> None:
        """Forget the cached snapshot (required after catalog changes)."""
        self._cache.invalidate()

    # === QUEUE ===

    def _on_file_changed(self, path: str) -> None:
        """Handle a QFileSystemWatcher notification."""
        # Editors and games often replace the file, which drops the watch
        if self._file_watcher is not None and path not in self._file_watcher.files():
            if Path(path).exists():
                self._file_watcher.addPath(path)
        self.logger.debug(f"Save file changed: {path}")
        self.notify_changed()

    def _enqueue(self, trigger: UpdateTrigger) -> None:
        if self._save_path is None:
            return
        self._pending.append(trigger)
        self._drain()

    def _drain(self) -> None:
        """Run queued passes one at a time.

        Re-entrant calls (a slot triggering a refresh) only enqueue; the outer
        loop picks the work up after the current pass completes.
        """
        if self._draining:
            return
        self._draining = True
        try:
            while self._pending and self._save_path is not None:
                self._run_pass(self._pending.popleft())
        finally:
            self._draining = False

    # === PASS ===

    def _run_pass(self, trigger: UpdateTrigger) -> None:
        if self._save_path is None:
            return
        save_path = self._save_path

        self._state = WatchState.RECONCILING
        bosses = self._load_bosses(save_path)
        bosses = merge_overrides(bosses, self.overrides.load(save_path))

        newly_killed: List[Boss] = []
        if trigger is UpdateTrigger.CHANGE:
            newly_killed = find_newly_killed(self._previous, bosses)

        self._previous = bosses
        self._last_update = WatchUpdate(trigger, bosses, newly_killed)

        self._state = WatchState.EMITTING
        self.bosses_updated.emit(bosses)
        # A slot may have stopped the watch during emission
        if newly_killed and self._save_path is not None:
            self.logger.info(
                f"Newly killed: {', '.join(boss.name for boss in newly_killed)}"
            )
            self.bosses_killed.emit(newly_killed)
            unknown = needing_info(newly_killed)
            if unknown and self._save_path is not None:
                self.unknown_bosses_killed.emit(unknown)

        if self._save_path is not None:
            self._state = WatchState.WATCHING

    def _load_bosses(self, save_path: Path) -> List[Boss]:
        """Return the reconciled list from cache or by running the converter."""
        cached = self._cache.get(save_path)
        if cached is not None:
            return cached

        # Taken before converting so a write during conversion forces a miss
        modified_at = file_modified_at(save_path)

        try:
            tree = self.converter.convert(save_path)
            bosses = reconcile(tree, self.catalog.index)
        except ConverterError as e:
            self.logger.warning(f"Save conversion failed, using placeholder bosses: {e}")
            bosses = placeholder_bosses()

        if modified_at is not None:
            self._cache.put(save_path, modified_at, bosses)
            self.logger.debug("Boss list parsed and cached")
        return bosses

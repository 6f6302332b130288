"""
Long-lived tracking session.

TrackerSession wires the catalog, the manual override store and the save
watcher together and exposes the operations the presentation layer needs.
It is the single owner of that state; the watcher keeps exclusive ownership
of its snapshot cache and previous boss list.
"""

import logging
from pathlib import Path
from typing import List, Optional

from ..catalog.loaders import CatalogError
from ..catalog.models import CatalogEntry, is_manual_identifier
from ..catalog.service import CatalogService
from ..overrides.models import OperationResult, OverrideMap
from ..overrides.store import ManualOverrideStore
from ..save.converter import SaveConverter, UesaveConverter
from ..save.models import Boss
from ..settings import AppSettings, ConfigError
from .watcher import SaveWatcher


class TrackerSession:
    """Owns all tracking state for one running application."""

    def __init__(self, settings: AppSettings, converter: Optional[SaveConverter] = None):
        """Initialize the session from settings.

        Args:
            settings: Application settings (paths and behaviour flags)
            converter: Save converter; a UesaveConverter from settings by default
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.settings = settings

        self.catalog = CatalogService(settings.catalog_path)
        self.overrides = ManualOverrideStore(settings.overrides_dir)
        self.converter = converter or UesaveConverter(settings.converter_path)
        self.watcher = SaveWatcher(self.catalog, self.overrides, self.converter)

    # === WATCHING ===

    @property
    def save_path(self) -> Optional[Path]:
        """Save currently watched."""
        return self.watcher.save_path

    @property
    def bosses(self) -> List[Boss]:
        """Most recently emitted boss list."""
        update = self.watcher.last_update
        return list(update.bosses) if update else []

    def start_watch(self, save_path: str | Path) -> None:
        """Remember and start watching a save file.

        Raises:
            ConfigError: If the save file does not exist
        """
        path = Path(save_path)
        if not path.is_file():
            raise ConfigError(f"Save file not found: {path}")

        self.settings.last_save_path = path
        self.watcher.watch(path)

    def restore_last_watch(self) -> bool:
        """Resume watching the last save if it still exists."""
        last_save = self.settings.last_save_path
        if not last_save or not last_save.is_file():
            return False
        self.logger.info(f"Restoring last save: {last_save}")
        self.watcher.watch(last_save)
        return True

    def refresh(self) -> None:
        """Force a re-render of the boss list without kill detection."""
        self.watcher.refresh()

    def stop(self) -> None:
        """Stop watching."""
        self.watcher.unwatch()

    # === CATALOG EDITING ===

    def save_boss_info(self, entry: CatalogEntry) -> OperationResult:
        """Add or update a boss in the catalog and refresh the list.

        Editing an existing catalog boss requires `allow_boss_editing`;
        new and user-authored bosses can always be saved.
        """
        existing = self.catalog.get_entry(entry.raw_identifier)
        if existing is not None and not existing.is_manual and not self.settings.allow_boss_editing:
            return OperationResult.failed("Boss editing is disabled")

        try:
            self.catalog.upsert_entry(entry)
        except CatalogError as e:
            self.logger.error(f"Failed to save boss info: {e}")
            return OperationResult.failed(str(e))

        # Catalog write -> cache invalidation -> reconcile, in this order
        self.watcher.invalidate_cache()
        self.watcher.refresh()
        return OperationResult.ok()

    def add_manual_boss(
        self, display_name: str, zone: str, category: str = "Boss"
    ) -> OperationResult:
        """Create a user-authored boss in the given zone."""
        entry = CatalogEntry(
            raw_identifier=self.catalog.new_manual_identifier(),
            display_name=display_name,
            category=category,
            zone=zone,
        )
        return self.save_boss_info(entry)

    # === MANUAL STATES ===

    def get_manual_states(self) -> OverrideMap:
        """Overrides stored for the watched save."""
        if self.save_path is None:
            return {}
        return self.overrides.load(self.save_path)

    def set_manual_state(self, raw_identifier: str, killed: bool) -> OperationResult:
        """Toggle a boss by hand.

        Bosses detected from the save can only be toggled when
        `allow_manual_edit_auto_detected` is enabled. Toggling marks the boss
        as encountered.
        """
        if self.save_path is None:
            return OperationResult.failed("No save path provided")
        if not is_manual_identifier(raw_identifier) and not self.settings.allow_manual_edit_auto_detected:
            return OperationResult.failed("Manual edit of detected bosses is disabled")

        result = self.overrides.set_state(
            self.save_path, raw_identifier, killed=killed, encountered=True
        )
        if result.success:
            self.watcher.refresh()
        return result

    def clear_manual_states(self) -> OperationResult:
        """Delete all overrides of the watched save and refresh."""
        if self.save_path is None:
            return OperationResult.failed("No save path provided")

        result = self.overrides.clear(self.save_path)
        if result.success:
            self.watcher.refresh()
        return result

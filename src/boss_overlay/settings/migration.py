"""
Settings migration system for Boss Overlay.
"""

import logging
from typing import Any, Callable, Dict, Tuple, TYPE_CHECKING, cast

import orjson

from ..overrides.models import override_from_record
from ..overrides.store import ManualOverrideStore
from .paths import PathSettings
from .types import ConfigVersion

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

# Version 1.0 kept a single manual state file shared by all saves
LEGACY_MANUAL_STATES_FILE = "manual-boss-states.json"


class SettingsMigrator:
    """Brings stored configuration up to the current schema version.

    Steps run in sequence, one version at a time, so a 1.0 profile passes
    through every intermediate step before it is stamped as current.
    """

    def __init__(self, settings: "QSettings", paths: PathSettings):
        self.settings = settings
        self.paths = paths
        self._steps: Dict[str, Tuple[str, Callable[[], None]]] = {
            ConfigVersion.V1_0.value: (ConfigVersion.V1_1.value, self._migrate_1_0_to_1_1),
        }

    def ensure_version(self) -> None:
        """Stamp a new profile, or migrate an older one."""
        stored = str(self.settings.value("app/version", "") or "")
        target = ConfigVersion.CURRENT.value

        if not stored:
            self.settings.setValue("app/version", target)
            self.settings.setValue("app/first_run", True)
            self.settings.sync()
            logger.info("First run detected, initializing configuration")
            return

        version = stored
        while version != target and version in self._steps:
            next_version, step = self._steps[version]
            logger.info(f"Migrating configuration from {version} to {next_version}")
            step()
            version = next_version

        if version != target:
            logger.warning(f"Unknown configuration version {stored}, keeping values as they are")
            return

        if version != stored:
            self.settings.setValue("app/version", version)
            self.settings.setValue("app/migrated_from", stored)
            self.settings.sync()
            logger.info(f"Configuration migrated from {stored} to {version}")

    def _migrate_1_0_to_1_1(self) -> None:
        """Migrate from version 1.0 to 1.1 - split manual states per save."""
        logger.debug("Performing migration from 1.0 to 1.1")

        legacy_file = self.paths.overrides_dir.parent / LEGACY_MANUAL_STATES_FILE
        if not legacy_file.exists():
            return

        last_save = self.paths.last_save_path
        if not last_save:
            logger.warning(
                f"Legacy manual states found but no save is known, leaving {legacy_file} in place"
            )
            return

        try:
            data = orjson.loads(legacy_file.read_bytes())
        except (OSError, orjson.JSONDecodeError) as e:
            logger.warning(f"Could not read legacy manual states {legacy_file}: {e}")
            return
        if not isinstance(data, dict):
            logger.warning(f"Ignoring malformed legacy manual states {legacy_file}")
            return

        store = ManualOverrideStore(self.paths.overrides_dir)
        overrides = store.load(last_save)
        migrated = 0
        for key, record in cast(Dict[str, Any], data).items():
            override = override_from_record(key, record)
            # Per-save states already present take precedence
            if override is not None and key not in overrides:
                overrides[key] = override
                migrated += 1

        if not store.save(last_save, overrides).success:
            return

        try:
            legacy_file.rename(legacy_file.with_name(legacy_file.name + ".migrated"))
        except OSError as e:
            logger.warning(f"Could not rename legacy manual states {legacy_file}: {e}")
        logger.info(f"Migrated {migrated} legacy manual states to {store.path_for(last_save)}")

"""
Core settings management for Boss Overlay.
"""

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QSettings

from .base import SettingsSection
from .logging import LoggingSettings
from .migration import SettingsMigrator
from .paths import PathSettings
from .tracker import TrackerSettings
from .types import ConfigVersion, ValidationResult
from .validation import SettingsValidator

logger = logging.getLogger(__name__)

ORGANIZATION_NAME = "boss_overlay"
APPLICATION_NAME = "boss_overlay"


class AppSettings(SettingsSection):
    """
    Persistent tracker configuration.

    Values live in the platform settings store (registry, plist or INI file)
    under a per-profile group. Subsystems are reachable through `paths`,
    `tracker` and `logging`; the values the tracking session reads on every
    operation are also exposed directly.
    """

    def __init__(self, profile: str = "default", settings_file: Optional[Path] = None):
        """Open the settings store and run pending migrations.

        Args:
            profile: Group name isolating one set of settings
            settings_file: INI file to use instead of the platform store
        """
        if settings_file is not None:
            store = QSettings(str(settings_file), QSettings.Format.IniFormat)
        else:
            store = QSettings(ORGANIZATION_NAME, APPLICATION_NAME)
        super().__init__(store)

        self.profile = profile
        self.settings.beginGroup(profile)

        self._paths = PathSettings(self.settings)
        self._tracker = TrackerSettings(self.settings)
        self._logging = LoggingSettings(self.settings)

        SettingsMigrator(self.settings, self._paths).ensure_version()
        self._validator = SettingsValidator(self)

        logger.debug(f"Settings profile '{profile}' loaded from {self.settings.fileName()}")

    # === SUBSYSTEMS ===

    @property
    def paths(self) -> PathSettings:
        return self._paths

    @property
    def tracker(self) -> TrackerSettings:
        return self._tracker

    @property
    def logging(self) -> LoggingSettings:
        return self._logging

    # === VERSION AND FIRST RUN ===

    @property
    def is_first_run(self) -> bool:
        return self._get_bool("app/first_run", True)

    def set_first_run_complete(self) -> None:
        self._set("app/first_run", False)

    @property
    def version(self) -> str:
        """Configuration schema version."""
        return self._get_str("app/version", ConfigVersion.CURRENT.value)

    # === SESSION SHORTCUTS ===

    @property
    def last_save_path(self) -> Optional[Path]:
        return self._paths.last_save_path

    @last_save_path.setter
    def last_save_path(self, value: Optional[Path]) -> None:
        self._paths.last_save_path = value

    @property
    def converter_path(self) -> Optional[Path]:
        return self._paths.converter_path

    @converter_path.setter
    def converter_path(self, value: Optional[Path]) -> None:
        self._paths.converter_path = value

    @property
    def catalog_path(self) -> Path:
        return self._paths.catalog_path

    @catalog_path.setter
    def catalog_path(self, value: Optional[Path]) -> None:
        self._paths.catalog_path = value

    @property
    def overrides_dir(self) -> Path:
        return self._paths.overrides_dir

    @overrides_dir.setter
    def overrides_dir(self, value: Optional[Path]) -> None:
        self._paths.overrides_dir = value

    @property
    def allow_manual_edit_auto_detected(self) -> bool:
        return self._tracker.allow_manual_edit_auto_detected

    @allow_manual_edit_auto_detected.setter
    def allow_manual_edit_auto_detected(self, value: bool) -> None:
        self._tracker.allow_manual_edit_auto_detected = value

    @property
    def allow_boss_editing(self) -> bool:
        return self._tracker.allow_boss_editing

    @allow_boss_editing.setter
    def allow_boss_editing(self, value: bool) -> None:
        self._tracker.allow_boss_editing = value

    # === MAINTENANCE ===

    def validate(self) -> ValidationResult:
        """Check paths and tools; may clear a stale last save path."""
        return self._validator.validate()

    def get_settings_file_path(self) -> str:
        return self.settings.fileName()

    def sync(self) -> None:
        self.settings.sync()

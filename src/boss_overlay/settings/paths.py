"""
Path-related settings for Boss Overlay.
"""

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QStandardPaths

from .base import SettingsSection

logger = logging.getLogger(__name__)

CATALOG_FILE_NAME = "bossDatabase.json"
OVERRIDES_DIR_NAME = "manual-states"


def app_data_dir() -> Path:
    """Platform-specific writable application data directory.

    - Windows: %APPDATA%/<org>/boss_overlay/
    - Linux: ~/.local/share/<org>/boss_overlay/
    - macOS: ~/Library/Application Support/<org>/boss_overlay/
    """
    location = QStandardPaths.writableLocation(
        QStandardPaths.StandardLocation.AppDataLocation
    )
    if location:
        return Path(location)
    logger.debug("No writable app data location, using the home directory")
    return Path.home() / ".boss_overlay"


class PathSettings(SettingsSection):
    """Locations of the save, the converter and the tracker's own data files."""

    @property
    def last_save_path(self) -> Optional[Path]:
        """Get the save file watched most recently."""
        return self._get_path("paths/last_save")

    @last_save_path.setter
    def last_save_path(self, value: Optional[Path]) -> None:
        """Set the save file watched most recently."""
        self._set_path("paths/last_save", value)

    @property
    def converter_path(self) -> Optional[Path]:
        """Get explicit uesave binary path (None = search PATH)."""
        return self._get_path("paths/converter")

    @converter_path.setter
    def converter_path(self, value: Optional[Path]) -> None:
        """Set explicit uesave binary path."""
        self._set_path("paths/converter", value)

    @property
    def catalog_path(self) -> Path:
        """Get boss catalog file path (defaults to app data directory)."""
        return self._get_path("paths/catalog") or app_data_dir() / CATALOG_FILE_NAME

    @catalog_path.setter
    def catalog_path(self, value: Optional[Path]) -> None:
        """Set boss catalog file path."""
        self._set_path("paths/catalog", value)

    @property
    def overrides_dir(self) -> Path:
        """Get directory holding per-save manual states."""
        return self._get_path("paths/overrides") or app_data_dir() / OVERRIDES_DIR_NAME

    @overrides_dir.setter
    def overrides_dir(self, value: Optional[Path]) -> None:
        """Set directory holding per-save manual states."""
        self._set_path("paths/overrides", value)

    @property
    def default_saves_dir(self) -> Path:
        """Directory the game writes its saves to (Windows layout)."""
        local_app_data = QStandardPaths.writableLocation(
            QStandardPaths.StandardLocation.GenericDataLocation
        )
        base = Path(local_app_data) if local_app_data else Path.home() / "AppData" / "Local"
        return base / "Sandfall" / "Saved" / "SaveGames"

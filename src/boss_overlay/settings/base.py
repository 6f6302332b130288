"""
Shared QSettings accessors for settings subsystems.
"""

from pathlib import Path
from typing import Any, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

TRUE_STRINGS = ("true", "1", "yes", "on")


class SettingsSection:
    """Base class for one group of keys stored in QSettings.

    INI-backed settings return every value as a string, so readers coerce
    explicitly instead of trusting the stored type.
    """

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_str(self, key: str, default: str = "") -> str:
        value = self.settings.value(key, default)
        return default if value is None else str(value)

    def _get_bool(self, key: str, default: bool = False) -> bool:
        value: Any = self.settings.value(key, default)
        if value is None:
            return default
        if isinstance(value, str):
            return value.strip().lower() in TRUE_STRINGS
        return bool(value)

    def _get_path(self, key: str) -> Optional[Path]:
        raw = self._get_str(key)
        return Path(raw) if raw else None

    def _set(self, key: str, value: Any) -> None:
        """Write a value and flush it to storage immediately."""
        self.settings.setValue(key, value)
        self.settings.sync()

    def _set_path(self, key: str, value: Optional[Path]) -> None:
        self._set(key, str(value) if value else "")

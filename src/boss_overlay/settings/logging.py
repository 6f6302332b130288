"""
Logging-related settings for Boss Overlay.
"""

import logging
from pathlib import Path
from typing import Optional

from .base import SettingsSection
from .paths import app_data_dir

logger = logging.getLogger(__name__)

LOG_FILE_NAME = "boss_overlay.csv"
VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LEVEL = "INFO"


class LoggingSettings(SettingsSection):
    """Console and CSV file logging options.

    The file log always records DEBUG; only the console level is configurable.
    """

    # === CONSOLE ===

    @property
    def console_logging(self) -> bool:
        return self._get_bool("logging/console", True)

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._set("logging/console", value)

    @property
    def console_log_level(self) -> str:
        level = self._get_str("logging/level", DEFAULT_LEVEL).upper()
        return level if level in VALID_LEVELS else DEFAULT_LEVEL

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        level = value.upper()
        if level not in VALID_LEVELS:
            logger.warning(f"Ignoring unknown log level '{value}', keeping {self.console_log_level}")
            return
        self._set("logging/level", level)

    @property
    def console_use_colors(self) -> bool:
        return self._get_bool("logging/colors", True)

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self._set("logging/colors", value)

    # === FILE ===

    @property
    def file_logging(self) -> bool:
        return self._get_bool("logging/file", False)

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._set("logging/file", value)

    @property
    def log_file_path(self) -> Path:
        """CSV log location, under the app data directory unless overridden."""
        return self._get_path("logging/file_path") or app_data_dir() / "logs" / LOG_FILE_NAME

    @log_file_path.setter
    def log_file_path(self, value: Optional[Path]) -> None:
        self._set_path("logging/file_path", value)

"""
Settings validation system for Boss Overlay.
"""

import logging
from typing import TYPE_CHECKING

from ..save.converter import UesaveConverter
from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Check converter, catalog and last save paths.

        A vanished last save is cleared so the next start does not try to
        restore it.
        """
        result = ValidationResult()
        paths = self.settings.paths

        converter_path = paths.converter_path
        if converter_path:
            if not converter_path.is_file():
                result.errors.append(f"Converter path does not exist: {converter_path}")
        elif not UesaveConverter().is_available():
            result.warnings.append("uesave not found on PATH, placeholder bosses will be shown")

        if not paths.catalog_path.exists():
            result.warnings.append(f"Boss catalog not found, starting empty: {paths.catalog_path}")

        last_save = paths.last_save_path
        if last_save and not last_save.exists():
            result.warnings.append(f"Last save file no longer exists: {last_save}")
            paths.last_save_path = None

        for warning in result.warnings:
            logger.debug(f"Settings warning: {warning}")
        return result

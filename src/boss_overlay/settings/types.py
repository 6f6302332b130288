"""
Settings value types and exceptions for Boss Overlay.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class ConfigVersion(Enum):
    """Stored configuration schema.

    1.1 moved manual boss states from one shared file to one file per save.
    """
    V1_0 = "1.0"
    V1_1 = "1.1"
    CURRENT = V1_1


class ConfigError(Exception):
    """Raised for unusable configuration, such as a save path that does not exist."""
    pass


@dataclass
class ValidationResult:
    """Outcome of `AppSettings.validate()`; only errors make it invalid."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

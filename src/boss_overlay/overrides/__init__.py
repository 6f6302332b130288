"""
Module for user-entered manual overrides of boss states.
"""

from .models import (
    CatalogOverride,
    ManualBossOverride,
    ManualOverride,
    OverrideMap,
    OperationResult,
    make_override,
    override_from_record,
)
from .store import ManualOverrideStore
from .merge import find_override, merge_overrides

__all__ = [
    "CatalogOverride",
    "ManualBossOverride",
    "ManualOverride",
    "OverrideMap",
    "OperationResult",
    "make_override",
    "override_from_record",
    "ManualOverrideStore",
    "find_override",
    "merge_overrides",
]

"""
Module for working with the boss reference catalog.

Provides loading, indexing and editing of the curated, zone-organized
catalog that maps raw game identifiers to display information.
"""

from .service import CatalogService
from .models import (
    CatalogEntry,
    CatalogDocument,
    CatalogRecord,
    HIDDEN_ZONE,
    NO_ZONE,
    UNDEFINED_ZONE,
    PLACEHOLDER_ZONES,
    NEEDS_INFO_ZONES,
    MANUAL_BOSS_PREFIX,
    is_manual_identifier,
)
from .normalizer import normalize_identifier
from .index import CatalogIndex
from .loaders import CatalogError, CatalogFileLoader

__all__ = [
    # Main service
    "CatalogService",
    # Models
    "CatalogEntry",
    "CatalogDocument",
    "CatalogRecord",
    # Constants
    "HIDDEN_ZONE",
    "NO_ZONE",
    "UNDEFINED_ZONE",
    "PLACEHOLDER_ZONES",
    "NEEDS_INFO_ZONES",
    "MANUAL_BOSS_PREFIX",
    # Helpers
    "is_manual_identifier",
    "normalize_identifier",
    # Component classes
    "CatalogIndex",
    "CatalogFileLoader",
    "CatalogError",
]

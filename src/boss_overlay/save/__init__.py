"""
Module for reading game saves and reconciling them with the catalog.
"""

from .models import Boss, EnemyCollection, RawEnemyRecord, SaveEnemies, SaveTree
from .converter import ConverterError, SaveConverter, UesaveConverter
from .parse_tree import extract_enemies, read_collection
from .reconciler import reconcile, reconcile_enemies, placeholder_bosses
from .cache import SaveSnapshotCache, SaveSnapshotCacheEntry, file_modified_at

__all__ = [
    # Models
    "Boss",
    "EnemyCollection",
    "RawEnemyRecord",
    "SaveEnemies",
    "SaveTree",
    # Converter
    "ConverterError",
    "SaveConverter",
    "UesaveConverter",
    # Parsing and reconciliation
    "extract_enemies",
    "read_collection",
    "reconcile",
    "reconcile_enemies",
    "placeholder_bosses",
    # Cache
    "SaveSnapshotCache",
    "SaveSnapshotCacheEntry",
    "file_modified_at",
]

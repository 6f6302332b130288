"""
Extraction of enemy records from a converted save tree.

Only three collections under ``root.properties`` are read; everything else in
the tree is ignored. Missing or malformed collections count as empty.
"""

import logging
from typing import Any, Dict, List, cast

from .models import EnemyCollection, RawEnemyRecord, SaveEnemies, SaveTree

logger = logging.getLogger(__name__)


def _collection_items(tree: SaveTree, collection: EnemyCollection) -> List[Any]:
    """Return the raw `Map` list of a collection or an empty list."""
    root = tree.get("root") if isinstance(tree, dict) else None
    properties = root.get("properties") if isinstance(root, dict) else None
    if not isinstance(properties, dict):
        return []
    prop = cast(Dict[str, Any], properties).get(collection.value)
    items = prop.get("Map") if isinstance(prop, dict) else None
    return cast(List[Any], items) if isinstance(items, list) else []


def read_collection(
    tree: SaveTree, collection: EnemyCollection
) -> List[RawEnemyRecord]:
    """Read one enemy collection.

    Args:
        tree: Parsed save tree
        collection: Collection to read

    Returns:
        Records in save order; malformed pairs are skipped
    """
    records: List[RawEnemyRecord] = []
    for item in _collection_items(tree, collection):
        if not isinstance(item, dict):
            continue
        key = item.get("key")
        value = item.get("value")
        name = key.get("Name") if isinstance(key, dict) else None
        if not isinstance(name, str):
            logger.debug(f"Skipping malformed entry in {collection.value}: {item!r}")
            continue
        flag = value.get("Bool") if isinstance(value, dict) else False
        records.append(
            RawEnemyRecord(raw_identifier=name, flag=flag is True, collection=collection)
        )
    return records


def extract_enemies(tree: SaveTree) -> SaveEnemies:
    """Extract the battled, encountered and transient-battled collections."""
    enemies = SaveEnemies(
        battled=read_collection(tree, EnemyCollection.BATTLED),
        encountered=read_collection(tree, EnemyCollection.ENCOUNTERED),
        transient_battled=read_collection(tree, EnemyCollection.TRANSIENT_BATTLED),
    )
    logger.debug(
        f"Save enemies: {len(enemies.battled)} battled, "
        f"{len(enemies.encountered)} encountered, "
        f"{len(enemies.transient_battled)} transient"
    )
    return enemies

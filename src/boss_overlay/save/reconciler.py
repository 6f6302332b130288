"""
Reconciliation of save contents against the boss catalog.

Walks the catalog in display order and decides, for every entry, whether it
appears in the save (exact or hash-normalized match), whether it is killed,
and whether it should be shown at all.
"""

import logging
from typing import Dict, List, Optional

from ..catalog.index import CatalogIndex
from ..catalog.models import (
    HIDDEN_ZONE,
    NEEDS_INFO_ZONES,
    PLACEHOLDER_ZONES,
    CatalogEntry,
)
from ..catalog.normalizer import normalize_identifier
from .models import Boss, SaveEnemies, SaveTree
from .parse_tree import extract_enemies

logger = logging.getLogger(__name__)


def _build_normalized_lookup(identifiers: List[str]) -> Dict[str, str]:
    """Map normalized identifier -> exact save identifier (last one wins)."""
    lookup: Dict[str, str] = {}
    for identifier in identifiers:
        lookup[normalize_identifier(identifier)] = identifier
    return lookup


def _match_save_identifier(
    entry: CatalogEntry, save_identifiers: set[str], normalized: Dict[str, str]
) -> Optional[str]:
    """Find the save identifier matching a catalog entry, if any."""
    if entry.raw_identifier in save_identifiers:
        return entry.raw_identifier

    matched = normalized.get(normalize_identifier(entry.raw_identifier))
    if matched:
        logger.debug(f"Matched {matched} to {entry.raw_identifier} (normalized)")
    return matched


def reconcile_enemies(enemies: SaveEnemies, index: CatalogIndex) -> List[Boss]:
    """Build the ordered boss list from extracted save enemies.

    Args:
        enemies: Enemy records read from the save
        index: Catalog index providing display order and metadata

    Returns:
        Bosses in catalog order. Hidden-zone entries never appear; unseen
        entries in placeholder zones are skipped; save identifiers unknown to
        the catalog are dropped.
    """
    all_identifiers = enemies.all_identifiers()
    save_identifiers = set(all_identifiers)
    killed = enemies.killed_identifiers()
    normalized = _build_normalized_lookup(all_identifiers)

    bosses: List[Boss] = []
    for entry in index.ordered_entries():
        save_identifier = _match_save_identifier(entry, save_identifiers, normalized)

        # Hidden bosses are redacted even when present and killed
        if entry.zone == HIDDEN_ZONE:
            if save_identifier:
                logger.debug(f"Hidden boss processed: {entry.display_name} (will not appear)")
            continue

        if save_identifier:
            bosses.append(
                Boss(
                    name=entry.display_name,
                    killed=save_identifier in killed,
                    encountered=True,
                    category=entry.category,
                    zone=entry.zone,
                    raw_identifier=save_identifier,
                    needs_info=entry.zone in NEEDS_INFO_ZONES,
                )
            )
        elif entry.zone not in PLACEHOLDER_ZONES:
            bosses.append(
                Boss(
                    name=entry.display_name,
                    killed=False,
                    encountered=False,
                    category=entry.category,
                    zone=entry.zone,
                    raw_identifier=entry.raw_identifier,
                )
            )

    encountered = sum(1 for b in bosses if b.encountered)
    logger.info(
        f"Extracted {len(bosses)} bosses ({encountered} from save, "
        f"{len(bosses) - encountered} manual), {len(killed)} killed in save"
    )
    return bosses


def reconcile(tree: SaveTree, index: CatalogIndex) -> List[Boss]:
    """Reconcile a converted save tree against the catalog."""
    return reconcile_enemies(extract_enemies(tree), index)


def placeholder_bosses() -> List[Boss]:
    """Built-in list shown when the save cannot be converted."""
    return [
        Boss(name="Boss Mime", killed=True, encountered=True, category="Mime", zone="Test Zone"),
        Boss(name="Boss Petank", killed=False, encountered=True, category="Petank", zone="Test Zone"),
        Boss(name="Alpha Enemy", killed=False, encountered=False, category="Alpha", zone="Test Zone 2"),
        Boss(name="Merchant Test", killed=True, encountered=True, category="Merchant", zone="Test Zone 2"),
    ]

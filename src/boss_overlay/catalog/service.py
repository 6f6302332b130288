"""
Main service for working with the boss catalog.

Provides a high-level API for loading the catalog at startup, looking up
entries through a CatalogIndex, and adding or updating bosses.
"""

import logging
import time
from pathlib import Path
from typing import List, Optional

from .index import CatalogIndex
from .loaders import CatalogError, CatalogFileLoader
from .models import (
    FIELD_RAW_IDENTIFIER,
    MANUAL_BOSS_PREFIX,
    CatalogDocument,
    CatalogEntry,
)


class CatalogService:
    """Service owning the in-memory catalog.

    The index is replaced wholesale after every mutation, never patched, so
    readers holding the previous index keep a consistent view. Callers that
    cache reconciliation results must invalidate them after `upsert_entry()`.
    """

    def __init__(self, catalog_path: str | Path, autoload: bool = True):
        """Initialize the catalog service.

        Args:
            catalog_path: Path to the zone-organized catalog JSON file
            autoload: Load the catalog immediately
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.catalog_path = Path(catalog_path)
        self.loader = CatalogFileLoader()
        self._index = CatalogIndex()

        if autoload:
            self.load()

    @property
    def index(self) -> CatalogIndex:
        """Current catalog index."""
        return self._index

    def load(self) -> bool:
        """(Re)load the catalog from disk.

        A missing or malformed file leaves an empty catalog in place.

        Returns:
            True if the file was loaded
        """
        self.logger.info(f"Loading boss catalog from: {self.catalog_path}")
        try:
            entries = self.loader.read_entries(self.catalog_path)
        except CatalogError as e:
            self.logger.error(f"Failed to load boss catalog, using empty catalog: {e}")
            self._index = CatalogIndex()
            return False

        self._index = CatalogIndex.build(entries)
        self.logger.info(
            f"Loaded {len(self._index)} catalog entries across {len(self._index.zones())} zones"
        )
        return True

    def zones(self) -> List[str]:
        """Return zone names in catalog order."""
        return self._index.zones()

    def get_entry(self, raw_identifier: str) -> Optional[CatalogEntry]:
        """Return the entry with this exact identifier, if any."""
        return self._index.by_exact(raw_identifier)

    def upsert_entry(self, entry: CatalogEntry) -> None:
        """Add a boss to the catalog or update an existing one.

        The entry is written into `entry.zone` (created if needed). An entry
        with the same identifier in that zone is replaced in place; copies in
        other zones are removed so that a zone change moves the boss. The
        index is rebuilt afterwards.

        Args:
            entry: Entry to write

        Raises:
            CatalogError: If the catalog file cannot be read or written
        """
        if self.catalog_path.exists():
            document = self.loader.read_document(self.catalog_path)
        else:
            self.logger.info(f"Creating new catalog file: {self.catalog_path}")
            document = {}

        self._remove_from_other_zones(document, entry)

        records = document.setdefault(entry.zone, [])
        for position, record in enumerate(records):
            if record.get(FIELD_RAW_IDENTIFIER) == entry.raw_identifier:
                records[position] = entry.to_record()
                break
        else:
            records.append(entry.to_record())

        self.loader.write_document(self.catalog_path, document)
        self.logger.info(f"Boss added/updated: {entry.display_name} in {entry.zone}")

        self.load()

    def _remove_from_other_zones(
        self, document: CatalogDocument, entry: CatalogEntry
    ) -> None:
        """Drop records with the entry's identifier from every other zone."""
        for zone_name, records in document.items():
            if zone_name == entry.zone:
                continue
            kept = [r for r in records if r.get(FIELD_RAW_IDENTIFIER) != entry.raw_identifier]
            if len(kept) != len(records):
                self.logger.debug(
                    f"Moving {entry.raw_identifier} from '{zone_name}' to '{entry.zone}'"
                )
                document[zone_name] = kept

    def new_manual_identifier(self) -> str:
        """Create a fresh identifier for a user-authored boss."""
        stamp = int(time.time() * 1000)
        candidate = f"{MANUAL_BOSS_PREFIX}{stamp}"
        while self._index.by_exact(candidate) is not None:
            stamp += 1
            candidate = f"{MANUAL_BOSS_PREFIX}{stamp}"
        return candidate

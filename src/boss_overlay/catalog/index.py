"""
In-memory index over the boss catalog.

Provides CatalogIndex which keeps the flattened catalog order and two lookup
indices used by the reconciler.
"""

import logging
from typing import Dict, Iterable, List, Optional

from .models import CatalogEntry
from .normalizer import normalize_identifier


class CatalogIndex:
    """Ordered catalog with exact and normalized lookups.

    Maintains:
    - ordered: entries in zone-then-insertion order (display order)
    - by exact raw identifier
    - by normalized identifier

    When two entries normalize to the same value the first registered one
    keeps the normalized slot. An index is never mutated after construction;
    catalog changes build a new one.
    """

    def __init__(self, entries: Iterable[CatalogEntry] = ()):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        self._ordered: List[CatalogEntry] = []
        self._by_exact: Dict[str, CatalogEntry] = {}
        self._by_normalized: Dict[str, CatalogEntry] = {}

        for entry in entries:
            self._ordered.append(entry)
            self._by_exact[entry.raw_identifier] = entry

            normalized = normalize_identifier(entry.raw_identifier)
            existing = self._by_normalized.get(normalized)
            if existing is None:
                self._by_normalized[normalized] = entry
            elif existing.raw_identifier != entry.raw_identifier:
                self.logger.debug(
                    f"Normalized collision on '{normalized}': keeping "
                    f"{existing.raw_identifier}, ignoring {entry.raw_identifier}"
                )

    @classmethod
    def build(cls, entries: Iterable[CatalogEntry]) -> "CatalogIndex":
        """Build an index from entries already in catalog order."""
        return cls(entries)

    def by_exact(self, raw_identifier: str) -> Optional[CatalogEntry]:
        """Look up an entry by its exact raw identifier."""
        return self._by_exact.get(raw_identifier)

    def by_normalized(self, normalized_identifier: str) -> Optional[CatalogEntry]:
        """Look up an entry by normalized identifier (first registered wins)."""
        return self._by_normalized.get(normalized_identifier)

    def ordered_entries(self) -> List[CatalogEntry]:
        """Return a copy of all entries in display order."""
        return list(self._ordered)

    def zones(self) -> List[str]:
        """Return zone names in catalog order."""
        seen: Dict[str, None] = {}
        for entry in self._ordered:
            seen.setdefault(entry.zone, None)
        return list(seen)

    def __len__(self) -> int:
        return len(self._ordered)

"""
Data models for the boss reference catalog.

The catalog file is a JSON object mapping zone names to ordered lists of
boss records. Zone order and record order define the display order, so
everything here keeps insertion order intact.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, TypeAlias

# Raw JSON shapes as stored on disk
CatalogRecord: TypeAlias = Dict[str, Any]
"""A single catalog record: {originalName, displayName, category}."""

CatalogDocument: TypeAlias = Dict[str, List[CatalogRecord]]
"""Full catalog file: zone name -> ordered records."""

# Reserved zones
HIDDEN_ZONE = "Hidden"
NO_ZONE = "Sans zone"
UNDEFINED_ZONE = "❓ À définir"

PLACEHOLDER_ZONES = frozenset({NO_ZONE, HIDDEN_ZONE, UNDEFINED_ZONE})
"""Zones whose entries are only shown once they appear in the save."""

NEEDS_INFO_ZONES = frozenset({NO_ZONE, UNDEFINED_ZONE})
"""Zones holding entries that still lack curated display information."""

# Prefix of bosses authored by the user (never present in a save)
MANUAL_BOSS_PREFIX = "MANUAL_"

# JSON field names used by the catalog file
FIELD_RAW_IDENTIFIER = "originalName"
FIELD_DISPLAY_NAME = "displayName"
FIELD_CATEGORY = "category"


def is_manual_identifier(raw_identifier: str) -> bool:
    """Check whether an identifier belongs to a user-authored boss."""
    return raw_identifier.startswith(MANUAL_BOSS_PREFIX)


@dataclass(frozen=True)
class CatalogEntry:
    """One curated boss definition.

    Attributes:
        raw_identifier: Identifier as written by the game (may carry a hash suffix)
        display_name: Human readable name
        category: Free-form category (Boss, Mime, Petank, ...)
        zone: Zone the entry is listed under in the catalog file
    """

    raw_identifier: str
    display_name: str
    category: str
    zone: str

    @classmethod
    def from_record(cls, record: CatalogRecord, zone: str) -> "CatalogEntry":
        """Create an entry from a catalog file record.

        Args:
            record: Raw JSON record (zone is implicit from the mapping key)
            zone: Zone name the record was found under

        Returns:
            CatalogEntry instance

        Raises:
            KeyError: If the record has no identifier
        """
        raw_identifier = str(record[FIELD_RAW_IDENTIFIER])
        return cls(
            raw_identifier=raw_identifier,
            display_name=str(record.get(FIELD_DISPLAY_NAME) or raw_identifier),
            category=str(record.get(FIELD_CATEGORY) or ""),
            zone=zone,
        )

    def to_record(self) -> CatalogRecord:
        """Convert back to the on-disk record shape (without zone)."""
        return {
            FIELD_RAW_IDENTIFIER: self.raw_identifier,
            FIELD_DISPLAY_NAME: self.display_name,
            FIELD_CATEGORY: self.category,
        }

    @property
    def is_manual(self) -> bool:
        """True for user-authored bosses."""
        return is_manual_identifier(self.raw_identifier)

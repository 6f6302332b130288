"""
Data models for save contents and reconciled bosses.

Contains the raw enemy records read from a converted save and the Boss
entity emitted to the presentation layer. Bosses are immutable: every
reconciliation pass produces a new list.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional, TypeAlias

from ..catalog.models import is_manual_identifier

SaveTree: TypeAlias = Dict[str, Any]
"""Structured data produced by the converter tool from a .sav file."""


class EnemyCollection(Enum):
    """Enemy collections read from the save's root properties."""
    BATTLED = "BattledEnemies_0"
    ENCOUNTERED = "EncounteredEnemies_0"
    TRANSIENT_BATTLED = "TransientBattledEnemies_0"

    @property
    def counts_kills(self) -> bool:
        """Whether a true flag in this collection means the enemy was killed."""
        return self is not EnemyCollection.ENCOUNTERED


@dataclass(frozen=True)
class RawEnemyRecord:
    """One `{key: {Name}, value: {Bool}}` pair from a save collection."""
    raw_identifier: str
    flag: bool
    collection: EnemyCollection


@dataclass
class SaveEnemies:
    """Enemy records grouped by the collection they were read from."""
    battled: List[RawEnemyRecord] = field(default_factory=list)
    encountered: List[RawEnemyRecord] = field(default_factory=list)
    transient_battled: List[RawEnemyRecord] = field(default_factory=list)

    def all_records(self) -> List[RawEnemyRecord]:
        """All records, battled first, then encountered, then transient."""
        return self.battled + self.encountered + self.transient_battled

    def all_identifiers(self) -> List[str]:
        """Unique identifiers across all collections, first-seen order."""
        return list(dict.fromkeys(r.raw_identifier for r in self.all_records()))

    def killed_identifiers(self) -> set[str]:
        """Identifiers flagged true in a battled collection."""
        return {
            r.raw_identifier
            for r in self.all_records()
            if r.flag and r.collection.counts_kills
        }


@dataclass(frozen=True)
class Boss:
    """Reconciled boss as shown to the user.

    Attributes:
        name: Display name
        killed: Whether the boss was defeated
        encountered: False for catalog entries not yet seen in the save
        category: Catalog category
        zone: Catalog zone
        raw_identifier: Matched save identifier, or catalog identifier when unseen
        needs_info: Entry still lacks curated display information
    """
    name: str
    killed: bool
    encountered: bool
    category: Optional[str] = None
    zone: Optional[str] = None
    raw_identifier: Optional[str] = None
    needs_info: bool = False

    @property
    def is_manual(self) -> bool:
        """True for user-authored bosses."""
        return self.raw_identifier is not None and is_manual_identifier(
            self.raw_identifier
        )

    def with_state(self, killed: bool, encountered: bool) -> "Boss":
        """Return a copy with new kill/encounter flags."""
        return replace(self, killed=killed, encountered=encountered)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dict, omitting unset optional fields."""
        data: Dict[str, Any] = {
            "name": self.name,
            "killed": self.killed,
            "encountered": self.encountered,
        }
        if self.category is not None:
            data["category"] = self.category
        if self.zone is not None:
            data["zone"] = self.zone
        if self.raw_identifier is not None:
            data["rawIdentifier"] = self.raw_identifier
        if self.needs_info:
            data["needsInfo"] = True
        return data

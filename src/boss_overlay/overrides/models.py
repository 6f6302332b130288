"""
Manual override records.

Two kinds of overrides exist and are persisted differently:

- CatalogOverride: a correction of a boss coming from the catalog/save.
  Stores `killed` and optionally `encountered`.
- ManualBossOverride: state of a user-authored boss (``MANUAL_`` prefix).
  Such bosses are encountered by definition, only `killed` is stored.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, TypeAlias, Union

from ..catalog.models import is_manual_identifier

OverrideRecord: TypeAlias = Dict[str, Any]
"""On-disk override shape: {killed: bool, encountered?: bool}."""


@dataclass(frozen=True)
class CatalogOverride:
    """User correction for a catalog-sourced boss."""
    killed: bool
    encountered: Optional[bool] = None

    def to_record(self) -> OverrideRecord:
        record: OverrideRecord = {"killed": self.killed}
        if self.encountered is not None:
            record["encountered"] = self.encountered
        return record


@dataclass(frozen=True)
class ManualBossOverride:
    """State of a user-authored boss."""
    killed: bool

    @property
    def encountered(self) -> bool:
        return True

    def to_record(self) -> OverrideRecord:
        return {"killed": self.killed}


ManualOverride: TypeAlias = Union[CatalogOverride, ManualBossOverride]

OverrideMap: TypeAlias = Dict[str, ManualOverride]
"""Raw (or normalized) identifier -> override."""


def make_override(
    raw_identifier: str, killed: bool, encountered: Optional[bool] = None
) -> ManualOverride:
    """Create the override variant matching an identifier."""
    if is_manual_identifier(raw_identifier):
        return ManualBossOverride(killed=killed)
    return CatalogOverride(killed=killed, encountered=encountered)


def override_from_record(raw_identifier: str, record: Any) -> Optional[ManualOverride]:
    """Parse a persisted record.

    Args:
        raw_identifier: Key the record was stored under
        record: Raw JSON value

    Returns:
        Override variant, or None if the record is malformed
    """
    if not isinstance(record, dict):
        return None
    killed = record.get("killed")
    if not isinstance(killed, bool):
        return None
    encountered = record.get("encountered")
    if not isinstance(encountered, bool):
        encountered = None
    return make_override(raw_identifier, killed, encountered)


@dataclass
class OperationResult:
    """Outcome of a persistence operation reported to the caller."""
    success: bool
    error: Optional[str] = None

    @classmethod
    def ok(cls) -> "OperationResult":
        return cls(success=True)

    @classmethod
    def failed(cls, error: str) -> "OperationResult":
        return cls(success=False, error=error)

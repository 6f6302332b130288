"""
Merging of manual overrides into a reconciled boss list.
"""

from typing import List, Optional

from ..catalog.normalizer import normalize_identifier
from ..save.models import Boss
from .models import ManualOverride, OverrideMap


def find_override(raw_identifier: str, overrides: OverrideMap) -> Optional[ManualOverride]:
    """Look up an override by exact identifier, then by normalized identifier.

    Overrides stored under a normalized key keep applying after the game
    rotates the identifier's hash suffix.
    """
    override = overrides.get(raw_identifier)
    if override is None:
        override = overrides.get(normalize_identifier(raw_identifier))
    return override


def merge_overrides(bosses: List[Boss], overrides: OverrideMap) -> List[Boss]:
    """Apply manual overrides to bosses.

    A boss whose `raw_identifier` has an override takes its `killed` flag from
    the override; `encountered` comes from the override too unless the
    override leaves it unset, in which case the boss keeps its own value.

    Args:
        bosses: Reconciled bosses (not modified)
        overrides: Identifier -> override

    Returns:
        New list in the same order
    """
    if not overrides:
        return list(bosses)

    merged: List[Boss] = []
    for boss in bosses:
        override = find_override(boss.raw_identifier, overrides) if boss.raw_identifier else None
        if override is None:
            merged.append(boss)
            continue

        encountered = override.encountered
        merged.append(
            boss.with_state(
                killed=override.killed,
                encountered=boss.encountered if encountered is None else encountered,
            )
        )
    return merged

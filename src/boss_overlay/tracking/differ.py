"""
Detection of bosses killed between two observations.
"""

from typing import Dict, List

from ..save.models import Boss


def find_newly_killed(previous: List[Boss], current: List[Boss]) -> List[Boss]:
    """Return bosses of `current` that became killed since `previous`.

    Bosses are joined on `raw_identifier`. A boss counts as newly killed when
    it was alive in `previous` and is killed now, or when it is absent from
    `previous` and already killed (several kills collapsed into one save).
    Bosses without an identifier (built-in placeholders) are never reported.

    Args:
        previous: Last emitted list
        current: Freshly reconciled list

    Returns:
        Newly killed bosses in `current` order
    """
    previous_by_id: Dict[str, Boss] = {}
    for boss in previous:
        if boss.raw_identifier is not None:
            previous_by_id.setdefault(boss.raw_identifier, boss)

    newly_killed: List[Boss] = []
    for boss in current:
        if boss.raw_identifier is None or not boss.killed:
            continue
        before = previous_by_id.get(boss.raw_identifier)
        if before is None or not before.killed:
            newly_killed.append(boss)
    return newly_killed


def needing_info(bosses: List[Boss]) -> List[Boss]:
    """Filter bosses flagged as lacking curated information."""
    return [boss for boss in bosses if boss.needs_info]

"""
Zone grouping and progress summaries for the presentation layer.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from ..save.models import Boss

UNCATEGORIZED_ZONE = "Uncategorized"


@dataclass
class ZoneGroup:
    """Bosses of one zone with their counters."""
    zone_name: str
    bosses: List[Boss] = field(default_factory=list)

    @property
    def killed(self) -> int:
        return sum(1 for b in self.bosses if b.killed)

    @property
    def encountered(self) -> int:
        return sum(1 for b in self.bosses if b.encountered)

    @property
    def total(self) -> int:
        return len(self.bosses)


def group_by_zone(bosses: List[Boss]) -> List[ZoneGroup]:
    """Group bosses by zone, keeping the order zones first appear in."""
    groups: Dict[str, ZoneGroup] = {}
    for boss in bosses:
        zone_name = boss.zone or UNCATEGORIZED_ZONE
        if zone_name not in groups:
            groups[zone_name] = ZoneGroup(zone_name)
        groups[zone_name].bosses.append(boss)
    return list(groups.values())


def progress(bosses: List[Boss]) -> Tuple[int, int]:
    """Return (killed and encountered, total)."""
    killed = sum(1 for b in bosses if b.encountered and b.killed)
    return killed, len(bosses)


def format_kill_notification(boss: Boss) -> str:
    """Notification body for a newly killed boss."""
    if boss.zone:
        return f"{boss.name} ({boss.zone})"
    return boss.name

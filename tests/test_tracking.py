"""Tests for kill detection and zone summaries."""

from boss_overlay.save.models import Boss
from boss_overlay.tracking import (
    find_newly_killed,
    format_kill_notification,
    group_by_zone,
    needing_info,
    progress,
)
from boss_overlay.tracking.zones import UNCATEGORIZED_ZONE


def _boss(raw_identifier: str, killed: bool, **kwargs: object) -> Boss:
    return Boss(
        name=raw_identifier.title(),
        killed=killed,
        encountered=True,
        raw_identifier=raw_identifier,
        **kwargs,  # type: ignore[arg-type]
    )


class TestFindNewlyKilled:
    """Test the previous/current kill diff."""

    def test_newly_killed(self) -> None:
        previous = [_boss("a", False), _boss("b", True)]
        current = [_boss("a", True), _boss("b", True)]

        assert [b.raw_identifier for b in find_newly_killed(previous, current)] == ["a"]

    def test_unchanged_lists_report_nothing(self) -> None:
        bosses = [_boss("a", True), _boss("b", False)]
        assert find_newly_killed(bosses, bosses) == []

    def test_absent_from_previous_and_killed(self) -> None:
        current = [_boss("a", False), _boss("c", True)]
        assert [b.raw_identifier for b in find_newly_killed([_boss("a", False)], current)] == ["c"]

    def test_empty_previous_reports_all_killed(self) -> None:
        current = [_boss("a", True), _boss("b", False)]
        assert [b.raw_identifier for b in find_newly_killed([], current)] == ["a"]

    def test_revived_boss_not_reported(self) -> None:
        assert find_newly_killed([_boss("a", True)], [_boss("a", False)]) == []

    def test_bosses_without_identifier_ignored(self) -> None:
        current = [Boss("Placeholder", killed=True, encountered=True)]
        assert find_newly_killed([], current) == []

    def test_needing_info(self) -> None:
        bosses = [_boss("a", True, needs_info=True), _boss("b", True)]
        assert [b.raw_identifier for b in needing_info(bosses)] == ["a"]


class TestZones:
    """Test zone grouping and notification text."""

    def test_group_by_zone_keeps_first_seen_order(self) -> None:
        bosses = [
            _boss("a", True, zone="Lumiere"),
            _boss("b", False, zone="Monolith"),
            _boss("c", False, zone="Lumiere"),
            Boss("d", killed=False, encountered=False),
        ]

        groups = group_by_zone(bosses)

        assert [g.zone_name for g in groups] == ["Lumiere", "Monolith", UNCATEGORIZED_ZONE]
        assert (groups[0].killed, groups[0].encountered, groups[0].total) == (1, 2, 2)
        assert groups[2].encountered == 0

    def test_progress_counts_encountered_kills(self) -> None:
        bosses = [
            _boss("a", True),
            Boss("b", killed=True, encountered=False),
            _boss("c", False),
        ]
        assert progress(bosses) == (1, 3)

    def test_progress_empty(self) -> None:
        assert progress([]) == (0, 0)

    def test_format_kill_notification(self) -> None:
        assert format_kill_notification(_boss("eveque", True, zone="Lumiere")) == "Eveque (Lumiere)"
        assert format_kill_notification(Boss("Goblu", True, True)) == "Goblu"

"""Tests for manual override persistence and merging."""

from pathlib import Path

import orjson
import pytest

from boss_overlay.overrides import (
    CatalogOverride,
    ManualBossOverride,
    ManualOverrideStore,
    find_override,
    make_override,
    merge_overrides,
    override_from_record,
)
from boss_overlay.save.models import Boss

from conftest import HASH_A, HASH_B


@pytest.fixture
def store(tmp_path: Path) -> ManualOverrideStore:
    return ManualOverrideStore(tmp_path / "manual-states")


class TestOverrideRecords:
    """Test override variants and their on-disk shape."""

    def test_manual_identifier_gives_manual_override(self) -> None:
        override = make_override("MANUAL_1700000000000", killed=True, encountered=False)
        assert isinstance(override, ManualBossOverride)
        assert override.encountered is True
        assert override.to_record() == {"killed": True}

    def test_catalog_override_keeps_encountered(self) -> None:
        override = make_override("Boss_Goblu", killed=False, encountered=True)
        assert override == CatalogOverride(killed=False, encountered=True)
        assert override.to_record() == {"killed": False, "encountered": True}

    def test_catalog_override_without_encountered(self) -> None:
        assert CatalogOverride(killed=True).to_record() == {"killed": True}

    @pytest.mark.parametrize("record", [None, [], {"encountered": True}, {"killed": "yes"}])
    def test_malformed_records(self, record: object) -> None:
        assert override_from_record("Boss_Goblu", record) is None

    def test_non_bool_encountered_ignored(self) -> None:
        override = override_from_record("Boss_Goblu", {"killed": True, "encountered": 1})
        assert override == CatalogOverride(killed=True)


class TestManualOverrideStore:
    """Test per-save override files."""

    def test_path_per_save(self, store: ManualOverrideStore, tmp_path: Path) -> None:
        assert store.path_for(tmp_path / "EXPEDITION_0.sav").name == "EXPEDITION_0.json"
        assert store.path_for("EXPEDITION_1.sav") != store.path_for("EXPEDITION_0.sav")

    def test_missing_file_is_empty(self, store: ManualOverrideStore) -> None:
        assert store.load("EXPEDITION_0.sav") == {}

    def test_set_state_round_trip(self, store: ManualOverrideStore) -> None:
        result = store.set_state("EXPEDITION_0.sav", "Boss_Goblu", killed=True, encountered=True)
        store.set_state("EXPEDITION_0.sav", "MANUAL_1", killed=True)

        assert result.success
        assert store.load("EXPEDITION_0.sav") == {
            "Boss_Goblu": CatalogOverride(killed=True, encountered=True),
            "MANUAL_1": ManualBossOverride(killed=True),
        }
        assert store.load("EXPEDITION_1.sav") == {}

    def test_manual_boss_encountered_not_written(self, store: ManualOverrideStore) -> None:
        store.set_state("EXPEDITION_0.sav", "MANUAL_1", killed=False, encountered=False)

        document = orjson.loads(store.path_for("EXPEDITION_0.sav").read_bytes())

        assert document == {"MANUAL_1": {"killed": False}}

    def test_corrupt_file_is_empty(self, store: ManualOverrideStore) -> None:
        path = store.path_for("EXPEDITION_0.sav")
        path.parent.mkdir(parents=True)
        path.write_text("{not json", encoding="utf-8")

        assert store.load("EXPEDITION_0.sav") == {}

    def test_malformed_entries_skipped(self, store: ManualOverrideStore) -> None:
        path = store.path_for("EXPEDITION_0.sav")
        path.parent.mkdir(parents=True)
        path.write_bytes(orjson.dumps({"A": {"killed": True}, "B": "broken"}))

        assert list(store.load("EXPEDITION_0.sav")) == ["A"]

    def test_clear(self, store: ManualOverrideStore) -> None:
        store.set_state("EXPEDITION_0.sav", "Boss_Goblu", killed=True)

        assert store.clear("EXPEDITION_0.sav").success
        assert store.load("EXPEDITION_0.sav") == {}
        assert store.clear("EXPEDITION_0.sav").success

    def test_save_failure_is_reported(self, tmp_path: Path) -> None:
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("", encoding="utf-8")
        store = ManualOverrideStore(blocker)

        result = store.set_state("EXPEDITION_0.sav", "Boss_Goblu", killed=True)

        assert not result.success
        assert result.error


class TestMergeOverrides:
    """Test applying overrides to reconciled bosses."""

    def test_override_takes_precedence(self) -> None:
        bosses = [
            Boss("Goblu", killed=True, encountered=True, raw_identifier="Boss_Goblu"),
            Boss("Eveque", killed=False, encountered=False, raw_identifier="Boss_Eveque"),
        ]
        overrides = {
            "Boss_Goblu": CatalogOverride(killed=False),
            "Boss_Eveque": CatalogOverride(killed=True, encountered=True),
        }

        merged = merge_overrides(bosses, overrides)

        assert (merged[0].killed, merged[0].encountered) == (False, True)
        assert (merged[1].killed, merged[1].encountered) == (True, True)
        assert bosses[1].killed is False

    def test_unset_encountered_keeps_boss_value(self) -> None:
        boss = Boss("Mime", killed=False, encountered=False, raw_identifier="Mime_Lumiere")
        merged = merge_overrides([boss], {"Mime_Lumiere": CatalogOverride(killed=True)})
        assert merged[0].killed and not merged[0].encountered

    def test_manual_boss_always_encountered(self) -> None:
        boss = Boss("Mine", killed=False, encountered=False, raw_identifier="MANUAL_1")
        merged = merge_overrides([boss], {"MANUAL_1": ManualBossOverride(killed=True)})
        assert merged[0].killed and merged[0].encountered

    def test_bosses_without_identifier_untouched(self) -> None:
        boss = Boss("Placeholder", killed=False, encountered=True)
        assert merge_overrides([boss], {"X": CatalogOverride(killed=True)}) == [boss]

    def test_normalized_key_survives_hash_rotation(self) -> None:
        overrides = {"Boss_Eveque": CatalogOverride(killed=True)}
        assert find_override(f"Boss_Eveque_{HASH_B}", overrides) is not None

    def test_exact_key_preferred(self) -> None:
        exact = CatalogOverride(killed=False)
        overrides = {"Boss_Eveque": CatalogOverride(killed=True), f"Boss_Eveque_{HASH_A}": exact}
        assert find_override(f"Boss_Eveque_{HASH_A}", overrides) is exact

    def test_empty_overrides_copy_list(self) -> None:
        bosses = [Boss("A", True, True, raw_identifier="A")]
        merged = merge_overrides(bosses, {})
        assert merged == bosses and merged is not bosses

"""Unit tests for the boss catalog package."""

from pathlib import Path
from typing import Any, Dict

import orjson
import pytest

from boss_overlay.catalog import (
    CatalogEntry,
    CatalogError,
    CatalogFileLoader,
    CatalogIndex,
    CatalogService,
    normalize_identifier,
)

HASH_32 = "4DFD38854045646F8DC570BDF56675B6"
HASH_33 = HASH_32 + "7"


class TestNormalizeIdentifier:
    """Test hash suffix stripping."""

    def test_strips_32_char_segment(self) -> None:
        raw = f"ObjectID_Enemy_Level_Lumiere_C_{HASH_32}"
        assert normalize_identifier(raw) == "ObjectID_Enemy_Level_Lumiere_C"

    def test_strips_33_char_segment(self) -> None:
        assert normalize_identifier(f"Boss_Eveque_{HASH_33}") == "Boss_Eveque"

    def test_other_lengths_unchanged(self) -> None:
        for raw in ("Boss_Goblu", f"Boss_{HASH_32[:31]}", f"Boss_{HASH_33}X", "Merchant_Grandis"):
            assert normalize_identifier(raw) == raw

    def test_only_last_segment_is_considered(self) -> None:
        raw = f"Boss_{HASH_32}_Phase2"
        assert normalize_identifier(raw) == raw

    def test_empty_identifier(self) -> None:
        assert normalize_identifier("") == ""

    def test_hash_variants_compare_equal(self) -> None:
        old = f"E_1_{HASH_32}"
        new = "E_1_ABCDEF0123456789ABCDEF0123456789"
        assert normalize_identifier(old) == normalize_identifier(new) == "E_1"


class TestCatalogFileLoader:
    """Test reading and writing the catalog document."""

    def test_read_entries_flattens_in_zone_order(self, catalog_file: Path) -> None:
        entries = CatalogFileLoader().read_entries(catalog_file)

        assert [e.zone for e in entries] == [
            "Lumiere", "Lumiere", "Lumiere", "Hidden",
            "Sans zone", "Sans zone", "Old Lumiere",
        ]
        assert entries[1] == CatalogEntry("Boss_Goblu", "Goblu", "Boss", "Lumiere")

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(CatalogError):
            CatalogFileLoader().read_document(tmp_path / "missing.json")

    def test_malformed_file_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        with pytest.raises(CatalogError):
            CatalogFileLoader().read_document(path)

    def test_record_without_identifier_skipped(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.json"
        path.write_bytes(orjson.dumps({"Zone": [{"displayName": "Nobody"}, {"originalName": "A"}]}))

        entries = CatalogFileLoader().read_entries(path)

        assert [e.raw_identifier for e in entries] == ["A"]
        assert entries[0].display_name == "A"

    def test_write_document_round_trip(self, tmp_path: Path) -> None:
        loader = CatalogFileLoader()
        document: Dict[str, Any] = {"Zone B": [{"originalName": "b"}], "Zone A": [{"originalName": "a"}]}
        path = tmp_path / "nested" / "catalog.json"

        loader.write_document(path, document)

        assert list(loader.read_document(path)) == ["Zone B", "Zone A"]


class TestCatalogIndex:
    """Test exact, normalized and ordered lookups."""

    def test_lookups(self) -> None:
        entry = CatalogEntry(f"Boss_Eveque_{HASH_32}", "Eveque", "Boss", "Lumiere")
        index = CatalogIndex.build([entry])

        assert index.by_exact(entry.raw_identifier) is entry
        assert index.by_exact("Boss_Eveque") is None
        assert index.by_normalized("Boss_Eveque") is entry

    def test_normalized_collision_first_registered_wins(self) -> None:
        first = CatalogEntry(f"Boss_X_{HASH_32}", "First", "Boss", "A")
        second = CatalogEntry(f"Boss_X_{'F' * 32}", "Second", "Boss", "B")

        index = CatalogIndex.build([first, second])

        assert index.by_normalized("Boss_X") is first
        assert index.by_exact(second.raw_identifier) is second

    def test_ordered_entries_and_zones(self, catalog_file: Path) -> None:
        index = CatalogIndex.build(CatalogFileLoader().read_entries(catalog_file))

        assert len(index) == 7
        assert index.zones() == ["Lumiere", "Hidden", "Sans zone", "Old Lumiere"]
        assert index.ordered_entries()[0].display_name == "Eveque"

    def test_ordered_entries_is_a_copy(self) -> None:
        index = CatalogIndex.build([CatalogEntry("A", "A", "Boss", "Z")])
        index.ordered_entries().clear()
        assert len(index.ordered_entries()) == 1


class TestCatalogService:
    """Test loading and editing through the service."""

    def test_load(self, catalog_file: Path) -> None:
        service = CatalogService(catalog_file)
        assert len(service.index) == 7
        assert service.get_entry("Boss_Goblu") is not None

    def test_missing_catalog_gives_empty_index(self, tmp_path: Path) -> None:
        service = CatalogService(tmp_path / "missing.json")
        assert len(service.index) == 0
        assert service.zones() == []

    def test_upsert_adds_to_new_zone(self, catalog_file: Path) -> None:
        service = CatalogService(catalog_file)
        old_index = service.index

        service.upsert_entry(CatalogEntry("Boss_Renoir", "Renoir", "Boss", "Monolith"))

        assert service.index is not old_index
        assert service.zones()[-1] == "Monolith"
        assert service.get_entry("Boss_Renoir") == CatalogEntry("Boss_Renoir", "Renoir", "Boss", "Monolith")

    def test_upsert_updates_in_place(self, catalog_file: Path) -> None:
        service = CatalogService(catalog_file)

        service.upsert_entry(CatalogEntry("Boss_Goblu", "Goblu the Great", "Boss", "Lumiere"))

        names = [e.display_name for e in service.index.ordered_entries() if e.zone == "Lumiere"]
        assert names == ["Eveque", "Goblu the Great", "Lumiere Mime"]

    def test_upsert_moves_between_zones(self, catalog_file: Path) -> None:
        service = CatalogService(catalog_file)

        service.upsert_entry(CatalogEntry("Enemy_Unsorted", "Sorted", "Boss", "Lumiere"))

        matches = [e for e in service.index.ordered_entries() if e.raw_identifier == "Enemy_Unsorted"]
        assert len(matches) == 1
        assert matches[0].zone == "Lumiere"

        document = orjson.loads(catalog_file.read_bytes())
        assert document["Lumiere"][-1] == {
            "originalName": "Enemy_Unsorted",
            "displayName": "Sorted",
            "category": "Boss",
        }

    def test_upsert_creates_missing_catalog(self, tmp_path: Path) -> None:
        path = tmp_path / "data" / "bossDatabase.json"
        service = CatalogService(path)

        service.upsert_entry(CatalogEntry("MANUAL_1", "My Boss", "Boss", "Custom"))

        assert path.exists()
        assert service.get_entry("MANUAL_1") is not None

    def test_new_manual_identifier_is_unique(self, tmp_path: Path) -> None:
        service = CatalogService(tmp_path / "catalog.json")
        first = service.new_manual_identifier()
        service.upsert_entry(CatalogEntry(first, "One", "Boss", "Custom"))

        second = service.new_manual_identifier()

        assert first.startswith("MANUAL_")
        assert second != first

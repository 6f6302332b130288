"""Shared fixtures for Boss Overlay tests."""

import os
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

import orjson
import pytest
from PySide6.QtCore import QCoreApplication

from boss_overlay.save.converter import ConverterError
from boss_overlay.save.models import SaveTree

HASH_A = "4DFD38854045646F8DC570BDF56675B6"
HASH_B = "0123456789ABCDEF0123456789ABCDEF"

TreeFactory = Callable[..., SaveTree]


def _map(pairs: Iterable[Tuple[str, bool]]) -> Dict[str, Any]:
    return {"Map": [{"key": {"Name": name}, "value": {"Bool": flag}} for name, flag in pairs]}


def build_tree(
    battled: Iterable[Tuple[str, bool]] = (),
    encountered: Iterable[Tuple[str, bool]] = (),
    transient: Iterable[Tuple[str, bool]] = (),
) -> SaveTree:
    """Build a converter-shaped save tree."""
    return {
        "header": {"save_game_version": 3},
        "root": {
            "save_game_type": "/Script/Sandfall.SaveGame",
            "properties": {
                "BattledEnemies_0": _map(battled),
                "EncounteredEnemies_0": _map(encountered),
                "TransientBattledEnemies_0": _map(transient),
            },
        },
    }


class FakeConverter:
    """Converter returning a preset tree, counting invocations."""

    def __init__(self, tree: Optional[SaveTree] = None):
        self.tree = tree if tree is not None else build_tree()
        self.error: Optional[str] = None
        self.calls: List[Path] = []

    def convert(self, save_path: Path) -> SaveTree:
        self.calls.append(save_path)
        if self.error:
            raise ConverterError(self.error)
        return self.tree


@pytest.fixture(scope="session")
def qt_app() -> QCoreApplication:
    """Qt application instance required by QObject-based components."""
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    return app  # type: ignore[return-value]


@pytest.fixture
def make_tree() -> TreeFactory:
    return build_tree


@pytest.fixture
def fake_converter() -> FakeConverter:
    return FakeConverter()


@pytest.fixture
def catalog_document() -> Dict[str, List[Dict[str, str]]]:
    """Small catalog covering regular, placeholder and hidden zones."""
    return {
        "Lumiere": [
            {"originalName": f"Boss_Eveque_{HASH_A}", "displayName": "Eveque", "category": "Boss"},
            {"originalName": "Boss_Goblu", "displayName": "Goblu", "category": "Boss"},
            {"originalName": "Mime_Lumiere", "displayName": "Lumiere Mime", "category": "Mime"},
        ],
        "Hidden": [
            {"originalName": "Boss_Secret", "displayName": "Secret", "category": "Boss"},
        ],
        "Sans zone": [
            {"originalName": "Enemy_Unsorted", "displayName": "Unsorted", "category": "Other"},
            {"originalName": "Enemy_NeverSeen", "displayName": "Never Seen", "category": "Other"},
        ],
        "Old Lumiere": [
            {"originalName": "Petank_Yellow", "displayName": "Yellow Petank", "category": "Petank"},
        ],
    }


@pytest.fixture
def catalog_file(tmp_path: Path, catalog_document: Dict[str, Any]) -> Path:
    path = tmp_path / "bossDatabase.json"
    path.write_bytes(orjson.dumps(catalog_document, option=orjson.OPT_INDENT_2))
    return path


@pytest.fixture
def save_file(tmp_path: Path) -> Path:
    path = tmp_path / "saves" / "EXPEDITION_0.sav"
    path.parent.mkdir(parents=True)
    path.write_bytes(b"GVAS\x00initial")
    return path


def touch_save(path: Path, content: bytes = b"GVAS\x00changed") -> None:
    """Rewrite a save and move its mtime forward so caches see the change."""
    before = os.stat(path).st_mtime_ns
    path.write_bytes(content)
    os.utime(path, ns=(before + 1_000_000_000, before + 1_000_000_000))


@pytest.fixture
def touch() -> Callable[..., None]:
    return touch_save

"""
Per-save persistence of manual overrides.

Each save file gets its own JSON file in the overrides directory, named after
the save's base name (``EXPEDITION_0.sav`` -> ``EXPEDITION_0.json``), so that
switching saves never leaks corrections between playthroughs.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, cast

import orjson

from .models import (
    ManualOverride,
    OperationResult,
    OverrideMap,
    OverrideRecord,
    make_override,
    override_from_record,
)

SAVE_SUFFIX = ".sav"


class ManualOverrideStore:
    """Loads and saves manual overrides for save files.

    Read failures degrade to an empty map; write failures are returned to the
    caller as a failed OperationResult instead of being raised.
    """

    def __init__(self, overrides_dir: str | Path):
        """Initialize the store.

        Args:
            overrides_dir: Directory holding one override file per save
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.overrides_dir = Path(overrides_dir)

    def path_for(self, save_path: str | Path) -> Path:
        """Return the override file used for a save."""
        save_name = Path(save_path).name.removesuffix(SAVE_SUFFIX)
        return self.overrides_dir / f"{save_name}.json"

    def load(self, save_path: str | Path) -> OverrideMap:
        """Load overrides for a save.

        Args:
            save_path: Path of the watched save file

        Returns:
            Identifier -> override; empty if the file is missing or unreadable
        """
        override_file = self.path_for(save_path)
        if not override_file.exists():
            return {}

        try:
            with override_file.open("rb") as f:
                data = orjson.loads(f.read())
        except (OSError, orjson.JSONDecodeError) as e:
            self.logger.warning(f"Could not load manual states from {override_file}: {e}")
            return {}

        if not isinstance(data, dict):
            self.logger.warning(f"Ignoring malformed manual states file: {override_file}")
            return {}

        overrides: OverrideMap = {}
        for key, record in cast(Dict[str, Any], data).items():
            override = override_from_record(key, record)
            if override is None:
                self.logger.warning(f"Ignoring malformed manual state for {key}")
                continue
            overrides[key] = override
        return overrides

    def save(self, save_path: str | Path, overrides: OverrideMap) -> OperationResult:
        """Persist all overrides for a save, replacing the previous file."""
        override_file = self.path_for(save_path)
        document: Dict[str, OverrideRecord] = {
            key: override.to_record() for key, override in overrides.items()
        }
        try:
            override_file.parent.mkdir(parents=True, exist_ok=True)
            override_file.write_bytes(orjson.dumps(document, option=orjson.OPT_INDENT_2))
        except OSError as e:
            self.logger.error(f"Could not save manual states to {override_file}: {e}")
            return OperationResult.failed(str(e))

        self.logger.debug(f"Saved {len(document)} manual states to {override_file}")
        return OperationResult.ok()

    def set_state(
        self,
        save_path: str | Path,
        raw_identifier: str,
        killed: bool,
        encountered: Optional[bool] = None,
    ) -> OperationResult:
        """Set one override and persist the whole map."""
        overrides = self.load(save_path)
        override: ManualOverride = make_override(raw_identifier, killed, encountered)
        overrides[raw_identifier] = override
        return self.save(save_path, overrides)

    def clear(self, save_path: str | Path) -> OperationResult:
        """Delete all overrides of a save."""
        override_file = self.path_for(save_path)
        try:
            override_file.unlink(missing_ok=True)
        except OSError as e:
            self.logger.error(f"Failed to clear manual states {override_file}: {e}")
            return OperationResult.failed(str(e))

        self.logger.info(f"Manual states cleared for: {save_path}")
        return OperationResult.ok()

"""
File loaders for the boss catalog.

Handles reading and writing the zone-organized catalog JSON file with orjson.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, cast

import orjson

from .models import CatalogDocument, CatalogEntry, CatalogRecord


class CatalogError(Exception):
    """Raised when the catalog file cannot be read or written."""
    pass


class CatalogFileLoader:
    """Reads and writes the catalog document."""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def read_document(self, catalog_file: Path) -> CatalogDocument:
        """Read the raw zone -> records mapping.

        Args:
            catalog_file: Path to the catalog JSON file

        Returns:
            Zone-organized document, preserving file order

        Raises:
            CatalogError: If the file is missing, unreadable or malformed
        """
        try:
            with catalog_file.open("rb") as f:  # orjson works with bytes
                data = orjson.loads(f.read())
        except (OSError, orjson.JSONDecodeError) as e:
            raise CatalogError(f"Cannot read catalog {catalog_file}: {e}") from e

        if not isinstance(data, dict):
            raise CatalogError(
                f"Catalog {catalog_file} must be an object mapping zones to lists"
            )

        document: CatalogDocument = {}
        for zone_name, records in cast(Dict[str, Any], data).items():
            if not isinstance(records, list):
                raise CatalogError(
                    f"Zone '{zone_name}' in {catalog_file} is not a list"
                )
            document[str(zone_name)] = [
                cast(CatalogRecord, record)
                for record in cast(List[Any], records)
                if isinstance(record, dict)
            ]
        return document

    def read_entries(self, catalog_file: Path) -> List[CatalogEntry]:
        """Read the catalog flattened into zone-then-insertion order.

        Records without an identifier are skipped with a warning.
        """
        entries: List[CatalogEntry] = []
        for zone_name, records in self.read_document(catalog_file).items():
            for record in records:
                try:
                    entries.append(CatalogEntry.from_record(record, zone_name))
                except KeyError:
                    self.logger.warning(
                        f"Skipping catalog record without identifier in zone '{zone_name}'"
                    )
        return entries

    def write_document(self, catalog_file: Path, document: CatalogDocument) -> None:
        """Write the document back with 2-space indentation.

        Raises:
            CatalogError: If the file cannot be written
        """
        try:
            catalog_file.parent.mkdir(parents=True, exist_ok=True)
            payload = orjson.dumps(document, option=orjson.OPT_INDENT_2)
            catalog_file.write_bytes(payload)
        except (OSError, TypeError) as e:
            raise CatalogError(f"Cannot write catalog {catalog_file}: {e}") from e

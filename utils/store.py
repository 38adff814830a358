"""JSON-file persistence for the item collection.

The whole collection lives in one JSON array.  Every read loads the file
fresh and every write rewrites it in full; there is no in-process copy.

Writes are not atomic and appends are read-modify-write, so the store
assumes a single writer process.  A concurrent append between the read and
the write is lost (last writer wins).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from utils.errors import StorageError

logger = logging.getLogger(__name__)

Fingerprint = tuple[int, int]


class ItemStore:
    """Load and persist the item collection held in a single JSON file."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def load_all(self) -> list[dict[str, Any]]:
        """Return every persisted item, in insertion order.

        Raises:
            StorageError: the file is missing, unreadable, not valid JSON,
                or does not hold a JSON array.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
            data = json.loads(raw)
        except (OSError, json.JSONDecodeError) as exc:
            logger.error("read failed path=%s error=%s", self.path, exc)
            raise StorageError(f"Failed to read data: {exc}") from exc
        if not isinstance(data, list):
            logger.error("read failed path=%s error=not a JSON array", self.path)
            raise StorageError(
                f"Failed to read data: {self.path} does not contain a JSON array"
            )
        logger.debug("loaded %d item(s) from %s", len(data), self.path)
        return data

    def save_all(self, items: list[dict[str, Any]]) -> None:
        """Overwrite the persisted collection with *items*.

        Raises:
            StorageError: the file cannot be written.
        """
        try:
            # Strict JSON: NaN and Infinity are refused rather than written
            raw = json.dumps(items, indent=2, allow_nan=False)
            self.path.write_text(raw, encoding="utf-8")
        except (OSError, TypeError, ValueError) as exc:
            logger.error("write failed path=%s error=%s", self.path, exc)
            raise StorageError(f"Failed to write data: {exc}") from exc
        logger.debug("saved %d item(s) to %s", len(items), self.path)

    def append(self, item: dict[str, Any]) -> dict[str, Any]:
        """Add *item* to the end of the collection and return it."""
        items = self.load_all()
        items.append(item)
        self.save_all(items)
        return item

    def count(self) -> int:
        return len(self.load_all())

    def last_modified(self) -> Fingerprint:
        """Return ``(mtime_ns, size)`` of the data file.

        Size is part of the fingerprint because filesystems with coarse
        timestamps can give two quick successive writes the same mtime.

        Raises:
            StorageError: the file cannot be stat'ed.
        """
        try:
            st = self.path.stat()
        except OSError as exc:
            raise StorageError(f"Failed to stat data: {exc}") from exc
        return (st.st_mtime_ns, st.st_size)

    def exists(self) -> bool:
        return self.path.is_file()

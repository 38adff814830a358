"""Stats snapshot cache keyed on the data file's modification fingerprint.

The snapshot is recomputed only when the store's ``(mtime_ns, size)``
fingerprint differs from the one recorded at the last computation.
"""

import logging
import threading
from datetime import datetime, timezone
from typing import Any, Callable

from utils.errors import StorageError
from utils.stats import calculate_stats
from utils.store import Fingerprint, ItemStore

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class StatsCache:
    """Thread-safe single-entry cache for the stats snapshot.

    Usage::

        cache = StatsCache(ItemStore("data/items.json"))
        snapshot = cache.get()   # computed on first call
        snapshot = cache.get()   # same object until the file changes

    A failed recompute leaves the previous snapshot and fingerprint in place
    and re-raises.
    """

    def __init__(
        self,
        store: ItemStore,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """Initialise the cache.

        Args:
            store: Store the snapshot is computed from.
            clock: Returns the timestamp recorded as ``lastUpdated``.
        """
        self._store = store
        self._clock = clock
        self._snapshot: dict[str, Any] | None = None
        self._fingerprint: Fingerprint | None = None
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(self) -> dict[str, Any]:
        """Return the current stats snapshot, recomputing it if stale.

        Raises:
            StorageError: the data file cannot be stat'ed or read.
        """
        with self._lock:
            fingerprint = self._store.last_modified()
            if self._snapshot is not None and fingerprint == self._fingerprint:
                self._hits += 1
                return self._snapshot
            self._misses += 1
            items = self._store.load_all()
            try:
                snapshot = calculate_stats(items, self._clock())
            except (KeyError, TypeError) as exc:
                raise StorageError(f"Malformed item record: {exc}") from exc
            self._snapshot = snapshot
            self._fingerprint = fingerprint
            logger.info(
                "stats recomputed total=%d fingerprint=%s",
                snapshot["total"], fingerprint,
            )
            return snapshot

    def clear(self) -> None:
        """Drop the cached snapshot and reset counters."""
        with self._lock:
            self._snapshot = None
            self._fingerprint = None
            self._hits = 0
            self._misses = 0

    def stats(self) -> dict[str, int]:
        """Return cache statistics.

        Returns:
            Dict with keys ``hits``, ``misses``, and ``cached`` (0 or 1).
        """
        with self._lock:
            return {
                "hits": self._hits,
                "misses": self._misses,
                "cached": int(self._snapshot is not None),
            }

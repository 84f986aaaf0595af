"""In-memory key-value store with a uniform time-to-live.

Entries are stamped with a monotonic timestamp on every write. Expiry is
passive: get() treats an entry older than the ttl as absent but leaves it in
place; cleanup() is the only pass that removes expired entries in bulk.
There is no background reaper.
"""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from typing import Callable, Dict, Generic, Optional, Tuple, TypeVar

from loguru import logger

from core.errors import KeyAlreadyExistsError, KeyNotFoundError, ValidationError
from core.rwlock import ReadWriteLock

T = TypeVar("T")

# One week
DEFAULT_TTL_SECONDS = 7 * 24 * 60 * 60


@dataclass(slots=True)
class Entry(Generic[T]):
    # Stores value + monotonic time of the last write
    value: T
    inserted_at: float


class ExpiringStore(Generic[T]):
    """Thread-safe mapping of string keys to values with one shared ttl.

    Key behavior:
      - get() is a liveness check: expired entries read as absent.
      - check() and add()'s precondition are existence checks: an expired
        entry that has not been swept still counts as present.
      - update() requires the key to exist; upsert() never fails.
      - Reads share the lock; writes and cleanup() hold it exclusively.
    """

    def __init__(
        self,
        ttl_seconds: float = 0,
        *,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        ttl = float(ttl_seconds)
        if not math.isfinite(ttl) or ttl < 0:
            raise ValidationError(f"ttl_seconds must be a finite, non-negative number, got {ttl_seconds!r}")
        if ttl == 0:
            logger.debug("No ttl configured; using default of {} seconds", DEFAULT_TTL_SECONDS)
            ttl = float(DEFAULT_TTL_SECONDS)

        self._ttl = ttl
        self._clock = clock
        self._entries: Dict[str, Entry[T]] = {}
        self._lock = ReadWriteLock()

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._entries)

    def _now(self) -> float:
        # Resolve time.monotonic per call so it can be patched after construction
        if self._clock is not None:
            return self._clock()
        return time.monotonic()

    def _is_expired(self, entry: Entry[T], now: float) -> bool:
        return now - entry.inserted_at > self._ttl

    def get(self, key: str) -> Tuple[Optional[T], bool]:
        """Return ``(value, True)`` for a live entry, else ``(None, False)``."""
        with self._lock.read():
            entry = self._entries.get(key)
            if entry is None or self._is_expired(entry, self._now()):
                return None, False
            return entry.value, True

    def add(self, key: str, value: T) -> None:
        """Insert a new entry.

        Raises:
          KeyAlreadyExistsError if the key is stored, even when it has expired
          but not been swept yet. The store is left unchanged.
        """
        with self._lock.write():
            if key in self._entries:
                raise KeyAlreadyExistsError(key)
            self._entries[key] = Entry(value=value, inserted_at=self._now())

    def update(self, key: str, value: T) -> None:
        """Replace the value of an existing entry and refresh its timestamp.

        Raises:
          KeyNotFoundError if the key is not stored. The store is left unchanged.
        """
        with self._lock.write():
            if key not in self._entries:
                raise KeyNotFoundError(key)
            self._entries[key] = Entry(value=value, inserted_at=self._now())

    def update_if(self, key: str, predicate: Callable[[T], bool], value: T) -> bool:
        """Replace a live entry only when `predicate(current_value)` holds.

        The liveness check, the predicate and the write run under one
        exclusive lock, so two callers can never both succeed against the
        same current value. `predicate` must not call back into the store.

        Returns:
          True if the entry was replaced; False if it is missing, expired or
          rejected by the predicate, in which case nothing changes.
        """
        with self._lock.write():
            now = self._now()
            entry = self._entries.get(key)
            if entry is None or self._is_expired(entry, now):
                return False
            if not predicate(entry.value):
                return False
            self._entries[key] = Entry(value=value, inserted_at=now)
            return True

    def upsert(self, key: str, value: T) -> None:
        """Write the entry whether or not the key exists."""
        with self._lock.write():
            self._entries[key] = Entry(value=value, inserted_at=self._now())

    def check(self, key: str) -> bool:
        """Report whether the key is stored, ignoring expiry."""
        with self._lock.read():
            return key in self._entries

    def delete(self, key: str) -> None:
        with self._lock.write():
            self._entries.pop(key, None)

    def cleanup(self) -> None:
        """Remove every expired entry in a single exclusive pass."""
        with self._lock.write():
            now = self._now()
            expired = [k for k, e in self._entries.items() if self._is_expired(e, now)]
            for key in expired:
                del self._entries[key]
            remaining = len(self._entries)

        logger.debug("Cleanup removed {} expired entries, {} remain", len(expired), remaining)

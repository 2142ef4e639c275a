"""Per-container cache of resolved option values."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import timedelta
from typing import Any


@dataclass(frozen=True, slots=True)
class CacheEntry:
    value: Any
    expires_at: float
    source_index: int | None

    def is_fresh(self, now: float) -> bool:
        return now < self.expires_at


class ValueCache:
    """Map of option name to its last resolved value.

    Entries only disappear through expiry or explicit invalidation; the number
    of entries is bounded by the number of declared options. The map itself is
    guarded by one lock, and every option name gets its own re-entrant lock so
    callers can serialize the read-resolve-store sequence of a single option
    without blocking other options.
    """

    def __init__(self) -> None:
        self._entries: dict[str, CacheEntry] = {}
        self._key_locks: dict[str, threading.RLock] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._entries

    def lock_for(self, name: str) -> threading.RLock:
        with self._lock:
            lock = self._key_locks.get(name)
            if lock is None:
                lock = threading.RLock()
                self._key_locks[name] = lock
            return lock

    def get(self, name: str, now: float) -> CacheEntry | None:
        """Return the entry for name if it is still fresh at now."""
        with self._lock:
            entry = self._entries.get(name)
            if entry is None:
                return None
            if not entry.is_fresh(now):
                del self._entries[name]
                return None
            return entry

    def peek(self, name: str) -> CacheEntry | None:
        with self._lock:
            return self._entries.get(name)

    def put(self, name: str, value: Any, *, source_index: int | None, expires_at: float) -> CacheEntry:
        entry = CacheEntry(value=value, expires_at=expires_at, source_index=source_index)
        with self._lock:
            self._entries[name] = entry
        return entry

    def invalidate(self, name: str) -> bool:
        with self._lock:
            return self._entries.pop(name, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


def normalize_timeout(timeout: timedelta | float) -> timedelta:
    """Accept a timedelta or a number of seconds; reject negative durations."""
    if isinstance(timeout, bool):
        raise TypeError("Cache timeout must be a timedelta or a number of seconds")
    if not isinstance(timeout, timedelta):
        if not isinstance(timeout, int | float):
            raise TypeError("Cache timeout must be a timedelta or a number of seconds")
        timeout = timedelta(seconds=timeout)
    if timeout < timedelta(0):
        raise ValueError(f"Cache timeout must not be negative, got {timeout}")
    return timeout

#!/usr/bin/env python3
"""
Time-bounded in-memory cache.

Entries expire ``ttl`` seconds after they were written. Expiry is evaluated
on read only: an expired entry behaves exactly like a missing one and is
dropped when it is found. There is no size bound and no background sweep.
"""

import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Generic, Optional, TypeVar

V = TypeVar("V")


@dataclass(frozen=True)
class CacheEntry(Generic[V]):
    key: str
    value: V
    created_at: float


class TimedCache(Generic[V]):
    """String-keyed cache with a single time-to-live for every entry."""

    def __init__(self, ttl: float, clock: Callable[[], float] = time.monotonic):
        if ttl <= 0:
            raise ValueError("ttl must be positive")
        self.ttl = ttl
        self._clock = clock
        self._entries: Dict[str, CacheEntry[V]] = {}
        self._lock = threading.Lock()

    def get(self, key: str, default: Optional[V] = None) -> Optional[V]:
        """Return the cached value, or ``default`` if absent or expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return default
            if self._clock() - entry.created_at >= self.ttl:
                del self._entries[key]
                return default
            return entry.value

    def set(self, key: str, value: V) -> None:
        """Store ``value`` under ``key``, replacing any previous entry."""
        with self._lock:
            self._entries[key] = CacheEntry(key=key, value=value, created_at=self._clock())

    def entry(self, key: str) -> Optional[CacheEntry[V]]:
        """The raw entry for ``key`` regardless of age, for diagnostics."""
        with self._lock:
            return self._entries.get(key)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        return f"TimedCache(ttl={self.ttl!r}, entries={len(self)})"

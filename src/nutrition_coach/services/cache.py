"""Simple cache abstractions."""

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol


class Cache(Protocol):
    """Cache interface for simple key-value data."""

    def get(self, key: str) -> object | None:
        """Return a cached value if present and not expired."""

    def set(self, key: str, value: object) -> None:
        """Store a cached value."""

    def clear(self) -> None:
        """Drop every cached value."""


@dataclass
class _CacheEntry:
    value: object
    created_at: float


@dataclass
class BoundedTtlCache(Cache):
    """In-memory cache with a fixed TTL and a maximum entry count.

    When full, the oldest-inserted entry is evicted. Reads do not refresh an
    entry's position.
    """

    _entries: dict[str, _CacheEntry]

    def __init__(
        self,
        ttl_seconds: float = 300,
        max_entries: int = 50,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self.clock = clock
        self._entries = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get(self, key: str) -> object | None:
        """Return a cached value if it hasn't expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self.clock() - entry.created_at >= self.ttl_seconds:
            self._entries.pop(key, None)
            return None
        return entry.value

    def set(self, key: str, value: object) -> None:
        """Store a value, evicting the oldest entry when at capacity."""
        self._entries.pop(key, None)
        if self._entries and len(self._entries) >= self.max_entries:
            oldest = next(iter(self._entries))
            self._entries.pop(oldest)
        self._entries[key] = _CacheEntry(value=value, created_at=self.clock())

    def clear(self) -> None:
        """Drop every cached value."""
        self._entries.clear()

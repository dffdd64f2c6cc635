"""A key-value cache that can evict its least recently used entries."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Hashable, Iterator
from typing import Generic, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

NO_AUTO_EVICT = 0


class LRUCache(Generic[K, V]):
    """A cache whose entries are ordered from least to most recently used.

    With a ``max_size`` other than ``NO_AUTO_EVICT`` (0), putting a new key
    into a full cache first evicts the least recently used entry.
    """

    def __init__(self, max_size: int = NO_AUTO_EVICT):
        if max_size < 0:
            raise ValueError("max_size must not be negative")
        self._max_size = max_size
        self._entries: OrderedDict[K, V] = OrderedDict()

    def __repr__(self) -> str:
        return f"LRUCache(max_size={self._max_size}, entries={list(self._entries.items())!r})"

    def put(self, key: K, entry: V) -> None:
        """Cache ``entry`` under ``key`` and mark it as most recently used."""
        if key in self._entries:
            self._entries[key] = entry
            self._entries.move_to_end(key)
            return
        if self.auto_evict() and len(self._entries) == self._max_size:
            self.evict()
        self._entries[key] = entry

    def get(self, key: K) -> V | None:
        """Return the entry for ``key`` and mark it as most recently used.

        Returns None if the key is not cached.
        """
        if key not in self._entries:
            return None
        self._entries.move_to_end(key)
        return self._entries[key]

    def find(self, key: K) -> V | None:
        """Return the entry for ``key`` without touching its recency, or None."""
        return self._entries.get(key)

    def erase(self, key: K) -> V:
        """Remove and return the entry for ``key``; raise KeyError if it is not cached."""
        if key not in self._entries:
            raise KeyError(key)
        return self._entries.pop(key)

    def evict(self, count: int = 1) -> None:
        """Remove the ``count`` least recently used entries."""
        if count < 0:
            raise ValueError("count must not be negative")
        if count > len(self._entries):
            raise ValueError(
                f"cannot evict {count} entries from a cache holding {len(self._entries)}"
            )
        for _ in range(count):
            self._entries.popitem(last=False)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[K, V]]:
        """Yield ``(key, entry)`` pairs from least to most recently used."""
        return iter(list(self._entries.items()))

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def max_size(self) -> int:
        return self._max_size

    def auto_evict(self) -> bool:
        return self._max_size != NO_AUTO_EVICT
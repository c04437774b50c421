"""Least-recently-used caches: a plain LRU, an LRU-K admission cache and a sharded LRU."""

from __future__ import annotations

import math
import os
import threading
from collections import OrderedDict
from collections.abc import Callable, Hashable
from typing import Any


class LruCache:
    """A thread-safe cache that evicts the least recently used entry when full."""

    def __init__(
        self,
        capacity: int,
        *,
        on_evict: Callable[[Hashable, Any], None] | None = None,
    ) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._entries: OrderedDict[Hashable, Any] = OrderedDict()
        self._lock = threading.RLock()
        self._on_evict = on_evict

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Return the value for *key* and mark it most recently used, or *default*."""
        with self._lock:
            try:
                self._entries.move_to_end(key)
            except KeyError:
                return default
            return self._entries[key]

    def put(self, key: Hashable, value: Any) -> None:
        """Store *value* under *key*, evicting the least recently used entry if full."""
        if self.capacity == 0:
            return
        with self._lock:
            if key in self._entries:
                self._entries[key] = value
                self._entries.move_to_end(key)
                return
            if len(self._entries) >= self.capacity:
                old_key, old_value = self._entries.popitem(last=False)
                if self._on_evict is not None:
                    self._on_evict(old_key, old_value)
            self._entries[key] = value

    def remove(self, key: Hashable) -> None:
        """Drop *key* from the cache if it is present."""
        with self._lock:
            self._entries.pop(key, None)

    def purge(self) -> None:
        """Remove every entry."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries


class LruKCache(LruCache):
    """An LRU cache that admits a key only after it has been accessed *k* times.

    Accesses to keys not yet admitted are counted in a separate, bounded
    history cache; values written meanwhile are held until admission.
    """

    def __init__(self, capacity: int, history_capacity: int, k: int) -> None:
        if k < 1:
            raise ValueError("k must be at least 1")
        super().__init__(capacity)
        self.k = k
        self._pending: dict[Hashable, Any] = {}
        self._history = LruCache(history_capacity, on_evict=self._forget)

    def _forget(self, key: Hashable, _count: Any) -> None:
        self._pending.pop(key, None)

    def _record_access(self, key: Hashable) -> int:
        count = self._history.get(key, 0) + 1
        self._history.put(key, count)
        return count

    def _admit(self, key: Hashable, value: Any) -> None:
        self._history.remove(key)
        self._pending.pop(key, None)
        super().put(key, value)

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Return the cached value, admitting a pending key once it reaches *k* accesses."""
        with self._lock:
            missing = object()
            value = super().get(key, missing)
            count = self._record_access(key)
            if value is not missing:
                return value
            if count >= self.k and key in self._pending:
                stored = self._pending[key]
                self._admit(key, stored)
                return stored
            return default

    def put(self, key: Hashable, value: Any) -> None:
        """Write *value*; it enters the main cache once *key* has *k* accesses."""
        with self._lock:
            if key in self._entries:
                super().put(key, value)
                return
            count = self._record_access(key)
            self._pending[key] = value
            if count >= self.k:
                self._admit(key, value)

    def purge(self) -> None:
        """Remove every entry, pending value and access count."""
        with self._lock:
            super().purge()
            self._history.purge()
            self._pending.clear()


class HashLruCache:
    """An LRU cache split into independent slices chosen by the key's hash."""

    def __init__(self, capacity: int, slice_nums: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self.slice_nums = slice_nums if slice_nums > 0 else (os.cpu_count() or 1)
        slice_size = math.ceil(capacity / self.slice_nums)
        self._slices = [LruCache(slice_size) for _ in range(self.slice_nums)]

    def _slice_for(self, key: Hashable) -> LruCache:
        return self._slices[hash(key) % self.slice_nums]

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Return the value for *key* from its slice, or *default*."""
        return self._slice_for(key).get(key, default)

    def put(self, key: Hashable, value: Any) -> None:
        """Store *value* under *key* in its slice."""
        self._slice_for(key).put(key, value)

    def purge(self) -> None:
        """Remove every entry from every slice."""
        for lru_slice in self._slices:
            lru_slice.purge()

    def __len__(self) -> int:
        return sum(len(lru_slice) for lru_slice in self._slices)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, Hashable) and key in self._slice_for(key)
"""Least-frequently-used caches with frequency aging, plain and sharded."""

from __future__ import annotations

import math
import os
import threading
from collections import OrderedDict
from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any


@dataclass
class _Entry:
    value: Any
    frequency: int = 1


class LfuCache:
    """A thread-safe cache that evicts the least frequently used entry when full.

    Ties between entries of equal frequency go to the one used least recently.
    When the average access count per entry exceeds *max_average_frequency*,
    every entry's count is lowered by half that limit (never below 1), so that
    old popularity fades and new keys can compete.
    """

    def __init__(self, capacity: int, max_average_frequency: int = 10) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        if max_average_frequency < 1:
            raise ValueError("max_average_frequency must be at least 1")
        self.capacity = capacity
        self.max_average_frequency = max_average_frequency
        self._entries: dict[Hashable, _Entry] = {}
        self._buckets: dict[int, OrderedDict[Hashable, None]] = {}
        self._min_frequency = 1
        self._total_frequency = 0
        self._lock = threading.RLock()

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Return the value for *key* and count the access, or *default*."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return default
            self._touch(key, entry)
            return entry.value

    def put(self, key: Hashable, value: Any) -> None:
        """Store *value* under *key*; a write to an existing key counts as an access."""
        if self.capacity == 0:
            return
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None:
                entry.value = value
                self._touch(key, entry)
                return
            if len(self._entries) >= self.capacity:
                self._evict()
            entry = _Entry(value)
            self._entries[key] = entry
            self._bucket_add(key, entry.frequency)
            self._min_frequency = 1
            self._count_access()

    def purge(self) -> None:
        """Remove every entry and reset all counts."""
        with self._lock:
            self._entries.clear()
            self._buckets.clear()
            self._min_frequency = 1
            self._total_frequency = 0

    def frequency(self, key: Hashable) -> int:
        """Return the current access count of *key*; raise KeyError if absent."""
        with self._lock:
            return self._entries[key].frequency

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def _bucket_add(self, key: Hashable, frequency: int) -> None:
        self._buckets.setdefault(frequency, OrderedDict())[key] = None

    def _bucket_remove(self, key: Hashable, frequency: int) -> None:
        bucket = self._buckets[frequency]
        del bucket[key]
        if not bucket:
            del self._buckets[frequency]

    def _touch(self, key: Hashable, entry: _Entry) -> None:
        old = entry.frequency
        self._bucket_remove(key, old)
        entry.frequency += 1
        self._bucket_add(key, entry.frequency)
        if old == self._min_frequency and old not in self._buckets:
            self._min_frequency += 1
        self._count_access()

    def _evict(self) -> None:
        bucket = self._buckets[self._min_frequency]
        key = next(iter(bucket))
        entry = self._entries.pop(key)
        self._bucket_remove(key, entry.frequency)
        self._total_frequency -= entry.frequency
        self._update_min_frequency()

    def _count_access(self) -> None:
        self._total_frequency += 1
        if not self._entries:
            return
        average = self._total_frequency // len(self._entries)
        if average > self.max_average_frequency:
            self._age()

    def _age(self) -> None:
        decrement = self.max_average_frequency // 2
        ordered = [
            key
            for frequency in sorted(self._buckets)
            for key in self._buckets[frequency]
        ]
        self._buckets.clear()
        for key in ordered:
            entry = self._entries[key]
            entry.frequency = max(1, entry.frequency - decrement)
            self._bucket_add(key, entry.frequency)
        self._total_frequency = sum(e.frequency for e in self._entries.values())
        self._update_min_frequency()

    def _update_min_frequency(self) -> None:
        self._min_frequency = min(self._buckets, default=1)


class HashLfuCache:
    """An LFU cache split into independent slices chosen by the key's hash."""

    def __init__(
        self,
        capacity: int,
        slice_nums: int = 0,
        max_average_frequency: int = 10,
    ) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self.slice_nums = slice_nums if slice_nums > 0 else (os.cpu_count() or 1)
        slice_size = math.ceil(capacity / self.slice_nums)
        self._slices = [
            LfuCache(slice_size, max_average_frequency) for _ in range(self.slice_nums)
        ]

    def _slice_for(self, key: Hashable) -> LfuCache:
        return self._slices[hash(key) % self.slice_nums]

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Return the value for *key* from its slice, or *default*."""
        return self._slice_for(key).get(key, default)

    def put(self, key: Hashable, value: Any) -> None:
        """Store *value* under *key* in its slice."""
        self._slice_for(key).put(key, value)

    def purge(self) -> None:
        """Remove every entry from every slice."""
        for lfu_slice in self._slices:
            lfu_slice.purge()

    def __len__(self) -> int:
        return sum(len(lfu_slice) for lfu_slice in self._slices)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, Hashable) and key in self._slice_for(key)
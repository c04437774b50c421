# cachesets

Small, thread-safe, in-memory caches with different eviction policies.
The package has no dependencies outside the standard library.

## Modules

`cachesets.lru`

- `LruCache(capacity, *, on_evict=None)`: evicts the least recently used
  entry when a new key is stored into a full cache. `on_evict(key, value)`
  is called, if given, for each entry evicted that way.
- `LruKCache(capacity, history_capacity, k)`: a key enters the main LRU cache
  only once it has been accessed `k` times. Each `get` and `put` of a key that
  is not yet admitted adds one to its count in a separate LRU history of size
  `history_capacity`, and the last value written is held until admission.
  When a key drops out of the history, its held value is forgotten as well.
  `k` must be at least 1.
- `HashLruCache(capacity, slice_nums=0)`: spreads the keys over `slice_nums`
  independent `LruCache` slices by `hash(key)`. Each slice holds
  `ceil(capacity / slice_nums)` entries. If `slice_nums` is 0 or less, the
  number of CPUs is used.

`cachesets.lfu`

- `LfuCache(capacity, max_average_frequency=10)`: evicts the entry with the
  lowest access count. Among entries with the same count, the one used least
  recently goes first. A new entry starts with a count of 1, and every `get`
  hit or `put` to an existing key adds one. If the total count divided by the
  number of entries (rounded down) goes above `max_average_frequency`, every
  count is lowered by `max_average_frequency // 2`, but never below 1.
- `HashLfuCache(capacity, slice_nums=0, max_average_frequency=10)`: the
  hash-sliced version of `LfuCache`, with the same slicing rules as
  `HashLruCache`.

## Common behaviour

- `get(key, default=None)` returns the value, or `default` if the key is missing.
- `put(key, value)` stores or replaces a value. A cache with capacity 0
  stores nothing.
- `purge()` removes everything. For `LruKCache` this also clears the history
  and any held values. For `LfuCache` it resets all counts.
- `len(cache)` and `key in cache` work on every class.
- `LruCache` and `LruKCache` also have `remove(key)`. `LfuCache` has
  `frequency(key)`, which raises `KeyError` for a missing key.
- A negative capacity raises `ValueError`.

## Usage

```python
from cachesets.lru import LruCache, LruKCache, HashLruCache
from cachesets.lfu import LfuCache, HashLfuCache

cache = LruCache(2)
cache.put("a", 1)
cache.put("b", 2)
cache.get("a")          # 1, and "a" becomes the most recently used
cache.put("c", 3)       # evicts "b"
cache.get("b")          # None
cache.get("b", -1)      # -1
"a" in cache            # True
len(cache)              # 2
cache.remove("a")
cache.purge()

lruk = LruKCache(10, history_capacity=100, k=2)
lruk.put("k", "v")      # first access: value held, not yet cached
"k" in lruk             # False
lruk.get("k")           # second access: admitted, returns "v"
"k" in lruk             # True

lfu = LfuCache(2)
lfu.put("x", 1)
lfu.put("y", 2)
lfu.get("x")
lfu.frequency("x")      # 2
lfu.put("z", 3)         # evicts "y", which has the lowest count

sliced = HashLruCache(1000, 8)
sliced.put(42, "answer")
sliced.get(42)          # "answer"
```

## What it does not do

These caches live only in the memory of one process. There is no
persistence, no expiry by time, no size limit in bytes, and no command-line
tool. In the sliced caches, a key's slice depends on `hash(key)`. Because
Python randomises string hashes, a string key can land in a different slice
in each process. The eviction order across slices is not global.

## Running the tests

```
pip install -e ".[test]"
pytest
```
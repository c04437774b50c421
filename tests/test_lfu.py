import pytest

from cachesets.lfu import HashLfuCache, LfuCache


def _fill(cache, *pairs):
    """Put every (key, value) pair into the cache in order and return it."""
    for key, value in pairs:
        cache.put(key, value)
    return cache


def _touch(cache, key, times):
    for _ in range(times):
        cache.get(key)


def test_put_then_get_returns_value():
    assert _fill(LfuCache(3), ("a", 1)).get("a") == 1


@pytest.mark.parametrize(("args", "expected"), [((-1,), -1), ((), None)])
def test_missing_key_returns_default(args, expected):
    assert LfuCache(3).get("nope", *args) == expected


def test_evicts_least_frequent():
    cache = _fill(LfuCache(2), ("a", 1), ("b", 2))
    cache.get("a")
    cache.put("c", 3)
    assert "b" not in cache
    assert [cache.get(key) for key in "ac"] == [1, 3]
    assert len(cache) == 2


def test_tie_broken_by_least_recent():
    cache = _fill(LfuCache(2), ("a", 1), ("b", 2), ("c", 3))
    assert [key for key in "abc" if key in cache] == ["b", "c"]


def test_update_existing_counts_as_access():
    cache = _fill(LfuCache(2), ("a", 1))
    before = cache.frequency("a")
    cache.put("a", 10)
    assert cache.get("a") == 10
    assert cache.frequency("a") > before
    assert len(cache) == 1


def test_frequency_grows_with_access():
    cache = _fill(LfuCache(3), ("a", 1), ("b", 2))
    _touch(cache, "a", 2)
    assert cache.frequency("a") > cache.frequency("b")


def test_new_entry_starts_at_frequency_one():
    assert _fill(LfuCache(3), ("a", 1)).frequency("a") == 1


def test_frequency_of_missing_key_raises():
    with pytest.raises(KeyError):
        LfuCache(3).frequency("missing")


def test_zero_capacity_stores_nothing():
    cache = _fill(LfuCache(0), ("a", 1))
    assert len(cache) == 0
    assert cache.get("a", "gone") == "gone"


@pytest.mark.parametrize(
    "factory",
    [
        lambda: LfuCache(-1),
        lambda: LfuCache(2, max_average_frequency=0),
        lambda: HashLfuCache(-3, slice_nums=2),
    ],
    ids=["negative-capacity", "zero-max-average", "hash-negative-capacity"],
)
def test_invalid_arguments_rejected(factory):
    with pytest.raises(ValueError):
        factory()


def test_aging_lowers_frequency():
    cache = _fill(LfuCache(4, max_average_frequency=2), ("a", 1))
    _touch(cache, "a", 5)
    assert 1 <= cache.frequency("a") < 6


def test_aged_cache_still_evicts_and_keeps_capacity():
    cache = _fill(LfuCache(2, max_average_frequency=2), ("a", 1))
    _touch(cache, "a", 10)
    _fill(cache, ("b", 2), ("c", 3))
    assert len(cache) == 2
    assert "c" in cache


def test_purge_clears_everything():
    cache = _fill(LfuCache(3), ("a", 1), ("b", 2))
    cache.purge()
    assert len(cache) == 0
    assert "a" not in cache
    cache.put("c", 3)
    assert cache.frequency("c") == 1


def test_size_never_exceeds_capacity():
    cache = LfuCache(5)
    for i in range(50):
        cache.put(i, i * 2)
        cache.get(i % 7)
        assert len(cache) <= 5


def test_hash_cache_round_trip():
    cache = _fill(HashLfuCache(8, slice_nums=4), *((i, str(i)) for i in range(8)))
    assert all(cache.get(i) == str(i) for i in range(8) if i in cache)
    assert len(cache) <= 8


def test_hash_cache_default_for_missing():
    assert HashLfuCache(4, slice_nums=2).get("x", "default") == "default"


def test_hash_cache_purge():
    cache = _fill(HashLfuCache(4, slice_nums=2), ("a", 1), ("b", 2))
    cache.purge()
    assert len(cache) == 0
    assert cache.get("a") is None


def test_hash_cache_default_slices_positive():
    cache = HashLfuCache(10)
    assert cache.slice_nums >= 1
    cache.put("k", "v")
    assert cache.get("k") == "v"
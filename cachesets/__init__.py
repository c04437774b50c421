"""Thread-safe in-memory caches: LRU, LRU-K and LFU, plain and hash-sliced."""

__version__ = "0.1.0"
__all__ = ["lru", "lfu"]
[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cachesets"
version = "0.1.0"
description = "Thread-safe in-memory LRU, LRU-K and LFU caches, with hash-sliced variants"
requires-python = ">=3.10"
dependencies = []
keywords = ["cache", "lru", "lru-k", "lfu", "eviction", "sharded"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cachesets"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

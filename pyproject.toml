[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "triplecache"
version = "0.1.0"
description = "A bounded key/record cache kept in a hash table, a recency list and a binary search tree, driven by JSON test scripts."
requires-python = ">=3.10"
dependencies = []
keywords = ["cache", "hash table", "binary search tree", "linked list", "lru"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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

[project.scripts]
triplecache = "triplecache.runner:main"

[tool.hatch.build.targets.wheel]
packages = ["triplecache"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

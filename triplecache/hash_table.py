"""Chained hash table mapping integer keys to records."""

from __future__ import annotations

from collections.abc import Iterator

from .output import Log
from .records import Record


class HashTable:
    """A fixed number of buckets, each a chain of ``(key, record)`` pairs.

    New entries go to the front of their bucket's chain. Keys are unique:
    adding a key that is already present is refused.
    """

    def __init__(self, bucket_count: int) -> None:
        if bucket_count < 1:
            raise ValueError(f"bucket_count must be positive, got {bucket_count}")
        self._buckets: list[list[tuple[int, Record | None]]] = [
            [] for _ in range(bucket_count)
        ]
        self._count = 0

    def bucket_count(self) -> int:
        """Number of buckets in the table."""
        return len(self._buckets)

    def hash_code(self, key: int) -> int:
        """Index of the bucket that holds ``key``."""
        return key % len(self._buckets)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[int]:
        for chain in self._buckets:
            for key, _ in chain:
                yield key

    def _chain(self, key: int) -> list[tuple[int, Record | None]]:
        return self._buckets[self.hash_code(key)]

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        return any(entry_key == key for entry_key, _ in self._chain(key))

    def is_empty(self) -> bool:
        return self._count == 0

    def add(self, key: int, record: Record | None) -> bool:
        """Insert ``record`` under ``key``; return False if the key is already present."""
        if key in self:
            return False
        self._chain(key).insert(0, (key, record))
        self._count += 1
        return True

    def remove(self, key: int) -> bool:
        """Remove the entry for ``key``; return whether one was removed."""
        chain = self._chain(key)
        for position, (entry_key, _) in enumerate(chain):
            if entry_key == key:
                del chain[position]
                self._count -= 1
                return True
        return False

    def clear(self) -> None:
        for chain in self._buckets:
            chain.clear()
        self._count = 0

    def get(self, key: int) -> Record | None:
        """The record stored under ``key``, or ``None`` if absent."""
        return next(
            (record for entry_key, record in self._chain(key) if entry_key == key),
            None,
        )

    def buckets(self) -> list[list[tuple[int, Record | None]]]:
        """A copy of every bucket's chain, front of the chain first."""
        return [list(chain) for chain in self._buckets]

    def print_table(self, log: Log) -> None:
        """Emit the contents of every bucket in index order."""
        for index, chain in enumerate(self._buckets):
            if not chain:
                log.emit(f"Empty bucket: {index}")
                continue
            log.emit(f"\nBucket {index}: ")
            for key, record in chain:
                if record is not None:
                    log.emit(record.describe())
                else:
                    log.emit(f"Hash node with key: {key}")
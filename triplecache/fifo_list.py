"""Ordered list of records, most recent at the head."""

from __future__ import annotations

from collections.abc import Iterator

from .output import Log
from .records import Record


class FifoList:
    """Records ordered from head (newest) to tail (oldest).

    Keys are not required to be unique; lookups by key act on the first
    match counted from the head.
    """

    def __init__(self) -> None:
        self._records: list[Record] = []

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __reversed__(self) -> Iterator[Record]:
        return reversed(self._records)

    def is_empty(self) -> bool:
        return not self._records

    def head(self) -> Record | None:
        """The newest record, or ``None`` when empty."""
        return self._records[0] if self._records else None

    def tail(self) -> Record | None:
        """The oldest record, or ``None`` when empty."""
        return self._records[-1] if self._records else None

    def keys(self) -> list[int]:
        """Keys from head to tail."""
        return [record.key for record in self._records]

    def insert_at_head(self, record: Record) -> None:
        self._records.insert(0, record)

    def insert_at_tail(self, record: Record) -> None:
        self._records.append(record)

    def _find(self, key: int) -> int | None:
        return next(
            (position for position, record in enumerate(self._records) if record.key == key),
            None,
        )

    def remove(self, key: int) -> Record | None:
        """Remove the first record with ``key``; return it, or ``None`` if absent."""
        position = self._find(key)
        if position is None:
            return None
        return self._records.pop(position)

    def remove_head(self) -> Record | None:
        """Remove and return the head record, or ``None`` when empty."""
        return self._records.pop(0) if self._records else None

    def remove_tail(self) -> Record | None:
        """Remove and return the tail record, or ``None`` when empty."""
        return self._records.pop() if self._records else None

    def move_to_head(self, key: int) -> None:
        """Move the first record with ``key`` to the head; no-op if absent."""
        position = self._find(key)
        if position:
            self._records.insert(0, self._records.pop(position))

    def move_to_tail(self, key: int) -> None:
        """Move the first record with ``key`` to the tail.

        Nothing happens when the list is empty, the key is absent, or the
        tail already has that key.
        """
        if not self._records or self._records[-1].key == key:
            return
        position = self._find(key)
        if position is not None:
            self._records.append(self._records.pop(position))

    def clear(self) -> None:
        self._records.clear()

    def print_list(self, log: Log) -> None:
        """Emit each record from head to tail."""
        self._print(iter(self._records), log)

    def reverse_print_list(self, log: Log) -> None:
        """Emit each record from tail to head."""
        self._print(reversed(self._records), log)

    def _print(self, records: Iterator[Record], log: Log) -> None:
        if self.is_empty():
            log.emit("The list is empty.")
            return
        for record in records:
            log.emit(record.describe())
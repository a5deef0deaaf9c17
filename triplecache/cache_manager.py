"""A bounded cache kept in a hash table, a recency list and a search tree at once."""

from __future__ import annotations

from .fifo_list import FifoList
from .hash_table import HashTable
from .output import Log
from .records import Record
from .search_tree import SearchTree


class CacheManager:
    """Holds records in three structures kept in step with each other.

    The hash table gives lookup by key, the list orders records from most to
    least recently used, and the tree gives sorted and ranged views. When the
    cache is full the record at the tail of the list is evicted.
    """

    def __init__(
        self, max_cache_size: int, hash_table_size: int, log: Log | None = None
    ) -> None:
        if hash_table_size > max_cache_size:
            max_cache_size = hash_table_size
            print(
                f"Resetting MaxCacheSize, {max_cache_size}, to match myHashTableSize "
                f"of : {hash_table_size}!  Reconsider your life choices!!!"
            )
        self._table = HashTable(hash_table_size)
        print(f"hashTableSize: {hash_table_size}")
        self._fifo = FifoList()
        self._tree = SearchTree()
        # The limit always follows the hash table size.
        self._max_cache_size = hash_table_size
        self.log = log if log is not None else Log()

    def table(self) -> HashTable:
        return self._table

    def fifo(self) -> FifoList:
        return self._fifo

    def tree(self) -> SearchTree:
        return self._tree

    def max_cache_size(self) -> int:
        return self._max_cache_size

    def __len__(self) -> int:
        return len(self._table)

    def is_empty(self) -> bool:
        return self._table.is_empty()

    def add(self, key: int, record: Record) -> bool:
        """Store ``record`` under ``key``, replacing any old entry and evicting the oldest if full."""
        if self.contains(key):
            self.remove(key)
        if len(self._fifo) >= self._max_cache_size:
            oldest = self._fifo.tail()
            if oldest is not None:
                self.remove(oldest.key)
        added = self._table.add(key, record)
        self._fifo.insert_at_head(record)
        self._tree.add(key, record)
        return added

    def remove(self, key: int) -> bool:
        """Remove ``key`` from every structure; return whether it was present."""
        if key not in self._table:
            return False
        self._fifo.remove(key)
        self._tree.remove(key)
        return self._table.remove(key)

    def clear(self) -> None:
        self._fifo.clear()
        self._table.clear()
        self._tree.clear()

    def get(self, key: int) -> Record | None:
        """The record for ``key``, marked as most recently used; ``None`` if absent."""
        if key not in self._table:
            return None
        record = self._table.get(key)
        self._fifo.move_to_head(key)
        return record

    def contains(self, key: int) -> bool:
        """Whether ``key`` is cached; a hit marks it as most recently used."""
        found = key in self._table
        if found:
            self._fifo.move_to_head(key)
        return found

    def print_cache(self) -> None:
        """Emit the recency list from newest to oldest, then the hash table."""
        log = self.log
        log.emit("Printing out the cache: ")
        log.emit("Here are the FIFO List contents: ")
        if self._fifo.is_empty():
            log.emit("Empty list")
        else:
            for record in self._fifo:
                log.emit(f"{record.key} ")
        log.emit("End of FIFO List")
        self._table.print_table(log)

    def print_range(self, low: int, high: int) -> None:
        """Emit the cached records whose keys lie in ``[low, high]``."""
        self._tree.print_range(low, high, self.log)

    def sort(self, ascending: bool) -> None:
        """Emit keys in sorted order, then in breadth-first order."""
        if ascending:
            self._tree.print_in_order(self.log)
        else:
            self._tree.print_reverse_order(self.log)
        self._tree.print_breadth_first(self.log)
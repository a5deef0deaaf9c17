"""A bounded cache kept in a hash table, a recency list and a binary search tree."""

__version__ = "0.1.0"

__all__ = ["cache_manager", "fifo_list", "hash_table", "output", "records", "runner", "search_tree"]
# triplecache

A small bounded cache that keeps every entry in three structures at once:

- a chained **hash table** (`HashTable`) for lookups by integer key,
- a **recency list** (`FifoList`) that orders entries from most to least
  recently used and decides which entry is evicted when the cache is full,
- a **binary search tree** (`SearchTree`) that gives sorted and ranged views
  of the keys.

Each entry is a `Record`: an integer key with a name, street address, city,
state and zip code.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Using the cache from Python

```python
from triplecache.cache_manager import CacheManager
from triplecache.output import Log
from triplecache.records import Record

with Log() as log:
    log.open_file("cache_output.txt")   # optional: also copy output to a file
    cache = CacheManager(max_cache_size=5, hash_table_size=5, log=log)
    cache.add(20, Record(20, "Jane Roe", "1 Sample St", "Springfield", "CA", "00000"))
    cache.add(7, Record(7, "John Doe", "2 Sample St", "Springfield", "CA", "00000"))

    cache.contains(20)      # True, and 20 becomes the most recently used
    cache.get(7)            # the Record for key 7, now the most recently used
    len(cache)              # 2

    cache.print_range(0, 10)
    cache.sort(ascending=True)
    cache.print_cache()
```

`Log` writes each message as a line to the console (standard output, or the
stream passed as `console`) and, while a file is open, to that file as well.

The capacity of the cache always equals the hash table size, whatever
`max_cache_size` is given; `max_cache_size()` reports the limit in force.
Constructing a `CacheManager` prints the hash table size to standard output.
When the cache is full, adding a new key first evicts the entry at the tail of
the recency list. Adding a key that is already present replaces its record.
`contains` and `get` both mark a found key as most recently used.

The structures are also usable on their own: `HashTable` in
`triplecache.hash_table`, `FifoList` in `triplecache.fifo_list` and
`SearchTree` (with its `TreeNode`) in `triplecache.search_tree`. The tree
exposes its traversals as generators (`in_order`, `reverse_order`,
`pre_order`, `post_order`, `breadth_first`, `in_range`) as well as `print_*`
methods that write to a `Log`.

## Running a test script

The `triplecache` command reads a settings file and replays the actions from
an input file against a cache:

```
triplecache
triplecache path/to/settings.json
```

With no argument it reads `milestone5_config.json` from the current
directory. The settings file names the input file, the output file and the
sizes:

```json
{
  "Milestone5": [
    {
      "files": [
        {
          "inputFile": "milestone5.json",
          "outputFile": "generatedOutputFile.txt",
          "errorLogFile": "logFile.txt"
        }
      ],
      "defaultVariables": [
        {"FIFOListSize": 5, "hashTableSize": 101}
      ]
    }
  ]
}
```

The input file holds named test cases under `cacheManager`; each test case is a
list of actions:

```json
{
  "cacheManager": [
    {
      "testCase1": [
        {"isEmpty": {}},
        {"add": {"key": 20, "fullName": "Jane Roe", "address": "1 Sample St",
                 "city": "Springfield", "state": "CA", "zip": "00000"}},
        {"contains": {"key": 20}},
        {"getSize": {}},
        {"printInOrder": {"ascending": "true"}},
        {"printRange": {"low": 0, "high": 50}},
        {"remove": {"key": 20}},
        {"clear": {}}
      ]
    }
  ]
}
```

Unknown action names are skipped. The `ascending` value of `printInOrder` is a
string: `"true"` sorts ascending, any other string descending.

After each test case the cache is printed, listed in ascending and descending
order, and cleared. Output goes both to the console and to the output file;
the closing "End of unit tests" line goes to the console only. If the settings
file or the input file cannot be opened, a message goes to standard error and
the command exits with status 1.

The same steps are available from Python through `load_settings`,
`process_test_case` and `run_tests` in `triplecache.runner`.

## What it does not do

- The cache lives in memory only; nothing is saved between runs.
- The `errorLogFile` setting is read into `Settings.error_log_file` but
  nothing is written to it.
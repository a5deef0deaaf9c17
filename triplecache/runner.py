"""Command that drives the cache through JSON-described test cases."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .cache_manager import CacheManager
from .output import Log
from .records import Record

CONFIG_FILE = "milestone5_config.json"


@dataclass(frozen=True)
class Settings:
    """Paths and sizes read from the configuration file."""

    input_file: str
    output_file: str
    error_log_file: str
    hash_table_size: int
    fifo_list_size: int


def load_settings(path: str | Path) -> Settings:
    """Read the configuration file; raises ``OSError`` if it cannot be opened."""
    with open(path, encoding="utf-8") as handle:
        config = json.load(handle)
    section = config["Milestone5"][0]
    files = section["files"][0]
    defaults = section["defaultVariables"][0]
    return Settings(
        input_file=files["inputFile"],
        output_file=files["outputFile"],
        error_log_file=files["errorLogFile"],
        hash_table_size=defaults["hashTableSize"],
        fifo_list_size=defaults["FIFOListSize"],
    )


def process_test_case(
    cache: CacheManager,
    name: str,
    actions: Iterable[Mapping[str, Any]],
    log: Log,
) -> None:
    """Apply each action to ``cache`` and report it; unknown actions are ignored."""
    log.emit(f"\nProcessing {name}:\n\n")
    for entry in actions:
        for action, details in entry.items():
            if action == "isEmpty":
                log.emit(f"isEmpty: {int(cache.is_empty())}")
            elif action == "contains":
                key = details["key"]
                log.emit(f"contains({key}): {int(cache.contains(key))}")
            elif action == "getSize":
                log.emit(f"getSize: {len(cache)}")
            elif action == "add":
                key = details["key"]
                record = Record(
                    key,
                    details["fullName"],
                    details["address"],
                    details["city"],
                    details["state"],
                    details["zip"],
                )
                cache.add(key, record)
                log.emit(f"add key to cacheManager: {key}")
            elif action == "remove":
                key = details["key"]
                cache.remove(key)
                log.emit(f"remove key: {key} from cacheManager")
            elif action == "clear":
                cache.clear()
                log.emit("clear cacheManager: ")
            elif action == "printInOrder":
                value = details["ascending"]
                if not isinstance(value, str):
                    raise TypeError(f"'ascending' must be a string, got {value!r}")
                ascending = value == "true"
                log.emit(
                    "sort ascending cacheManager"
                    if ascending
                    else "sort descending cacheManager"
                )
                cache.sort(ascending)
            elif action == "printRange":
                low, high = details["low"], details["high"]
                log.emit(f"printRange with low: {low} and high: {high}")
                cache.print_range(low, high)


def run_tests(cache: CacheManager, data: Mapping[str, Any], log: Log) -> None:
    """Run every test case in ``data``, reporting and clearing the cache after each."""
    for test_case in data.get("cacheManager", []):
        for name, actions in test_case.items():
            process_test_case(cache, name, actions, log)
            cache.print_cache()
            cache.sort(True)
            cache.sort(False)
            cache.clear()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run cache test cases described in JSON.")
    parser.add_argument("config", nargs="?", default=CONFIG_FILE, help="configuration file")
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config)
    except OSError:
        print("Error opening config file!", file=sys.stderr)
        return 1

    log = Log()
    cache = CacheManager(settings.fifo_list_size, settings.hash_table_size, log)

    try:
        with open(settings.input_file, encoding="utf-8") as handle:
            data = json.load(handle)
    except OSError:
        print(f"Failed to open the file: {settings.input_file}.", file=sys.stderr)
        return 1

    log.open_file(settings.output_file)
    try:
        run_tests(cache, data, log)
    finally:
        log.close()

    log.emit("\n\nEnd of unit tests")
    return 0


if __name__ == "__main__":
    sys.exit(main())
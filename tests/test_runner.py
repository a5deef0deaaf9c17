import io
import json

import pytest

from triplecache.cache_manager import CacheManager
from triplecache.output import Log
from triplecache.runner import Settings, load_settings, main, process_test_case, run_tests


def add_action(key):
    return {
        "add": {
            "key": key,
            "fullName": "John Doe",
            "address": "1234 Log St",
            "city": "Oakland",
            "state": "CA",
            "zip": "00000",
        }
    }


def make_cache():
    stream = io.StringIO()
    log = Log(stream)
    return CacheManager(5, 3, log), log, stream


def write_config(tmp_path, input_path, output_path):
    config = {
        "Milestone5": [
            {
                "files": [
                    {
                        "inputFile": str(input_path),
                        "outputFile": str(output_path),
                        "errorLogFile": str(tmp_path / "logFile.txt"),
                    }
                ],
                "defaultVariables": [{"FIFOListSize": 5, "hashTableSize": 3}],
            }
        ]
    }
    path = tmp_path / "config.json"
    path.write_text(json.dumps(config), encoding="utf-8")
    return path


def test_load_settings(tmp_path):
    path = write_config(tmp_path, tmp_path / "in.json", tmp_path / "out.txt")
    settings = load_settings(path)
    assert settings == Settings(
        input_file=str(tmp_path / "in.json"),
        output_file=str(tmp_path / "out.txt"),
        error_log_file=str(tmp_path / "logFile.txt"),
        hash_table_size=3,
        fifo_list_size=5,
    )


def test_load_settings_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_settings(tmp_path / "absent.json")


def test_process_test_case_basic_actions():
    cache, log, stream = make_cache()
    actions = [{"isEmpty": {}}, add_action(20), {"contains": {"key": 20}}, {"getSize": {}}]
    process_test_case(cache, "t1", actions, log)
    lines = stream.getvalue().splitlines()
    assert lines[1] == "Processing t1:"
    assert lines[4:] == [
        "isEmpty: 1",
        "add key to cacheManager: 20",
        "contains(20): 1",
        "getSize: 1",
    ]
    assert cache.get(20).full_name == "John Doe"


def test_process_test_case_remove_and_clear():
    cache, log, stream = make_cache()
    actions = [add_action(1), add_action(2), {"remove": {"key": 1}}, {"clear": {}}]
    process_test_case(cache, "t", actions, log)
    lines = stream.getvalue().splitlines()
    assert "remove key: 1 from cacheManager" in lines
    assert "clear cacheManager: " in lines
    assert cache.is_empty()


def test_process_test_case_sort_and_range():
    cache, log, stream = make_cache()
    actions = [
        add_action(2),
        add_action(1),
        {"printInOrder": {"ascending": "false"}},
        {"printRange": {"low": 1, "high": 1}},
    ]
    process_test_case(cache, "t", actions, log)
    lines = stream.getvalue().splitlines()
    assert "sort descending cacheManager" in lines
    assert "Performing reverse-order traversal" in lines
    assert "printRange with low: 1 and high: 1" in lines
    assert "Printing nodes in range [1, 1]" in lines


def test_process_test_case_rejects_non_string_ascending():
    cache, log, _ = make_cache()
    with pytest.raises(TypeError):
        process_test_case(cache, "t", [{"printInOrder": {"ascending": True}}], log)


def test_unknown_action_is_ignored():
    cache, log, stream = make_cache()
    process_test_case(cache, "t", [{"frobnicate": {}}], log)
    assert stream.getvalue().splitlines() == ["", "Processing t:", "", ""]
    assert cache.is_empty()


def test_run_tests_clears_between_cases():
    cache, log, stream = make_cache()
    data = {"cacheManager": [{"a": [add_action(5)]}, {"b": [{"getSize": {}}]}]}
    run_tests(cache, data, log)
    lines = stream.getvalue().splitlines()
    assert "Processing a:" in lines
    assert "Processing b:" in lines
    assert "getSize: 0" in lines
    assert lines.count("Printing out the cache: ") == 2
    assert cache.is_empty()


def test_run_tests_without_cases_emits_nothing():
    cache, log, stream = make_cache()
    run_tests(cache, {}, log)
    assert stream.getvalue() == ""


def test_main_end_to_end(tmp_path, capsys):
    input_path = tmp_path / "input.json"
    output_path = tmp_path / "output.txt"
    input_path.write_text(
        json.dumps({"cacheManager": [{"testCase1": [{"isEmpty": {}}, add_action(20)]}]}),
        encoding="utf-8",
    )
    config = write_config(tmp_path, input_path, output_path)
    assert main([str(config)]) == 0
    written = output_path.read_text(encoding="utf-8")
    assert "Processing testCase1:" in written
    assert "add key to cacheManager: 20" in written
    assert "End of unit tests" not in written
    assert "End of unit tests" in capsys.readouterr().out


def test_main_missing_config(tmp_path, capsys):
    assert main([str(tmp_path / "absent.json")]) == 1
    assert "Error opening config file!" in capsys.readouterr().err


def test_main_missing_input(tmp_path, capsys):
    config = write_config(tmp_path, tmp_path / "absent.json", tmp_path / "out.txt")
    assert main([str(config)]) == 1
    assert "Failed to open the file:" in capsys.readouterr().err
    assert not (tmp_path / "out.txt").exists()
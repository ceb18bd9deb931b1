import json

import pytest

from cloudplus_exam.services.history_store import HistoryStore


@pytest.fixture
def store(tmp_path):
    return HistoryStore(str(tmp_path / "storage" / "history.json"))


def test_missing_file_is_empty(store):
    assert store.load() == []


def test_append_persists_across_instances(store):
    assert store.append(31) == [31]
    assert store.append(42) == [31, 42]

    reopened = HistoryStore(store.path)
    assert reopened.load() == [31, 42]


def test_storage_format(store):
    store.append(7)
    with open(store.path, encoding="utf-8") as f:
        assert json.load(f) == {"scoreHistory": [7]}


def test_corrupt_file_treated_as_empty(store, tmp_path):
    (tmp_path / "storage").mkdir()
    with open(store.path, "w", encoding="utf-8") as f:
        f.write("{not json")

    assert store.load() == []
    assert store.append(10) == [10]


@pytest.mark.parametrize("payload", [
    {"scoreHistory": "12"},
    {"scoreHistory": [1, "x"]},
    {"scoreHistory": [-4]},
    [1, 2, 3],
])
def test_malformed_entry_treated_as_empty(store, tmp_path, payload):
    (tmp_path / "storage").mkdir()
    with open(store.path, "w", encoding="utf-8") as f:
        json.dump(payload, f)

    assert store.load() == []


def test_clear_removes_history(store):
    store.append(20)
    store.clear()
    assert store.load() == []
    assert HistoryStore(store.path).load() == []


def test_clear_when_empty_is_noop(store):
    store.clear()
    assert store.load() == []


def test_other_keys_are_preserved(store, tmp_path):
    (tmp_path / "storage").mkdir()
    with open(store.path, "w", encoding="utf-8") as f:
        json.dump({"theme": "dark", "scoreHistory": [3]}, f)

    store.append(4)
    store.clear()
    with open(store.path, encoding="utf-8") as f:
        assert json.load(f) == {"theme": "dark"}


def test_write_failure_does_not_raise(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory", encoding="utf-8")
    store = HistoryStore(str(blocker / "history.json"))

    assert store.append(5) == [5]
    assert store.load() == []
    store.clear()

# test_storage.py

import json

import pytest

from scicalc.errors import StorageError
from scicalc.modes import Theme
from scicalc.storage import HISTORY_KEY, THEME_KEY, JsonFileStorage, MemoryStorage


def test_missing_file_yields_defaults(json_storage):
    assert json_storage.load_history() == []
    assert json_storage.load_theme() is None


def test_history_round_trip_across_instances(tmp_path):
    path = tmp_path / "state.json"
    JsonFileStorage(path).save_history(["1+1", "2*3"])
    assert JsonFileStorage(path).load_history() == ["1+1", "2*3"]


def test_theme_and_history_share_one_document(tmp_path):
    path = tmp_path / "state.json"
    storage = JsonFileStorage(path)
    storage.save_theme(Theme.LIGHT)
    storage.save_history(["5!"])

    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    assert data == {THEME_KEY: "light", HISTORY_KEY: ["5!"]}
    assert storage.load_theme() is Theme.LIGHT


def test_unicode_expressions_preserved(json_storage):
    json_storage.save_history(["2*π"])
    assert json_storage.load_history() == ["2*π"]


def test_creates_parent_directories(tmp_path):
    storage = JsonFileStorage(tmp_path / "nested" / "dir" / "state.json")
    storage.save_history(["1"])
    assert storage.load_history() == ["1"]


def test_corrupt_file_is_ignored(tmp_path):
    path = tmp_path / "state.json"
    path.write_text("{not json", encoding="utf-8")
    storage = JsonFileStorage(path)
    assert storage.load_history() == []
    assert storage.load_theme() is None


def test_malformed_values_are_ignored(tmp_path):
    path = tmp_path / "state.json"
    path.write_text(json.dumps({HISTORY_KEY: ["1+1", 7, None], THEME_KEY: "neon"}), encoding="utf-8")
    storage = JsonFileStorage(path)
    assert storage.load_history() == ["1+1"]
    assert storage.load_theme() is None


def test_non_object_document_is_ignored(tmp_path):
    path = tmp_path / "state.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert JsonFileStorage(path).load_history() == []


def test_write_failure_raises_storage_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    storage = JsonFileStorage(blocker / "state.json")
    with pytest.raises(StorageError):
        storage.save_history(["1"])


def test_memory_storage():
    storage = MemoryStorage(history=["a"], theme=Theme.DARK)
    assert storage.load_history() == ["a"]
    assert storage.load_theme() is Theme.DARK
    storage.save_theme(Theme.LIGHT)
    assert storage.load_theme() is Theme.LIGHT

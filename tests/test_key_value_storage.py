"""
tests/test_key_value_storage.py

File-backed key/value slots.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from app.storage.key_value import FileKeyValueStorage
from app.storage.saved_searches import SavedSearchStore


def test_missing_slot_reads_as_none(tmp_path: Path) -> None:
    assert FileKeyValueStorage(tmp_path).get("absent") is None


def test_set_then_get_round_trips_value(tmp_path: Path) -> None:
    storage = FileKeyValueStorage(tmp_path / "nested")

    storage.set("slot", '["a"]')

    assert storage.get("slot") == '["a"]'
    assert (tmp_path / "nested" / "slot.json").exists()


def test_set_overwrites_previous_value(tmp_path: Path) -> None:
    storage = FileKeyValueStorage(tmp_path)
    storage.set("slot", "one")
    storage.set("slot", "two")

    assert storage.get("slot") == "two"
    assert not (tmp_path / "slot.json.tmp").exists()


@pytest.mark.parametrize("key", ["../escape", "a/b", ""])
def test_unsafe_keys_are_rejected(tmp_path: Path, key: str) -> None:
    with pytest.raises(ValueError):
        FileKeyValueStorage(tmp_path).get(key)


def test_saved_searches_survive_new_store_instance(tmp_path: Path) -> None:
    SavedSearchStore(FileKeyValueStorage(tmp_path)).save("pricing", "Pricing", ["c-1"])

    reloaded = SavedSearchStore(FileKeyValueStorage(tmp_path)).list()

    assert [s.query for s in reloaded] == ["pricing"]


def test_undecodable_slot_file_lists_as_empty(tmp_path: Path) -> None:
    (tmp_path / "competitoriq_saved_searches.json").write_bytes(b"\xff")

    assert SavedSearchStore(FileKeyValueStorage(tmp_path)).list() == []


def test_save_replaces_undecodable_slot_file(tmp_path: Path) -> None:
    (tmp_path / "competitoriq_saved_searches.json").write_bytes(b"\xff\xfe")
    store = SavedSearchStore(FileKeyValueStorage(tmp_path))

    saved = store.save("pricing", None, [])

    assert [s.id for s in store.list()] == [saved.id]


def test_unreadable_slot_path_lists_as_empty(tmp_path: Path) -> None:
    (tmp_path / "competitoriq_saved_searches.json").mkdir()

    assert SavedSearchStore(FileKeyValueStorage(tmp_path)).list() == []

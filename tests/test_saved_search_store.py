"""
tests/test_saved_search_store.py

Saved search persistence: ordering, cap, deletion and corrupt data recovery.
"""

from __future__ import annotations

import itertools
import json
from datetime import datetime, timezone

import pytest

from app.storage.key_value import InMemoryKeyValueStorage
from app.storage.saved_searches import MAX_SAVED_SEARCHES, SAVED_SEARCHES_KEY, SavedSearchStore


@pytest.fixture()
def storage() -> InMemoryKeyValueStorage:
    return InMemoryKeyValueStorage()


@pytest.fixture()
def store(storage: InMemoryKeyValueStorage) -> SavedSearchStore:
    counter = itertools.count(1)
    return SavedSearchStore(
        storage,
        id_factory=lambda: f"s-{next(counter)}",
        clock=lambda: datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc),
    )


def test_list_is_empty_when_slot_missing(store: SavedSearchStore) -> None:
    assert store.list() == []


def test_save_returns_created_record(store: SavedSearchStore) -> None:
    saved = store.save("pricing", "Pricing", ["c-1", "c-2"])

    assert saved.id == "s-1"
    assert saved.query == "pricing"
    assert saved.category == "Pricing"
    assert saved.competitor_ids == ["c-1", "c-2"]
    assert saved.created_at == "2026-03-01T12:00:00+00:00"
    assert store.list() == [saved]


def test_newest_search_comes_first(store: SavedSearchStore) -> None:
    store.save("first", None, [])
    store.save("second", None, [])

    assert [s.query for s in store.list()] == ["second", "first"]


def test_list_is_capped_at_fifty(store: SavedSearchStore) -> None:
    for index in range(MAX_SAVED_SEARCHES + 1):
        store.save(f"query-{index}", None, [])

    searches = store.list()

    assert len(searches) == MAX_SAVED_SEARCHES
    assert searches[0].query == "query-50"
    assert "query-0" not in {s.query for s in searches}


def test_duplicate_queries_are_kept(store: SavedSearchStore) -> None:
    first = store.save("pricing", None, [])
    second = store.save("pricing", None, [])

    assert first.id != second.id
    assert len(store.list()) == 2


def test_delete_removes_only_that_entry(store: SavedSearchStore) -> None:
    keep = store.save("keep", None, [])
    drop = store.save("drop", None, [])

    store.delete(drop.id)

    assert [s.id for s in store.list()] == [keep.id]


def test_delete_unknown_id_is_a_noop(store: SavedSearchStore) -> None:
    saved = store.save("pricing", None, [])

    store.delete("missing")

    assert store.list() == [saved]


def test_records_are_stored_as_json_array(store: SavedSearchStore, storage: InMemoryKeyValueStorage) -> None:
    store.save("pricing", None, ["c-1"])

    payload = json.loads(storage.get(SAVED_SEARCHES_KEY))

    assert payload == [
        {
            "id": "s-1",
            "query": "pricing",
            "category": None,
            "competitor_ids": ["c-1"],
            "created_at": "2026-03-01T12:00:00+00:00",
        }
    ]


@pytest.mark.parametrize(
    "raw",
    [
        "{not json",
        '{"id": "s-1"}',
        '[{"query": "missing id"}]',
        '["just a string"]',
    ],
)
def test_corrupt_slot_reads_as_empty(raw: str) -> None:
    store = SavedSearchStore(InMemoryKeyValueStorage({SAVED_SEARCHES_KEY: raw}))

    assert store.list() == []


def test_save_after_corruption_starts_fresh() -> None:
    storage = InMemoryKeyValueStorage({SAVED_SEARCHES_KEY: "garbage"})
    store = SavedSearchStore(storage)

    saved = store.save("pricing", None, [])

    assert store.list() == [saved]

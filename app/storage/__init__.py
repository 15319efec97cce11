"""
Local persistence for client-side state.
"""

from app.storage.key_value import FileKeyValueStorage, InMemoryKeyValueStorage, KeyValueStorage
from app.storage.saved_searches import MAX_SAVED_SEARCHES, SAVED_SEARCHES_KEY, SavedSearchStore

__all__ = [
    "FileKeyValueStorage",
    "InMemoryKeyValueStorage",
    "KeyValueStorage",
    "MAX_SAVED_SEARCHES",
    "SAVED_SEARCHES_KEY",
    "SavedSearchStore",
]

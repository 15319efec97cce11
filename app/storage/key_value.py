"""
String-keyed storage slots holding serialized blobs.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from pathlib import Path

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class KeyValueStorage(ABC):
    """
    Minimal get/set interface over named string slots.
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """
        Return the stored value, or None when the slot is empty.
        """

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """
        Replace the slot value.
        """


class InMemoryKeyValueStorage(KeyValueStorage):
    """
    Process-local storage. Contents are lost when the process exits.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class FileKeyValueStorage(KeyValueStorage):
    """
    Stores each slot as `<directory>/<key>.json`.

    Writes are plain read-modify-write without locking; two processes
    writing the same slot can overwrite each other.
    """

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory)

    def _path_for(self, key: str) -> Path:
        if not _SAFE_KEY.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self._directory / f"{key}.json"

    def get(self, key: str) -> str | None:
        path = self._path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        path = self._path_for(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(".json.tmp")
        temp_path.write_text(value, encoding="utf-8")
        temp_path.replace(path)

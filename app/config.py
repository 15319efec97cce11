"""
app/config.py

Application-level configuration helpers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from db.config import load_env_files


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    """
    Ensure project `.env` files are loaded once before reading app settings.
    """

    load_env_files()


def _get_float_env(name: str, default: float) -> float:
    """
    Read a float from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return float(raw_value)
    except ValueError:
        return default


def _get_str_env(name: str, default: str) -> str:
    """
    Read a string from environment variables with fallback.
    """

    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return default
    stripped = value.strip()
    return stripped if stripped else default


def _get_optional_str_env(name: str) -> str | None:
    """
    Read an optional string value from environment variables.
    """

    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return None
    stripped = value.strip()
    return stripped if stripped else None


@dataclass(frozen=True)
class SavedSearchSettings:
    """
    Where saved searches are kept on local disk.
    """

    storage_dir: str = ".competitoriq"


@dataclass(frozen=True)
class WorkflowSettings:
    """
    External workflow engine webhook settings.
    """

    base_url: str | None = None
    timeout_seconds: float = 30.0


@lru_cache(maxsize=1)
def get_saved_search_settings() -> SavedSearchSettings:
    """
    Return cached saved search settings from environment variables.
    """

    return SavedSearchSettings(
        storage_dir=_get_str_env("SAVED_SEARCH_STORAGE_DIR", ".competitoriq"),
    )


@lru_cache(maxsize=1)
def get_workflow_settings() -> WorkflowSettings:
    """
    Return cached workflow webhook settings from environment variables.
    """

    base_url = _get_optional_str_env("WORKFLOW_WEBHOOK_BASE_URL")
    return WorkflowSettings(
        base_url=base_url.rstrip("/") if base_url else None,
        timeout_seconds=max(1.0, _get_float_env("WORKFLOW_TIMEOUT_SECONDS", 30.0)),
    )

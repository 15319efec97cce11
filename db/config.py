"""
db/config.py

Environment-driven database configuration helpers.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
_ENV_FILENAMES = (".env", ".env.local")
_CLOUD_LIKE_ENVIRONMENTS = frozenset({"prod", "production", "staging", "cloud"})
_DRIVER_PREFIXES = ("postgres://", "postgresql://")


def _iter_env_pairs(path: Path) -> Iterator[tuple[str, str]]:
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if line.startswith("#") or "=" not in line:
            continue
        key, _, value = line.partition("=")
        key = key.strip()
        if key:
            yield key, value.strip().strip("\"'")


def load_env_files() -> None:
    """
    Copy `.env` then `.env.local` entries from the project root into os.environ.

    Existing process variables are never overwritten, so the first source to
    define a key wins.
    """

    for filename in _ENV_FILENAMES:
        path = _PROJECT_ROOT / filename
        if path.is_file():
            for key, value in _iter_env_pairs(path):
                os.environ.setdefault(key, value)


def normalize_postgres_url(url: str) -> str:
    """
    Point bare postgres URLs at the psycopg (v3) driver.
    """

    for prefix in _DRIVER_PREFIXES:
        if url.startswith(prefix):
            return "postgresql+psycopg://" + url[len(prefix):]
    return url


def resolve_database_url() -> str:
    """
    Return the page store URL.

    DATABASE_URL always wins. CLOUD_DATABASE_URL is only consulted when
    ENVIRONMENT names a deployed tier; LOCAL_DATABASE_URL is the last resort.
    """

    load_env_files()

    environment = os.getenv("ENVIRONMENT", "local").strip().lower()
    candidates = [os.getenv("DATABASE_URL")]
    if environment in _CLOUD_LIKE_ENVIRONMENTS:
        candidates.append(os.getenv("CLOUD_DATABASE_URL"))
    candidates.append(os.getenv("LOCAL_DATABASE_URL"))

    for candidate in candidates:
        if candidate:
            return normalize_postgres_url(candidate.strip())

    raise RuntimeError(
        "No database URL configured. Set DATABASE_URL, or configure "
        "LOCAL_DATABASE_URL / CLOUD_DATABASE_URL."
    )

"""
tests/test_config.py

Environment-driven settings and identifier validation.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterator

import pytest

from app.config import get_saved_search_settings, get_workflow_settings
from db.config import normalize_postgres_url
from db.repositories.validators import parse_uuid, require_text


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    get_saved_search_settings.cache_clear()
    get_workflow_settings.cache_clear()
    yield
    get_saved_search_settings.cache_clear()
    get_workflow_settings.cache_clear()


def test_workflow_settings_strip_trailing_slash(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WORKFLOW_WEBHOOK_BASE_URL", "https://wf.example.com/webhook/competitor/")
    monkeypatch.setenv("WORKFLOW_TIMEOUT_SECONDS", "12.5")

    settings = get_workflow_settings()

    assert settings.base_url == "https://wf.example.com/webhook/competitor"
    assert settings.timeout_seconds == 12.5


def test_workflow_settings_fall_back_on_bad_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WORKFLOW_WEBHOOK_BASE_URL", "   ")
    monkeypatch.setenv("WORKFLOW_TIMEOUT_SECONDS", "soon")

    settings = get_workflow_settings()

    assert settings.base_url is None
    assert settings.timeout_seconds == 30.0


def test_saved_search_dir_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SAVED_SEARCH_STORAGE_DIR", "/var/lib/competitoriq")

    assert get_saved_search_settings().storage_dir == "/var/lib/competitoriq"


@pytest.mark.parametrize(
    "url, expected",
    [
        ("postgres://u:p@h/db", "postgresql+psycopg://u:p@h/db"),
        ("postgresql://u:p@h/db", "postgresql+psycopg://u:p@h/db"),
        ("postgresql+psycopg://u:p@h/db", "postgresql+psycopg://u:p@h/db"),
    ],
)
def test_normalize_postgres_url(url: str, expected: str) -> None:
    assert normalize_postgres_url(url) == expected


def test_parse_uuid_accepts_strings_and_uuids() -> None:
    value = uuid.uuid4()
    assert parse_uuid(str(value)) == value
    assert parse_uuid(value) is value


def test_parse_uuid_names_the_field() -> None:
    with pytest.raises(ValueError, match="competitor_id"):
        parse_uuid("not-a-uuid", field="competitor_id")


def test_require_text_strips_and_rejects_blank() -> None:
    assert require_text("  Acme ", field="name") == "Acme"
    with pytest.raises(ValueError, match="name is required"):
        require_text("   ", field="name")

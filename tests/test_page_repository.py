"""
tests/test_page_repository.py

Pytest unit tests for CompetitorPageRepository.

Statements are captured by a fake session and inspected in compiled form;
rows are built as transient ORM objects, so no database is involved.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any

import pytest
from sqlalchemy.dialects import postgresql

from app.domain.competitor_pages import UNCATEGORIZED, UNKNOWN_COMPETITOR
from db.models.competitor_page import CompetitorPage, ScrapeStatus
from db.repositories.page_repository import CompetitorPageRepository

COMPETITOR_ID = uuid.UUID("11111111-1111-1111-1111-111111111111")
OTHER_COMPETITOR_ID = uuid.UUID("22222222-2222-2222-2222-222222222222")
PROJECT_ID = uuid.UUID("33333333-3333-3333-3333-333333333333")


class FakeResult:
    def __init__(self, rows: list[tuple[CompetitorPage, str | None]]) -> None:
        self._rows = rows

    def all(self) -> list[tuple[CompetitorPage, str | None]]:
        return list(self._rows)


class FakeSession:
    def __init__(self, rows: list[tuple[CompetitorPage, str | None]] | None = None) -> None:
        self._rows = rows or []
        self.statements: list[Any] = []

    def execute(self, stmt: Any) -> FakeResult:
        self.statements.append(stmt)
        return FakeResult(self._rows)


def _page(
    *,
    url: str = "https://acme.io/pricing",
    metadata: Any = None,
    minute: int = 0,
) -> CompetitorPage:
    return CompetitorPage(
        id=uuid.uuid4(),
        competitor_id=COMPETITOR_ID,
        url=url,
        title="Pricing",
        description=None,
        markdown_content="Plans start at $10",
        metadata_json=metadata,
        scrape_status=ScrapeStatus.SUCCESS,
        last_scraped_at=None,
        updated_at=datetime(2026, 1, 1, 0, minute, tzinfo=timezone.utc),
    )


def _compiled(session: FakeSession):
    (stmt,) = session.statements
    return stmt.compile(dialect=postgresql.dialect())


def _id_lists(compiled) -> list[list[Any]]:
    return [list(value) for value in compiled.params.values() if isinstance(value, (list, tuple))]


# ---------------------------------------------------------------------------
# Query shape
# ---------------------------------------------------------------------------


class TestListPagesQuery:
    def test_orders_newest_first_and_joins_competitor(self) -> None:
        session = FakeSession()

        CompetitorPageRepository(session).list_pages()

        sql = str(_compiled(session))
        assert "JOIN competitors ON competitor_pages.competitor_id = competitors.id" in sql
        assert "ORDER BY competitor_pages.updated_at DESC" in sql
        assert "WHERE" not in sql

    def test_competitor_filter_uses_parsed_ids(self) -> None:
        session = FakeSession()

        CompetitorPageRepository(session).list_pages(
            competitor_ids=[str(COMPETITOR_ID), str(OTHER_COMPETITOR_ID)],
        )

        compiled = _compiled(session)
        assert "competitor_pages.competitor_id IN" in str(compiled)
        assert [COMPETITOR_ID, OTHER_COMPETITOR_ID] in _id_lists(compiled)

    def test_empty_competitor_filter_is_ignored(self) -> None:
        session = FakeSession()

        CompetitorPageRepository(session).list_pages(competitor_ids=[])

        assert "WHERE" not in str(_compiled(session))

    def test_project_filter_targets_competitor_project(self) -> None:
        session = FakeSession()

        CompetitorPageRepository(session).list_pages(project_id=str(PROJECT_ID))

        compiled = _compiled(session)
        assert "competitors.project_id =" in str(compiled)
        assert PROJECT_ID in compiled.params.values()

    def test_invalid_competitor_id_raises_before_querying(self) -> None:
        session = FakeSession()

        with pytest.raises(ValueError, match="competitor_id"):
            CompetitorPageRepository(session).list_pages(competitor_ids=["not-a-uuid"])

        assert session.statements == []

    def test_invalid_project_id_raises(self) -> None:
        with pytest.raises(ValueError, match="project_id"):
            CompetitorPageRepository(FakeSession()).list_pages(project_id="nope")

    def test_single_competitor_listing_filters_by_that_id(self) -> None:
        session = FakeSession()

        CompetitorPageRepository(session).list_competitor_pages(COMPETITOR_ID)

        assert [COMPETITOR_ID] in _id_lists(_compiled(session))


# ---------------------------------------------------------------------------
# Row mapping
# ---------------------------------------------------------------------------


class TestRecordMapping:
    def test_rows_keep_database_order(self) -> None:
        newer, older = _page(url="https://acme.io/new", minute=5), _page(url="https://acme.io/old")
        session = FakeSession([(newer, "Acme"), (older, "Acme")])

        records = CompetitorPageRepository(session).list_pages()

        assert [r.url for r in records] == ["https://acme.io/new", "https://acme.io/old"]

    def test_maps_fields_to_page_record(self) -> None:
        page = _page(metadata={"category": "Pricing"})
        session = FakeSession([(page, "Acme")])

        (record,) = CompetitorPageRepository(session).list_pages()

        assert record.id == str(page.id)
        assert record.competitor_id == str(COMPETITOR_ID)
        assert record.competitor_name == "Acme"
        assert record.category == "Pricing"
        assert record.scrape_status == ScrapeStatus.SUCCESS
        assert record.updated_at == page.updated_at

    def test_missing_competitor_name_becomes_unknown(self) -> None:
        session = FakeSession([(_page(), None)])

        (record,) = CompetitorPageRepository(session).list_pages()

        assert record.competitor_name == UNKNOWN_COMPETITOR

    @pytest.mark.parametrize("metadata", [None, ["Pricing"], "Pricing"])
    def test_non_dict_metadata_becomes_empty(self, metadata: Any) -> None:
        session = FakeSession([(_page(metadata=metadata), "Acme")])

        (record,) = CompetitorPageRepository(session).list_pages()

        assert record.metadata == {}
        assert record.category == UNCATEGORIZED

    def test_metadata_is_copied(self) -> None:
        metadata = {"category": "Blog"}
        session = FakeSession([(_page(metadata=metadata), "Acme")])

        (record,) = CompetitorPageRepository(session).list_pages()
        metadata["category"] = "Changed"

        assert record.category == "Blog"

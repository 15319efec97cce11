"""
Competitor page reads, denormalized with the owning competitor's name.
"""

from __future__ import annotations

import uuid
from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.domain.competitor_pages import UNKNOWN_COMPETITOR, PageRecord
from app.search.source import PageSource
from db.models.competitor import Competitor
from db.models.competitor_page import CompetitorPage
from db.repositories.validators import parse_uuid, parse_uuid_list


class CompetitorPageRepository(PageSource):
    """
    Serves page records for search and comparison views.

    Database errors are not caught here; callers see them as raised.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_pages(
        self,
        *,
        competitor_ids: Sequence[str] | None = None,
        project_id: str | None = None,
    ) -> list[PageRecord]:
        stmt = (
            select(CompetitorPage, Competitor.name)
            .join(Competitor, CompetitorPage.competitor_id == Competitor.id)
            .order_by(CompetitorPage.updated_at.desc())
        )
        if competitor_ids:
            stmt = stmt.where(
                CompetitorPage.competitor_id.in_(parse_uuid_list(competitor_ids, field="competitor_id"))
            )
        if project_id is not None:
            stmt = stmt.where(Competitor.project_id == parse_uuid(project_id, field="project_id"))

        return [_to_record(page, name) for page, name in self._session.execute(stmt).all()]

    def list_competitor_pages(self, competitor_id: str | uuid.UUID) -> list[PageRecord]:
        return self.list_pages(competitor_ids=[str(parse_uuid(competitor_id, field="competitor_id"))])


def _to_record(page: CompetitorPage, competitor_name: str | None) -> PageRecord:
    return PageRecord(
        id=str(page.id),
        url=page.url,
        competitor_id=str(page.competitor_id),
        competitor_name=competitor_name or UNKNOWN_COMPETITOR,
        title=page.title,
        description=page.description,
        markdown_content=page.markdown_content,
        metadata=dict(page.metadata_json) if isinstance(page.metadata_json, dict) else {},
        scrape_status=page.scrape_status,
        last_scraped_at=page.last_scraped_at,
        updated_at=page.updated_at,
    )

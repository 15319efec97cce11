"""
Page record factory and an in-memory page source for tests.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timedelta, timezone
from typing import Any

from app.domain.competitor_pages import PageRecord
from app.search.source import PageSource

_BASE_TIME = datetime(2026, 1, 1, tzinfo=timezone.utc)


def make_page(
    page_id: str,
    *,
    title: str | None = None,
    url: str | None = None,
    markdown_content: str | None = None,
    description: str | None = None,
    category: str | None = None,
    competitor_id: str = "c-1",
    competitor_name: str = "Acme",
    scrape_status: str | None = "success",
    metadata: dict[str, Any] | None = None,
    updated_minutes: int = 0,
) -> PageRecord:
    page_metadata = dict(metadata or {})
    if category is not None:
        page_metadata["category"] = category
    return PageRecord(
        id=page_id,
        url=url or f"https://example.com/{page_id}",
        competitor_id=competitor_id,
        competitor_name=competitor_name,
        title=title,
        description=description,
        markdown_content=markdown_content,
        metadata=page_metadata,
        scrape_status=scrape_status,
        updated_at=_BASE_TIME + timedelta(minutes=updated_minutes),
    )


class InMemoryPageSource(PageSource):
    """
    Serves a fixed page list, newest first, and records every call.
    """

    def __init__(self, pages: Sequence[PageRecord], *, error: Exception | None = None) -> None:
        self._pages = list(pages)
        self._error = error
        self.calls: list[dict[str, Any]] = []

    def list_pages(
        self,
        *,
        competitor_ids: Sequence[str] | None = None,
        project_id: str | None = None,
    ) -> list[PageRecord]:
        self.calls.append({"competitor_ids": competitor_ids, "project_id": project_id})
        if self._error is not None:
            raise self._error
        pages = [
            page
            for page in self._pages
            if not competitor_ids or page.competitor_id in competitor_ids
        ]
        return sorted(pages, key=lambda page: page.updated_at, reverse=True)

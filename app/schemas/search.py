"""
app/schemas/search.py

Request/response schemas for content search and saved searches.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from app.domain.competitor_pages import PageRecord
from app.domain.search import SavedSearch, SearchResult


class PageRecordResponse(BaseModel):
    """
    API view of a stored page, including its owning competitor's name.
    """

    id: str
    url: str
    competitor_id: str
    competitor_name: str
    title: str | None = None
    description: str | None = None
    markdown_content: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    category: str
    scrape_status: str | None = None
    last_scraped_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_record(cls, page: PageRecord) -> "PageRecordResponse":
        return cls(
            id=page.id,
            url=page.url,
            competitor_id=page.competitor_id,
            competitor_name=page.competitor_name,
            title=page.title,
            description=page.description,
            markdown_content=page.markdown_content,
            metadata=page.metadata,
            category=page.category,
            scrape_status=page.scrape_status,
            last_scraped_at=page.last_scraped_at,
            updated_at=page.updated_at,
        )


class SearchResultResponse(BaseModel):
    page: PageRecordResponse
    snippet: str
    match_positions: list[int] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: SearchResult) -> "SearchResultResponse":
        return cls(
            page=PageRecordResponse.from_record(result.page),
            snippet=result.snippet,
            match_positions=list(result.match_positions),
        )


class SavedSearchCreateRequest(BaseModel):
    query: str = Field(..., min_length=1)
    category: str | None = None
    competitor_ids: list[str] = Field(default_factory=list)


class SavedSearchResponse(BaseModel):
    id: str
    query: str
    category: str | None = None
    competitor_ids: list[str] = Field(default_factory=list)
    created_at: str

    @classmethod
    def from_saved(cls, saved: SavedSearch) -> "SavedSearchResponse":
        return cls(**saved.to_dict())

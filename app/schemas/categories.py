"""
app/schemas/categories.py

Response schemas for category comparison and page statistics.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from app.domain.competitor_pages import CompetitorPageGroup, PageStatistics
from app.schemas.search import PageRecordResponse


class CategoryCountResponse(BaseModel):
    category: str
    count: int = Field(..., ge=0)


class CompetitorPageGroupResponse(BaseModel):
    competitor_id: str
    competitor_name: str
    pages: list[PageRecordResponse] = Field(default_factory=list)

    @classmethod
    def from_group(cls, group: CompetitorPageGroup) -> "CompetitorPageGroupResponse":
        return cls(
            competitor_id=group.competitor_id,
            competitor_name=group.competitor_name,
            pages=[PageRecordResponse.from_record(page) for page in group.pages],
        )


class CategoryComparisonResponse(BaseModel):
    """
    Category counts over all project pages plus the filtered side-by-side groups.
    """

    categories: list[CategoryCountResponse] = Field(default_factory=list)
    groups: list[CompetitorPageGroupResponse] = Field(default_factory=list)


class PageStatisticsResponse(BaseModel):
    total_pages: int = Field(..., ge=0)
    status_counts: dict[str, int] = Field(default_factory=dict)
    success_count: int = Field(..., ge=0)
    pending_count: int = Field(..., ge=0)
    top_category: CategoryCountResponse | None = None
    last_crawled_at: datetime | None = None

    @classmethod
    def from_statistics(cls, stats: PageStatistics) -> "PageStatisticsResponse":
        top = stats.top_category
        return cls(
            total_pages=stats.total_pages,
            status_counts=stats.status_counts,
            success_count=stats.success_count,
            pending_count=stats.pending_count,
            top_category=CategoryCountResponse(category=top[0], count=top[1]) if top else None,
            last_crawled_at=stats.last_crawled_at,
        )

"""
app/domain/competitor_pages.py

Read-side domain models for discovered competitor pages.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

UNCATEGORIZED = "Uncategorized"
UNKNOWN_COMPETITOR = "Unknown"


def effective_category(metadata: dict[str, Any] | None) -> str:
    """
    Return the page category stored in metadata, or "Uncategorized".

    Metadata is written by the external categorizer, so non-string values
    are rendered with str().
    """

    if not isinstance(metadata, dict):
        return UNCATEGORIZED
    category = metadata.get("category")
    if category is None:
        return UNCATEGORIZED
    return category if isinstance(category, str) else str(category)


@dataclass(frozen=True)
class PageRecord:
    """
    One stored page, denormalized with its owning competitor's name.
    """

    id: str
    url: str
    competitor_id: str
    competitor_name: str = UNKNOWN_COMPETITOR
    title: str | None = None
    description: str | None = None
    markdown_content: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    scrape_status: str | None = None
    last_scraped_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def category(self) -> str:
        return effective_category(self.metadata)


@dataclass(frozen=True)
class CompetitorPageGroup:
    """
    Pages of one competitor, used for side-by-side comparison.
    """

    competitor_id: str
    competitor_name: str
    pages: list[PageRecord] = field(default_factory=list)


@dataclass(frozen=True)
class PageStatistics:
    """
    Headline numbers for a competitor's discovered pages.
    """

    total_pages: int
    status_counts: dict[str, int]
    success_count: int
    pending_count: int
    top_category: tuple[str, int] | None
    last_crawled_at: datetime | None = None

"""
app/services/category_service.py

Category breakdowns and page statistics for comparison views.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from datetime import datetime

from app.domain.competitor_pages import CompetitorPageGroup, PageRecord, PageStatistics

_UNKNOWN_STATUS = "unknown"
_SUCCESS_STATUS = "success"
_PENDING_STATUS = "pending"


def count_categories(pages: Iterable[PageRecord]) -> list[tuple[str, int]]:
    """
    Return (category, page count) pairs, largest first; ties keep first-seen order.
    """

    counts = Counter(page.category for page in pages)
    return sorted(counts.items(), key=lambda item: -item[1])


def filter_pages(
    pages: Iterable[PageRecord],
    *,
    category: str | None = None,
    competitor_ids: Sequence[str] | None = None,
) -> list[PageRecord]:
    selected = set(competitor_ids or ())
    return [
        page
        for page in pages
        if (not category or page.category == category)
        and (not selected or page.competitor_id in selected)
    ]


def retain_known_competitors(competitor_ids: Iterable[str], known: Iterable[str]) -> list[str]:
    """
    Drop ids of competitors that no longer exist, keeping the saved order.
    """

    known_ids = set(known)
    return [competitor_id for competitor_id in competitor_ids if competitor_id in known_ids]


def group_by_competitor(pages: Iterable[PageRecord]) -> list[CompetitorPageGroup]:
    """
    Group pages per competitor, ordered by competitor name (case-insensitive).
    """

    groups: dict[str, CompetitorPageGroup] = {}
    for page in pages:
        group = groups.get(page.competitor_id)
        if group is None:
            group = CompetitorPageGroup(
                competitor_id=page.competitor_id,
                competitor_name=page.competitor_name,
            )
            groups[page.competitor_id] = group
        group.pages.append(page)
    return sorted(groups.values(), key=lambda group: group.competitor_name.casefold())


def summarize_pages(
    pages: Sequence[PageRecord],
    *,
    last_crawled_at: datetime | None = None,
) -> PageStatistics:
    status_counts = Counter(page.scrape_status or _UNKNOWN_STATUS for page in pages)
    categories = count_categories(pages)
    return PageStatistics(
        total_pages=len(pages),
        status_counts=dict(status_counts),
        success_count=status_counts.get(_SUCCESS_STATUS, 0),
        pending_count=status_counts.get(_PENDING_STATUS, 0),
        top_category=categories[0] if categories else None,
        last_crawled_at=last_crawled_at,
    )

"""
Relevance ordering for matched search results.

Pages whose title contains any query term come first. Within each group,
pages with more term occurrences in their markdown content come first.
Ties keep retrieval order.
"""

from __future__ import annotations

from collections.abc import Sequence

from app.domain.competitor_pages import PageRecord
from app.domain.search import SearchResult


def title_matches(page: PageRecord, terms: Sequence[str]) -> bool:
    title = (page.title or "").lower()
    return any(term in title for term in terms)


def term_occurrences(page: PageRecord, terms: Sequence[str]) -> int:
    """
    Sum of non-overlapping occurrences of every term in the markdown content.
    """

    content = (page.markdown_content or "").lower()
    return sum(content.count(term) for term in terms)


def rank_results(results: Sequence[SearchResult], terms: Sequence[str]) -> list[SearchResult]:
    """
    Return results ordered by title match, then occurrence count, both descending.
    """

    # Keys are computed once per result; sorted() is stable.
    keyed = [
        ((0 if title_matches(result.page, terms) else 1, -term_occurrences(result.page, terms)), result)
        for result in results
    ]
    keyed.sort(key=lambda item: item[0])
    return [result for _, result in keyed]

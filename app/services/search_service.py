"""
app/services/search_service.py

Content search orchestration over stored competitor pages.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import lru_cache

from app.config import get_saved_search_settings
from app.domain.search import SearchResult
from app.logging_utils import log_event
from app.search.matching import combined_text, match_positions, matches_all_terms, split_terms
from app.search.ranking import rank_results
from app.search.snippet import generate_snippet
from app.search.source import PageSource
from app.storage.key_value import FileKeyValueStorage
from app.storage.saved_searches import SavedSearchStore

logger = logging.getLogger(__name__)


class ContentSearchService:
    """
    Full-text search across scraped page content.

    Candidate pages are fetched once per query, filtered and ranked in memory.
    Fetch errors propagate to the caller; there is no retry and no fallback.
    """

    def __init__(self, page_source: PageSource) -> None:
        self._page_source = page_source

    def search(
        self,
        query: str,
        *,
        competitor_ids: Sequence[str] | None = None,
        category: str | None = None,
    ) -> list[SearchResult]:
        if not query.strip():
            return []

        pages = self._page_source.list_pages(competitor_ids=list(competitor_ids) if competitor_ids else None)
        terms = split_terms(query)

        matched: list[SearchResult] = []
        for page in pages:
            if category and page.category != category:
                continue

            text = combined_text(page)
            if not matches_all_terms(text, terms):
                continue

            if page.markdown_content is not None:
                snippet_source = page.markdown_content
            elif page.description is not None:
                snippet_source = page.description
            else:
                snippet_source = page.url

            matched.append(
                SearchResult(
                    page=page,
                    snippet=generate_snippet(snippet_source, terms),
                    match_positions=match_positions(text, terms),
                )
            )

        results = rank_results(matched, terms)
        log_event(
            logger,
            logging.INFO,
            "content_search_completed",
            terms=len(terms),
            candidates=len(pages),
            results=len(results),
            category=category,
            competitor_filter=len(competitor_ids or ()),
        )
        return results


@lru_cache(maxsize=1)
def get_saved_search_store() -> SavedSearchStore:
    """
    Build and cache the file-backed saved search store.
    """

    settings = get_saved_search_settings()
    return SavedSearchStore(FileKeyValueStorage(settings.storage_dir))

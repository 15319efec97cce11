"""
Query term extraction and substring matching over page text.
"""

from __future__ import annotations

from collections.abc import Sequence

from app.domain.competitor_pages import PageRecord


def split_terms(query: str) -> list[str]:
    """
    Lower-case the query and split it on whitespace, dropping empty pieces.
    """

    return query.lower().split()


def combined_text(page: PageRecord) -> str:
    """
    Lower-cased searchable text: title, url, markdown content, description.
    """

    fields = (
        page.title or "",
        page.url,
        page.markdown_content or "",
        page.description or "",
    )
    return " ".join(fields).lower()


def matches_all_terms(text: str, terms: Sequence[str]) -> bool:
    # Plain substring test, so "art" also matches "start".
    return all(term in text for term in terms)


def match_positions(text: str, terms: Sequence[str]) -> list[int]:
    """
    First offset of each term in text, in term order, skipping misses.
    """

    positions = (text.find(term) for term in terms)
    return [position for position in positions if position >= 0]

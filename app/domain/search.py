"""
app/domain/search.py

Domain models for content search and saved searches.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from app.domain.competitor_pages import PageRecord


@dataclass(frozen=True)
class SearchResult:
    """
    One matched page with its excerpt and per-term match offsets.
    """

    page: PageRecord
    snippet: str
    match_positions: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class SavedSearch:
    """
    A persisted query configuration.
    """

    id: str
    query: str
    category: str | None
    competitor_ids: list[str]
    created_at: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "SavedSearch":
        competitor_ids = payload.get("competitor_ids") or []
        if not isinstance(competitor_ids, list):
            raise TypeError("competitor_ids must be a list")
        category = payload.get("category")
        return cls(
            id=str(payload["id"]),
            query=str(payload["query"]),
            category=str(category) if category is not None else None,
            competitor_ids=[str(item) for item in competitor_ids],
            created_at=str(payload["created_at"]),
        )

"""
Candidate page source abstraction used by the search service.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from app.domain.competitor_pages import PageRecord


class PageSource(ABC):
    """
    Read access to stored competitor pages.
    """

    @abstractmethod
    def list_pages(
        self,
        *,
        competitor_ids: Sequence[str] | None = None,
        project_id: str | None = None,
    ) -> list[PageRecord]:
        """
        Return pages, optionally scoped, most recently updated first.
        """

"""
app/domain package marker.
"""

from app.domain.competitor_pages import (
    UNCATEGORIZED,
    CompetitorPageGroup,
    PageRecord,
    PageStatistics,
    effective_category,
)
from app.domain.search import SavedSearch, SearchResult
from app.domain.workflow import ALLOWED_WORKFLOW_ACTIONS, WorkflowAction, WorkflowProxyResult

__all__ = [
    "ALLOWED_WORKFLOW_ACTIONS",
    "CompetitorPageGroup",
    "PageRecord",
    "PageStatistics",
    "SavedSearch",
    "SearchResult",
    "UNCATEGORIZED",
    "WorkflowAction",
    "WorkflowProxyResult",
    "effective_category",
]

"""
app/schemas package marker.
"""

from app.schemas.categories import (
    CategoryComparisonResponse,
    CategoryCountResponse,
    CompetitorPageGroupResponse,
    PageStatisticsResponse,
)
from app.schemas.projects import (
    CompetitorCreateRequest,
    CompetitorInsightResponse,
    CompetitorResponse,
    CompetitorUpdateRequest,
    CountResponse,
    ProjectCreateRequest,
    ProjectResponse,
    ProjectStatsResponse,
    ProjectUpdateRequest,
)
from app.schemas.search import (
    PageRecordResponse,
    SavedSearchCreateRequest,
    SavedSearchResponse,
    SearchResultResponse,
)
from app.schemas.workflow import ScrapeSiteMapRequest, WorkflowProxyRequest, WorkflowProxyResponse

__all__ = [
    "CategoryComparisonResponse",
    "CategoryCountResponse",
    "CompetitorCreateRequest",
    "CompetitorInsightResponse",
    "CompetitorPageGroupResponse",
    "CompetitorResponse",
    "CompetitorUpdateRequest",
    "CountResponse",
    "PageRecordResponse",
    "PageStatisticsResponse",
    "ProjectCreateRequest",
    "ProjectResponse",
    "ProjectStatsResponse",
    "ProjectUpdateRequest",
    "SavedSearchCreateRequest",
    "SavedSearchResponse",
    "ScrapeSiteMapRequest",
    "SearchResultResponse",
    "WorkflowProxyRequest",
    "WorkflowProxyResponse",
]

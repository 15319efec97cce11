"""
app/services package marker.
"""

from app.services.project_service import ProjectService, ProjectStats
from app.services.search_service import ContentSearchService, get_saved_search_store
from app.services.workflow_proxy_service import (
    WorkflowNotConfiguredError,
    WorkflowProxyService,
    get_workflow_proxy_service,
)

__all__ = [
    "ContentSearchService",
    "ProjectService",
    "ProjectStats",
    "WorkflowNotConfiguredError",
    "WorkflowProxyService",
    "get_saved_search_store",
    "get_workflow_proxy_service",
]

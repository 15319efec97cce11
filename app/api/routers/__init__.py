"""
app/api/routers package marker.
"""

from app.api.routers.pages import router as pages_router
from app.api.routers.projects import router as projects_router
from app.api.routers.search import router as search_router
from app.api.routers.workflow import router as workflow_router

__all__ = [
    "pages_router",
    "projects_router",
    "search_router",
    "workflow_router",
]

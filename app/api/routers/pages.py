"""
app/api/routers/pages.py

Competitor page listings, category comparison and page statistics.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.api.dependencies import get_page_repository, get_project_service, not_found, parse_path_id
from app.schemas.categories import (
    CategoryComparisonResponse,
    CategoryCountResponse,
    CompetitorPageGroupResponse,
    PageStatisticsResponse,
)
from app.schemas.search import PageRecordResponse
from app.services.category_service import (
    count_categories,
    filter_pages,
    group_by_competitor,
    summarize_pages,
)
from app.services.project_service import ProjectService
from db.repositories.errors import EntityNotFoundError
from db.repositories.page_repository import CompetitorPageRepository

router = APIRouter(tags=["pages"])


@router.get("/competitors/{competitor_id}/pages", response_model=list[PageRecordResponse])
def list_competitor_pages(
    competitor_id: str,
    pages: CompetitorPageRepository = Depends(get_page_repository),
) -> list[PageRecordResponse]:
    records = pages.list_competitor_pages(parse_path_id(competitor_id, field="competitor_id"))
    return [PageRecordResponse.from_record(record) for record in records]


@router.get("/competitors/{competitor_id}/stats", response_model=PageStatisticsResponse)
def get_competitor_page_stats(
    competitor_id: str,
    pages: CompetitorPageRepository = Depends(get_page_repository),
    service: ProjectService = Depends(get_project_service),
) -> PageStatisticsResponse:
    parsed_id = parse_path_id(competitor_id, field="competitor_id")
    try:
        competitor = service.get_competitor(parsed_id)
    except EntityNotFoundError as exc:
        raise not_found(exc) from exc

    stats = summarize_pages(
        pages.list_competitor_pages(parsed_id),
        last_crawled_at=competitor.last_crawled_at,
    )
    return PageStatisticsResponse.from_statistics(stats)


@router.get("/projects/{project_id}/categories", response_model=CategoryComparisonResponse)
def compare_categories(
    project_id: str,
    category: str | None = Query(default=None, description="Only show pages in this category"),
    competitor_id: list[str] | None = Query(default=None, description="Only show these competitors"),
    pages: CompetitorPageRepository = Depends(get_page_repository),
) -> CategoryComparisonResponse:
    """
    Category counts across the project, plus filtered pages grouped per competitor.
    """

    try:
        project_pages = pages.list_pages(project_id=str(parse_path_id(project_id, field="project_id")))
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    selected = filter_pages(project_pages, category=category, competitor_ids=competitor_id)
    return CategoryComparisonResponse(
        categories=[
            CategoryCountResponse(category=name, count=count)
            for name, count in count_categories(project_pages)
        ],
        groups=[CompetitorPageGroupResponse.from_group(group) for group in group_by_competitor(selected)],
    )

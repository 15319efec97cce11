"""
app/api/routers/projects.py

Project and competitor CRUD endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.api.dependencies import get_project_service, not_found, parse_path_id
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
from app.services.project_service import ProjectService
from db.repositories.errors import EntityNotFoundError

router = APIRouter(tags=["projects"])


def _bad_request(exc: ValueError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@router.get("/projects", response_model=list[ProjectResponse])
def list_projects(service: ProjectService = Depends(get_project_service)) -> list[ProjectResponse]:
    return [ProjectResponse.model_validate(project) for project in service.list_projects()]


@router.post("/projects", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
def create_project(
    body: ProjectCreateRequest,
    service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    try:
        project = service.create_project(
            name=body.name,
            description=body.description,
            user_id=body.user_id,
        )
    except ValueError as exc:
        raise _bad_request(exc) from exc
    return ProjectResponse.model_validate(project)


@router.get("/projects/{project_id}", response_model=ProjectResponse)
def get_project(
    project_id: str,
    service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    try:
        project = service.get_project(parse_path_id(project_id, field="project_id"))
    except EntityNotFoundError as exc:
        raise not_found(exc) from exc
    return ProjectResponse.model_validate(project)


@router.patch("/projects/{project_id}", response_model=ProjectResponse)
def update_project(
    project_id: str,
    body: ProjectUpdateRequest,
    service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    try:
        project = service.update_project(
            parse_path_id(project_id, field="project_id"),
            body.model_dump(exclude_unset=True),
        )
    except EntityNotFoundError as exc:
        raise not_found(exc) from exc
    except ValueError as exc:
        raise _bad_request(exc) from exc
    return ProjectResponse.model_validate(project)


@router.delete("/projects/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_project(
    project_id: str,
    service: ProjectService = Depends(get_project_service),
) -> Response:
    try:
        service.delete_project(parse_path_id(project_id, field="project_id"))
    except EntityNotFoundError as exc:
        raise not_found(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/stats", response_model=ProjectStatsResponse)
def get_stats(service: ProjectService = Depends(get_project_service)) -> ProjectStatsResponse:
    stats = service.get_stats()
    return ProjectStatsResponse(
        total_projects=stats.total_projects,
        total_competitors=stats.total_competitors,
        pending_crawls=stats.pending_crawls,
    )


@router.get("/projects/{project_id}/competitors", response_model=list[CompetitorResponse])
def list_competitors(
    project_id: str,
    service: ProjectService = Depends(get_project_service),
) -> list[CompetitorResponse]:
    competitors = service.list_competitors(parse_path_id(project_id, field="project_id"))
    return [CompetitorResponse.model_validate(competitor) for competitor in competitors]


@router.get("/projects/{project_id}/competitors/count", response_model=CountResponse)
def count_competitors(
    project_id: str,
    service: ProjectService = Depends(get_project_service),
) -> CountResponse:
    return CountResponse(count=service.count_competitors(parse_path_id(project_id, field="project_id")))


@router.post(
    "/projects/{project_id}/competitors",
    response_model=CompetitorResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_competitor(
    project_id: str,
    body: CompetitorCreateRequest,
    service: ProjectService = Depends(get_project_service),
) -> CompetitorResponse:
    try:
        competitor = service.create_competitor(
            project_id=parse_path_id(project_id, field="project_id"),
            name=body.name,
            main_url=body.main_url,
        )
    except EntityNotFoundError as exc:
        raise not_found(exc) from exc
    except ValueError as exc:
        raise _bad_request(exc) from exc
    return CompetitorResponse.model_validate(competitor)


@router.get("/competitors/{competitor_id}", response_model=CompetitorResponse)
def get_competitor(
    competitor_id: str,
    service: ProjectService = Depends(get_project_service),
) -> CompetitorResponse:
    try:
        competitor = service.get_competitor(parse_path_id(competitor_id, field="competitor_id"))
    except EntityNotFoundError as exc:
        raise not_found(exc) from exc
    return CompetitorResponse.model_validate(competitor)


@router.patch("/competitors/{competitor_id}", response_model=CompetitorResponse)
def update_competitor(
    competitor_id: str,
    body: CompetitorUpdateRequest,
    service: ProjectService = Depends(get_project_service),
) -> CompetitorResponse:
    try:
        competitor = service.update_competitor(
            parse_path_id(competitor_id, field="competitor_id"),
            body.model_dump(exclude_unset=True),
        )
    except EntityNotFoundError as exc:
        raise not_found(exc) from exc
    except ValueError as exc:
        raise _bad_request(exc) from exc
    return CompetitorResponse.model_validate(competitor)


@router.delete("/competitors/{competitor_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_competitor(
    competitor_id: str,
    service: ProjectService = Depends(get_project_service),
) -> Response:
    try:
        service.delete_competitor(parse_path_id(competitor_id, field="competitor_id"))
    except EntityNotFoundError as exc:
        raise not_found(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/competitors/{competitor_id}/insights", response_model=list[CompetitorInsightResponse])
def list_competitor_insights(
    competitor_id: str,
    service: ProjectService = Depends(get_project_service),
) -> list[CompetitorInsightResponse]:
    try:
        insights = service.list_insights(parse_path_id(competitor_id, field="competitor_id"))
    except EntityNotFoundError as exc:
        raise not_found(exc) from exc
    return [CompetitorInsightResponse.model_validate(insight) for insight in insights]

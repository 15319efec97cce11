"""
app/api/routers/workflow.py

Crawl and scrape triggers forwarded to the external workflow engine.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.api.dependencies import get_page_repository, get_project_service, not_found, parse_path_id
from app.domain.workflow import WorkflowProxyResult
from app.schemas.workflow import ScrapeSiteMapRequest, WorkflowProxyRequest, WorkflowProxyResponse
from app.services.project_service import ProjectService
from app.services.workflow_proxy_service import (
    WorkflowNotConfiguredError,
    WorkflowProxyService,
    get_workflow_proxy_service,
)
from db.repositories.errors import EntityNotFoundError
from db.repositories.page_repository import CompetitorPageRepository

router = APIRouter(tags=["workflow"])


def _to_response(result: WorkflowProxyResult) -> JSONResponse:
    body = WorkflowProxyResponse.from_result(result).to_body()
    return JSONResponse(status_code=result.status_code, content=jsonable_encoder(body))


def _not_configured(exc: WorkflowNotConfiguredError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc))


@router.post("/workflow/proxy", response_model=WorkflowProxyResponse)
def proxy_workflow(
    body: WorkflowProxyRequest,
    proxy: WorkflowProxyService = Depends(get_workflow_proxy_service),
) -> JSONResponse:
    """
    Forward an allowed action verbatim to the workflow engine.
    """

    try:
        result = proxy.forward(body.action, body.payload, body.query_params)
    except WorkflowNotConfiguredError as exc:
        raise _not_configured(exc) from exc
    return _to_response(result)


@router.post("/competitors/{competitor_id}/map", response_model=WorkflowProxyResponse)
def trigger_site_map(
    competitor_id: str,
    body: ScrapeSiteMapRequest | None = None,
    service: ProjectService = Depends(get_project_service),
    proxy: WorkflowProxyService = Depends(get_workflow_proxy_service),
) -> JSONResponse:
    try:
        competitor = service.get_competitor(parse_path_id(competitor_id, field="competitor_id"))
        result = proxy.trigger_site_map(competitor, max_urls=(body or ScrapeSiteMapRequest()).max_urls)
    except EntityNotFoundError as exc:
        raise not_found(exc) from exc
    except WorkflowNotConfiguredError as exc:
        raise _not_configured(exc) from exc
    return _to_response(result)


@router.post("/competitors/{competitor_id}/scrape-pending", response_model=WorkflowProxyResponse)
def trigger_scrape_pending(
    competitor_id: str,
    service: ProjectService = Depends(get_project_service),
    pages: CompetitorPageRepository = Depends(get_page_repository),
    proxy: WorkflowProxyService = Depends(get_workflow_proxy_service),
) -> JSONResponse:
    parsed_id = parse_path_id(competitor_id, field="competitor_id")
    try:
        service.get_competitor(parsed_id)
        result = proxy.trigger_scrape_pending(str(parsed_id), pages.list_competitor_pages(parsed_id))
    except EntityNotFoundError as exc:
        raise not_found(exc) from exc
    except WorkflowNotConfiguredError as exc:
        raise _not_configured(exc) from exc
    return _to_response(result)

"""
app/api/routers/search.py

Content search and saved search endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from app.api.dependencies import get_content_search_service
from app.schemas.search import SavedSearchCreateRequest, SavedSearchResponse, SearchResultResponse
from app.services.search_service import ContentSearchService, get_saved_search_store
from app.storage.saved_searches import SavedSearchStore

router = APIRouter(tags=["search"])


@router.get("/search", response_model=list[SearchResultResponse])
def search_content(
    q: str = Query(default="", description="Whitespace-separated search terms"),
    category: str | None = Query(default=None, description="Exact page category"),
    competitor_id: list[str] | None = Query(default=None, description="Restrict to these competitors"),
    search_service: ContentSearchService = Depends(get_content_search_service),
) -> list[SearchResultResponse]:
    """
    Search scraped page content. Every term must appear in the page.
    """

    try:
        results = search_service.search(q, competitor_ids=competitor_id, category=category)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    return [SearchResultResponse.from_result(result) for result in results]


@router.get("/saved-searches", response_model=list[SavedSearchResponse])
def list_saved_searches(
    store: SavedSearchStore = Depends(get_saved_search_store),
) -> list[SavedSearchResponse]:
    return [SavedSearchResponse.from_saved(saved) for saved in store.list()]


@router.post(
    "/saved-searches",
    response_model=SavedSearchResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_saved_search(
    body: SavedSearchCreateRequest,
    store: SavedSearchStore = Depends(get_saved_search_store),
) -> SavedSearchResponse:
    saved = store.save(body.query, body.category, body.competitor_ids)
    return SavedSearchResponse.from_saved(saved)


@router.delete("/saved-searches/{search_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_saved_search(
    search_id: str,
    store: SavedSearchStore = Depends(get_saved_search_store),
) -> Response:
    store.delete(search_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

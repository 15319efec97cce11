"""
app/api/dependencies.py

Shared FastAPI dependencies and request helpers.
"""

from __future__ import annotations

import uuid

from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.services.project_service import ProjectService
from app.services.search_service import ContentSearchService
from db.repositories.errors import EntityNotFoundError
from db.repositories.page_repository import CompetitorPageRepository
from db.repositories.validators import parse_uuid
from db.session import get_db


def get_page_repository(db: Session = Depends(get_db)) -> CompetitorPageRepository:
    return CompetitorPageRepository(db)


def get_content_search_service(
    pages: CompetitorPageRepository = Depends(get_page_repository),
) -> ContentSearchService:
    return ContentSearchService(pages)


def get_project_service(db: Session = Depends(get_db)) -> ProjectService:
    return ProjectService(db)


def parse_path_id(value: str, *, field: str) -> uuid.UUID:
    """
    Parse a path identifier, answering 400 when it is not a UUID.
    """

    try:
        return parse_uuid(value, field=field)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


def not_found(exc: EntityNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))

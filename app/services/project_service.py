"""
app/services/project_service.py

Project and competitor management on top of the repositories.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Any

from sqlalchemy.orm import Session

from app.logging_utils import log_event
from db.models.competitor import Competitor, CompetitorStatus
from db.models.competitor_insight import CompetitorInsight
from db.models.project import Project
from db.repositories.project_repository import CompetitorRepository, ProjectRepository
from db.repositories.validators import require_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectStats:
    total_projects: int
    total_competitors: int
    pending_crawls: int


class ProjectService:
    """
    Validates inputs and delegates persistence to the repositories.
    """

    def __init__(self, db: Session) -> None:
        self._projects = ProjectRepository(db)
        self._competitors = CompetitorRepository(db)

    # ── Projects ──────────────────────────────────────────────────────────────

    def list_projects(self) -> list[Project]:
        return self._projects.list_projects()

    def get_project(self, project_id: uuid.UUID) -> Project:
        return self._projects.get_project(project_id)

    def create_project(self, *, name: str, description: str | None, user_id: str) -> Project:
        project = self._projects.create_project(
            name=require_text(name, field="name"),
            description=description,
            user_id=require_text(user_id, field="user_id"),
        )
        log_event(logger, logging.INFO, "project_created", project_id=project.id)
        return project

    def update_project(self, project_id: uuid.UUID, updates: dict[str, Any]) -> Project:
        if "name" in updates:
            updates = {**updates, "name": require_text(updates["name"], field="name")}
        return self._projects.update_project(project_id, updates)

    def delete_project(self, project_id: uuid.UUID) -> None:
        self._projects.delete_project(project_id)
        log_event(logger, logging.INFO, "project_deleted", project_id=project_id)

    def get_stats(self) -> ProjectStats:
        return ProjectStats(
            total_projects=self._projects.count_projects(),
            total_competitors=self._competitors.count_competitors(),
            pending_crawls=self._competitors.count_by_status(CompetitorStatus.PENDING),
        )

    # ── Competitors ───────────────────────────────────────────────────────────

    def list_competitors(self, project_id: uuid.UUID) -> list[Competitor]:
        return self._competitors.list_competitors(project_id)

    def count_competitors(self, project_id: uuid.UUID) -> int:
        return self._competitors.count_competitors(project_id)

    def get_competitor(self, competitor_id: uuid.UUID) -> Competitor:
        return self._competitors.get_competitor(competitor_id)

    def create_competitor(self, *, project_id: uuid.UUID, name: str, main_url: str) -> Competitor:
        competitor = self._competitors.create_competitor(
            project_id=project_id,
            name=require_text(name, field="name"),
            main_url=require_text(main_url, field="main_url"),
        )
        log_event(
            logger,
            logging.INFO,
            "competitor_created",
            competitor_id=competitor.id,
            project_id=project_id,
        )
        return competitor

    def update_competitor(self, competitor_id: uuid.UUID, updates: dict[str, Any]) -> Competitor:
        for field in ("name", "main_url", "status"):
            if field in updates:
                updates = {**updates, field: require_text(updates[field], field=field)}
        return self._competitors.update_competitor(competitor_id, updates)

    def delete_competitor(self, competitor_id: uuid.UUID) -> None:
        self._competitors.delete_competitor(competitor_id)
        log_event(logger, logging.INFO, "competitor_deleted", competitor_id=competitor_id)

    def list_insights(self, competitor_id: uuid.UUID) -> list[CompetitorInsight]:
        self._competitors.get_competitor(competitor_id)
        return self._competitors.list_insights(competitor_id)

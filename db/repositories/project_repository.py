"""
Project and competitor repository: CRUD lookups and counters.
"""

from __future__ import annotations

import uuid
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from db.models.competitor import Competitor, CompetitorStatus
from db.models.competitor_insight import CompetitorInsight
from db.models.project import Project
from db.repositories.errors import EntityNotFoundError

_PROJECT_UPDATABLE = frozenset({"name", "description"})
_COMPETITOR_UPDATABLE = frozenset({"name", "main_url", "status"})


class ProjectRepository:
    def __init__(self, session: Session) -> None:
        self._session = session

    def list_projects(self) -> list[Project]:
        stmt = select(Project).order_by(Project.created_at.desc())
        return list(self._session.scalars(stmt))

    def get_project(self, project_id: uuid.UUID) -> Project:
        project = self._session.get(Project, project_id)
        if project is None:
            raise EntityNotFoundError("Project", project_id)
        return project

    def create_project(self, *, name: str, description: str | None, user_id: str) -> Project:
        project = Project(name=name, description=description, user_id=user_id)
        self._session.add(project)
        self._session.commit()
        self._session.refresh(project)
        return project

    def update_project(self, project_id: uuid.UUID, updates: dict[str, Any]) -> Project:
        project = self.get_project(project_id)
        _apply_updates(project, updates, _PROJECT_UPDATABLE)
        self._session.commit()
        self._session.refresh(project)
        return project

    def delete_project(self, project_id: uuid.UUID) -> None:
        project = self.get_project(project_id)
        self._session.delete(project)
        self._session.commit()

    def count_projects(self) -> int:
        return int(self._session.scalar(select(func.count()).select_from(Project)) or 0)


class CompetitorRepository:
    def __init__(self, session: Session) -> None:
        self._session = session

    def list_competitors(self, project_id: uuid.UUID) -> list[Competitor]:
        stmt = (
            select(Competitor)
            .where(Competitor.project_id == project_id)
            .order_by(Competitor.created_at.desc())
        )
        return list(self._session.scalars(stmt))

    def get_competitor(self, competitor_id: uuid.UUID) -> Competitor:
        competitor = self._session.get(Competitor, competitor_id)
        if competitor is None:
            raise EntityNotFoundError("Competitor", competitor_id)
        return competitor

    def create_competitor(self, *, project_id: uuid.UUID, name: str, main_url: str) -> Competitor:
        if self._session.get(Project, project_id) is None:
            raise EntityNotFoundError("Project", project_id)
        competitor = Competitor(
            project_id=project_id,
            name=name,
            main_url=main_url,
            status=CompetitorStatus.PENDING,
        )
        self._session.add(competitor)
        self._session.commit()
        self._session.refresh(competitor)
        return competitor

    def update_competitor(self, competitor_id: uuid.UUID, updates: dict[str, Any]) -> Competitor:
        competitor = self.get_competitor(competitor_id)
        _apply_updates(competitor, updates, _COMPETITOR_UPDATABLE)
        self._session.commit()
        self._session.refresh(competitor)
        return competitor

    def delete_competitor(self, competitor_id: uuid.UUID) -> None:
        competitor = self.get_competitor(competitor_id)
        self._session.delete(competitor)
        self._session.commit()

    def count_competitors(self, project_id: uuid.UUID | None = None) -> int:
        stmt = select(func.count()).select_from(Competitor)
        if project_id is not None:
            stmt = stmt.where(Competitor.project_id == project_id)
        return int(self._session.scalar(stmt) or 0)

    def count_by_status(self, status: str) -> int:
        stmt = select(func.count()).select_from(Competitor).where(Competitor.status == status)
        return int(self._session.scalar(stmt) or 0)

    def list_insights(self, competitor_id: uuid.UUID) -> list[CompetitorInsight]:
        stmt = (
            select(CompetitorInsight)
            .where(CompetitorInsight.competitor_id == competitor_id)
            .order_by(CompetitorInsight.created_at.desc())
        )
        return list(self._session.scalars(stmt))


def _apply_updates(row: object, updates: dict[str, Any], allowed: frozenset[str]) -> None:
    unknown = set(updates) - allowed
    if unknown:
        raise ValueError(f"Fields cannot be updated: {sorted(unknown)}")
    for key, value in updates.items():
        setattr(row, key, value)

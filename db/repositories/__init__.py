"""
Repository layer exports.
"""

from db.repositories.errors import EntityNotFoundError, RepositoryError
from db.repositories.page_repository import CompetitorPageRepository
from db.repositories.project_repository import CompetitorRepository, ProjectRepository
from db.repositories.validators import parse_uuid, parse_uuid_list, require_text

__all__ = [
    "CompetitorPageRepository",
    "CompetitorRepository",
    "EntityNotFoundError",
    "ProjectRepository",
    "RepositoryError",
    "parse_uuid",
    "parse_uuid_list",
    "require_text",
]

"""
Repository-layer exceptions.
"""

from __future__ import annotations


class RepositoryError(Exception):
    """Base exception for repository failures."""


class EntityNotFoundError(RepositoryError):
    """Raised when a referenced row does not exist."""

    def __init__(self, entity: str, entity_id: object) -> None:
        super().__init__(f"{entity} not found: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id

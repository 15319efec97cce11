"""
Model package exports.

Import all SQLAlchemy models here so metadata registration and Alembic
autogeneration work without extra imports.
"""

from db.models.competitor import Competitor, CompetitorStatus
from db.models.competitor_insight import CompetitorInsight
from db.models.competitor_page import CompetitorPage, ScrapeStatus
from db.models.project import Project

__all__ = [
    "Competitor",
    "CompetitorInsight",
    "CompetitorPage",
    "CompetitorStatus",
    "Project",
    "ScrapeStatus",
]

"""
db/models/competitor.py

Competitor model: one tracked company website inside a project.
"""

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Index, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from db.base import Base, CreatedAtMixin

if TYPE_CHECKING:
    from db.models.competitor_insight import CompetitorInsight
    from db.models.competitor_page import CompetitorPage
    from db.models.project import Project


class CompetitorStatus:
    PENDING = "Pending"
    ACTIVE = "Active"
    PAUSED = "Paused"


class Competitor(Base, CreatedAtMixin):
    """
    A tracked company. Its pages are discovered and scraped by the external
    workflow engine and written back to competitor_pages.
    """

    __tablename__ = "competitors"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    project_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    main_url: Mapped[str] = mapped_column(String(2048), nullable=False)

    status: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default=CompetitorStatus.PENDING,
        comment="Pending until the first site map completes",
    )

    last_crawled_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    # ── Relationships ──────────────────────────────────────────────────────────

    project: Mapped["Project"] = relationship("Project", back_populates="competitors")

    pages: Mapped[list["CompetitorPage"]] = relationship(
        "CompetitorPage",
        back_populates="competitor",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    insights: Mapped[list["CompetitorInsight"]] = relationship(
        "CompetitorInsight",
        back_populates="competitor",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        Index("ix_competitors_project_id", "project_id"),
        Index("ix_competitors_status", "status"),
    )

    def __repr__(self) -> str:
        return f"<Competitor id={self.id} name={self.name!r} status={self.status!r}>"

"""
db/models/competitor_page.py

Discovered competitor page, written by the external crawl/scrape workflow.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import TYPE_CHECKING, Any

from sqlalchemy import DateTime, ForeignKey, Index, String, Text
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from db.base import Base, TimestampMixin

if TYPE_CHECKING:
    from db.models.competitor import Competitor


class ScrapeStatus:
    NOT_SCRAPED = "not_scraped"
    PENDING = "pending"
    PROCESSING = "processing"
    SUCCESS = "success"
    FAILED = "failed"


class CompetitorPage(Base, TimestampMixin):
    __tablename__ = "competitor_pages"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    competitor_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("competitors.id", ondelete="CASCADE"),
        nullable=False,
    )
    url: Mapped[str] = mapped_column(String(2048), nullable=False)
    title: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    markdown_content: Mapped[str | None] = mapped_column(Text, nullable=True)
    metadata_json: Mapped[dict[str, Any] | None] = mapped_column(
        JSONB,
        nullable=True,
        comment="Free-form page metadata; 'category' is set by the categorizer",
    )
    scrape_status: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default=ScrapeStatus.NOT_SCRAPED,
        comment="not_scraped, pending, processing, success, failed",
    )
    last_scraped_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    competitor: Mapped["Competitor"] = relationship("Competitor", back_populates="pages")

    __table_args__ = (
        Index("ix_competitor_pages_competitor_id", "competitor_id"),
        Index("ix_competitor_pages_scrape_status", "scrape_status"),
        Index("ix_competitor_pages_updated_at", "updated_at"),
    )

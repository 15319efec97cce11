"""
app/schemas/projects.py

Schemas for projects, competitors and their insights.
"""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ProjectCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    user_id: str = Field(..., min_length=1, max_length=255)


class ProjectUpdateRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None


class ProjectResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    user_id: str
    name: str
    description: str | None = None
    created_at: datetime


class CompetitorCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    main_url: str = Field(..., min_length=1, max_length=2048)


class CompetitorUpdateRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    main_url: str | None = Field(default=None, min_length=1, max_length=2048)
    status: str | None = Field(default=None, min_length=1, max_length=32)


class CompetitorResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    project_id: uuid.UUID
    name: str
    main_url: str
    status: str
    last_crawled_at: datetime | None = None
    created_at: datetime


class CompetitorInsightResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    competitor_id: uuid.UUID
    url: str
    title: str | None = None
    content: str | None = None
    summary: str | None = None
    created_at: datetime


class CountResponse(BaseModel):
    count: int = Field(..., ge=0)


class ProjectStatsResponse(BaseModel):
    total_projects: int = Field(..., ge=0)
    total_competitors: int = Field(..., ge=0)
    pending_crawls: int = Field(..., ge=0)

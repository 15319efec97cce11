from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI

from app.logging_utils import configure_logging

logger = logging.getLogger(__name__)

_REQUIRED_SETTINGS: tuple[tuple[tuple[str, ...], str], ...] = (
    (
        ("DATABASE_URL", "CLOUD_DATABASE_URL", "LOCAL_DATABASE_URL"),
        "page store database URL (DATABASE_URL, CLOUD_DATABASE_URL or LOCAL_DATABASE_URL)",
    ),
    (
        ("WORKFLOW_WEBHOOK_BASE_URL",),
        "workflow engine webhook base URL (WORKFLOW_WEBHOOK_BASE_URL)",
    ),
)


def _validate_env() -> None:
    """
    Fail fast when a required setting has none of its variables set.

    All gaps are reported together.
    """

    from db.config import load_env_files

    load_env_files()

    missing = [
        description
        for names, description in _REQUIRED_SETTINGS
        if not any(os.getenv(name, "").strip() for name in names)
    ]
    if missing:
        raise RuntimeError(
            "CompetitorIQ cannot start, missing configuration:\n"
            + "\n".join(f"  - {item}" for item in missing)
        )


def _verify_database() -> None:
    """
    Connect once, then confirm every mapped table has been migrated.

    Tables are never created here; `alembic upgrade head` owns the schema.
    """

    from sqlalchemy import inspect, text
    from sqlalchemy.exc import SQLAlchemyError

    import db.models  # noqa: F401  registers mapped tables
    from db.base import Base
    from db.session import get_engine

    try:
        with get_engine().connect() as connection:
            connection.execute(text("SELECT 1"))
            present = set(inspect(connection).get_table_names())
    except SQLAlchemyError as exc:
        raise RuntimeError("Page store database is unreachable.") from exc

    absent = sorted(set(Base.metadata.tables) - present)
    if absent:
        logger.critical("Unmigrated tables: %s", ", ".join(absent))
        raise RuntimeError(
            f"Database is missing tables ({', '.join(absent)}). "
            "Run 'alembic upgrade head' and restart."
        )
    logger.info("Database reachable with %d mapped tables", len(Base.metadata.tables))


@asynccontextmanager
async def _lifespan(application: FastAPI) -> AsyncIterator[None]:
    _verify_database()
    yield


def create_app() -> FastAPI:
    """
    Build the CompetitorIQ API with all routers mounted.
    """

    _validate_env()
    configure_logging()

    application = FastAPI(
        title="CompetitorIQ API",
        version="1.0.0",
        lifespan=_lifespan,
    )

    from app.api.routers import (
        pages_router,
        projects_router,
        search_router,
        workflow_router,
    )

    for router in (projects_router, pages_router, search_router, workflow_router):
        application.include_router(router)

    @application.get("/health")
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    return application


app = create_app()

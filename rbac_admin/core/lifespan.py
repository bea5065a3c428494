"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py; no business
logic here, only wiring of infrastructure (table creation, engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from rbac_admin.core.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup creates ORM tables when database_create_tables is set.
    Shutdown disposes the SQL engine if one was created.
    """
    settings = get_settings()

    # ---- Startup ----
    if settings.database_create_tables:
        from rbac_admin.infrastructure.persistence.database import create_tables

        await create_tables()
        logger.info("Database tables ensured")

    yield

    # ---- Shutdown ----
    from rbac_admin.infrastructure.persistence import database

    if getattr(database, "engine", None) is not None:
        await database.engine.dispose()
        logger.info("Database engine disposed")

"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring: logging, the in-memory catalog
or the SQL engine, and engine dispose on exit. No business logic.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from cardfile.core.config import get_settings
from cardfile.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown."""
    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    if settings.database_backend == "memory":
        from cardfile.infrastructure.persistence.memory_store import InMemoryCatalog

        if getattr(app.state, "catalog", None) is None:
            app.state.catalog = InMemoryCatalog()
        logger.info("Using in-memory text material store")
    else:
        from cardfile.infrastructure.persistence.database import create_all

        await create_all()
        logger.info("Database tables ensured")

    yield

    # ---- Shutdown ----
    from cardfile.infrastructure.persistence import database

    if getattr(database, "engine", None) is not None:
        await database.engine.dispose()
        logger.info("Database engine disposed")

"""Application lifespan management.

Startup:
1. Logging
2. Node registry (fails fast on a misconfigured kind set)
3. Database tables, when DB_CREATE_TABLES is set

Shutdown: dispose the database engine. Logs are flushed at exit.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
import logging
from typing import TYPE_CHECKING

from content_service.core.settings import get_app_settings, get_db_settings
from content_service.features.content import get_node_registry
from content_service.infra.database import create_tables, dispose_engine
from content_service.infra.logging import setup_logging

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from fastapi import FastAPI

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Start and stop application services."""
    setup_logging()
    app_settings = get_app_settings()

    if getattr(app.state, "node_registry", None) is None:
        app.state.node_registry = get_node_registry()

    db_settings = get_db_settings()
    if db_settings.create_tables:
        await create_tables()

    logger.info(
        "Application started",
        extra={
            "service": app_settings.service_name,
            "version": app_settings.version,
            "environment": app_settings.environment,
            "node_kinds": [kind.value for kind in app.state.node_registry.kinds],
        },
    )

    try:
        yield
    finally:
        await dispose_engine()
        logger.info("Application stopped")

"""Database session infrastructure."""

from content_service.infra.database.session import (
    create_tables,
    dispose_engine,
    get_async_session,
    get_engine,
    get_session_factory,
)

__all__ = [
    "create_tables",
    "dispose_engine",
    "get_async_session",
    "get_engine",
    "get_session_factory",
]

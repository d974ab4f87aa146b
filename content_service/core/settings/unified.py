"""Unified settings view aggregating every domain."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from .app import AppSettings
from .content import ContentSettings
from .database import DatabaseSettings
from .graphql import GraphQLSettings
from .loader import (
    get_app_settings,
    get_content_settings,
    get_db_settings,
    get_graphql_settings,
    get_logging_settings,
)
from .logs import LoggingSettings


@dataclass(frozen=True, slots=True)
class Settings:
    """All settings domains in one place.

    Example:
        settings = get_settings()
        print(settings.app.environment)
        print(settings.graphql.path)
    """

    app: AppSettings
    db: DatabaseSettings
    graphql: GraphQLSettings
    content: ContentSettings
    logging: LoggingSettings

    @property
    def environment(self) -> str:
        """Shortcut for the deployment environment."""
        return self.app.environment


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the cached unified settings."""
    return Settings(
        app=get_app_settings(),
        db=get_db_settings(),
        graphql=get_graphql_settings(),
        content=get_content_settings(),
        logging=get_logging_settings(),
    )

"""Modular Pydantic Settings v2 configuration.

Import settings via cached loaders:
    from content_service.core.settings import get_graphql_settings

Or use unified settings for convenient access to all domains:
    from content_service.core.settings import get_settings

    settings = get_settings()
    print(settings.graphql.max_page_size)

Configuration precedence (highest to lowest):
    1. init kwargs (testing/overrides)
    2. Environment variables
    3. .env file
"""

from __future__ import annotations

from .app import AppSettings
from .content import ContentSettings
from .database import DatabaseSettings
from .graphql import GraphQLSettings
from .loader import (
    clear_all_caches,
    get_app_settings,
    get_content_settings,
    get_db_settings,
    get_graphql_settings,
    get_logging_settings,
)
from .logs import LoggingSettings
from .unified import Settings, get_settings

__all__ = [
    "AppSettings",
    "ContentSettings",
    "DatabaseSettings",
    "GraphQLSettings",
    "LoggingSettings",
    "Settings",
    "clear_all_caches",
    "get_app_settings",
    "get_content_settings",
    "get_db_settings",
    "get_graphql_settings",
    "get_logging_settings",
    "get_settings",
]

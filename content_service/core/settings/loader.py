"""LRU-cached settings loaders.

Settings are loaded and validated once, then cached for the lifetime of the process.

Testing:
    In tests, clear the cache to force reload:
    get_app_settings.cache_clear()

    Or override with custom values:
    settings = AppSettings(debug=True, ...)
"""

from __future__ import annotations

from functools import lru_cache

from .app import AppSettings
from .content import ContentSettings
from .database import DatabaseSettings
from .graphql import GraphQLSettings
from .logs import LoggingSettings


@lru_cache(maxsize=1)
def get_app_settings() -> AppSettings:
    """Get cached application settings.

    Returns:
        Validated and frozen AppSettings instance.
    """
    return AppSettings()


@lru_cache(maxsize=1)
def get_db_settings() -> DatabaseSettings:
    """Get cached database settings.

    Returns:
        Validated and frozen DatabaseSettings instance.
    """
    return DatabaseSettings()


@lru_cache(maxsize=1)
def get_graphql_settings() -> GraphQLSettings:
    """Get cached GraphQL settings.

    Returns:
        Validated and frozen GraphQLSettings instance.
    """
    return GraphQLSettings()


@lru_cache(maxsize=1)
def get_content_settings() -> ContentSettings:
    """Get cached content store settings."""
    return ContentSettings()


@lru_cache(maxsize=1)
def get_logging_settings() -> LoggingSettings:
    """Get cached logging settings.

    Returns:
        Validated and frozen LoggingSettings instance.
    """
    return LoggingSettings()


def clear_all_caches() -> None:
    """Clear every cached settings instance (useful in tests)."""
    get_app_settings.cache_clear()
    get_db_settings.cache_clear()
    get_graphql_settings.cache_clear()
    get_content_settings.cache_clear()
    get_logging_settings.cache_clear()
    from .unified import get_settings

    get_settings.cache_clear()

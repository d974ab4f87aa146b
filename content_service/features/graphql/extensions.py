"""Strawberry extensions for the GraphQL schema.

Provides:
- Error formatting and production masking
- Query depth limiting
- Optional introspection lockdown
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from graphql.validation import NoSchemaIntrospectionCustomRule
from strawberry.extensions import AddValidationRules, QueryDepthLimiter

from content_service.core.settings import get_graphql_settings
from content_service.features.graphql.error_handler import ErrorFormattingExtension

if TYPE_CHECKING:
    from content_service.core.settings import GraphQLSettings

logger = logging.getLogger(__name__)


def get_extensions(settings: GraphQLSettings | None = None) -> list[Any]:
    """Get list of Strawberry extensions for the schema.

    Returns:
        List of extension classes and instances
    """
    settings = settings or get_graphql_settings()

    extensions: list[Any] = [
        ErrorFormattingExtension,
        QueryDepthLimiter(max_depth=settings.max_query_depth),
    ]
    if not settings.introspection_enabled:
        extensions.append(AddValidationRules([NoSchemaIntrospectionCustomRule]))

    logger.debug(
        "GraphQL extensions configured",
        extra={
            "max_query_depth": settings.max_query_depth,
            "introspection_enabled": settings.introspection_enabled,
        },
    )
    return extensions


__all__ = ["get_extensions"]

"""GraphQL schema assembly.

Combines Query and Mutation with the concrete node types (so that ``node``
and the ``Publication`` fields can return any of them) and the configured
extensions.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from content_service.features.graphql.error_handler import ContentSchema
from content_service.features.graphql.extensions import get_extensions
from content_service.features.graphql.resolvers import Mutation, Query
from content_service.features.graphql.types import NODE_TYPES

if TYPE_CHECKING:
    from content_service.core.settings import GraphQLSettings

logger = logging.getLogger(__name__)


def build_schema(settings: GraphQLSettings | None = None) -> ContentSchema:
    """Create the schema with extensions derived from ``settings``."""
    return ContentSchema(
        query=Query,
        mutation=Mutation,
        types=list(NODE_TYPES),
        extensions=get_extensions(settings),
    )


schema = build_schema()

logger.debug("GraphQL schema created")

__all__ = ["build_schema", "schema"]

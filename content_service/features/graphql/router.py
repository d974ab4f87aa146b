"""GraphQL router for FastAPI integration.

Provides:
- GraphQL endpoint at GRAPHQL_PATH
- Optional GraphQL IDE (GraphiQL, Apollo Sandbox or Pathfinder)
- Request context with session, content repository and node registry
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Annotated, Any, cast
from uuid import uuid4

from fastapi import APIRouter, BackgroundTasks, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession
from strawberry.fastapi import GraphQLRouter

from content_service.core.dependencies.database import get_db_session
from content_service.core.settings import get_content_settings, get_graphql_settings
from content_service.features.content import ContentRepository, get_node_registry
from content_service.features.graphql.context import GraphQLContext
from content_service.infra.logging import set_log_context

if TYPE_CHECKING:
    import strawberry

    from content_service.features.content import ContentNodeRegistry

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


def get_node_registry_dependency(request: Request) -> ContentNodeRegistry:
    """The registry built at startup, or the process default outside an app."""
    registry = getattr(request.app.state, "node_registry", None)
    return registry if registry is not None else get_node_registry()


async def get_graphql_context(
    request: Request,
    response: Response,
    background_tasks: BackgroundTasks,
    session: Annotated[AsyncSession, Depends(get_db_session)],
    nodes: Annotated[Any, Depends(get_node_registry_dependency)],
) -> GraphQLContext:
    """Create GraphQL context from FastAPI dependencies.

    Args:
        request: FastAPI request
        response: FastAPI response (for setting headers)
        background_tasks: FastAPI background tasks
        session: Database session from dependency
        nodes: Node registry

    Returns:
        GraphQLContext for use in resolvers
    """
    correlation_id = request.headers.get(CORRELATION_HEADER) or uuid4().hex
    set_log_context(correlation_id=correlation_id)
    response.headers[CORRELATION_HEADER] = correlation_id

    return GraphQLContext(
        request=request,
        response=response,
        background_tasks=background_tasks,
        session=session,
        content=ContentRepository(session, get_content_settings()),
        nodes=nodes,
        settings=get_graphql_settings(),
        correlation_id=correlation_id,
    )


def create_graphql_router(schema: strawberry.Schema | None = None) -> APIRouter:
    """Create GraphQL router with settings-based configuration."""
    if schema is None:
        from content_service.features.graphql.schema import schema as default_schema

        schema = default_schema

    settings = get_graphql_settings()

    graphql_app = GraphQLRouter(
        schema,
        path=settings.path,
        context_getter=cast("Any", get_graphql_context),
        graphql_ide=settings.graphql_ide or None,
    )

    router = APIRouter()
    router.include_router(graphql_app)

    logger.debug(
        "GraphQL router created",
        extra={"path": settings.path, "graphql_ide": settings.graphql_ide},
    )
    return router


__all__ = ["CORRELATION_HEADER", "create_graphql_router", "get_graphql_context"]

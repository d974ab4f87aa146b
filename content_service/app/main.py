"""FastAPI application factory."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import FastAPI

from content_service.app.exception_handlers import configure_exception_handlers
from content_service.app.lifespan import lifespan
from content_service.core.settings import get_settings
from content_service.features.content import build_node_registry

if TYPE_CHECKING:
    import strawberry

    from content_service.features.content import ContentNodeRegistry


def create_app(
    *,
    node_registry: ContentNodeRegistry | None = None,
    schema: strawberry.Schema | None = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        node_registry: Registry to serve; built from the content kinds if omitted.
        schema: GraphQL schema to serve; the default schema if omitted.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_settings()
    app_settings = settings.app

    app = FastAPI(
        title=app_settings.title,
        description=app_settings.description,
        version=app_settings.version,
        debug=app_settings.debug,
        lifespan=lifespan,
    )

    # Built here so a misconfigured registry stops the app before it serves.
    app.state.node_registry = node_registry or build_node_registry()

    configure_exception_handlers(app)

    if settings.graphql.enabled:
        from content_service.features.graphql.router import create_graphql_router

        app.include_router(create_graphql_router(schema))

    return app

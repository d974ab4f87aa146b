"""GraphQL context for request-scoped dependencies.

The context is created fresh for each GraphQL request and provides:
- Database session
- ContentRepository bound to that session
- The node registry (shared, immutable)
- Correlation ID (for log correlation)

Following Strawberry's FastAPI integration pattern:
https://strawberry.rocks/docs/integrations/fastapi#context_getter
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from strawberry.fastapi import BaseContext

from content_service.core.pagination import ConnectionArgs
from content_service.core.settings import get_graphql_settings

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession
    from starlette.background import BackgroundTasks
    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.websockets import WebSocket

    from content_service.core.settings import GraphQLSettings
    from content_service.features.content import ContentNodeRegistry, ContentRepository


@dataclass
class GraphQLContext(BaseContext):
    """Request context for GraphQL operations.

    Standard fields (per Strawberry docs):
    - request, response, background_tasks

    Custom fields:
    - session: Database session (request-scoped)
    - content: Repository over the content store
    - nodes: Node registry used for global ids and the ``node`` field
    - settings: GraphQL settings (page sizes)
    - correlation_id: For log correlation

    Example usage in resolver:
        @strawberry.field
        async def node(self, info: Info[GraphQLContext, None], id: strawberry.ID) -> Node | None:
            entity = await info.context.nodes.resolve(id, info.context.content)
            return to_node(entity, info.context.nodes) if entity else None
    """

    request: Request | WebSocket | None = None
    response: Response | None = None
    background_tasks: BackgroundTasks | None = None

    session: AsyncSession = field(default=None)  # type: ignore[assignment]
    content: ContentRepository = field(default=None)  # type: ignore[assignment]
    nodes: ContentNodeRegistry = field(default=None)  # type: ignore[assignment]
    settings: GraphQLSettings = field(default_factory=get_graphql_settings)
    correlation_id: str | None = None

    def connection_args(
        self,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> ConnectionArgs:
        """Build connection arguments, applying the default and maximum page size."""
        if first is None and last is None:
            first = self.settings.default_page_size
        return ConnectionArgs(
            first=self.settings.clamp(first),
            after=after,
            last=self.settings.clamp(last),
            before=before,
        )


__all__ = ["GraphQLContext"]

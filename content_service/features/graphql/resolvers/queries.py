"""Query resolvers for the GraphQL API.

Provides:
- viewer: The current user, root of every content listing
- node(id): Refetch any node by global id
"""

from __future__ import annotations

import logging
from typing import Annotated

import strawberry
from strawberry.types import Info

from content_service.features.graphql.context import GraphQLContext
from content_service.features.graphql.types import Node, UserType, to_node

logger = logging.getLogger(__name__)

NodeIdArg = Annotated[strawberry.ID, strawberry.argument(description="Global id of the node")]


@strawberry.type(description="Root query type")
class Query:
    """GraphQL Query resolvers."""

    @strawberry.field(description="The current user")
    async def viewer(self, info: Info[GraphQLContext, None]) -> UserType:
        ctx = info.context
        user = await ctx.content.get_viewer()
        return UserType.from_model(user, ctx.nodes)

    @strawberry.field(description="Fetch any object by its global id")
    async def node(self, info: Info[GraphQLContext, None], id: NodeIdArg) -> Node | None:  # noqa: A002
        """Resolve a global id.

        Malformed ids and unknown kinds are errors; a well-formed id naming
        nothing resolves to null.
        """
        ctx = info.context
        entity = await ctx.nodes.resolve(str(id), ctx.content)
        if entity is None:
            return None
        return to_node(entity, ctx.nodes)


__all__ = ["Query"]

"""Mutation resolvers for the GraphQL API.

Provides:
- updateOption: Set the value of a site option
"""

from __future__ import annotations

import logging
from typing import Annotated, Any

import strawberry
from strawberry.types import Info

from content_service.core.exceptions import InvalidArgumentError
from content_service.core.relay import run_client_mutation
from content_service.features.content import NodeKind
from content_service.features.graphql.context import GraphQLContext
from content_service.features.graphql.types import (
    OptionType,
    UpdateOptionInput,
    UpdateOptionPayload,
)

logger = logging.getLogger(__name__)


@strawberry.type(description="Root mutation type")
class Mutation:
    """GraphQL Mutation resolvers."""

    @strawberry.mutation(description="Update the value of a site option")
    async def update_option(
        self,
        info: Info[GraphQLContext, None],
        input: Annotated[UpdateOptionInput, strawberry.argument(description="Option id and new value")],  # noqa: A002
    ) -> UpdateOptionPayload:
        """Update an option.

        Raises:
            MalformedIdentifierError / UnknownTagError: If ``id`` cannot be decoded.
            InvalidArgumentError: If ``id`` names something other than an option.
            NotFoundException: If the option does not exist.
        """
        ctx = info.context

        async def mutate(data: UpdateOptionInput) -> dict[str, Any]:
            kind, local_id = ctx.nodes.decode(str(data.id))
            if kind is not NodeKind.OPTION:
                raise InvalidArgumentError(
                    f"Expected an Option id, got a {kind.value} id",
                    argument="id",
                )
            option = await ctx.content.set_option(local_id, data.value)
            return {"option": OptionType.from_model(option, ctx.nodes)}

        payload = await run_client_mutation(input, mutate, UpdateOptionPayload)
        logger.info(
            "updateOption completed",
            extra={"client_mutation_id": input.client_mutation_id},
        )
        return payload


__all__ = ["Mutation"]

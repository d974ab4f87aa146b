"""Input and payload types for mutations.

Every input carries an optional ``clientMutationId`` that is echoed back on
its payload unchanged.
"""

from __future__ import annotations

import strawberry

from content_service.features.graphql.types.content import OptionType


@strawberry.input(description="Input for updating a site option")
class UpdateOptionInput:
    """Input for updateOption mutation."""

    id: strawberry.ID = strawberry.field(description="Global id of the option")
    value: str = strawberry.field(description="New option value")
    client_mutation_id: str | None = strawberry.field(
        default=None,
        description="Opaque value returned unchanged on the payload",
    )


@strawberry.type(description="Result of updateOption")
class UpdateOptionPayload:
    option: OptionType = strawberry.field(description="The updated option")
    client_mutation_id: str | None = strawberry.field(
        default=None,
        description="The clientMutationId sent with the input",
    )


__all__ = ["UpdateOptionInput", "UpdateOptionPayload"]

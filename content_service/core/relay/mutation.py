"""Client mutation id envelope.

Relay clients attach an opaque ``clientMutationId`` to a mutation input and
expect the same value back on the payload so they can match responses to
requests. The envelope copies it across untouched and keeps no state.

Example:
    async def mutate(input: UpdateOptionInput) -> dict[str, Any]:
        option = await repo.set_option(...)
        return {"option": OptionType.from_model(option)}

    return await run_client_mutation(input, mutate, UpdateOptionPayload)
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Mapping


class ClientMutationInput(Protocol):
    """Any mutation input carrying a client mutation id."""

    client_mutation_id: str | None


async def run_client_mutation[I: ClientMutationInput, P](
    input: I,  # noqa: A002
    mutate: Callable[[I], Mapping[str, Any] | Awaitable[Mapping[str, Any]]],
    payload_type: Callable[..., P],
) -> P:
    """Run ``mutate`` and build its payload with the input's client mutation id.

    Args:
        input: Mutation input; its ``client_mutation_id`` is echoed back.
        mutate: Performs the mutation and returns the payload fields.
        payload_type: Payload constructor accepting the fields plus
            ``client_mutation_id``.

    Returns:
        The payload. Exceptions raised by ``mutate`` propagate unchanged.
    """
    fields = mutate(input)
    if inspect.isawaitable(fields):
        fields = await fields
    return payload_type(client_mutation_id=input.client_mutation_id, **fields)


__all__ = ["ClientMutationInput", "run_client_mutation"]

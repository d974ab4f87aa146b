"""Relay building blocks: global ids, node registry, mutation envelope."""

from content_service.core.relay.global_id import (
    GlobalIdCodec,
    ResolvedGlobalId,
    from_global_id,
    to_global_id,
)
from content_service.core.relay.mutation import (
    ClientMutationInput,
    run_client_mutation,
)
from content_service.core.relay.node import NodeDefinition, NodeRegistry

__all__ = [
    "ClientMutationInput",
    "GlobalIdCodec",
    "NodeDefinition",
    "NodeRegistry",
    "ResolvedGlobalId",
    "from_global_id",
    "run_client_mutation",
    "to_global_id",
]

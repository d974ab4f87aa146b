"""Node registry: global id resolution and entity classification.

The registry is the single source of truth for the closed set of node kinds.
It is built once from a ``StrEnum`` of kinds plus one :class:`NodeDefinition`
per kind, and refuses to build when any kind lacks a definition (so no kind
can be resolvable without being classifiable) or when the classification
predicates overlap.

Usage:
    registry = NodeRegistry(NodeKind, definitions)

    entity = await registry.resolve(global_id, context)   # None if not found
    kind = registry.classify(entity)                        # NodeKind | None
    gid = registry.global_id_of(entity)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
import inspect
import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from content_service.core.exceptions import (
    InvalidArgumentError,
    RegistryConfigurationError,
)
from content_service.core.relay.global_id import GlobalIdCodec

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable, Mapping

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class NodeDefinition[K: StrEnum, C]:
    """Everything the registry needs to know about one node kind.

    Attributes:
        kind: The node kind this definition serves.
        fetch: ``fetch(context, local_id)`` returning the entity, ``None`` when
            it does not exist, or an awaitable of either.
        is_type_of: Predicate telling whether an entity is of this kind.
        local_id: Extracts the local id from an entity of this kind.
        exemplar: Builds a representative entity, used by the startup check
            that every exemplar matches exactly its own predicate.
    """

    kind: K
    fetch: Callable[[C, str], Any | Awaitable[Any]]
    is_type_of: Callable[[object], bool]
    local_id: Callable[[Any], object]
    exemplar: Callable[[], object]


class NodeRegistry[K: StrEnum, C]:
    """Immutable mapping from node kinds to fetch and classification logic."""

    __slots__ = ("_definitions", "_kinds", "codec")

    def __init__(
        self,
        kinds: type[K],
        definitions: Iterable[NodeDefinition[K, C]],
    ) -> None:
        """Build and verify the registry.

        Args:
            kinds: The enum enumerating every node kind.
            definitions: One definition per member of ``kinds``.

        Raises:
            RegistryConfigurationError: On missing, duplicate, foreign or
                overlapping definitions.
        """
        by_kind: dict[K, NodeDefinition[K, C]] = {}
        for definition in definitions:
            if not isinstance(definition.kind, kinds):
                raise RegistryConfigurationError(
                    f"Definition for {definition.kind!r} is not a member of {kinds.__name__}",
                )
            if definition.kind in by_kind:
                raise RegistryConfigurationError(
                    f"Node kind {definition.kind.value!r} registered twice",
                    extra={"kind": definition.kind.value},
                )
            by_kind[definition.kind] = definition

        missing = [kind.value for kind in kinds if kind not in by_kind]
        if missing:
            raise RegistryConfigurationError(
                f"Node kinds without a definition: {', '.join(missing)}",
                extra={"missing": missing},
            )

        self._kinds = kinds
        # Enum declaration order is the classification order.
        self._definitions: Mapping[K, NodeDefinition[K, C]] = MappingProxyType(
            {kind: by_kind[kind] for kind in kinds},
        )
        self.codec = GlobalIdCodec(frozenset(kind.value for kind in kinds))
        self._check_exclusive()

        logger.debug(
            "Node registry built",
            extra={"kinds": [kind.value for kind in kinds]},
        )

    def _check_exclusive(self) -> None:
        """Verify each exemplar matches its own predicate and no other."""
        for definition in self._definitions.values():
            sample = definition.exemplar()
            matches = [
                other.kind.value
                for other in self._definitions.values()
                if other.is_type_of(sample)
            ]
            if matches != [definition.kind.value]:
                raise RegistryConfigurationError(
                    f"Exemplar of {definition.kind.value!r} matched {matches or 'no'} predicates",
                    extra={"kind": definition.kind.value, "matches": matches},
                )

    @property
    def kinds(self) -> tuple[K, ...]:
        """All registered kinds, in classification order."""
        return tuple(self._definitions)

    def definition(self, kind: K) -> NodeDefinition[K, C]:
        """Return the definition for ``kind``."""
        return self._definitions[kind]

    # ------------------------------------------------------------------
    # Identifier helpers
    # ------------------------------------------------------------------

    def encode(self, kind: K, local_id: object) -> str:
        """Encode a global id for ``(kind, local_id)``."""
        return self.codec.encode(kind.value, local_id)

    def decode(self, global_id: str) -> tuple[K, str]:
        """Decode a global id into a registered kind and its local id.

        Raises:
            MalformedIdentifierError: If the id is not validly encoded.
            UnknownTagError: If the id names a kind outside the registry.
        """
        type_tag, local_id = self.codec.decode(global_id)
        return self._kinds(type_tag), local_id

    # ------------------------------------------------------------------
    # Resolution and classification
    # ------------------------------------------------------------------

    async def resolve(self, global_id: str, context: C) -> Any | None:
        """Fetch the entity named by ``global_id``.

        Codec errors are raised before any fetch is attempted. Whatever the
        fetch function raises propagates unchanged; ``None`` means the id
        was well formed but nothing exists under it.
        """
        kind, local_id = self.decode(global_id)
        definition = self._definitions[kind]

        result = definition.fetch(context, local_id)
        if inspect.isawaitable(result):
            result = await result

        logger.debug(
            "Resolved node",
            extra={
                "kind": kind.value,
                "local_id": local_id,
                "found": result is not None,
            },
        )
        return result

    def classify(self, entity: object) -> K | None:
        """Return the kind of ``entity``, or ``None`` if no predicate matches."""
        for definition in self._definitions.values():
            if definition.is_type_of(entity):
                return definition.kind
        return None

    def global_id_of(self, entity: object) -> str:
        """Build the global id of an already-resolved entity.

        Raises:
            InvalidArgumentError: If the entity is not of any registered kind.
        """
        kind = self.classify(entity)
        if kind is None:
            raise InvalidArgumentError(
                f"Cannot build a global id for {type(entity).__name__}",
                argument="entity",
            )
        definition = self._definitions[kind]
        return self.encode(kind, definition.local_id(entity))


__all__ = ["NodeDefinition", "NodeRegistry"]

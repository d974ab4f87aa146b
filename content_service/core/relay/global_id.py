"""Global identifier codec.

A global id names one entity across every node kind by encoding the pair
``(type_tag, local_id)`` as ``base64("<type_tag>:<local_id>")``. The tag may
not contain the separator, so the first ``:`` in the decoded text always
splits the pair unambiguously and distinct pairs never share an encoding.

Example:
    codec = GlobalIdCodec(frozenset({"Post", "User"}))
    gid = codec.encode("Post", 42)        # "UG9zdDo0Mg=="
    codec.decode(gid)                     # ("Post", "42")
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import NamedTuple

from content_service.core.exceptions import (
    InvalidTagError,
    MalformedIdentifierError,
    UnknownTagError,
)
from content_service.core.relay.opaque import decode_opaque, encode_opaque

logger = logging.getLogger(__name__)

SEPARATOR = ":"


class ResolvedGlobalId(NamedTuple):
    """Decoded form of a global identifier."""

    type_tag: str
    local_id: str


def to_global_id(type_tag: str, local_id: object) -> str:
    """Encode a ``(type_tag, local_id)`` pair without consulting any registry.

    Raises:
        InvalidTagError: If the tag is empty or contains the separator.
    """
    if not isinstance(type_tag, str) or not type_tag:
        raise InvalidTagError(str(type_tag), "Node type tag must be a non-empty string")
    if SEPARATOR in type_tag:
        raise InvalidTagError(
            type_tag, f"Node type tag must not contain {SEPARATOR!r}"
        )
    return encode_opaque(f"{type_tag}{SEPARATOR}{local_id}")


def from_global_id(global_id: str) -> ResolvedGlobalId:
    """Decode a global id into its tag and local id.

    Only the encoding is checked here; whether the tag is known is the
    caller's concern (see :class:`GlobalIdCodec`).

    Raises:
        MalformedIdentifierError: If the value is not a valid encoding.
    """
    try:
        text = decode_opaque(global_id)
    except ValueError as exc:
        logger.warning("Rejected undecodable global id", extra={"reason": str(exc)})
        raise MalformedIdentifierError(str(global_id), str(exc)) from exc

    type_tag, sep, local_id = text.partition(SEPARATOR)
    if not sep:
        raise MalformedIdentifierError(global_id, "missing type separator")
    if not type_tag:
        raise MalformedIdentifierError(global_id, "empty type tag")
    return ResolvedGlobalId(type_tag, local_id)


@dataclass(frozen=True, slots=True)
class GlobalIdCodec:
    """Global id codec bound to a closed set of type tags.

    ``decode`` separates garbage input (:class:`MalformedIdentifierError`)
    from well-formed ids naming an unsupported kind (:class:`UnknownTagError`).
    """

    known_tags: frozenset[str]

    def encode(self, type_tag: str, local_id: object) -> str:
        """Encode a pair; ``local_id`` is coerced with ``str()``."""
        return to_global_id(type_tag, local_id)

    def decode(self, global_id: str) -> ResolvedGlobalId:
        """Decode a global id and check its tag against the known set."""
        resolved = from_global_id(global_id)
        if resolved.type_tag not in self.known_tags:
            logger.warning(
                "Global id names an unknown node type",
                extra={"type_tag": resolved.type_tag},
            )
            raise UnknownTagError(resolved.type_tag, sorted(self.known_tags))
        return resolved


__all__ = [
    "SEPARATOR",
    "GlobalIdCodec",
    "ResolvedGlobalId",
    "from_global_id",
    "to_global_id",
]

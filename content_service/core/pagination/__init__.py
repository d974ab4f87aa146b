"""Relay connection pagination over ordered sequences.

Usage:
    from content_service.core.pagination import ConnectionArgs, paginate

    connection = await paginate(repo.list_posts("post"), ConnectionArgs(first=10))
    for edge in connection.edges:
        print(edge.cursor, edge.node)

Cursors are opaque base64 strings naming an offset in the full sequence;
clients pass them back unchanged as ``after``/``before``.
"""

from content_service.core.pagination.connection import (
    connection_from_sequence,
    paginate,
)
from content_service.core.pagination.cursor import CURSOR_PREFIX, CursorCodec
from content_service.core.pagination.schemas import (
    Connection,
    ConnectionArgs,
    Edge,
    PageInfo,
)

__all__ = [
    "CURSOR_PREFIX",
    "Connection",
    "ConnectionArgs",
    "CursorCodec",
    "Edge",
    "PageInfo",
    "connection_from_sequence",
    "paginate",
]

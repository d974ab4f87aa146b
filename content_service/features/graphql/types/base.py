"""Base GraphQL types: the Node interface and Relay pagination types.

Provides the Strawberry mirrors of ``content_service.core.pagination`` plus
argument aliases shared by every connection field.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Any

import strawberry

if TYPE_CHECKING:
    from collections.abc import Callable

    from content_service.core.pagination import Connection, PageInfo


@strawberry.interface(description="An object with a globally unique ID")
class Node:
    """Relay Node interface."""

    id: strawberry.ID = strawberry.field(description="Opaque global identifier")


@strawberry.type(name="PageInfo", description="Pagination metadata following GraphQL Relay specification")
class PageInfoType:
    """GraphQL Relay PageInfo for cursor-based pagination.

    Mirrors content_service.core.pagination.schemas.PageInfo.
    """

    has_previous_page: bool = strawberry.field(description="Whether previous items exist")
    has_next_page: bool = strawberry.field(description="Whether more items exist")
    start_cursor: str | None = strawberry.field(
        default=None,
        description="Cursor of the first item",
    )
    end_cursor: str | None = strawberry.field(
        default=None,
        description="Cursor of the last item",
    )

    @classmethod
    def from_page_info(cls, page_info: PageInfo) -> PageInfoType:
        return cls(
            has_previous_page=page_info.has_previous_page,
            has_next_page=page_info.has_next_page,
            start_cursor=page_info.start_cursor,
            end_cursor=page_info.end_cursor,
        )


# Type aliases for annotated arguments with descriptions
FirstArg = Annotated[
    int | None, strawberry.argument(description="Number of items to return (forward pagination)"),
]
AfterArg = Annotated[
    str | None, strawberry.argument(description="Cursor to start after (forward pagination)"),
]
LastArg = Annotated[
    int | None, strawberry.argument(description="Number of items to return (backward pagination)"),
]
BeforeArg = Annotated[
    str | None, strawberry.argument(description="Cursor to end before (backward pagination)"),
]


def build_connection[N](
    connection: Connection[Any],
    connection_type: Callable[..., N],
    edge_type: Callable[..., Any],
    to_type: Callable[[Any], Any],
) -> N:
    """Convert a core connection into its Strawberry connection type.

    Args:
        connection: Connection produced by the pager
        connection_type: Strawberry connection class
        edge_type: Strawberry edge class
        to_type: Maps a stored entity to its Strawberry type

    Returns:
        Instance of ``connection_type``
    """
    return connection_type(
        edges=[edge_type(node=to_type(edge.node), cursor=edge.cursor) for edge in connection.edges],
        page_info=PageInfoType.from_page_info(connection.page_info),
    )


__all__ = [
    "AfterArg",
    "BeforeArg",
    "FirstArg",
    "LastArg",
    "Node",
    "PageInfoType",
    "build_connection",
]

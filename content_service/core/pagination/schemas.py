"""Connection response schemas following the Relay specification.

A connection is a page over an ordered sequence:
- edges pair each node with the cursor of its position in the full sequence
- page_info says whether more items exist on either side of the page
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class PageInfo(BaseModel):
    """Pagination metadata following GraphQL Relay specification.

    Attributes:
        has_previous_page: Whether there are items before the current page
        has_next_page: Whether there are items after the current page
        start_cursor: Cursor of the first item in this page
        end_cursor: Cursor of the last item in this page
    """

    model_config = ConfigDict(frozen=True)

    has_previous_page: bool = Field(
        default=False,
        description="Whether previous items exist",
    )
    has_next_page: bool = Field(
        default=False,
        description="Whether more items exist",
    )
    start_cursor: str | None = Field(
        default=None,
        description="Cursor of the first item",
    )
    end_cursor: str | None = Field(
        default=None,
        description="Cursor of the last item",
    )


class Edge(BaseModel, Generic[T]):
    """Edge wrapper for paginated items (Relay pattern).

    Attributes:
        node: The actual data item
        cursor: Cursor for this specific item
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    node: T = Field(description="The data item")
    cursor: str = Field(description="Cursor for this item")


class Connection(BaseModel, Generic[T]):
    """A page of an ordered sequence.

    Attributes:
        edges: List of Edge objects containing nodes and cursors
        page_info: Navigation metadata
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    edges: list[Edge[T]] = Field(
        default_factory=list,
        description="List of edges (items with cursors)",
    )
    page_info: PageInfo = Field(
        default_factory=PageInfo,
        description="Pagination metadata",
    )

    @property
    def nodes(self) -> list[T]:
        """Get just the nodes without edge wrappers."""
        return [edge.node for edge in self.edges]


class ConnectionArgs(BaseModel):
    """Relay connection arguments.

    Values are not range-checked here; the pager reports bad counts and
    cursors with its own error types.
    """

    model_config = ConfigDict(frozen=True)

    first: int | None = Field(default=None, description="Keep at most the first N items")
    after: str | None = Field(default=None, description="Start after this cursor (exclusive)")
    last: int | None = Field(default=None, description="Keep at most the last N items")
    before: str | None = Field(default=None, description="End before this cursor (exclusive)")


__all__ = [
    "Connection",
    "ConnectionArgs",
    "Edge",
    "PageInfo",
]

"""Connection pager: slice an ordered sequence into a Relay connection.

Algorithm (offset cursors):
    1. ``after`` drops every element at or before its offset,
       ``before`` drops every element at or after its offset.
    2. ``first`` keeps the leading N of what remains, then ``last`` keeps
       the trailing N of that window. When both are given the result is the
       tail of the head; this order is fixed.
    3. Edges keep the cursor of their position in the full sequence.
    4. ``has_previous_page``/``has_next_page`` report whether ``first`` or
       ``last`` cut anything off inside the ``after``/``before`` range.

Arguments are validated before anything is awaited, so a bad cursor or
count never costs a query.

Usage:
    connection = await paginate(repo.list_options(), ConnectionArgs(first=10))
    next_page = await paginate(
        repo.list_options(),
        ConnectionArgs(first=10, after=connection.page_info.end_cursor),
    )
"""

from __future__ import annotations

from collections.abc import Sequence
import inspect
import logging
from typing import TYPE_CHECKING, NamedTuple

from content_service.core.exceptions import InvalidArgumentError
from content_service.core.pagination.cursor import CursorCodec
from content_service.core.pagination.schemas import (
    Connection,
    ConnectionArgs,
    Edge,
    PageInfo,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable

logger = logging.getLogger(__name__)


class _Window(NamedTuple):
    """Validated, decoded connection arguments."""

    first: int | None
    last: int | None
    after: int | None
    before: int | None


def _check_count(value: int | None, name: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"'{name}' must be an integer", argument=name)
    if value < 0:
        raise InvalidArgumentError(
            f"'{name}' must be a non-negative integer, got {value}",
            argument=name,
        )
    return value


def _decode_args(args: ConnectionArgs) -> _Window:
    """Validate counts and decode cursors.

    Raises:
        InvalidArgumentError: If ``first`` or ``last`` is negative.
        InvalidCursorError: If ``after`` or ``before`` cannot be decoded.
    """
    first = _check_count(args.first, "first")
    last = _check_count(args.last, "last")
    after = CursorCodec.decode(args.after, "after") if args.after is not None else None
    before = CursorCodec.decode(args.before, "before") if args.before is not None else None
    return _Window(first=first, last=last, after=after, before=before)


def _require_ordered[T](items: Sequence[T]) -> Sequence[T]:
    # Sets, mappings and one-shot iterators have no caller-visible order.
    if not isinstance(items, Sequence) or isinstance(items, (str, bytes)):
        raise InvalidArgumentError(
            f"Connections require an ordered sequence, got {type(items).__name__}",
            argument="sequence",
        )
    return items


def _slice[T](items: Sequence[T], window: _Window) -> Connection[T]:
    start = 0
    end = len(items)

    if window.after is not None:
        start = max(start, window.after + 1)
    if window.before is not None:
        end = min(end, window.before)
    end = max(end, start)

    range_start, range_end = start, end

    if window.first is not None:
        end = min(end, start + window.first)
    if window.last is not None:
        start = max(start, end - window.last)

    edges = [
        Edge(node=items[offset], cursor=CursorCodec.encode(offset))
        for offset in range(start, end)
    ]
    page_info = PageInfo(
        has_previous_page=start > range_start,
        has_next_page=end < range_end,
        start_cursor=edges[0].cursor if edges else None,
        end_cursor=edges[-1].cursor if edges else None,
    )

    logger.debug(
        "Sliced connection",
        extra={
            "total": len(items),
            "range": (range_start, range_end),
            "window": (start, end),
        },
    )
    return Connection(edges=edges, page_info=page_info)


def connection_from_sequence[T](
    items: Sequence[T],
    args: ConnectionArgs | None = None,
) -> Connection[T]:
    """Build a connection from a sequence already in hand.

    Raises:
        InvalidArgumentError: On negative counts or unordered input.
        InvalidCursorError: On undecodable ``after``/``before`` cursors.
    """
    window = _decode_args(args or ConnectionArgs())
    return _slice(_require_ordered(items), window)


async def paginate[T](
    source: Sequence[T] | Awaitable[Sequence[T]],
    args: ConnectionArgs | None = None,
) -> Connection[T]:
    """Build a connection from a sequence or a pending fetch of one.

    The arguments are checked first; if they are invalid a pending
    coroutine is closed without being run. Failures of the pending fetch
    propagate unchanged.
    """
    try:
        window = _decode_args(args or ConnectionArgs())
    except Exception:
        if inspect.iscoroutine(source):
            source.close()
        raise

    if inspect.isawaitable(source):
        items = await source
    else:
        items = source
    return _slice(_require_ordered(items), window)


__all__ = ["connection_from_sequence", "paginate"]

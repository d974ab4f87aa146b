"""Cursor encoding and decoding for connection pagination.

A cursor names an element by its 0-based offset in the full, ordered
sequence a connection was sliced from, so cursors stay stable while the
caller pages forwards and backwards.

Cursor format (Relay ``arrayconnection`` compatible):
    base64("arrayconnection:<offset>")

Example:
    CursorCodec.encode(2)            # "YXJyYXljb25uZWN0aW9uOjI="
    CursorCodec.decode("YXJy...I=")  # 2
"""

from __future__ import annotations

import logging

from content_service.core.exceptions import InvalidCursorError
from content_service.core.relay.opaque import decode_opaque, encode_opaque

logger = logging.getLogger(__name__)

CURSOR_PREFIX = "arrayconnection:"


class CursorCodec:
    """Encode and decode offset cursors."""

    @staticmethod
    def encode(offset: int) -> str:
        """Encode a non-negative offset to an opaque cursor.

        Raises:
            ValueError: If ``offset`` is negative.
        """
        if offset < 0:
            msg = f"Cursor offset must be non-negative, got {offset}"
            raise ValueError(msg)
        return encode_opaque(f"{CURSOR_PREFIX}{offset}")

    @staticmethod
    def decode(cursor: str, argument: str | None = None) -> int:
        """Decode a cursor back to its offset.

        Args:
            cursor: Opaque cursor string.
            argument: Name of the argument it came from, for error reporting.

        Raises:
            InvalidCursorError: If the cursor was not produced by :meth:`encode`.
        """
        try:
            text = decode_opaque(cursor)
        except ValueError as exc:
            logger.warning("Rejected undecodable cursor", extra={"argument": argument})
            raise InvalidCursorError(str(cursor), argument) from exc

        digits = text.removeprefix(CURSOR_PREFIX)
        # Canonical decimal only, so each offset has exactly one cursor.
        if (
            not text.startswith(CURSOR_PREFIX)
            or not (digits.isascii() and digits.isdigit())
            or (len(digits) > 1 and digits.startswith("0"))
        ):
            logger.warning("Rejected malformed cursor", extra={"argument": argument})
            raise InvalidCursorError(cursor, argument)
        try:
            return int(digits)
        except ValueError as exc:
            # Past the interpreter's integer-string conversion limit.
            logger.warning("Rejected oversized cursor", extra={"argument": argument})
            raise InvalidCursorError(cursor, argument) from exc


__all__ = ["CURSOR_PREFIX", "CursorCodec"]

"""Opaque string encoding shared by global identifiers and cursors.

Values are the standard base64 alphabet over UTF-8 text, the same shape
Relay clients expect from ``toGlobalId`` and ``offsetToCursor``. Decoding is
strict: characters outside the alphabet, bad padding, non-UTF-8 payloads and
non-canonical encodings are all rejected, so ``encode_opaque`` and
``decode_opaque`` are exact inverses.
"""

from __future__ import annotations

import base64
import binascii


def encode_opaque(text: str) -> str:
    """Encode text to an opaque base64 string."""
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def decode_opaque(value: str) -> str:
    """Decode an opaque string produced by :func:`encode_opaque`.

    Raises:
        ValueError: If ``value`` is not a canonical base64 encoding of UTF-8 text.
    """
    if not isinstance(value, str):
        msg = f"expected str, got {type(value).__name__}"
        raise ValueError(msg)
    try:
        raw = base64.b64decode(value.encode("ascii"), validate=True)
        text = raw.decode("utf-8")
    except (UnicodeError, binascii.Error) as exc:
        msg = f"not valid base64 text ({exc})"
        raise ValueError(msg) from exc

    # b64decode ignores stray bits in the final quantum; only the canonical
    # spelling round-trips.
    if base64.b64encode(raw).decode("ascii") != value:
        msg = "non-canonical base64 encoding"
        raise ValueError(msg)
    return text


__all__ = ["decode_opaque", "encode_opaque"]

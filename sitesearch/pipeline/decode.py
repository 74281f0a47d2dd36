"""Decoding of compressed page content."""

import base64
import binascii
import zlib

from sitesearch.errors import DecodeError


def inflate(data: str | bytes) -> str:
    """Decode a base64, zlib-deflate compressed blob into UTF-8 text.

    Args:
        data: Base64 text (or its ASCII bytes)

    Returns:
        Decompressed text

    Raises:
        DecodeError: If base64 is malformed, the deflate stream is corrupt
            or the result is not valid UTF-8
    """
    try:
        raw = base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"Malformed base64 content: {e}") from e

    try:
        return zlib.decompress(raw).decode("utf-8")
    except zlib.error as e:
        raise DecodeError(f"Corrupt deflate stream: {e}") from e
    except UnicodeDecodeError as e:
        raise DecodeError(f"Content is not valid UTF-8: {e}") from e


def deflate(text: str) -> str:
    """Compress text the way the content feed does (inverse of :func:`inflate`)."""
    return base64.b64encode(zlib.compress(text.encode("utf-8"))).decode("ascii")

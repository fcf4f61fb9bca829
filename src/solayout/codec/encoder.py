"""Record encoder for account layouts.

This module provides the encode() function, the inverse of decode(). It is
mostly used to build fixtures and to check layouts against known accounts.
"""

from __future__ import annotations

from ..models.base import BaseLayout


def encode(record: BaseLayout) -> bytes:
    """Encode a layout instance to its fixed-width binary form.

    Fields are written in declaration order with little-endian integers.
    Padding blobs are written as zero bytes.

    Args:
        record: Layout instance to encode

    Returns:
        Exactly ``type(record).byte_width()`` bytes

    Raises:
        SchemaError: If the layout class cannot be resolved into codecs
        EncodeError: If a field value does not fit its codec

    Example:
        >>> data = encode(AccountFlags(initialized=True, market=True))
        >>> data.hex()
        '0300000000000000'
    """
    return type(record).layout_codec().encode(record)

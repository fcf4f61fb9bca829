"""Record decoder for account layouts.

This module provides the decode() function that turns raw account bytes into
a layout model instance.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from pydantic import ValidationError

from ..exceptions import DecodeError, TrailingBytesError
from ..models.base import BaseLayout
from .primitives import Buffer

logger = logging.getLogger(__name__)

L = TypeVar("L", bound=BaseLayout)


def decode(layout_class: type[L], data: Buffer, strict: bool | None = None) -> L:
    """Decode account bytes into a layout model.

    Fields are read in declaration order, each from the bytes immediately
    following the previous one. The buffer is only borrowed: decoded values
    never reference it, and no view of it outlives the call. Any object
    supporting the buffer protocol is accepted, contiguous or not.

    Args:
        layout_class: Layout class describing the account
        data: Raw account bytes
        strict: If True, reject bytes left over after the last field. If None,
            use the layout's ``layout_strict`` option.

    Returns:
        Decoded layout instance

    Raises:
        SchemaError: If the layout class cannot be resolved into codecs
        InsufficientBytesError: If the buffer is shorter than the layout
        TrailingBytesError: If ``strict`` and the buffer is longer than the layout
        DecodeError: If the decoded values are rejected by the model

    Example:
        >>> flags = decode(AccountFlags, bytes([0x03, 0, 0, 0, 0, 0, 0, 0]))
        >>> flags.initialized, flags.market, flags.bids
        (True, True, False)
    """
    if strict is None:
        strict = layout_class.layout_strict

    codec = layout_class.layout_codec()

    with memoryview(data) as raw:
        if not raw.c_contiguous:
            # Strided views cannot be cast; decode a compact copy
            data = raw.tobytes()

    # Views are released on exit, including when decoding raises
    with memoryview(data) as raw, raw.cast("B") as view:
        try:
            record = codec.decode(view)
        except ValidationError as e:
            raise DecodeError(f"Failed to construct {layout_class.__name__}: {e}") from e

        available = len(view)

    if available > codec.byte_width:
        if strict:
            raise TrailingBytesError(codec.byte_width, available)
        logger.debug(
            "%s: ignoring %d trailing bytes after %d-byte layout",
            layout_class.__name__,
            available - codec.byte_width,
            codec.byte_width,
        )

    return record

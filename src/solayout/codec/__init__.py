"""Fixed-width binary codec for solayout.

This module provides the field codecs and the record decoder/encoder that walk
a layout field by field.
"""

from __future__ import annotations

from .decoder import decode
from .encoder import encode
from .primitives import ArrayCodec, BlobCodec, BytesCodec, FieldCodec, FlagWordCodec, IntCodec
from .record import FlagsCodec, LayoutCodec
from .schema import FieldSchema, LayoutSchema

__all__ = [
    "encode",
    "decode",
    "FieldCodec",
    "IntCodec",
    "BlobCodec",
    "BytesCodec",
    "ArrayCodec",
    "FlagWordCodec",
    "LayoutCodec",
    "FlagsCodec",
    "LayoutSchema",
    "FieldSchema",
]

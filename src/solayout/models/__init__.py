"""Pydantic layout modeling for solayout.

This module provides the BaseLayout class and the fixed-width field types used
to declare account layouts.
"""

from __future__ import annotations

from .base import BaseLayout, BitFlags
from .fields import (
    I8,
    I16,
    I32,
    I64,
    I128,
    U8,
    U16,
    U32,
    U64,
    U128,
    Blob,
    FixedArray,
    FixedBytes,
    PublicKey,
    Seq128,
    codec_of,
)

__all__ = [
    "BaseLayout",
    "BitFlags",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "Blob",
    "FixedArray",
    "FixedBytes",
    "PublicKey",
    "Seq128",
    "codec_of",
]

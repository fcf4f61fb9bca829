"""solayout: Fixed-width account layout codec

A Python library for decoding the raw account data of on-chain programs into
typed records. Layouts are declared as Pydantic models whose fields are read
back to back, in declaration order, with little-endian integers.

Key Features:
- Pydantic-based layout modeling
- Fixed-width integers, padding blobs, bit-flag words and fixed-count arrays
- Nested layouts and exact byte offsets
- Serum DEX market, open orders and swap event layouts

Quick Start:
    >>> from solayout import BaseLayout, U8, U64, Blob, decode
    >>>
    >>> Blob5 = Blob(5)
    >>>
    >>> class Pool(BaseLayout):
    ...     status: U64
    ...     padding: Blob5 = None
    ...     nonce: U8
    >>>
    >>> pool = decode(Pool, bytes([1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 42]))
    >>> pool.status, pool.nonce
    (1, 42)
"""

from __future__ import annotations

from .codec import FieldCodec, LayoutSchema, decode, encode
from .exceptions import (
    DecodeError,
    EncodeError,
    InsufficientBytesError,
    LayoutError,
    SchemaError,
    TrailingBytesError,
)
from .models import (
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
    BaseLayout,
    BitFlags,
    Blob,
    FixedArray,
    FixedBytes,
    PublicKey,
    Seq128,
)
from .utils import byte_width, field_offsets, field_sizes

__version__ = "0.1.0"

__all__ = [
    # Core API
    "BaseLayout",
    "BitFlags",
    "decode",
    "encode",
    "FieldCodec",
    "LayoutSchema",
    # Field types
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
    # Exceptions
    "LayoutError",
    "SchemaError",
    "EncodeError",
    "DecodeError",
    "InsufficientBytesError",
    "TrailingBytesError",
    # Sizing
    "byte_width",
    "field_sizes",
    "field_offsets",
    # Version
    "__version__",
]

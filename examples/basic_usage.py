#!/usr/bin/env python3
"""Basic usage example for solayout.

This example demonstrates:
1. Declaring an account layout with Pydantic
2. Inspecting field offsets and sizes
3. Decoding raw account bytes
4. Handling short buffers
"""

from __future__ import annotations

from solayout import (
    U8,
    U64,
    BaseLayout,
    Blob,
    InsufficientBytesError,
    decode,
    encode,
    field_offsets,
    field_sizes,
)

Blob5 = Blob(5)


class PoolHeader(BaseLayout):
    """Head of a hypothetical pool account."""

    status: U64
    reserved: Blob5 = None
    nonce: U8


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("solayout Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Field layout...")
    offsets = field_offsets(PoolHeader)
    for name, size in field_sizes(PoolHeader).items():
        print(f"   {offsets[name]:3d}  {name}: {size} bytes")
    print(f"   Total: {PoolHeader.byte_width()} bytes")
    print()

    print("2. Decoding account bytes...")
    data = bytes([0x01, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0x2A])
    header = decode(PoolHeader, data)
    print(f"   Raw: {data.hex()}")
    print(f"   status={header.status} nonce={header.nonce}")
    print()

    print("3. Encoding back...")
    print(f"   {encode(header).hex()}")
    print()

    print("4. Decoding a truncated account...")
    try:
        decode(PoolHeader, data[:13])
    except InsufficientBytesError as e:
        print(f"   {e}")
    print()


if __name__ == "__main__":
    main()

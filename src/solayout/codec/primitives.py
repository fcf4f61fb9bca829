"""Fixed-width field codecs.

This module provides the FieldCodec capability and the primitive codecs built
on it. Every codec has a constant byte width and converts between exactly that
many bytes and a Python value. All multi-byte integers are little-endian.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from ..exceptions import EncodeError, InsufficientBytesError

Buffer = bytes | bytearray | memoryview


@runtime_checkable
class FieldCodec(Protocol):
    """Capability implemented by every decodable field type.

    ``decode`` reads the first ``byte_width`` bytes of ``data`` and ignores the
    rest. It raises InsufficientBytesError when ``data`` is shorter than
    ``byte_width``. ``encode`` returns exactly ``byte_width`` bytes.
    """

    @property
    def byte_width(self) -> int: ...

    def decode(self, data: Buffer) -> Any: ...

    def encode(self, value: Any) -> bytes: ...


def check_length(byte_width: int, data: Buffer) -> None:
    """Raise InsufficientBytesError if ``data`` holds fewer than ``byte_width`` bytes."""
    if len(data) < byte_width:
        raise InsufficientBytesError(byte_width, len(data))


@dataclass(frozen=True)
class IntCodec:
    """Little-endian fixed-width integer.

    Attributes:
        byte_width: Size of the integer in bytes (1, 2, 4, 8 or 16)
        signed: Whether the integer is two's complement signed
    """

    byte_width: int
    signed: bool = False

    def __post_init__(self) -> None:
        if self.byte_width not in (1, 2, 4, 8, 16):
            raise ValueError(f"byte_width must be 1, 2, 4, 8 or 16, got {self.byte_width}")

    @property
    def min_value(self) -> int:
        return -(1 << (self.byte_width * 8 - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        bits = self.byte_width * 8
        return (1 << (bits - 1)) - 1 if self.signed else (1 << bits) - 1

    def decode(self, data: Buffer) -> int:
        check_length(self.byte_width, data)
        return int.from_bytes(data[: self.byte_width], "little", signed=self.signed)

    def encode(self, value: Any) -> bytes:
        if isinstance(value, bool) or not isinstance(value, int):
            raise EncodeError(f"expected int, got {type(value).__name__}")
        if value < self.min_value or value > self.max_value:
            raise EncodeError(
                f"value {value} out of bounds [{self.min_value}, {self.max_value}] "
                f"for {self.byte_width}-byte {'signed' if self.signed else 'unsigned'} integer"
            )
        return value.to_bytes(self.byte_width, "little", signed=self.signed)


@dataclass(frozen=True)
class BlobCodec:
    """Reserved region of ``byte_width`` bytes. Decodes to None."""

    byte_width: int

    def decode(self, data: Buffer) -> None:
        check_length(self.byte_width, data)
        return None

    def encode(self, value: Any) -> bytes:
        return bytes(self.byte_width)


@dataclass(frozen=True)
class BytesCodec:
    """Opaque byte string of ``byte_width`` bytes (keys, hashes, raw bit sets)."""

    byte_width: int

    def decode(self, data: Buffer) -> bytes:
        check_length(self.byte_width, data)
        return bytes(data[: self.byte_width])

    def encode(self, value: Any) -> bytes:
        if not isinstance(value, (bytes, bytearray)):
            raise EncodeError(f"expected bytes, got {type(value).__name__}")
        if len(value) != self.byte_width:
            raise EncodeError(f"expected {self.byte_width} bytes, got {len(value)} bytes")
        return bytes(value)


@dataclass(frozen=True)
class ArrayCodec:
    """Fixed number of fixed-width elements laid out back to back.

    Attributes:
        element: Codec for a single element
        count: Number of elements
    """

    element: FieldCodec
    count: int

    @property
    def byte_width(self) -> int:
        return self.count * self.element.byte_width

    def decode(self, data: Buffer) -> list[Any]:
        check_length(self.byte_width, data)
        size = self.element.byte_width
        return [self.element.decode(data[i * size : (i + 1) * size]) for i in range(self.count)]

    def encode(self, value: Any) -> bytes:
        if not isinstance(value, Sequence) or isinstance(value, (bytes, str)):
            raise EncodeError(f"expected a sequence, got {type(value).__name__}")
        if len(value) != self.count:
            raise EncodeError(f"expected {self.count} elements, got {len(value)}")
        return b"".join(self.element.encode(item) for item in value)


@dataclass(frozen=True)
class FlagWordCodec:
    """Little-endian integer word whose low bits are named boolean flags.

    Flag ``i`` in ``names`` is bit ``i`` of the word. Bits beyond the named
    flags are ignored on decode and written as zero on encode.

    Example:
        >>> codec = FlagWordCodec(("initialized", "market"))
        >>> codec.decode(bytes([0x02, 0, 0, 0, 0, 0, 0, 0]))
        {'initialized': False, 'market': True}
    """

    names: tuple[str, ...]
    word_bytes: int = 8

    def __post_init__(self) -> None:
        if len(self.names) > self.word_bytes * 8:
            raise ValueError(
                f"{len(self.names)} flags do not fit in a {self.word_bytes}-byte word"
            )
        if len(set(self.names)) != len(self.names):
            raise ValueError(f"duplicate flag names in {self.names}")

    @property
    def byte_width(self) -> int:
        return self.word_bytes

    def decode(self, data: Buffer) -> dict[str, bool]:
        word = IntCodec(self.word_bytes).decode(data)
        return {name: bool((word >> bit) & 1) for bit, name in enumerate(self.names)}

    def encode(self, value: Any) -> bytes:
        if not isinstance(value, Mapping):
            raise EncodeError(f"expected a mapping of flags, got {type(value).__name__}")
        unknown = set(value) - set(self.names)
        if unknown:
            raise EncodeError(f"unknown flags: {sorted(unknown)}")
        word = 0
        for bit, name in enumerate(self.names):
            if value.get(name, False):
                word |= 1 << bit
        return IntCodec(self.word_bytes).encode(word)

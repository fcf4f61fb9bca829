"""Unit tests for fixed-width field codecs."""

from __future__ import annotations

import pytest

from solayout import EncodeError, InsufficientBytesError
from solayout.codec.primitives import (
    ArrayCodec,
    BlobCodec,
    BytesCodec,
    FieldCodec,
    FlagWordCodec,
    IntCodec,
)


class TestIntCodec:
    """Test little-endian integer codecs."""

    @pytest.mark.parametrize("width", [1, 2, 4, 8, 16])
    def test_byte_width(self, width: int) -> None:
        assert IntCodec(width).byte_width == width

    def test_decode_little_endian(self) -> None:
        assert IntCodec(2).decode(b"\x34\x12") == 0x1234
        assert IntCodec(4).decode(b"\x78\x56\x34\x12") == 0x12345678
        assert IntCodec(8).decode(b"\x01" + b"\x00" * 7) == 1

    def test_decode_u128(self) -> None:
        data = bytes(range(16))
        assert IntCodec(16).decode(data) == int.from_bytes(data, "little")

    def test_decode_signed(self) -> None:
        assert IntCodec(1, signed=True).decode(b"\xff") == -1
        assert IntCodec(2, signed=True).decode(b"\x00\x80") == -32768
        assert IntCodec(8, signed=True).decode(b"\xfe" + b"\xff" * 7) == -2

    def test_decode_ignores_trailing_bytes(self) -> None:
        assert IntCodec(2).decode(b"\x01\x00\xff\xff") == 1

    def test_decode_accepts_exact_length(self) -> None:
        assert IntCodec(4).decode(b"\xff\xff\xff\xff") == 0xFFFFFFFF

    def test_decode_short_slice(self) -> None:
        with pytest.raises(InsufficientBytesError) as exc_info:
            IntCodec(8).decode(b"\x00" * 7)
        assert exc_info.value.needed == 8
        assert exc_info.value.available == 7

    def test_decode_memoryview(self) -> None:
        view = memoryview(b"\x00\x2a\x00")
        assert IntCodec(2).decode(view[1:]) == 42

    def test_bounds(self) -> None:
        assert IntCodec(1).max_value == 255
        assert IntCodec(1, signed=True).min_value == -128
        assert IntCodec(8).max_value == 2**64 - 1

    def test_encode(self) -> None:
        assert IntCodec(4).encode(0x12345678) == b"\x78\x56\x34\x12"
        assert IntCodec(2, signed=True).encode(-1) == b"\xff\xff"

    def test_encode_out_of_bounds(self) -> None:
        with pytest.raises(EncodeError, match="out of bounds"):
            IntCodec(1).encode(256)
        with pytest.raises(EncodeError, match="out of bounds"):
            IntCodec(1).encode(-1)

    def test_encode_wrong_type(self) -> None:
        with pytest.raises(EncodeError, match="expected int"):
            IntCodec(1).encode("1")
        with pytest.raises(EncodeError, match="expected int"):
            IntCodec(1).encode(True)

    def test_invalid_width(self) -> None:
        with pytest.raises(ValueError):
            IntCodec(3)


class TestBlobCodec:
    """Test padding blobs."""

    def test_decode_discards_content(self) -> None:
        assert BlobCodec(5).decode(b"\xde\xad\xbe\xef\x01") is None

    def test_decode_short_slice(self) -> None:
        with pytest.raises(InsufficientBytesError):
            BlobCodec(1024).decode(bytes(1023))

    def test_encode_zeros(self) -> None:
        assert BlobCodec(7).encode(None) == bytes(7)


class TestBytesCodec:
    """Test opaque byte strings."""

    def test_decode(self) -> None:
        data = bytes(range(40))
        assert BytesCodec(32).decode(data) == bytes(range(32))

    def test_decode_returns_bytes_copy(self) -> None:
        buffer = bytearray(b"\x01\x02")
        value = BytesCodec(2).decode(memoryview(buffer))
        buffer[0] = 0xFF
        assert value == b"\x01\x02"

    def test_encode_wrong_length(self) -> None:
        with pytest.raises(EncodeError, match="expected 32 bytes"):
            BytesCodec(32).encode(b"\x00" * 31)


class TestArrayCodec:
    """Test fixed-count element arrays."""

    def test_byte_width(self) -> None:
        assert ArrayCodec(IntCodec(4), 128).byte_width == 512
        assert ArrayCodec(IntCodec(16), 128).byte_width == 2048

    def test_decode_u32_in_order(self) -> None:
        data = b"".join(i.to_bytes(4, "little") for i in range(128))
        assert ArrayCodec(IntCodec(4), 128).decode(data) == list(range(128))

    def test_decode_exact_length_accepted(self) -> None:
        codec = ArrayCodec(IntCodec(4), 128)
        assert len(codec.decode(bytes(512))) == 128

    def test_decode_one_byte_short(self) -> None:
        with pytest.raises(InsufficientBytesError) as exc_info:
            ArrayCodec(IntCodec(4), 128).decode(bytes(511))
        assert exc_info.value.needed == 512
        assert exc_info.value.available == 511

    def test_decode_ignores_trailing_bytes(self) -> None:
        data = b"\x01\x00\x02\x00\xff\xff"
        assert ArrayCodec(IntCodec(2), 2).decode(data) == [1, 2]

    def test_encode(self) -> None:
        assert ArrayCodec(IntCodec(2), 2).encode([1, 2]) == b"\x01\x00\x02\x00"

    def test_encode_wrong_count(self) -> None:
        with pytest.raises(EncodeError, match="expected 3 elements"):
            ArrayCodec(IntCodec(1), 3).encode([1, 2])


class TestFlagWordCodec:
    """Test bit-flag words."""

    NAMES = ("initialized", "market", "open_orders")

    def test_byte_width(self) -> None:
        assert FlagWordCodec(self.NAMES).byte_width == 8

    def test_decode_bit_order(self) -> None:
        codec = FlagWordCodec(self.NAMES)
        assert codec.decode(bytes([0x05, 0, 0, 0, 0, 0, 0, 0])) == {
            "initialized": True,
            "market": False,
            "open_orders": True,
        }

    def test_decode_ignores_unnamed_bits(self) -> None:
        codec = FlagWordCodec(self.NAMES)
        assert codec.decode(b"\x00" * 7 + b"\x80") == dict.fromkeys(self.NAMES, False)

    def test_decode_short_slice(self) -> None:
        with pytest.raises(InsufficientBytesError):
            FlagWordCodec(self.NAMES).decode(bytes(7))

    def test_encode(self) -> None:
        codec = FlagWordCodec(self.NAMES)
        assert codec.encode({"market": True}) == bytes([0x02, 0, 0, 0, 0, 0, 0, 0])

    def test_encode_unknown_flag(self) -> None:
        with pytest.raises(EncodeError, match="unknown flags"):
            FlagWordCodec(self.NAMES).encode({"bids": True})

    def test_too_many_flags(self) -> None:
        with pytest.raises(ValueError, match="do not fit"):
            FlagWordCodec(tuple(f"f{i}" for i in range(9)), word_bytes=1)


class TestFieldCodecProtocol:
    """Test that every primitive satisfies the FieldCodec capability."""

    @pytest.mark.parametrize(
        "codec",
        [
            IntCodec(8),
            BlobCodec(5),
            BytesCodec(32),
            ArrayCodec(IntCodec(8), 128),
            FlagWordCodec(("a", "b")),
        ],
    )
    def test_is_field_codec(self, codec: FieldCodec) -> None:
        assert isinstance(codec, FieldCodec)

    def test_plain_object_is_not_codec(self) -> None:
        assert not isinstance(object(), FieldCodec)

"""Base layout classes and solayout-specific Pydantic configuration.

This module provides BaseLayout, which every account layout inherits from, and
BitFlags, the base for layouts packed into a single flag word.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from ..codec.primitives import Buffer, FieldCodec


class BaseLayout(BaseModel):
    """Base class for all fixed-width account layouts.

    Fields are declared in the exact order the on-chain program serializes
    them, each annotated with a fixed-width alias (U64, PublicKey, Blob(5), ...)
    or another layout class.

    solayout-specific options are configured as ClassVar attributes:

    Example:
        >>> class Pool(BaseLayout):
        ...     status: U64
        ...     padding: Blob(5) = None
        ...     nonce: U8
        ...
        ...     layout_strict: ClassVar[bool] = True
        >>> Pool.byte_width()
        14

    Attributes:
        layout_strict: Reject bytes left over after the last field when decoding
    """

    model_config = ConfigDict(
        # Decoded records are immutable
        frozen=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
        # Public keys and other byte strings appear as hex in JSON
        ser_json_bytes="hex",
    )

    layout_strict: ClassVar[bool] = False

    @classmethod
    def layout_codec(cls) -> FieldCodec:
        """Return the codec that reads and writes this layout as a field."""
        # Import here to avoid circular dependency
        from ..codec.record import LayoutCodec

        return LayoutCodec(cls)

    @classmethod
    def byte_width(cls) -> int:
        """Total width of the layout in bytes."""
        return cls.layout_codec().byte_width

    @classmethod
    def from_bytes(cls, data: Buffer, strict: bool | None = None) -> Any:
        """Decode account bytes into an instance of this layout.

        See solayout.decode() for details.
        """
        from ..codec.decoder import decode

        return decode(cls, data, strict=strict)

    def to_bytes(self) -> bytes:
        """Encode this instance to its fixed-width binary form."""
        from ..codec.encoder import encode

        return encode(self)


class BitFlags(BaseLayout):
    """Layout packed into one little-endian integer word.

    Each field must be a bool. The first declared field is bit 0, the second
    bit 1, and so on; the declaration order is the wire format.

    Example:
        >>> class Status(BitFlags):
        ...     enabled: bool = False
        ...     paused: bool = False
        >>> Status.from_bytes(bytes([0x02, 0, 0, 0, 0, 0, 0, 0])).paused
        True

    Attributes:
        flag_word_bytes: Width of the flag word in bytes
    """

    flag_word_bytes: ClassVar[int] = 8

    @classmethod
    def layout_codec(cls) -> FieldCodec:
        from ..codec.record import FlagsCodec

        return FlagsCodec(cls)

    @classmethod
    def flag_names(cls) -> tuple[str, ...]:
        """Flag names in bit order."""
        return tuple(cls.model_fields)

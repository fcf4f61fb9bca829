"""Field type aliases and helpers.

Each alias is an ``Annotated`` type carrying both the codec used on the wire
and the Pydantic constraints that keep constructed records encodable.

Example:
    >>> class Vault(BaseLayout):
    ...     owner: PublicKey
    ...     amount: U64
    ...     reserved: Blob(7) = None
    ...     history: Seq128(U32)
"""

from __future__ import annotations

from typing import Annotated, Any, get_args, get_origin

from pydantic import Field

from ..codec.primitives import ArrayCodec, BlobCodec, BytesCodec, FieldCodec, IntCodec

U8 = Annotated[int, IntCodec(1), Field(ge=0, le=2**8 - 1)]
U16 = Annotated[int, IntCodec(2), Field(ge=0, le=2**16 - 1)]
U32 = Annotated[int, IntCodec(4), Field(ge=0, le=2**32 - 1)]
U64 = Annotated[int, IntCodec(8), Field(ge=0, le=2**64 - 1)]
U128 = Annotated[int, IntCodec(16), Field(ge=0, le=2**128 - 1)]

I8 = Annotated[int, IntCodec(1, signed=True), Field(ge=-(2**7), le=2**7 - 1)]
I16 = Annotated[int, IntCodec(2, signed=True), Field(ge=-(2**15), le=2**15 - 1)]
I32 = Annotated[int, IntCodec(4, signed=True), Field(ge=-(2**31), le=2**31 - 1)]
I64 = Annotated[int, IntCodec(8, signed=True), Field(ge=-(2**63), le=2**63 - 1)]
I128 = Annotated[int, IntCodec(16, signed=True), Field(ge=-(2**127), le=2**127 - 1)]

PUBLIC_KEY_LENGTH = 32


def FixedBytes(length: int) -> Any:
    """Create a fixed-length opaque bytes field.

    Args:
        length: Exact length in bytes

    Example:
        >>> class Message(BaseLayout):
        ...     digest: FixedBytes(32)
    """
    return Annotated[bytes, BytesCodec(length), Field(min_length=length, max_length=length)]


# Account addresses are opaque 32-byte identifiers
PublicKey = FixedBytes(PUBLIC_KEY_LENGTH)


def Blob(length: int) -> Any:
    """Create a reserved region that decodes to None.

    Blob fields should default to None so records can be built without them.

    Example:
        >>> class Message(BaseLayout):
        ...     padding: Blob(5) = None
    """
    return Annotated[None, BlobCodec(length)]


def codec_of(field_type: Any) -> FieldCodec:
    """Return the codec carried by an alias such as U64 or FixedBytes(16).

    Raises:
        TypeError: If ``field_type`` carries no codec
    """
    if isinstance(field_type, FieldCodec):
        return field_type
    if get_origin(field_type) is Annotated:
        for item in get_args(field_type)[1:]:
            if isinstance(item, FieldCodec):
                return item
    if isinstance(field_type, type) and hasattr(field_type, "layout_codec"):
        return field_type.layout_codec()
    raise TypeError(f"{field_type!r} is not a fixed-width field type")


def FixedArray(element: Any, count: int) -> Any:
    """Create a field holding exactly ``count`` fixed-width elements.

    Args:
        element: Element alias (U64, U128, FixedBytes(16), ...) or layout class
        count: Number of elements

    Example:
        >>> class Message(BaseLayout):
        ...     client_ids: FixedArray(U64, 128)
    """
    codec = ArrayCodec(codec_of(element), count)
    return Annotated[list[element], codec, Field(min_length=count, max_length=count)]


def Seq128(element: Any) -> Any:
    """Create a field holding exactly 128 fixed-width elements."""
    return FixedArray(element, 128)

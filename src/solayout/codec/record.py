"""Record codecs: layouts as fields.

LayoutCodec implements the record decoder. It walks a layout's fields in
declaration order, slicing the buffer by each field's width. FlagsCodec turns
a bit-flag word into a BitFlags model.
"""

from __future__ import annotations

from typing import Any, Type

from ..exceptions import EncodeError, InsufficientBytesError, SchemaError
from .primitives import Buffer, FlagWordCodec, check_length
from .schema import LayoutSchema


class LayoutCodec:
    """Codec for a composite record described by a BaseLayout subclass."""

    def __init__(self, layout_class: Type[Any]) -> None:
        self.layout_class = layout_class
        self.schema = LayoutSchema.from_model(layout_class)
        self.byte_width = self.schema.byte_width

    def __repr__(self) -> str:
        return f"LayoutCodec({self.layout_class.__name__}, byte_width={self.byte_width})"

    def decode_fields(self, data: Buffer) -> dict[str, Any]:
        """Decode every field into a name -> value mapping.

        The bounds of each field are checked before it is sliced, so a short
        buffer fails at the first field that does not fit.

        Raises:
            InsufficientBytesError: If the buffer ends inside a field
        """
        available = len(data)
        values: dict[str, Any] = {}
        for field in self.schema.fields:
            if field.end > available:
                raise InsufficientBytesError(
                    field.byte_width, available - field.offset, field=field.name
                )
            values[field.name] = field.codec.decode(data[field.offset : field.end])
        return values

    def decode(self, data: Buffer) -> Any:
        return self.layout_class(**self.decode_fields(data))

    def encode(self, value: Any) -> bytes:
        if not isinstance(value, self.layout_class):
            raise EncodeError(
                f"expected {self.layout_class.__name__}, got {type(value).__name__}"
            )
        chunks = []
        for field in self.schema.fields:
            try:
                chunks.append(field.codec.encode(getattr(value, field.name)))
            except EncodeError as e:
                raise EncodeError(f"Field {field.name}: {e}") from e
        return b"".join(chunks)


class FlagsCodec:
    """Codec for a BitFlags layout: one little-endian word, one bit per field."""

    def __init__(self, layout_class: Type[Any]) -> None:
        self.layout_class = layout_class
        names = []
        for name, field_info in layout_class.model_fields.items():
            if field_info.annotation is not bool:
                raise SchemaError(
                    f"{layout_class.__name__}.{name}: flag fields must be bool, "
                    f"got {field_info.annotation}"
                )
            names.append(name)
        try:
            self.word = FlagWordCodec(tuple(names), word_bytes=layout_class.flag_word_bytes)
        except ValueError as e:
            raise SchemaError(f"{layout_class.__name__}: {e}") from e
        self.byte_width = self.word.byte_width

    def __repr__(self) -> str:
        return f"FlagsCodec({self.layout_class.__name__}, names={self.word.names})"

    def decode(self, data: Buffer) -> Any:
        check_length(self.byte_width, data)
        return self.layout_class(**self.word.decode(data))

    def encode(self, value: Any) -> bytes:
        if not isinstance(value, self.layout_class):
            raise EncodeError(
                f"expected {self.layout_class.__name__}, got {type(value).__name__}"
            )
        return self.word.encode({name: getattr(value, name) for name in self.word.names})

"""Schema introspection for layout models.

This module walks the fields of a BaseLayout subclass in declaration order and
resolves each one to a FieldCodec and a byte offset.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Type

from pydantic.fields import FieldInfo

from ..exceptions import SchemaError
from .primitives import FieldCodec


@dataclass(frozen=True)
class FieldSchema:
    """Schema information for a single field.

    Attributes:
        name: Field name
        codec: Codec that reads and writes the field
        offset: Byte offset of the field from the start of the layout
    """

    name: str
    codec: FieldCodec
    offset: int

    @property
    def byte_width(self) -> int:
        return self.codec.byte_width

    @property
    def end(self) -> int:
        """Offset one past the last byte of the field."""
        return self.offset + self.codec.byte_width


class LayoutSchema:
    """Schema information for an entire layout.

    Example:
        >>> schema = LayoutSchema.from_model(OpenOrders)
        >>> for field in schema.fields:
        ...     print(f"{field.offset:5d} {field.name}: {field.byte_width} bytes")
    """

    def __init__(self, layout_class: Type[Any]) -> None:
        """Initialize schema from a layout class.

        Args:
            layout_class: BaseLayout subclass to introspect
        """
        self.layout_class = layout_class
        self.fields: List[FieldSchema] = []
        self._introspect()

    @classmethod
    def from_model(cls, layout_class: Type[Any]) -> LayoutSchema:
        return cls(layout_class)

    def _introspect(self) -> None:
        offset = 0
        for field_name, field_info in self.layout_class.model_fields.items():
            codec = resolve_codec(field_name, field_info)
            self.fields.append(FieldSchema(name=field_name, codec=codec, offset=offset))
            offset += codec.byte_width

    @property
    def byte_width(self) -> int:
        """Total width of the layout in bytes."""
        return sum(field.byte_width for field in self.fields)


def resolve_codec(name: str, field_info: FieldInfo) -> FieldCodec:
    """Find the codec for a field.

    A codec attached through ``Annotated`` metadata wins. Otherwise the
    annotation itself must be a layout class, which is decoded as a nested
    record.

    Raises:
        SchemaError: If the field has no codec
    """
    # Import here to avoid circular dependency
    from ..models.base import BaseLayout

    codecs = [item for item in field_info.metadata if isinstance(item, FieldCodec)]
    if len(codecs) > 1:
        raise SchemaError(f"Field {name}: more than one codec attached")
    if codecs:
        return codecs[0]

    annotation = field_info.annotation
    if isinstance(annotation, type) and issubclass(annotation, BaseLayout):
        return annotation.layout_codec()

    raise SchemaError(
        f"Field {name}: no codec for type {annotation}. "
        f"Use a fixed-width alias such as U64, PublicKey, Blob(n) or a nested layout."
    )

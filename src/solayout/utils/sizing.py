"""Layout size calculation utilities.

This module provides functions to calculate layout widths and field offsets
without decoding anything.
"""

from __future__ import annotations

from ..codec.schema import LayoutSchema
from ..models.base import BaseLayout, BitFlags


def _layout_class(layout_or_class: BaseLayout | type[BaseLayout]) -> type[BaseLayout]:
    if isinstance(layout_or_class, BaseLayout):
        return type(layout_or_class)
    return layout_or_class


def byte_width(layout_or_class: BaseLayout | type[BaseLayout]) -> int:
    """Calculate the width of a layout in bytes.

    Args:
        layout_or_class: Layout instance or class

    Returns:
        Total width in bytes

    Raises:
        SchemaError: If the layout cannot be resolved into codecs

    Example:
        >>> byte_width(OpenOrders)
        3228
    """
    return _layout_class(layout_or_class).byte_width()


def field_sizes(layout_or_class: BaseLayout | type[BaseLayout]) -> dict[str, int]:
    """Get the width in bytes of each field in a layout.

    For a BitFlags layout the sizes are in bits (one per flag).

    Example:
        >>> field_sizes(DidSwap)["from_mint"]
        32
    """
    layout_class = _layout_class(layout_or_class)
    if issubclass(layout_class, BitFlags):
        return {name: 1 for name in layout_class.flag_names()}
    schema = LayoutSchema.from_model(layout_class)
    return {field.name: field.byte_width for field in schema.fields}


def field_offsets(layout_or_class: BaseLayout | type[BaseLayout]) -> dict[str, int]:
    """Get the byte offset of each field from the start of the layout.

    For a BitFlags layout the offsets are bit positions.

    Example:
        >>> field_offsets(OpenOrders)["market"]
        13
    """
    layout_class = _layout_class(layout_or_class)
    if issubclass(layout_class, BitFlags):
        return {name: bit for bit, name in enumerate(layout_class.flag_names())}
    schema = LayoutSchema.from_model(layout_class)
    return {field.name: field.offset for field in schema.fields}

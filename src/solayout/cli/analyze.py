"""Layout analysis CLI command."""

from __future__ import annotations

import importlib.util
import inspect
import sys
from pathlib import Path

from ..codec.primitives import ArrayCodec, BlobCodec, BytesCodec, FieldCodec, IntCodec
from ..codec.record import FlagsCodec, LayoutCodec
from ..codec.schema import LayoutSchema
from ..models.base import BaseLayout, BitFlags


def analyze_file(file_path: Path) -> None:
    """Analyze all BaseLayout classes in a Python file.

    Args:
        file_path: Path to Python file containing layout definitions
    """
    spec = importlib.util.spec_from_file_location("user_module", file_path)
    if spec is None or spec.loader is None:
        raise ValueError(f"Could not load module from {file_path}")

    module = importlib.util.module_from_spec(spec)
    sys.modules["user_module"] = module
    spec.loader.exec_module(module)

    # Only include classes defined in this file (not imported)
    layout_classes = [
        obj
        for _name, obj in inspect.getmembers(module, inspect.isclass)
        if issubclass(obj, BaseLayout)
        and obj not in (BaseLayout, BitFlags)
        and obj.__module__ == "user_module"
    ]

    if not layout_classes:
        print(f"No BaseLayout classes found in {file_path}")
        return

    print("|" * 7, "solayout: Fixed-width account layout codec", "|" * 7)
    print(f"{len(layout_classes)} layout{'s' if len(layout_classes) != 1 else ''} loaded.")
    print("Offsets and widths are in bytes unless otherwise noted.")
    print()

    for layout_class in layout_classes:
        analyze_layout_class(layout_class)


def analyze_layout_class(layout_class: type[BaseLayout]) -> None:
    """Print the field-by-field breakdown of a single layout class."""
    total = layout_class.byte_width()
    print(f"{'=' * 19} {layout_class.__name__} {'=' * 19}")
    print(f"Total size: {total} bytes")
    if layout_class.layout_strict:
        print("Trailing bytes: rejected")
    print()

    if issubclass(layout_class, BitFlags):
        print(f"{'-' * 27} Flags {'-' * 27}")
        for bit, name in enumerate(layout_class.flag_names()):
            print(f"        bit {bit:2d} {name}")
        print()
        return

    print(f"{'-' * 27} Fields {'-' * 26}")
    print(f"        {'offset':>6}  {'size':>5}  name")
    schema = LayoutSchema.from_model(layout_class)
    for field in schema.fields:
        description = _describe(field.codec)
        print(f"        {field.offset:>6}  {field.byte_width:>5}  {field.name} ({description})")
    print()


def _describe(codec: FieldCodec) -> str:
    """Short human-readable codec description."""
    if isinstance(codec, IntCodec):
        return f"{'i' if codec.signed else 'u'}{codec.byte_width * 8}"
    if isinstance(codec, BlobCodec):
        return "padding"
    if isinstance(codec, BytesCodec):
        return "bytes"
    if isinstance(codec, ArrayCodec):
        return f"{_describe(codec.element)}[{codec.count}]"
    if isinstance(codec, (LayoutCodec, FlagsCodec)):
        return codec.layout_class.__name__
    return type(codec).__name__

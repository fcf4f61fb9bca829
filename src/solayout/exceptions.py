"""Exception hierarchy for solayout.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from LayoutError for easy catching of any solayout-specific error.
"""

from __future__ import annotations


class LayoutError(Exception):
    """Base exception for all solayout errors."""

    pass


class SchemaError(LayoutError):
    """Raised when a layout class cannot be resolved into field codecs.

    Examples:
        - Field annotation carries no codec metadata
        - Bit-flag word declares a non-bool flag
        - Bit-flag word declares more flags than it has bits
    """

    pass


class EncodeError(LayoutError):
    """Raised when encoding a record fails.

    Examples:
        - Integer value does not fit the field width
        - Byte string has the wrong length
        - Array has the wrong number of elements
    """

    pass


class DecodeError(LayoutError):
    """Raised when decoding account bytes fails.

    A decode failure usually means the bytes belong to a different account
    type or a different program version. It is never worth retrying.
    """

    pass


class InsufficientBytesError(DecodeError):
    """Raised when a buffer is shorter than a field or record requires.

    Attributes:
        needed: Number of bytes the field or record requires
        available: Number of bytes that were supplied
        field: Name of the field being decoded, if known
    """

    def __init__(self, needed: int, available: int, field: str | None = None) -> None:
        self.needed = needed
        self.available = available
        self.field = field
        where = f" for field {field}" if field is not None else ""
        super().__init__(f"Insufficient bytes{where}: need {needed}, have {available}")


class TrailingBytesError(DecodeError):
    """Raised in strict mode when bytes are left over after the last field."""

    def __init__(self, consumed: int, available: int) -> None:
        self.consumed = consumed
        self.available = available
        super().__init__(
            f"{available - consumed} trailing bytes after layout of {consumed} bytes"
        )

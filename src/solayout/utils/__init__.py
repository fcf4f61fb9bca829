"""Utility functions for solayout.

This module provides layout size and offset calculation.
"""

from __future__ import annotations

from .sizing import byte_width, field_offsets, field_sizes

__all__ = [
    "byte_width",
    "field_offsets",
    "field_sizes",
]

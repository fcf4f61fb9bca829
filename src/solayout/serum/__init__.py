"""Serum DEX layouts.

This module provides the account and event layouts read by Serum swap
clients.
"""

from __future__ import annotations

from .layouts import (
    LAYOUTS,
    AccountFlags,
    Blob5,
    Blob7,
    Blob1024,
    DidSwap,
    MarketState,
    OpenOrders,
    Side,
)

__all__ = [
    "LAYOUTS",
    "AccountFlags",
    "OpenOrders",
    "MarketState",
    "DidSwap",
    "Side",
    "Blob5",
    "Blob7",
    "Blob1024",
]

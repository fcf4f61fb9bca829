"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Callable

import pytest


@pytest.fixture
def scenario_bytes() -> bytes:
    """u64 = 1, five reserved bytes, u8 = 42."""
    return bytes([0x01, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0x2A])


@pytest.fixture
def make_key() -> Callable[[int], bytes]:
    """Factory for distinct, recognizable 32-byte public keys."""

    def _make_key(seed: int) -> bytes:
        return bytes((seed + i) % 256 for i in range(32))

    return _make_key


@pytest.fixture
def u64le() -> Callable[[int], bytes]:
    """Little-endian u64 packer for building account fixtures by hand."""

    def _u64le(value: int) -> bytes:
        return value.to_bytes(8, "little")

    return _u64le

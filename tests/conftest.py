"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def scenario_bytes() -> bytes:
    """uint8(200), string("hi"), bool(True)."""
    return b"\xc8\x02hi\x01"


@pytest.fixture
def long_payload() -> bytes:
    """300-byte payload, long enough to need a 2-byte size header."""
    return bytes(range(256)) + bytes(range(44))

"""Utility functions for bitsparrow."""

from __future__ import annotations

from .sizing import encoded_size, field_kinds, size_header_length

__all__ = [
    "encoded_size",
    "field_kinds",
    "size_header_length",
]

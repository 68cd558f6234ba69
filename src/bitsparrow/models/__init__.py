"""Pydantic message modeling for bitsparrow."""

from __future__ import annotations

from .base import BaseMessage
from .fields import (
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    Size,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    WireField,
)

__all__ = [
    "BaseMessage",
    "WireField",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "Size",
    "Float32",
    "Float64",
]

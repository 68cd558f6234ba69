"""Fixed-width numeric layouts.

Every multi-byte value is written most-significant byte first, so the wire
format does not depend on host byte order. 64-bit integers occupy the high
32 bits followed by the low 32 bits, both big-endian, which is exactly the
layout of a single big-endian 64-bit word. Floats use IEEE-754 binary32 and
binary64 bit patterns.
"""

from __future__ import annotations

import operator
import struct
from dataclasses import dataclass

from ..exceptions import EncodeError


@dataclass(frozen=True)
class FixedWidth:
    """Layout of one fixed-width scalar kind.

    Attributes:
        name: Wire kind name (``uint8``, ``int64``, ``float32``...)
        bits: Width in bits
        signed: Two's complement integer (ignored for floats)
        is_float: IEEE-754 value instead of an integer
    """

    name: str
    bits: int
    signed: bool = False
    is_float: bool = False

    @property
    def size(self) -> int:
        """Number of bytes on the wire."""
        return self.bits // 8

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    @property
    def _struct(self) -> struct.Struct:
        return _STRUCTS[(self.bits, self.signed, self.is_float)]

    def pack(self, value: int | float, wrap: bool = False) -> bytes:
        """Return the big-endian representation of ``value``.

        Args:
            value: Number to encode
            wrap: Truncate out-of-range integers modulo 2**bits instead of failing

        Raises:
            EncodeError: If the value has the wrong type or does not fit
        """
        if self.is_float:
            try:
                return self._struct.pack(value)
            except (struct.error, OverflowError) as err:
                raise EncodeError(f"{self.name}: cannot encode {value!r}: {err}") from err

        try:
            number = operator.index(value)
        except TypeError as err:
            raise EncodeError(
                f"{self.name}: expected int, got {type(value).__name__}"
            ) from err

        if wrap:
            return _STRUCTS[(self.bits, False, False)].pack(number & ((1 << self.bits) - 1))

        if not self.min_value <= number <= self.max_value:
            raise EncodeError(
                f"{self.name}: value {number} out of bounds [{self.min_value}, {self.max_value}]"
            )
        return self._struct.pack(number)

    def unpack(self, data: bytes | bytearray | memoryview, offset: int = 0) -> int | float:
        """Read one value starting at ``offset``. The caller checks bounds."""
        return self._struct.unpack_from(data, offset)[0]


_STRUCTS: dict[tuple[int, bool, bool], struct.Struct] = {
    (8, False, False): struct.Struct(">B"),
    (16, False, False): struct.Struct(">H"),
    (32, False, False): struct.Struct(">I"),
    (64, False, False): struct.Struct(">Q"),
    (8, True, False): struct.Struct(">b"),
    (16, True, False): struct.Struct(">h"),
    (32, True, False): struct.Struct(">i"),
    (64, True, False): struct.Struct(">q"),
    (32, False, True): struct.Struct(">f"),
    (64, False, True): struct.Struct(">d"),
}

UINT8 = FixedWidth("uint8", 8)
UINT16 = FixedWidth("uint16", 16)
UINT32 = FixedWidth("uint32", 32)
UINT64 = FixedWidth("uint64", 64)
INT8 = FixedWidth("int8", 8, signed=True)
INT16 = FixedWidth("int16", 16, signed=True)
INT32 = FixedWidth("int32", 32, signed=True)
INT64 = FixedWidth("int64", 64, signed=True)
FLOAT32 = FixedWidth("float32", 32, is_float=True)
FLOAT64 = FixedWidth("float64", 64, is_float=True)

LAYOUTS: dict[str, FixedWidth] = {
    layout.name: layout
    for layout in (UINT8, UINT16, UINT32, UINT64, INT8, INT16, INT32, INT64, FLOAT32, FLOAT64)
}

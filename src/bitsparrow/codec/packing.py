"""Boolean bit-packing state.

Consecutive boolean writes share a byte, up to eight per byte, bit 0 first.
The state is either open (a packing byte exists and the next boolean may
use it) or closed. Any other read or write closes it.
"""

from __future__ import annotations

from dataclasses import dataclass

BITS_PER_BYTE = 8


@dataclass(frozen=True)
class PackingOpen:
    """A packing byte is accepting further booleans.

    Attributes:
        index: Position of the packing byte in the byte sequence
        shift: Bit position of the most recently used bit (0-7)
    """

    index: int
    shift: int = 0

    @property
    def full(self) -> bool:
        return self.shift >= BITS_PER_BYTE - 1

    def advance(self) -> PackingOpen:
        """Return the state after one more boolean shares this byte."""
        return PackingOpen(self.index, self.shift + 1)


PackingState = PackingOpen | None

PACKING_CLOSED: PackingState = None


def next_bit(state: PackingState) -> PackingOpen | None:
    """Return the advanced state if the next boolean fits the open byte, else None."""
    if state is None or state.full:
        return None
    return state.advance()


def set_bit(byte: int, shift: int, value: bool) -> int:
    """Return ``byte`` with bit ``shift`` set when ``value`` is true."""
    return byte | (1 << shift) if value else byte


def bit_is_set(byte: int, shift: int) -> bool:
    """Return whether bit ``shift`` of ``byte`` is set."""
    return bool(byte & (1 << shift))

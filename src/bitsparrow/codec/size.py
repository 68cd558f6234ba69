"""Self-describing variable-length size codec.

A size is written in 1 to 8 bytes. The leading byte starts with a unary
prefix announcing how many continuation bytes follow, UTF-8 style:

    0xxxxxxx                               0 .. 2**7 - 1
    10xxxxxx + 1 byte                   2**7 .. 2**14 - 1
    110xxxxx + 2 bytes                 2**14 .. 2**21 - 1
    1110xxxx + 3 bytes                 2**21 .. 2**28 - 1
    11110xxx + 4 bytes                 2**28 .. 2**35 - 1
    111110xx + 5 bytes                 2**35 .. 2**42 - 1
    1111110x + 6 bytes                 2**42 .. 2**49 - 1
    11111110 + 7 bytes                 2**49 .. 2**53 - 1

Bits left in the leading byte hold the most significant part of the value;
continuation bytes hold the rest in big-endian order.
"""

from __future__ import annotations

from ..config import MAX_SAFE_INTEGER
from ..exceptions import InvalidSizeError

MAX_HEADER_LENGTH = 8
MAX_CONTINUATION_BYTES = MAX_HEADER_LENGTH - 1


def header_length(value: int, max_size: int = MAX_SAFE_INTEGER) -> int:
    """Return the number of bytes needed to encode ``value`` as a size header.

    Raises:
        InvalidSizeError: If value is negative or greater than ``max_size``
    """
    if value < 0:
        raise InvalidSizeError(f"Size must be non-negative, got {value}")
    if value > max_size:
        raise InvalidSizeError(f"Provided size is too long: {value} > {max_size}")

    # Tight 7n-bit cutoffs: the 2**28, 2**35, 2**42 and 2**49 boundaries need the
    # longer header, a shorter one spills into the marker bits and misreads.
    length = 1
    # Each header byte contributes 7 bits of payload capacity
    while value >= 1 << (7 * length):
        length += 1
    return length


def encode_size(value: int, max_size: int = MAX_SAFE_INTEGER) -> bytes:
    """Encode ``value`` as a size header using the smallest byte count.

    Example:
        >>> encode_size(5)
        b'\\x05'
        >>> encode_size(300)
        b'\\x81,'
    """
    length = header_length(value, max_size)
    header = bytearray(value.to_bytes(length, "big"))
    header[0] |= (0xFF00 >> (length - 1)) & 0xFF
    return bytes(header)


def decode_lead(lead: int) -> tuple[int, int]:
    """Split a leading header byte into its value bits and continuation count.

    Args:
        lead: First byte of the header (0-255)

    Returns:
        ``(high_bits, continuation_count)``

    Raises:
        InvalidSizeError: If the prefix announces more than 7 continuation bytes
    """
    if lead & 0x80 == 0:
        return lead, 0

    high_bits = lead ^ 0x80
    continuation = 1
    marker = 0x40
    while marker and high_bits & marker:
        high_bits ^= marker
        marker >>= 1
        continuation += 1

    if continuation > MAX_CONTINUATION_BYTES:
        raise InvalidSizeError(f"Can't read size out of 53 bit range (lead byte 0x{lead:02x})")

    return high_bits, continuation

"""Exception hierarchy for bitsparrow.

All exceptions inherit from BitsparrowError so callers can catch any
bitsparrow-specific failure with a single handler.
"""

from __future__ import annotations


class BitsparrowError(Exception):
    """Base exception for all bitsparrow errors."""

    pass


class SchemaError(BitsparrowError):
    """Raised when a message class cannot be mapped to wire kinds.

    Examples:
        - Unsupported field annotation
        - Integer field without an explicit wire kind
        - Wire kind incompatible with the field's Python type
    """

    pass


class EncodeError(BitsparrowError):
    """Raised when a value cannot be written.

    Examples:
        - Integer outside the range of its fixed width
        - Field type mismatch
        - Message exceeds bitsparrow_max_bytes
    """

    pass


class DecodeError(BitsparrowError):
    """Raised when a byte sequence cannot be read.

    Examples:
        - Truncated data
        - Trailing bytes after a strict message decode
    """

    pass


class BoundaryError(DecodeError):
    """Raised when a read would consume bytes past the end of the source."""

    pass


class InvalidInputError(DecodeError):
    """Raised when a Decoder is constructed over something that is not a byte sequence."""

    pass


class InvalidSizeError(EncodeError, DecodeError):
    """Raised when a size header is out of the representable range.

    On encode: the requested size is negative or above the configured maximum.
    On decode: the header announces more than 7 continuation bytes.
    """

    pass

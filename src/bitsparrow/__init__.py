"""bitsparrow: Compact Binary Codec

A dense binary serialization format without schema negotiation. An Encoder
appends typed values to a byte sequence; a Decoder reads them back in the
same order. Writer and reader agree on the field sequence out of band.

Key Features:
- Big-endian fixed-width integers (8-64 bit) and IEEE-754 floats
- Self-describing 1-8 byte size headers for lengths
- Adjacent booleans packed eight to a byte
- Optional pydantic message classes that fix the field order in code

Quick Start:
    >>> from bitsparrow import Encoder, Decoder
    >>>
    >>> data = Encoder().uint8(200).string("hi").bool(True).end()
    >>> decoder = Decoder(data)
    >>> decoder.uint8(), decoder.string(), decoder.bool()
    (200, 'hi', True)
    >>> decoder.end()
    True
"""

from __future__ import annotations

__version__ = "0.1.0"

from .codec import Decoder, Encoder, decode, encode
from .config import DEFAULT_CONFIG, MAX_SAFE_INTEGER, CodecConfig
from .exceptions import (
    BitsparrowError,
    BoundaryError,
    DecodeError,
    EncodeError,
    InvalidInputError,
    InvalidSizeError,
    SchemaError,
)
from .models import (
    BaseMessage,
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
from .text import TextCodec, Utf8TextCodec
from .utils import encoded_size, field_kinds, size_header_length

__all__ = [
    # Core API
    "Encoder",
    "Decoder",
    "encode",
    "decode",
    # Configuration
    "CodecConfig",
    "DEFAULT_CONFIG",
    "MAX_SAFE_INTEGER",
    "TextCodec",
    "Utf8TextCodec",
    # Messages
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
    # Exceptions
    "BitsparrowError",
    "SchemaError",
    "EncodeError",
    "DecodeError",
    "BoundaryError",
    "InvalidInputError",
    "InvalidSizeError",
    # Sizing
    "size_header_length",
    "encoded_size",
    "field_kinds",
    # Version
    "__version__",
]

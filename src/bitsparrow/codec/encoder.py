"""Binary encoder.

This module provides the Encoder class, which appends typed values to a
growing byte sequence, and the encode() function that writes a pydantic
message field by field in declaration order.
"""

from __future__ import annotations

import logging
import operator
from typing import Any, Iterable

from pydantic import BaseModel

from ..config import DEFAULT_CONFIG, CodecConfig
from ..exceptions import EncodeError
from . import numeric
from .numeric import FixedWidth
from .packing import PACKING_CLOSED, PackingOpen, PackingState, next_bit, set_bit
from .schema import FieldSchema, MessageSchema
from .size import encode_size

logger = logging.getLogger(__name__)


class Encoder:
    """Accumulates typed writes and returns them as bytes.

    Every write returns the encoder so calls can be chained. ``end()``
    returns the finalized bytes and leaves the encoder empty and reusable.

    Consecutive ``bool()`` writes share a byte, up to eight per byte.
    Any other write in between starts a fresh packing byte.

    Example:
        >>> data = Encoder().uint8(200).string("hi").bool(True).end()
        >>> data
        b'\\xc8\\x02hi\\x01'
    """

    def __init__(self, config: CodecConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self._data = bytearray()
        self._packing: PackingState = PACKING_CLOSED

    def __len__(self) -> int:
        """Number of bytes written since the last ``end()``."""
        return len(self._data)

    def _write(self, chunk: bytes) -> Encoder:
        self._data += chunk
        self._packing = PACKING_CLOSED
        return self

    def _fixed(self, layout: FixedWidth, value: int | float) -> Encoder:
        return self._write(layout.pack(value, wrap=self.config.wrap_integers))

    # ---------------------------------------------------------------------------- #
    #                                 Fixed width                                  #
    # ---------------------------------------------------------------------------- #
    def uint8(self, value: int) -> Encoder:
        return self._fixed(numeric.UINT8, value)

    def uint16(self, value: int) -> Encoder:
        return self._fixed(numeric.UINT16, value)

    def uint32(self, value: int) -> Encoder:
        return self._fixed(numeric.UINT32, value)

    def uint64(self, value: int) -> Encoder:
        return self._fixed(numeric.UINT64, value)

    def int8(self, value: int) -> Encoder:
        return self._fixed(numeric.INT8, value)

    def int16(self, value: int) -> Encoder:
        return self._fixed(numeric.INT16, value)

    def int32(self, value: int) -> Encoder:
        return self._fixed(numeric.INT32, value)

    def int64(self, value: int) -> Encoder:
        return self._fixed(numeric.INT64, value)

    def float32(self, value: float) -> Encoder:
        return self._fixed(numeric.FLOAT32, value)

    def float64(self, value: float) -> Encoder:
        return self._fixed(numeric.FLOAT64, value)

    # ---------------------------------------------------------------------------- #
    #                                Variable width                                #
    # ---------------------------------------------------------------------------- #
    def bool(self, value: Any) -> Encoder:
        """Write a boolean, sharing the previous packing byte when possible."""
        state = next_bit(self._packing)
        if state is not None:
            self._data[state.index] = set_bit(self._data[state.index], state.shift, value)
            self._packing = state
            return self

        self._data.append(1 if value else 0)
        self._packing = PackingOpen(len(self._data) - 1)
        return self

    def size(self, value: int) -> Encoder:
        """Write a non-negative integer as a 1-8 byte size header.

        Raises:
            InvalidSizeError: If value is negative or above ``config.max_size``
        """
        try:
            number = operator.index(value)
        except TypeError as err:
            raise EncodeError(f"size: expected int, got {type(value).__name__}") from err
        return self._write(encode_size(number, self.config.max_size))

    def bytes(self, value: bytes | bytearray | memoryview | Iterable[int]) -> Encoder:
        """Write a size header followed by the raw payload."""
        if isinstance(value, (str, int)):
            raise EncodeError(f"bytes: expected a byte sequence, got {type(value).__name__}")
        try:
            payload = bytes(value)
        except (TypeError, ValueError) as err:
            raise EncodeError(f"bytes: cannot encode {type(value).__name__}: {err}") from err

        return self._write(encode_size(len(payload), self.config.max_size) + payload)

    def string(self, value: str) -> Encoder:
        """Write text as length-prefixed UTF-8."""
        if not isinstance(value, str):
            raise EncodeError(f"string: expected str, got {type(value).__name__}")
        return self.bytes(self.config.text_codec.encode(value))

    def end(self) -> bytes:
        """Return everything written so far and reset the encoder."""
        data = bytes(self._data)
        self._data = bytearray()
        self._packing = PACKING_CLOSED
        logger.debug("Encoder finalized %d bytes", len(data))
        return data


def encode(message: BaseModel, config: CodecConfig | None = None) -> bytes:
    """Encode a pydantic message to bytes.

    Fields are written in declaration order using the wire kind resolved by
    MessageSchema. Nothing but the field values reaches the wire, so the
    reader must decode with the same message class.

    Args:
        message: Message instance to encode
        config: Codec options (defaults to DEFAULT_CONFIG)

    Returns:
        Encoded bytes

    Raises:
        SchemaError: If a field cannot be mapped to a wire kind
        EncodeError: If a field value cannot be written or the result
            exceeds ``bitsparrow_max_bytes``

    Examples:
        ```python
        from bitsparrow import BaseMessage, UInt8, encode

        class Status(BaseMessage):
            vehicle_id: UInt8
            name: str
            active: bool

        data = encode(Status(vehicle_id=200, name="hi", active=True))
        ```
    """
    schema = MessageSchema.from_model(type(message))
    encoder = Encoder(config)

    for field_schema in schema.fields:
        _encode_field(encoder, field_schema, getattr(message, field_schema.name))

    encoded = encoder.end()

    max_bytes = getattr(type(message), "bitsparrow_max_bytes", None)
    if max_bytes is not None and len(encoded) > max_bytes:
        raise EncodeError(
            f"Encoded message size ({len(encoded)} bytes) exceeds bitsparrow_max_bytes={max_bytes}"
        )

    logger.debug("Encoded %s into %d bytes", type(message).__name__, len(encoded))
    return encoded


def _encode_field(encoder: Encoder, field_schema: FieldSchema, value: Any) -> None:
    """Write one field value with the encoder method named by its wire kind."""
    if value is None:
        raise EncodeError(f"Field {field_schema.name} is required but got None")

    try:
        getattr(encoder, field_schema.kind)(value)
    except EncodeError as err:
        raise type(err)(f"Field {field_schema.name}: {err}") from err

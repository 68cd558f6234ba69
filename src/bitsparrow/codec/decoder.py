"""Binary decoder.

This module provides the Decoder class, which reads typed values back from a
byte sequence in the order they were written, and the decode() function that
rebuilds a pydantic message from bytes produced by encode().
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, TypeVar

from pydantic import BaseModel, ValidationError

from ..config import DEFAULT_CONFIG, CodecConfig
from ..exceptions import BoundaryError, DecodeError, InvalidInputError
from . import numeric
from .numeric import FixedWidth
from .packing import PACKING_CLOSED, PackingOpen, PackingState, bit_is_set, next_bit
from .schema import MessageSchema
from .size import decode_lead

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class Decoder:
    """Reads typed values from a byte sequence.

    Each read advances an internal cursor. Reads that need more bytes than
    remain raise BoundaryError and leave the cursor where it was; after any
    error the decoder should be discarded. The source is never modified.

    Example:
        >>> decoder = Decoder(b'\\xc8\\x02hi\\x01')
        >>> decoder.uint8(), decoder.string(), decoder.bool()
        (200, 'hi', True)
        >>> decoder.end()
        True
    """

    def __init__(
        self, data: bytes | bytearray | memoryview | Iterable[int], config: CodecConfig | None = None
    ) -> None:
        if data is None or isinstance(data, str) or not hasattr(data, "__len__"):
            raise InvalidInputError(f"Invalid type: expected a byte sequence, got {type(data).__name__}")
        try:
            self._data = bytes(data)
        except (TypeError, ValueError) as err:
            raise InvalidInputError(f"Invalid type: {type(data).__name__} is not a byte sequence") from err

        self.config = config or DEFAULT_CONFIG
        self._length = len(self._data)
        self._index = 0
        self._packing: PackingState = PACKING_CLOSED

    @property
    def position(self) -> int:
        """Offset of the next unread byte."""
        return self._index

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        return self._length - self._index

    def _take(self, count: int) -> int:
        """Consume ``count`` bytes and return the offset of the first one."""
        end = self._index + count
        if end > self._length:
            raise BoundaryError(
                f"Reading out of boundary: need {count} bytes at offset {self._index}, "
                f"{self.remaining} available"
            )
        start = self._index
        self._index = end
        self._packing = PACKING_CLOSED
        return start

    def _fixed(self, layout: FixedWidth) -> Any:
        return layout.unpack(self._data, self._take(layout.size))

    # ---------------------------------------------------------------------------- #
    #                                 Fixed width                                  #
    # ---------------------------------------------------------------------------- #
    def uint8(self) -> int:
        return self._fixed(numeric.UINT8)

    def uint16(self) -> int:
        return self._fixed(numeric.UINT16)

    def uint32(self) -> int:
        return self._fixed(numeric.UINT32)

    def uint64(self) -> int:
        return self._fixed(numeric.UINT64)

    def int8(self) -> int:
        return self._fixed(numeric.INT8)

    def int16(self) -> int:
        return self._fixed(numeric.INT16)

    def int32(self) -> int:
        return self._fixed(numeric.INT32)

    def int64(self) -> int:
        return self._fixed(numeric.INT64)

    def float32(self) -> float:
        return self._fixed(numeric.FLOAT32)

    def float64(self) -> float:
        return self._fixed(numeric.FLOAT64)

    # ---------------------------------------------------------------------------- #
    #                                Variable width                                #
    # ---------------------------------------------------------------------------- #
    def bool(self) -> bool:
        """Read a boolean, continuing the current packing byte when possible."""
        state = next_bit(self._packing)
        if state is not None:
            self._packing = state
            return bit_is_set(self._data[state.index], state.shift)

        index = self._take(1)
        self._packing = PackingOpen(index)
        return bit_is_set(self._data[index], 0)

    def size(self) -> int:
        """Read a size header.

        Raises:
            InvalidSizeError: If the header announces more than 7 continuation bytes
            BoundaryError: If the header is truncated
        """
        origin = self._index
        try:
            value, continuation = decode_lead(self._data[self._take(1)])
            if continuation:
                start = self._take(continuation)
                for byte in self._data[start : start + continuation]:
                    value = value * 256 + byte
        except BoundaryError:
            self._index = origin
            raise
        return value

    def bytes(self) -> bytes:
        """Read a size header and return that many following bytes."""
        origin = self._index
        size = self.size()
        try:
            start = self._take(size)
        except BoundaryError:
            self._index = origin
            raise
        return self._data[start : start + size]

    def string(self) -> str:
        """Read length-prefixed UTF-8; malformed sequences become U+FFFD."""
        return self.config.text_codec.decode(self.bytes())

    def end(self) -> bool:
        """Return True once every byte has been consumed."""
        return self._index >= self._length


def decode(
    message_class: type[T],
    data: bytes | bytearray | memoryview,
    config: CodecConfig | None = None,
    strict: bool = True,
) -> T:
    """Decode bytes produced by encode() back into a pydantic message.

    Args:
        message_class: Message class the data was encoded from
        data: Encoded bytes
        config: Codec options (defaults to DEFAULT_CONFIG)
        strict: Reject data with unread trailing bytes

    Returns:
        Decoded message instance

    Raises:
        SchemaError: If a field cannot be mapped to a wire kind
        DecodeError: If data is truncated, has trailing bytes (strict), or
            yields values the message rejects
    """
    schema = MessageSchema.from_model(message_class)
    decoder = Decoder(data, config)

    field_values: dict[str, Any] = {}
    for field_schema in schema.fields:
        try:
            field_values[field_schema.name] = getattr(decoder, field_schema.kind)()
        except DecodeError as err:
            raise type(err)(f"Field {field_schema.name}: {err}") from err

    if strict and not decoder.end():
        raise DecodeError(
            f"{decoder.remaining} trailing bytes after decoding {message_class.__name__}"
        )

    try:
        decoded = message_class(**field_values)
    except ValidationError as err:
        raise DecodeError(f"Failed to construct {message_class.__name__}: {err}") from err

    logger.debug("Decoded %s from %d bytes", message_class.__name__, decoder.position)
    return decoded

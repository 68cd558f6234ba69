"""Message size calculation utilities."""

from __future__ import annotations

from pydantic import BaseModel

from ..codec.encoder import encode
from ..codec.schema import MessageSchema
from ..codec.size import header_length
from ..config import CodecConfig


def size_header_length(value: int) -> int:
    """Return how many bytes the size header for ``value`` occupies.

    Example:
        >>> size_header_length(127)
        1
        >>> size_header_length(300)
        2

    Raises:
        InvalidSizeError: If value is negative or above 2**53 - 1
    """
    return header_length(value)


def encoded_size(message: BaseModel, config: CodecConfig | None = None) -> int:
    """Return the number of bytes ``encode(message)`` produces.

    Strings, bytes and packed booleans make the size depend on field values,
    so this needs an instance rather than a class.
    """
    return len(encode(message, config))


def field_kinds(message_or_class: BaseModel | type[BaseModel]) -> dict[str, str]:
    """Map each field name to its wire kind, in encoding order.

    Example:
        >>> field_kinds(Status)
        {'vehicle_id': 'uint8', 'name': 'string', 'active': 'bool'}
    """
    if isinstance(message_or_class, BaseModel):
        message_class = type(message_or_class)
    else:
        message_class = message_or_class

    schema = MessageSchema.from_model(message_class)
    return {field.name: field.kind for field in schema.fields}

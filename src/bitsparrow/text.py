"""UTF-8 text conversion used by the string codec.

The codec only needs ``encode(str) -> bytes`` and ``decode(bytes) -> str``.
Decoding never fails: malformed sequences become U+FFFD.
"""

from __future__ import annotations

from typing import Protocol


class TextCodec(Protocol):
    """Contract for the text <-> bytes transform used by ``string`` fields."""

    def encode(self, text: str) -> bytes: ...

    def decode(self, data: bytes) -> str: ...


class Utf8TextCodec:
    """UTF-8 transform backed by Python's built-in codec.

    Lone surrogates cannot be represented in UTF-8 and are replaced on encode
    as well, so any ``str`` can be written.
    """

    name = "utf-8"

    def encode(self, text: str) -> bytes:
        return text.encode("utf-8", errors="replace")

    def decode(self, data: bytes) -> str:
        return bytes(data).decode("utf-8", errors="replace")

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

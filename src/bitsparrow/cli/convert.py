"""Conversion between command-line text and encoded bytes."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from ..codec.decoder import Decoder
from ..codec.encoder import Encoder
from ..codec.schema import FLOAT_KINDS, INTEGER_KINDS, WIRE_KINDS
from ..config import CodecConfig
from ..exceptions import DecodeError

TRUE_WORDS = {"1", "true", "yes", "on"}
FALSE_WORDS = {"0", "false", "no", "off"}


def check_kind(kind: str) -> str:
    if kind not in WIRE_KINDS:
        raise ValueError(f"Unknown wire kind {kind!r}; expected one of {', '.join(WIRE_KINDS)}")
    return kind


def parse_value(kind: str, text: str) -> Any:
    """Parse ``text`` into the Python value written by ``kind``.

    Integers accept any base prefix (``0x``, ``0o``, ``0b``), bytes are hex.
    """
    check_kind(kind)
    if kind in INTEGER_KINDS:
        return int(text, 0)
    if kind in FLOAT_KINDS:
        return float(text)
    if kind == "bool":
        word = text.lower()
        if word in TRUE_WORDS:
            return True
        if word in FALSE_WORDS:
            return False
        raise ValueError(f"Not a boolean: {text!r}")
    if kind == "bytes":
        return bytes.fromhex(text)
    return text


def parse_pair(item: str) -> tuple[str, Any]:
    """Split ``KIND:VALUE`` and parse the value."""
    kind, sep, text = item.partition(":")
    if not sep:
        raise ValueError(f"Expected KIND:VALUE, got {item!r}")
    return kind, parse_value(kind, text)


def encode_values(pairs: Iterable[tuple[str, Any]], config: CodecConfig | None = None) -> bytes:
    encoder = Encoder(config)
    for kind, value in pairs:
        getattr(encoder, check_kind(kind))(value)
    return encoder.end()


def decode_values(
    data: bytes, kinds: Sequence[str], config: CodecConfig | None = None
) -> list[Any]:
    """Read one value per kind and require the data to be fully consumed."""
    decoder = Decoder(data, config)
    values = [getattr(decoder, check_kind(kind))() for kind in kinds]
    if not decoder.end():
        raise DecodeError(f"{decoder.remaining} bytes left unread after {len(kinds)} values")
    return values


def format_value(kind: str, value: Any) -> str:
    if kind == "bytes":
        return value.hex()
    if kind == "string":
        return repr(value)
    return str(value)

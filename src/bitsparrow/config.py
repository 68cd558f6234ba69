"""Configuration for Encoder and Decoder instances."""

from __future__ import annotations

from dataclasses import dataclass, field

from .text import TextCodec, Utf8TextCodec

# Largest integer a 64-bit float holds exactly. Size headers never exceed it so
# that readers limited to double precision can decode every header we emit.
MAX_SAFE_INTEGER = (1 << 53) - 1


@dataclass(frozen=True)
class CodecConfig:
    """Options shared by Encoder and Decoder.

    Attributes:
        text_codec: Transform used by ``string`` reads and writes.
            Defaults to UTF-8 with replacement of malformed input.

        wrap_integers: When True, integers outside the range of a fixed-width
            write are truncated modulo 2**bits instead of raising EncodeError.
            Useful when interoperating with writers that silently wrap.

        max_size: Largest value the size codec will encode (default 2**53 - 1).
            Lower it to reject oversized payloads early.

    Examples:
        ```python
        from bitsparrow import CodecConfig, Encoder

        encoder = Encoder(CodecConfig(wrap_integers=True))
        encoder.uint8(300).end()  # b"," (300 % 256 == 44)
        ```
    """

    text_codec: TextCodec = field(default_factory=Utf8TextCodec)
    wrap_integers: bool = False
    max_size: int = MAX_SAFE_INTEGER

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not callable(getattr(self.text_codec, "encode", None)) or not callable(
            getattr(self.text_codec, "decode", None)
        ):
            raise ValueError(f"text_codec must provide encode() and decode(), got {self.text_codec!r}")

        if not 0 <= self.max_size <= MAX_SAFE_INTEGER:
            raise ValueError(f"max_size must be 0-{MAX_SAFE_INTEGER}, got {self.max_size}")


DEFAULT_CONFIG = CodecConfig()

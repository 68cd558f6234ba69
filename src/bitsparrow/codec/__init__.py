"""Binary codec for bitsparrow.

This module provides the Encoder/Decoder pair and the message-level
encode()/decode() functions built on top of them.
"""

from __future__ import annotations

from .decoder import Decoder, decode
from .encoder import Encoder, encode
from .schema import WIRE_KINDS, FieldSchema, MessageSchema

__all__ = [
    "Encoder",
    "Decoder",
    "encode",
    "decode",
    "MessageSchema",
    "FieldSchema",
    "WIRE_KINDS",
]

"""Base message class.

Messages are plain pydantic models whose fields are written in declaration
order. Reader and writer must share the class; nothing on the wire
describes it.
"""

from __future__ import annotations

from typing import ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict

from ..codec import decode, encode
from ..config import CodecConfig

M = TypeVar("M", bound="BaseMessage")


class BaseMessage(BaseModel):
    """Base class for bitsparrow messages.

    Example:
        >>> from typing import ClassVar
        >>> class StatusReport(BaseMessage):
        ...     vehicle_id: UInt8
        ...     callsign: str
        ...     active: bool
        ...     docked: bool
        ...
        ...     bitsparrow_max_bytes: ClassVar[int | None] = 32

    Attributes:
        bitsparrow_max_bytes: Maximum encoded size in bytes (optional, checked on encode)
    """

    model_config = ConfigDict(
        strict=False,
        validate_assignment=True,
        extra="forbid",
    )

    bitsparrow_max_bytes: ClassVar[int | None] = None

    def to_bytes(self, config: CodecConfig | None = None) -> bytes:
        """Shorthand for ``encode(self, config)``."""
        return encode(self, config)

    @classmethod
    def from_bytes(
        cls: type[M], data: bytes | bytearray | memoryview, config: CodecConfig | None = None
    ) -> M:
        """Shorthand for ``decode(cls, data, config)``."""
        return decode(cls, data, config)

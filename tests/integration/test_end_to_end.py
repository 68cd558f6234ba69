"""End-to-end tests for complete write/read sessions."""

from __future__ import annotations

from typing import ClassVar, Optional

import pytest

from bitsparrow import (
    BaseMessage,
    Decoder,
    EncodeError,
    Encoder,
    Float64,
    Int32,
    UInt8,
    UInt32,
    decode,
    encode,
    encoded_size,
)

# Reference vector: uint16(0x0102), int32(-2), bool x3, float32(0.5), size(16384), bytes(b"\xaa")
REFERENCE = bytes.fromhex("0102fffffffe033f000000c0400001aa")


class Telemetry(BaseMessage):
    """Telemetry message mixing every field family."""

    node_id: UInt8
    sequence: UInt32
    altitude_mm: Int32
    latitude: Float64
    longitude: Float64
    label: str
    armed: bool
    gps_fix: bool
    low_battery: bool
    payload: bytes

    bitsparrow_max_bytes: ClassVar[Optional[int]] = 128


class TestEndToEnd:
    """Test full encode/decode workflows."""

    def test_reference_vector(self) -> None:
        """Test a fixed byte layout covering every codec part."""
        data = (
            Encoder()
            .uint16(0x0102)
            .int32(-2)
            .bool(True)
            .bool(True)
            .bool(False)
            .float32(0.5)
            .size(16384)
            .bytes(b"\xaa")
            .end()
        )
        assert data == REFERENCE

        decoder = Decoder(REFERENCE)
        assert decoder.uint16() == 0x0102
        assert decoder.int32() == -2
        assert [decoder.bool(), decoder.bool(), decoder.bool()] == [True, True, False]
        assert decoder.float32() == 0.5
        assert decoder.size() == 16384
        assert decoder.bytes() == b"\xaa"
        assert decoder.end()

    def test_partial_read_not_ended(self) -> None:
        """Test end() stays false while fields remain."""
        decoder = Decoder(REFERENCE)
        decoder.uint16()
        decoder.int32()
        assert decoder.end() is False

    def test_telemetry_workflow(self) -> None:
        """Test a message through encode, size check and decode."""
        msg = Telemetry(
            node_id=3,
            sequence=4_000_000_000,
            altitude_mm=-1250,
            latitude=48.858844,
            longitude=2.294351,
            label="tower",
            armed=True,
            gps_fix=True,
            low_battery=False,
            payload=bytes(50),
        )

        data = encode(msg)
        # 1 + 4 + 4 + 8 + 8 + (1 + 5) + 1 + (1 + 50)
        assert len(data) == 83
        assert encoded_size(msg) == 83
        assert decode(Telemetry, data) == msg

    def test_max_bytes_exceeded(self) -> None:
        """Test oversized messages are rejected before they reach the caller."""
        msg = Telemetry(
            node_id=0,
            sequence=0,
            altitude_mm=0,
            latitude=0.0,
            longitude=0.0,
            label="",
            armed=False,
            gps_fix=False,
            low_battery=False,
            payload=bytes(200),
        )
        with pytest.raises(EncodeError, match="bitsparrow_max_bytes=128"):
            encode(msg)

    def test_many_messages_one_encoder(self) -> None:
        """Test an encoder reused across sessions."""
        encoder = Encoder()
        batches = []
        for index in range(5):
            encoder.uint8(index).string(f"item-{index}")
            for bit in range(index):
                encoder.bool(bit % 2 == 0)
            batches.append(encoder.end())

        for index, data in enumerate(batches):
            decoder = Decoder(data)
            assert decoder.uint8() == index
            assert decoder.string() == f"item-{index}"
            assert [decoder.bool() for _ in range(index)] == [bit % 2 == 0 for bit in range(index)]
            assert decoder.end()

    def test_message_round_trip(self) -> None:
        msg = Telemetry(
            node_id=255,
            sequence=0,
            altitude_mm=-(2**31),
            latitude=-90.0,
            longitude=180.0,
            label="",
            armed=False,
            gps_fix=True,
            low_battery=True,
            payload=b"\x01",
        )
        data = encode(msg)
        assert len(data) <= Telemetry.bitsparrow_max_bytes
        assert decode(Telemetry, data) == msg

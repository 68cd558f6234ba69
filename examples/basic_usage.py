#!/usr/bin/env python3
"""Basic usage example for bitsparrow.

This example demonstrates:
1. Writing values with an Encoder and reading them back with a Decoder
2. Boolean packing
3. Defining a message with pydantic
4. Encoding and decoding the message
"""

from __future__ import annotations

from bitsparrow import BaseMessage, Decoder, Encoder, UInt8, UInt32, decode, encode, field_kinds


class StatusReport(BaseMessage):
    """Vehicle status report."""

    vehicle_id: UInt8
    uptime_s: UInt32
    callsign: str
    active: bool
    docked: bool


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("bitsparrow Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Encoding raw values...")
    data = Encoder().uint8(200).string("hi").bool(True).end()
    print(f"   Encoded: {data.hex()} ({len(data)} bytes)")

    decoder = Decoder(data)
    print(f"   Decoded: {decoder.uint8()}, {decoder.string()!r}, {decoder.bool()}")
    print(f"   Fully consumed: {decoder.end()}")
    print()

    print("2. Packing booleans...")
    encoder = Encoder()
    flags = [True, False, True, True, False, False, True, False]
    for flag in flags:
        encoder.bool(flag)
    packed = encoder.end()
    print(f"   {len(flags)} booleans -> {len(packed)} byte: 0x{packed.hex()}")
    print()

    print("3. Encoding a message...")
    msg = StatusReport(vehicle_id=42, uptime_s=86400, callsign="sparrow", active=True, docked=False)
    for name, kind in field_kinds(StatusReport).items():
        print(f"   {name:<12} {kind}")
    encoded = encode(msg)
    print(f"   Encoded: {encoded.hex()} ({len(encoded)} bytes)")
    print()

    print("4. Decoding the message...")
    decoded = decode(StatusReport, encoded)
    print(f"   {decoded!r}")
    print(f"   Round trip OK: {decoded == msg}")


if __name__ == "__main__":
    main()

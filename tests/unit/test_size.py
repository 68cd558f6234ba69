"""Unit tests for the variable-length size codec."""

from __future__ import annotations

import pytest

from bitsparrow import (
    BoundaryError,
    CodecConfig,
    DecodeError,
    Decoder,
    EncodeError,
    Encoder,
    InvalidSizeError,
    size_header_length,
)
from bitsparrow.codec.size import decode_lead, encode_size, header_length


class TestSizeEncoding:
    """Test header byte counts and marker patterns."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, b"\x00"),
            (2**7 - 1, b"\x7f"),
            (2**7, b"\x80\x80"),
            (300, b"\x81\x2c"),
            (2**14 - 1, b"\xbf\xff"),
            (2**14, b"\xc0\x40\x00"),
            (2**21 - 1, b"\xdf\xff\xff"),
            (2**21, b"\xe0\x20\x00\x00"),
            (2**28 - 1, b"\xef\xff\xff\xff"),
            (2**28, b"\xf0\x10\x00\x00\x00"),
            (2**35, b"\xf8\x08\x00\x00\x00\x00"),
            (2**42, b"\xfc\x04\x00\x00\x00\x00\x00"),
            (2**49, b"\xfe\x02\x00\x00\x00\x00\x00\x00"),
            (2**53 - 1, b"\xfe\x1f\xff\xff\xff\xff\xff\xff"),
        ],
    )
    def test_known_headers(self, value: int, expected: bytes) -> None:
        """Test exact header bytes and their round trip."""
        assert Encoder().size(value).end() == expected

        decoder = Decoder(expected)
        assert decoder.size() == value
        assert decoder.end()

    @pytest.mark.parametrize(
        ("value", "length"),
        [
            (0, 1),
            (2**7 - 1, 1),
            (2**7, 2),
            (2**14 - 1, 2),
            (2**14, 3),
            (2**21 - 1, 3),
            (2**21, 4),
            (2**28 - 1, 4),
            (2**35 - 1, 5),
            (2**42 - 1, 6),
            (2**49 - 1, 7),
            (2**53 - 1, 8),
        ],
    )
    def test_header_length(self, value: int, length: int) -> None:
        """Test the smallest byte count is chosen."""
        assert header_length(value) == length
        assert size_header_length(value) == length
        assert len(encode_size(value)) == length

    def test_too_large(self) -> None:
        """Test sizes above 2**53 - 1 are rejected."""
        with pytest.raises(InvalidSizeError, match="too long"):
            Encoder().size(2**53)

    def test_negative(self) -> None:
        """Test negative sizes are rejected."""
        with pytest.raises(InvalidSizeError, match="non-negative"):
            Encoder().size(-1)

    def test_configured_maximum(self) -> None:
        """Test max_size lowers the accepted ceiling."""
        encoder = Encoder(CodecConfig(max_size=1000))
        encoder.size(1000)
        with pytest.raises(InvalidSizeError):
            encoder.size(1001)

    def test_wrong_type(self) -> None:
        """Test non-integers are rejected."""
        with pytest.raises(EncodeError, match="expected int"):
            Encoder().size(3.0)

    def test_invalid_size_is_encode_and_decode_error(self) -> None:
        """Test InvalidSizeError can be caught from either side."""
        assert issubclass(InvalidSizeError, EncodeError)
        assert issubclass(InvalidSizeError, DecodeError)


class TestSizeDecoding:
    """Test reading size headers."""

    def test_lead_byte_without_prefix(self) -> None:
        """Test single-byte headers carry the value verbatim."""
        assert decode_lead(0x7F) == (0x7F, 0)

    def test_lead_byte_prefix(self) -> None:
        """Test the unary prefix is stripped and counted."""
        assert decode_lead(0b10_111111) == (0b111111, 1)
        assert decode_lead(0b1110_0101) == (0b0101, 3)
        assert decode_lead(0b11111110) == (0, 7)

    def test_more_than_seven_continuation_bytes(self) -> None:
        """Test 0xFF announces 8 continuation bytes and is rejected."""
        with pytest.raises(InvalidSizeError, match="53 bit"):
            Decoder(b"\xff" + b"\x00" * 8).size()

    def test_truncated_header(self) -> None:
        """Test a header missing continuation bytes."""
        decoder = Decoder(b"\xc0\x40")
        with pytest.raises(BoundaryError):
            decoder.size()

    def test_empty_input(self) -> None:
        """Test reading a size from nothing."""
        with pytest.raises(BoundaryError):
            Decoder(b"").size()

    def test_sequential_sizes(self) -> None:
        """Test headers of different lengths back to back."""
        values = [0, 127, 128, 70000, 2**30, 2**53 - 1]
        encoder = Encoder()
        for value in values:
            encoder.size(value)
        decoder = Decoder(encoder.end())

        assert [decoder.size() for _ in values] == values
        assert decoder.end()

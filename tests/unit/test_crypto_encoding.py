"""Tests for fixed-width integer encoding."""
import pytest

from keyblob.core.crypto.utils.encoding import FixedWidthIntegerCodec
from keyblob.core.exceptions import EncodingOverflow


class TestFixedWidthIntegerCodec:
    """Test suite for FixedWidthIntegerCodec."""

    def test_encode_reverses_byte_order(self):
        """Test magnitude is written least significant byte first."""
        assert FixedWidthIntegerCodec.encode(0x0CA1, 2) == b"\xa1\x0c"

    def test_encode_pads_high_end_with_zeros(self):
        """Test short values are zero-padded at the most significant end."""
        assert FixedWidthIntegerCodec.encode(0x0102, 4) == b"\x02\x01\x00\x00"

    def test_encode_zero(self):
        """Test zero fills the field with zero bytes."""
        assert FixedWidthIntegerCodec.encode(0, 3) == b"\x00\x00\x00"

    def test_encode_exact_width(self):
        """Test a value using every byte of the field."""
        assert FixedWidthIntegerCodec.encode(0xFFFF, 2) == b"\xff\xff"

    def test_encode_overflow_raises(self):
        """Test values wider than the field are rejected, not truncated."""
        with pytest.raises(EncodingOverflow) as exc_info:
            FixedWidthIntegerCodec.encode(0x10000, 2)

        assert exc_info.value.width == 2

    def test_encode_negative_raises(self):
        """Test negative integers are rejected."""
        with pytest.raises(EncodingOverflow):
            FixedWidthIntegerCodec.encode(-1, 4)

    def test_encode_zero_width_only_fits_zero(self):
        """Test a zero-width field only accepts zero."""
        assert FixedWidthIntegerCodec.encode(0, 0) == b""
        with pytest.raises(EncodingOverflow):
            FixedWidthIntegerCodec.encode(1, 0)

    def test_decode_inverts_encode(self):
        """Test decoding recovers the value for big integers."""
        value = (1 << 2047) | 0x1234567890ABCDEF
        field = FixedWidthIntegerCodec.encode(value, 256)

        assert len(field) == 256
        assert FixedWidthIntegerCodec.decode(field) == value

    def test_encode_is_deterministic(self):
        """Test the same input always gives the same field."""
        value = 0xDEADBEEF
        assert FixedWidthIntegerCodec.encode(value, 8) == FixedWidthIntegerCodec.encode(value, 8)

    def test_byte_length(self):
        """Test byte length of integer magnitudes."""
        assert FixedWidthIntegerCodec.byte_length(0) == 0
        assert FixedWidthIntegerCodec.byte_length(255) == 1
        assert FixedWidthIntegerCodec.byte_length(256) == 2
        assert FixedWidthIntegerCodec.byte_length(3233) == 2


class TestEncodeUint32:
    """Test suite for 4-byte scalar fields."""

    def test_little_endian(self):
        """Test scalar is little-endian."""
        assert FixedWidthIntegerCodec.encode_uint32(0x31415352) == b"RSA1"

    def test_max_value(self):
        """Test the largest 32-bit value."""
        assert FixedWidthIntegerCodec.encode_uint32(0xFFFFFFFF) == b"\xff" * 4

    def test_overflow_raises(self):
        """Test values above 32 bits are rejected."""
        with pytest.raises(EncodingOverflow):
            FixedWidthIntegerCodec.encode_uint32(1 << 32)

    def test_negative_raises(self):
        """Test negative values are rejected."""
        with pytest.raises(EncodingOverflow):
            FixedWidthIntegerCodec.encode_uint32(-1)

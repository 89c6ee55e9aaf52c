"""Tests for BLOBHEADER and RSAPUBKEY packing."""
import pytest

from keyblob.core.blob.constants import AlgorithmId, BlobType, Magic
from keyblob.core.blob.header import BlobHeader, RSAPubKey
from keyblob.core.exceptions import EncodingOverflow


class TestBlobHeader:
    """Test suite for BlobHeader."""

    def test_public_sign_header(self):
        """Test PUBLICKEYBLOB header bytes for CALG_RSA_SIGN."""
        header = BlobHeader(BlobType.PUBLICKEYBLOB, AlgorithmId.CALG_RSA_SIGN)

        assert header.to_bytes() == bytes.fromhex("0602000000240000")

    def test_private_keyx_header(self):
        """Test PRIVATEKEYBLOB header bytes for CALG_RSA_KEYX."""
        header = BlobHeader(BlobType.PRIVATEKEYBLOB, AlgorithmId.CALG_RSA_KEYX)

        assert header.to_bytes() == bytes.fromhex("0702000000a40000")

    def test_header_size(self):
        """Test the header is always 8 bytes."""
        header = BlobHeader(BlobType.PUBLICKEYBLOB, AlgorithmId.CALG_RSA_KEYX)

        assert len(header.to_bytes()) == 8


class TestRSAPubKey:
    """Test suite for RSAPubKey."""

    def test_pack(self):
        """Test magic, bit length and exponent are little-endian."""
        pub_key = RSAPubKey(Magic.RSA1, 2048, 65537)

        assert pub_key.to_bytes() == b"RSA1" + bytes.fromhex("00080000") + bytes.fromhex("01000100")

    def test_exponent_overflow_raises(self):
        """Test exponents wider than 32 bits are rejected."""
        pub_key = RSAPubKey(Magic.RSA2, 16, 1 << 32)

        with pytest.raises(EncodingOverflow):
            pub_key.to_bytes()

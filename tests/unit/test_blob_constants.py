"""Tests for key blob constants and key usage."""
import pytest

from keyblob.core.blob.constants import AlgorithmId, BlobType, KeyUsage, Magic
from keyblob.core.exceptions import InvalidUsage


class TestConstants:
    """Test suite for CryptoAPI constant values."""

    def test_blob_types(self):
        """Test bType values."""
        assert BlobType.PUBLICKEYBLOB == 0x06
        assert BlobType.PRIVATEKEYBLOB == 0x07

    def test_algorithm_ids(self):
        """Test ALG_ID values."""
        assert AlgorithmId.CALG_RSA_SIGN == 0x00002400
        assert AlgorithmId.CALG_RSA_KEYX == 0x0000A400

    def test_magic_spells_rsa(self):
        """Test magic values read as ASCII when little-endian."""
        assert Magic.RSA1.to_bytes(4, "little") == b"RSA1"
        assert Magic.RSA2.to_bytes(4, "little") == b"RSA2"


class TestKeyUsage:
    """Test suite for KeyUsage."""

    def test_algorithm_mapping(self):
        """Test each usage maps to its ALG_ID."""
        assert KeyUsage.SIGN.algorithm_id is AlgorithmId.CALG_RSA_SIGN
        assert KeyUsage.KEYX.algorithm_id is AlgorithmId.CALG_RSA_KEYX

    @pytest.mark.parametrize("value,expected", [
        (KeyUsage.SIGN, KeyUsage.SIGN),
        (1, KeyUsage.SIGN),
        (2, KeyUsage.KEYX),
        ("sign", KeyUsage.SIGN),
        ("KEYX", KeyUsage.KEYX),
        (" KeyX ", KeyUsage.KEYX),
    ])
    def test_parse_valid(self, value, expected):
        """Test accepted spellings of a usage."""
        assert KeyUsage.parse(value) is expected

    @pytest.mark.parametrize("value", [0, 3, -1, "exchange", "", None, 1.0, True, b"sign"])
    def test_parse_invalid_raises(self, value):
        """Test anything but SIGN and KEYX is rejected."""
        with pytest.raises(InvalidUsage) as exc_info:
            KeyUsage.parse(value)

        assert exc_info.value.usage == value

    def test_invalid_usage_is_value_error(self):
        """Test InvalidUsage can be caught as ValueError."""
        with pytest.raises(ValueError):
            KeyUsage.parse(99)

"""Tests for export configuration."""
import logging

import pytest

from keyblob.core.blob.constants import KeyUsage, OutputFormat
from keyblob.core.config import ExportConfig
from keyblob.core.exceptions import InvalidUsage


class TestExportConfig:
    """Test suite for ExportConfig."""

    def test_defaults(self):
        """Test default values."""
        config = ExportConfig.default()

        assert config.usage is KeyUsage.KEYX
        assert config.output_format is OutputFormat.RAW
        assert config.c_array_per_line == 16
        assert config.log_level == logging.WARNING

    def test_for_signing(self):
        """Test signing preset."""
        assert ExportConfig.for_signing().usage is KeyUsage.SIGN

    def test_for_key_exchange_with_overrides(self):
        """Test presets accept other settings."""
        config = ExportConfig.for_key_exchange(output_format="hex")

        assert config.usage is KeyUsage.KEYX
        assert config.output_format is OutputFormat.HEX

    def test_usage_is_normalized(self):
        """Test usage names and values are converted to KeyUsage."""
        assert ExportConfig(usage="sign").usage is KeyUsage.SIGN
        assert ExportConfig(usage=2).usage is KeyUsage.KEYX

    def test_invalid_usage_raises(self):
        """Test unknown usages are rejected at construction."""
        with pytest.raises(InvalidUsage):
            ExportConfig(usage=7)

    def test_invalid_format_raises(self):
        """Test unknown output formats are rejected."""
        with pytest.raises(ValueError):
            ExportConfig(output_format="pem")

    def test_invalid_line_width_raises(self):
        """Test c_array_per_line must be positive."""
        with pytest.raises(ValueError):
            ExportConfig(c_array_per_line=0)

"""
Export configuration module.

Provides the defaults used by the exporter facade and the CLI.
"""
import logging
from dataclasses import dataclass

from .blob.constants import KeyUsage, OutputFormat


@dataclass
class ExportConfig:
    """
    Key blob export configuration.

    Usage is not stored in RSA keys, so the exporter needs a default
    for callers that do not pass one explicitly.
    """
    # Blob settings
    usage: KeyUsage = KeyUsage.KEYX

    # Output settings
    output_format: OutputFormat = OutputFormat.RAW
    c_array_per_line: int = 16

    # Logging
    log_level: int = logging.WARNING

    def __post_init__(self):
        self.usage = KeyUsage.parse(self.usage)
        self.output_format = OutputFormat(self.output_format)
        if self.c_array_per_line < 1:
            raise ValueError("c_array_per_line must be at least 1")

    @classmethod
    def default(cls) -> 'ExportConfig':
        """Create default configuration."""
        return cls()

    @classmethod
    def for_signing(cls, **kwargs) -> 'ExportConfig':
        """Create configuration exporting AT_SIGNATURE keys."""
        return cls(usage=KeyUsage.SIGN, **kwargs)

    @classmethod
    def for_key_exchange(cls, **kwargs) -> 'ExportConfig':
        """Create configuration exporting AT_KEYEXCHANGE keys."""
        return cls(usage=KeyUsage.KEYX, **kwargs)

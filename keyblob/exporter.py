"""
High-level key blob exporter.

Usage:
    >>> from keyblob import KeyBlobExporter, ExportConfig
    >>>
    >>> exporter = KeyBlobExporter(ExportConfig.for_signing())
    >>> blob = exporter.export_private_pem(open("key.pem", "rb").read())
"""
from typing import Any, Optional, Union

from .core.blob import KeyBlobEncoder, KeyUsage, render
from .core.config import ExportConfig
from .core.keys import RSAKeyParser, to_private_key, to_public_key
from .core.keys.parser import Passphrase
from .core.logging import get_logger

logger = get_logger(__name__)

Usage = Optional[Union[KeyUsage, int, str]]


class KeyBlobExporter:
    """Parses RSA keys and exports them as CryptoAPI key blobs."""

    def __init__(
        self,
        config: Optional[ExportConfig] = None,
        parser: Optional[RSAKeyParser] = None,
        encoder: Optional[KeyBlobEncoder] = None
    ):
        """
        Initialize the exporter.

        Args:
            config: Export configuration (defaults to ExportConfig.default())
            parser: Key parser
            encoder: Blob encoder
        """
        self.config = config or ExportConfig.default()
        self.parser = parser or RSAKeyParser()
        self.encoder = encoder or KeyBlobEncoder()

    def _usage(self, usage: Usage) -> KeyUsage:
        return self.config.usage if usage is None else KeyUsage.parse(usage)

    def export_public_key(self, key: Any, usage: Usage = None) -> bytes:
        """Exports a public key (or the public half of a private key)."""
        return self.encoder.encode_public(to_public_key(key), self._usage(usage))

    def export_private_key(self, key: Any, usage: Usage = None) -> bytes:
        """Exports a private key."""
        return self.encoder.encode_private(to_private_key(key), self._usage(usage))

    def export_public_der(self, der: bytes, usage: Usage = None) -> bytes:
        """Exports a PKCS#1 or SubjectPublicKeyInfo DER public key."""
        return self.export_public_key(self.parser.parse_public_key(der), usage)

    def export_private_der(
        self,
        der: bytes,
        usage: Usage = None,
        passphrase: Passphrase = None
    ) -> bytes:
        """Exports a PKCS#1 or PKCS#8 DER private key."""
        key = self.parser.parse_private_key(der, passphrase)
        return self.export_private_key(key, usage)

    def export_public_pem(self, data: Union[bytes, str], usage: Usage = None) -> bytes:
        """Exports the public key in the first PEM block of data."""
        return self.export_public_key(self.parser.parse_public_key_pem(data), usage)

    def export_private_pem(
        self,
        data: Union[bytes, str],
        usage: Usage = None,
        passphrase: Passphrase = None
    ) -> bytes:
        """Exports the private key in the first PEM block of data."""
        key = self.parser.parse_private_key_pem(data, passphrase)
        return self.export_private_key(key, usage)

    def render(self, blob: bytes) -> Union[bytes, str]:
        """Renders a blob using the configured output format."""
        return render(
            blob, self.config.output_format, per_line=self.config.c_array_per_line
        )

"""
keyblob - Convert RSA keys to Windows CryptoAPI key blobs.

Usage:
    >>> import keyblob
    >>>
    >>> key = keyblob.parse_public_key_pem(pem_bytes)
    >>> blob = keyblob.encode_public_key_blob(key, keyblob.KeyUsage.KEYX)
"""
import logging

from .core.blob import (
    AlgorithmId,
    BlobType,
    KeyUsage,
    Magic,
    OutputFormat,
    KeyBlobEncoder,
    encode_public_key_blob,
    encode_private_key_blob,
)
from .core.config import ExportConfig
from .core.crypto import CRTParameters, CRTParameterDeriver, FixedWidthIntegerCodec
from .core.exceptions import (
    KeyBlobError,
    PEMDecodeError,
    DecodeError,
    KeyTypeMismatch,
    InvalidUsage,
    EncodingOverflow,
    InvalidKeyMaterial,
)
from .core.keys import (
    RSAPublicKey,
    RSAPrivateKey,
    RSAKeyParser,
    parse_public_key,
    parse_private_key,
    parse_public_key_pem,
    parse_private_key_pem,
)
from .exporter import KeyBlobExporter

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for keyblob modules.

    Sets the level of the 'keyblob' logger and every logger already
    created below it, and attaches a console handler if the root logger
    has none.

    Args:
        level: Logging level (default: logging.INFO)
    """
    names = ['keyblob'] + [
        name for name in logging.root.manager.loggerDict
        if name.startswith('keyblob.')
    ]
    for name in names:
        logging.getLogger(name).setLevel(level)

    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=level,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )


__all__ = [
    # Values
    'RSAPublicKey',
    'RSAPrivateKey',
    'CRTParameters',
    # Constants
    'AlgorithmId',
    'BlobType',
    'KeyUsage',
    'Magic',
    'OutputFormat',
    # Services
    'RSAKeyParser',
    'KeyBlobEncoder',
    'CRTParameterDeriver',
    'FixedWidthIntegerCodec',
    'KeyBlobExporter',
    'ExportConfig',
    # Functions
    'parse_public_key',
    'parse_private_key',
    'parse_public_key_pem',
    'parse_private_key_pem',
    'encode_public_key_blob',
    'encode_private_key_blob',
    'setup_logging',
    # Errors
    'KeyBlobError',
    'PEMDecodeError',
    'DecodeError',
    'KeyTypeMismatch',
    'InvalidUsage',
    'EncodingOverflow',
    'InvalidKeyMaterial',
]

"""CryptoAPI key blob encoding."""
from .constants import (
    AlgorithmId,
    BlobType,
    CUR_BLOB_VERSION,
    HEADER_SIZE,
    KeyUsage,
    Magic,
    OutputFormat,
)
from .header import BlobHeader, RSAPubKey
from .encoder import KeyBlobEncoder, encode_public_key_blob, encode_private_key_blob
from .formatting import render, to_c_array, to_hex

__all__ = [
    'AlgorithmId',
    'BlobType',
    'CUR_BLOB_VERSION',
    'HEADER_SIZE',
    'KeyUsage',
    'Magic',
    'OutputFormat',
    'BlobHeader',
    'RSAPubKey',
    'KeyBlobEncoder',
    'encode_public_key_blob',
    'encode_private_key_blob',
    'render',
    'to_c_array',
    'to_hex',
]

"""Core building blocks: key parsing, CRT derivation and blob encoding."""
from .config import ExportConfig
from .exceptions import (
    KeyBlobError,
    PEMDecodeError,
    DecodeError,
    KeyTypeMismatch,
    InvalidUsage,
    EncodingOverflow,
    InvalidKeyMaterial,
)

__all__ = [
    'ExportConfig',
    'KeyBlobError',
    'PEMDecodeError',
    'DecodeError',
    'KeyTypeMismatch',
    'InvalidUsage',
    'EncodingOverflow',
    'InvalidKeyMaterial',
]

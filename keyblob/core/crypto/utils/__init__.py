"""Shared utilities for the crypto module."""
from .encoding import FixedWidthIntegerCodec, UINT32_MAX

__all__ = [
    'FixedWidthIntegerCodec',
    'UINT32_MAX',
]

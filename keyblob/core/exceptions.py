"""
Custom exceptions for key blob conversion.

This module defines exception classes raised while parsing RSA keys
and encoding them into CryptoAPI key blobs.
"""
from typing import Optional, Any


class KeyBlobError(Exception):
    """Base exception for all keyblob errors."""

    def __init__(self, message: str, error_code: Optional[int] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            error_code: Numeric error code (if available)
        """
        self.error_code = error_code
        super().__init__(message)


class PEMDecodeError(KeyBlobError):
    """Exception raised when no usable PEM block is found."""
    pass


class DecodeError(KeyBlobError):
    """Exception raised when DER data matches no supported key structure."""
    pass


class KeyTypeMismatch(KeyBlobError):
    """Exception raised when a decoded key is not an RSA key."""

    def __init__(
        self,
        message: str,
        key_type: Optional[str] = None,
        error_code: Optional[int] = None
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            key_type: Name of the key type that was found instead
            error_code: Numeric error code (if available)
        """
        self.key_type = key_type
        super().__init__(message, error_code)


class InvalidUsage(KeyBlobError, ValueError):
    """Exception raised for a key usage other than SIGN or KEYX."""

    def __init__(self, usage: Any, error_code: Optional[int] = None) -> None:
        self.usage = usage
        super().__init__(f"invalid rsa key usage: {usage!r}", error_code)


class EncodingOverflow(KeyBlobError):
    """Exception raised when a value does not fit its fixed-width field."""

    def __init__(
        self,
        message: str,
        width: Optional[int] = None,
        error_code: Optional[int] = None
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            width: Field width in bytes that was exceeded
            error_code: Numeric error code (if available)
        """
        self.width = width
        super().__init__(message, error_code)


class InvalidKeyMaterial(KeyBlobError):
    """Exception raised when private key components are inconsistent."""
    pass

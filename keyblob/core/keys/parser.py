"""RSA key parser for PEM and DER encoded keys.

Both key kinds are read with the same two-step fallback: the raw PKCS#1
structure is tried first, then the wrapped form (SubjectPublicKeyInfo for
public keys, PKCS#8 PrivateKeyInfo for private keys).
"""
import re
from typing import Optional, Tuple, Union

from Crypto.IO import PEM
from Crypto.Util.asn1 import DerSequence
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from ..exceptions import DecodeError, KeyTypeMismatch, PEMDecodeError
from ..logging import get_logger
from .models import RSAPrivateKey, RSAPublicKey

logger = get_logger(__name__)

_PEM_BLOCK = re.compile(
    r"-----BEGIN ([^-\r\n]+)-----.*?-----END \1-----",
    re.DOTALL
)

_HEADER_LINE = re.compile(r"^([A-Za-z0-9-]+):")

# Headers PEM.decode reads itself
_ENCRYPTION_HEADERS = ('Proc-Type', 'DEK-Info')

Passphrase = Optional[Union[str, bytes]]


def _drop_headers(block: str) -> str:
    """Remove RFC 1421 header lines other than the encryption headers."""
    lines = block.splitlines()
    kept = lines[:1]
    index = 1
    while index < len(lines) - 1:
        match = _HEADER_LINE.match(lines[index])
        if match is None:
            break
        if match.group(1) in _ENCRYPTION_HEADERS:
            kept.append(lines[index])
        index += 1
        # folded continuation lines
        while index < len(lines) - 1 and lines[index][:1] in (' ', '\t'):
            index += 1
    kept.extend(lines[index:])
    return '\n'.join(kept)


def _to_bytes(passphrase: Passphrase) -> Optional[bytes]:
    if passphrase is None or isinstance(passphrase, bytes):
        return passphrase
    return passphrase.encode('utf-8')


class RSAKeyParser:
    """Decodes RSA keys from ASN.1 DER and PEM data."""

    @staticmethod
    def decode_pem(data: Union[bytes, str], passphrase: Passphrase = None) -> bytes:
        """Decode the first PEM block found in data into DER bytes."""
        return RSAKeyParser._decode_pem_block(data, passphrase)[0]

    @staticmethod
    def _decode_pem_block(
        data: Union[bytes, str],
        passphrase: Passphrase = None
    ) -> Tuple[bytes, bool]:
        """
        Decode the first PEM block found in data.

        Text around the block is ignored. Legacy OpenSSL encrypted blocks
        are decrypted when a passphrase is given.

        Args:
            data: PEM text
            passphrase: Password for encrypted PEM blocks

        Returns:
            DER bytes of the block and whether it was encrypted

        Raises:
            PEMDecodeError: If no block is found or it cannot be decoded
        """
        if isinstance(data, (bytes, bytearray)):
            text = bytes(data).decode('latin-1')
        else:
            text = data

        match = _PEM_BLOCK.search(text)
        if match is None:
            raise PEMDecodeError("failed to decode PEM data")

        try:
            der, marker, encrypted = PEM.decode(
                _drop_headers(match.group(0)), _to_bytes(passphrase)
            )
        except (ValueError, TypeError) as exc:
            raise PEMDecodeError(f"failed to decode PEM data: {exc}") from exc

        logger.debug(
            "Decoded PEM block %r (%d bytes, encrypted=%s)", marker, len(der), encrypted
        )
        return der, bool(encrypted)

    @staticmethod
    def decode_pkcs1_public(der: bytes) -> RSAPublicKey:
        """Decodes a PKCS#1 RSAPublicKey: SEQUENCE { n, e }."""
        seq = DerSequence().decode(der, nr_elements=2, only_ints_expected=True)
        return RSAPublicKey(n=seq[0], e=seq[1])

    @staticmethod
    def decode_pkcs1_private(der: bytes) -> RSAPrivateKey:
        """Decodes a two-prime PKCS#1 RSAPrivateKey (version 0)."""
        seq = DerSequence().decode(der, nr_elements=9, only_ints_expected=True)
        if seq[0] != 0:
            raise ValueError("No PKCS#1 encoding of a two-prime RSA private key")
        # version, n, e, d, p, q, dp, dq, qinv
        return RSAPrivateKey(n=seq[1], e=seq[2], d=seq[3], p=seq[4], q=seq[5])

    @staticmethod
    def parse_public_key(der: bytes) -> RSAPublicKey:
        """
        Parse an RSA public key from DER data.

        Raises:
            DecodeError: If the data is neither PKCS#1 nor SubjectPublicKeyInfo
            KeyTypeMismatch: If the SubjectPublicKeyInfo is not an RSA key
        """
        der = bytes(der)
        try:
            key = RSAKeyParser.decode_pkcs1_public(der)
            logger.debug("Parsed PKCS#1 RSA public key")
            return key
        except ValueError as exc:
            logger.debug("Not a PKCS#1 public key (%s), trying SubjectPublicKeyInfo", exc)

        try:
            wrapped = serialization.load_der_public_key(der)
        except UnsupportedAlgorithm as exc:
            raise KeyTypeMismatch(
                "invalid public key type", key_type=str(exc)
            ) from exc
        except ValueError as exc:
            raise DecodeError(f"failed to parse public key: {exc}") from exc

        if not isinstance(wrapped, rsa.RSAPublicKey):
            raise KeyTypeMismatch(
                "invalid public key type", key_type=type(wrapped).__name__
            )
        logger.debug("Parsed SubjectPublicKeyInfo RSA public key")
        return RSAPublicKey.from_cryptography(wrapped)

    @staticmethod
    def parse_private_key(der: bytes, passphrase: Passphrase = None) -> RSAPrivateKey:
        """
        Parse an RSA private key from DER data.

        Args:
            der: PKCS#1 RSAPrivateKey or PKCS#8 PrivateKeyInfo bytes
            passphrase: Password for EncryptedPrivateKeyInfo data

        Raises:
            DecodeError: If the data is neither PKCS#1 nor PKCS#8, or is
                encrypted and cannot be decrypted
            KeyTypeMismatch: If the PKCS#8 key is not an RSA key
        """
        der = bytes(der)
        try:
            key = RSAKeyParser.decode_pkcs1_private(der)
            logger.debug("Parsed PKCS#1 RSA private key")
            return key
        except ValueError as exc:
            logger.debug("Not a PKCS#1 private key (%s), trying PKCS#8", exc)

        password = _to_bytes(passphrase)
        try:
            try:
                wrapped = serialization.load_der_private_key(der, password=password)
            except TypeError:
                # Password given for an unencrypted PrivateKeyInfo
                if password is None:
                    raise
                wrapped = serialization.load_der_private_key(der, password=None)
        except UnsupportedAlgorithm as exc:
            raise KeyTypeMismatch(
                "invalid private key type", key_type=str(exc)
            ) from exc
        except (ValueError, TypeError) as exc:
            raise DecodeError(f"failed to parse private key: {exc}") from exc

        if not isinstance(wrapped, rsa.RSAPrivateKey):
            raise KeyTypeMismatch(
                "invalid private key type", key_type=type(wrapped).__name__
            )
        logger.debug("Parsed PKCS#8 RSA private key")
        return RSAPrivateKey.from_cryptography(wrapped)

    @staticmethod
    def parse_public_key_pem(data: Union[bytes, str]) -> RSAPublicKey:
        """Parse an RSA public key from the first PEM block in data."""
        return RSAKeyParser.parse_public_key(RSAKeyParser.decode_pem(data))

    @staticmethod
    def parse_private_key_pem(
        data: Union[bytes, str],
        passphrase: Passphrase = None
    ) -> RSAPrivateKey:
        """Parse an RSA private key from the first PEM block in data."""
        der, encrypted = RSAKeyParser._decode_pem_block(data, passphrase)
        # A decrypted legacy PEM block holds plain DER
        return RSAKeyParser.parse_private_key(der, None if encrypted else passphrase)


parse_public_key = RSAKeyParser.parse_public_key
parse_private_key = RSAKeyParser.parse_private_key
parse_public_key_pem = RSAKeyParser.parse_public_key_pem
parse_private_key_pem = RSAKeyParser.parse_private_key_pem

"""RSA key values and the PEM/DER key parser."""
from .models import RSAPublicKey, RSAPrivateKey, to_public_key, to_private_key
from .parser import (
    RSAKeyParser,
    parse_public_key,
    parse_private_key,
    parse_public_key_pem,
    parse_private_key_pem,
)

__all__ = [
    'RSAPublicKey',
    'RSAPrivateKey',
    'to_public_key',
    'to_private_key',
    'RSAKeyParser',
    'parse_public_key',
    'parse_private_key',
    'parse_public_key_pem',
    'parse_private_key_pem',
]

"""
Canonical RSA key values.

Every input (PEM, DER, pycryptodome keys, pyca/cryptography keys) is
reduced to one of these immutable values before blob encoding.
"""
from dataclasses import dataclass
from typing import Any

from Crypto.PublicKey.RSA import RsaKey
from Crypto.Util.number import ceil_div, size
from cryptography.hazmat.primitives.asymmetric import rsa

from ..crypto.crt import CRTParameters, CRTParameterDeriver
from ..exceptions import EncodingOverflow, InvalidKeyMaterial, KeyTypeMismatch


@dataclass(frozen=True)
class RSAPublicKey:
    """RSA public key: modulus and public exponent."""
    n: int
    e: int

    def __post_init__(self):
        if self.n <= 0:
            raise InvalidKeyMaterial("modulus must be positive")
        if self.e <= 0:
            raise InvalidKeyMaterial("public exponent must be positive")

    @property
    def bit_length(self) -> int:
        """Bit length of the modulus."""
        return size(self.n)

    @property
    def byte_length(self) -> int:
        """Byte length of the modulus; the width of modulus-sized fields."""
        return ceil_div(self.bit_length, 8)

    @classmethod
    def from_pycryptodome(cls, key: RsaKey) -> 'RSAPublicKey':
        """Builds a public key from a pycryptodome RsaKey."""
        return cls(n=int(key.n), e=int(key.e))

    @classmethod
    def from_cryptography(cls, key: Any) -> 'RSAPublicKey':
        """Builds a public key from a pyca/cryptography RSA key."""
        if isinstance(key, rsa.RSAPrivateKey):
            key = key.public_key()
        if not isinstance(key, rsa.RSAPublicKey):
            raise KeyTypeMismatch(
                "invalid public key type", key_type=type(key).__name__
            )
        numbers = key.public_numbers()
        return cls(n=numbers.n, e=numbers.e)


@dataclass(frozen=True)
class RSAPrivateKey:
    """RSA private key with its two prime factors.

    CRT values are not stored; they are always derived from d, p and q.
    """
    n: int
    e: int
    d: int
    p: int
    q: int

    def __post_init__(self):
        if self.n <= 0:
            raise InvalidKeyMaterial("modulus must be positive")
        if self.e <= 0:
            raise InvalidKeyMaterial("public exponent must be positive")
        if self.d <= 0:
            raise InvalidKeyMaterial("private exponent must be positive")
        if self.p * self.q != self.n:
            raise InvalidKeyMaterial("modulus is not the product of p and q")

    @property
    def public_key(self) -> RSAPublicKey:
        return RSAPublicKey(n=self.n, e=self.e)

    @property
    def bit_length(self) -> int:
        return size(self.n)

    @property
    def byte_length(self) -> int:
        return ceil_div(self.bit_length, 8)

    @property
    def half_length(self) -> int:
        """
        Width of the prime-sized fields (p, q, dP, dQ, qInv).

        Raises:
            EncodingOverflow: If the modulus byte length is odd
        """
        length = self.byte_length
        if length % 2:
            raise EncodingOverflow(
                f"modulus byte length {length} is odd and cannot be split "
                f"between p and q",
                width=length
            )
        return length // 2

    def crt_parameters(self) -> CRTParameters:
        """Derives dP, dQ and qInv."""
        return CRTParameterDeriver.derive(self.d, self.p, self.q)

    @classmethod
    def from_pycryptodome(cls, key: RsaKey) -> 'RSAPrivateKey':
        """Builds a private key from a pycryptodome RsaKey."""
        if not key.has_private():
            raise KeyTypeMismatch("RSA key has no private part", key_type='RsaKey')
        return cls(
            n=int(key.n), e=int(key.e), d=int(key.d), p=int(key.p), q=int(key.q)
        )

    @classmethod
    def from_cryptography(cls, key: Any) -> 'RSAPrivateKey':
        """Builds a private key from a pyca/cryptography RSA private key."""
        if not isinstance(key, rsa.RSAPrivateKey):
            raise KeyTypeMismatch(
                "invalid private key type", key_type=type(key).__name__
            )
        numbers = key.private_numbers()
        return cls(
            n=numbers.public_numbers.n,
            e=numbers.public_numbers.e,
            d=numbers.d,
            p=numbers.p,
            q=numbers.q,
        )


def to_public_key(key: Any) -> RSAPublicKey:
    """Converts any supported key object into an RSAPublicKey."""
    if isinstance(key, RSAPublicKey):
        return key
    if isinstance(key, RSAPrivateKey):
        return key.public_key
    if isinstance(key, RsaKey):
        return RSAPublicKey.from_pycryptodome(key)
    return RSAPublicKey.from_cryptography(key)


def to_private_key(key: Any) -> RSAPrivateKey:
    """Converts any supported private key object into an RSAPrivateKey."""
    if isinstance(key, RSAPrivateKey):
        return key
    if isinstance(key, RSAPublicKey):
        raise KeyTypeMismatch("RSA key has no private part", key_type='RSAPublicKey')
    if isinstance(key, RsaKey):
        return RSAPrivateKey.from_pycryptodome(key)
    return RSAPrivateKey.from_cryptography(key)

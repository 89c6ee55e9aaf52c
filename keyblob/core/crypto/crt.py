"""CRT parameter derivation for RSA private keys."""
from dataclasses import dataclass

from Crypto.Util.number import inverse

from ..exceptions import InvalidKeyMaterial
from ..logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CRTParameters:
    """Chinese Remainder Theorem values of an RSA private key."""
    dp: int  # d mod (p - 1)
    dq: int  # d mod (q - 1)
    qinv: int  # q^-1 mod p


class CRTParameterDeriver:
    """Computes dP, dQ and qInv from the private exponent and the primes."""

    @staticmethod
    def derive(d: int, p: int, q: int) -> CRTParameters:
        """
        Derive the CRT parameters.

        Args:
            d: Private exponent
            p: First prime factor
            q: Second prime factor

        Returns:
            CRTParameters with dp, dq and qinv

        Raises:
            InvalidKeyMaterial: If a prime is not greater than one or
                q has no inverse modulo p
        """
        if p <= 1 or q <= 1:
            raise InvalidKeyMaterial("prime factors must be greater than one")
        if d < 0:
            raise InvalidKeyMaterial("private exponent must not be negative")

        dp = d % (p - 1)
        dq = d % (q - 1)
        try:
            qinv = inverse(q, p)
        except ValueError as exc:
            raise InvalidKeyMaterial("q has no inverse modulo p") from exc

        # inverse() does not raise on every pycryptodome release
        if (q * qinv) % p != 1:
            raise InvalidKeyMaterial("q has no inverse modulo p")

        logger.debug("Derived CRT parameters for %d-bit primes", max(p, q).bit_length())
        return CRTParameters(dp=dp, dq=dq, qinv=qinv)

"""CryptoAPI PUBLICKEYBLOB / PRIVATEKEYBLOB encoder."""
from typing import Any, Union

from ..crypto.utils import FixedWidthIntegerCodec
from ..keys.models import to_private_key, to_public_key
from ..logging import get_logger
from .constants import BlobType, KeyUsage, Magic
from .header import BlobHeader, RSAPubKey

logger = get_logger(__name__)

Usage = Union[KeyUsage, int, str]


class KeyBlobEncoder:
    """
    Builds key blobs from RSA keys.

    A blob is BLOBHEADER, RSAPUBKEY and then the key integers, each
    little-endian in a fixed width derived from the modulus size:

    - public:  modulus (L)
    - private: modulus (L), p, q, dP, dQ, qInv (L/2 each), d (L)
    """

    def __init__(self, codec: FixedWidthIntegerCodec = None):
        """Initializes the encoder."""
        self.codec = codec or FixedWidthIntegerCodec()

    def _headers(
        self,
        blob_type: BlobType,
        magic: Magic,
        usage: KeyUsage,
        byte_length: int,
        public_exponent: int
    ) -> bytes:
        header = BlobHeader(blob_type=blob_type, algorithm_id=usage.algorithm_id)
        pub_key = RSAPubKey(
            magic=magic,
            bit_length=byte_length * 8,
            public_exponent=public_exponent
        )
        return header.to_bytes() + pub_key.to_bytes()

    def encode_public(self, key: Any, usage: Usage) -> bytes:
        """
        Encode a PUBLICKEYBLOB.

        Args:
            key: RSAPublicKey or any key accepted by to_public_key
            usage: KeyUsage.SIGN or KeyUsage.KEYX

        Returns:
            Blob bytes, 20 + L long

        Raises:
            InvalidUsage: If usage is not SIGN or KEYX
            EncodingOverflow: If the exponent does not fit in 32 bits
        """
        usage = KeyUsage.parse(usage)
        key = to_public_key(key)
        length = key.byte_length

        buffer = bytearray(self._headers(
            BlobType.PUBLICKEYBLOB, Magic.RSA1, usage, length, key.e
        ))
        buffer += self.codec.encode(key.n, length)

        logger.debug("Encoded %d-bit PUBLICKEYBLOB (%s), %d bytes",
                     length * 8, usage.name, len(buffer))
        return bytes(buffer)

    def encode_private(self, key: Any, usage: Usage) -> bytes:
        """
        Encode a PRIVATEKEYBLOB.

        Args:
            key: RSAPrivateKey or any key accepted by to_private_key
            usage: KeyUsage.SIGN or KeyUsage.KEYX

        Returns:
            Blob bytes, 20 + 2L + 5(L/2) long

        Raises:
            InvalidUsage: If usage is not SIGN or KEYX
            EncodingOverflow: If the modulus byte length is odd or a
                value does not fit its field
            InvalidKeyMaterial: If the CRT parameters cannot be derived
        """
        usage = KeyUsage.parse(usage)
        key = to_private_key(key)
        length = key.byte_length
        half = key.half_length
        crt = key.crt_parameters()

        buffer = bytearray(self._headers(
            BlobType.PRIVATEKEYBLOB, Magic.RSA2, usage, length, key.e
        ))
        for value, width in (
            (key.n, length),
            (key.p, half),
            (key.q, half),
            (crt.dp, half),
            (crt.dq, half),
            (crt.qinv, half),
            (key.d, length),
        ):
            buffer += self.codec.encode(value, width)

        logger.debug("Encoded %d-bit PRIVATEKEYBLOB (%s), %d bytes",
                     length * 8, usage.name, len(buffer))
        return bytes(buffer)


_encoder = KeyBlobEncoder()


def encode_public_key_blob(key: Any, usage: Usage) -> bytes:
    """Encodes key as a PUBLICKEYBLOB."""
    return _encoder.encode_public(key, usage)


def encode_private_key_blob(key: Any, usage: Usage) -> bytes:
    """Encodes key as a PRIVATEKEYBLOB."""
    return _encoder.encode_private(key, usage)

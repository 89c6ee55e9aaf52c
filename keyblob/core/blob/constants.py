"""
CryptoAPI key blob constants.

Values come from the Windows CryptoAPI documentation:
- ALG_ID: https://learn.microsoft.com/en-us/windows/win32/seccrypto/alg-id
- RSA/Schannel key blobs:
  https://learn.microsoft.com/en-us/windows/win32/seccrypto/rsa-schannel-key-blobs
"""
from enum import Enum, IntEnum
from typing import Union

from ..exceptions import InvalidUsage

CUR_BLOB_VERSION = 0x02

# BLOBHEADER (8 bytes) + RSAPUBKEY (12 bytes)
HEADER_SIZE = 20


class BlobType(IntEnum):
    """bType values of BLOBHEADER."""
    PUBLICKEYBLOB = 0x06
    PRIVATEKEYBLOB = 0x07


class AlgorithmId(IntEnum):
    """aiKeyAlg values for RSA keys."""
    CALG_RSA_SIGN = 0x00002400
    CALG_RSA_KEYX = 0x0000A400


class Magic(IntEnum):
    """RSAPUBKEY magic values ("RSA1" / "RSA2" read little-endian)."""
    RSA1 = 0x31415352
    RSA2 = 0x32415352


class KeyUsage(IntEnum):
    """What the exported key is meant for; not derivable from the key itself."""
    SIGN = 1
    KEYX = 2

    @property
    def algorithm_id(self) -> AlgorithmId:
        """Returns the ALG_ID written into the blob header."""
        return _USAGE_ALGORITHMS[self]

    @classmethod
    def parse(cls, usage: Union['KeyUsage', int, str]) -> 'KeyUsage':
        """
        Resolve a caller-supplied usage.

        Accepts members, their integer values and case-insensitive names.

        Raises:
            InvalidUsage: For anything that is not SIGN or KEYX
        """
        if isinstance(usage, cls):
            return usage
        if isinstance(usage, str):
            try:
                return cls[usage.strip().upper()]
            except KeyError:
                raise InvalidUsage(usage) from None
        if isinstance(usage, int) and not isinstance(usage, bool):
            try:
                return cls(usage)
            except ValueError:
                raise InvalidUsage(usage) from None
        raise InvalidUsage(usage)


_USAGE_ALGORITHMS = {
    KeyUsage.SIGN: AlgorithmId.CALG_RSA_SIGN,
    KeyUsage.KEYX: AlgorithmId.CALG_RSA_KEYX,
}


class OutputFormat(str, Enum):
    """How an encoded blob is rendered for output."""
    RAW = 'raw'
    HEX = 'hex'
    C_ARRAY = 'c-array'

"""BLOBHEADER and RSAPUBKEY structures."""
import struct
from dataclasses import dataclass

from ..crypto.utils import FixedWidthIntegerCodec
from .constants import AlgorithmId, BlobType, CUR_BLOB_VERSION, Magic

_BLOB_HEADER = struct.Struct('<BBHI')


@dataclass(frozen=True)
class BlobHeader:
    """
    Leading 8 bytes of every key blob.

    Layout (little-endian):
    - bType: blob type tag
    - bVersion: always CUR_BLOB_VERSION
    - reserved: two zero bytes
    - aiKeyAlg: algorithm identifier
    """
    blob_type: BlobType
    algorithm_id: AlgorithmId
    version: int = CUR_BLOB_VERSION
    reserved: int = 0

    def to_bytes(self) -> bytes:
        """Packs the header."""
        return _BLOB_HEADER.pack(
            self.blob_type, self.version, self.reserved, self.algorithm_id
        )


@dataclass(frozen=True)
class RSAPubKey:
    """RSAPUBKEY: magic, modulus bit length and public exponent."""
    magic: Magic
    bit_length: int
    public_exponent: int

    def to_bytes(self) -> bytes:
        """Packs the structure, rejecting values wider than 32 bits."""
        return b"".join(
            FixedWidthIntegerCodec.encode_uint32(value)
            for value in (self.magic, self.bit_length, self.public_exponent)
        )

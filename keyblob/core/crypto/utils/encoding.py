"""Fixed-width little-endian integer encoding."""
import struct

from Crypto.Util.number import ceil_div, size

from ...exceptions import EncodingOverflow

UINT32_MAX = 0xFFFFFFFF


class FixedWidthIntegerCodec:
    """Encodes non-negative integers into exact-width little-endian fields.

    Key blobs store every big integer as its magnitude in reversed
    (least significant first) byte order, padded with zeros up to the
    width of the field.
    """

    @staticmethod
    def byte_length(value: int) -> int:
        """Returns the number of bytes needed for the magnitude of value."""
        return ceil_div(size(value), 8) if value else 0

    @staticmethod
    def encode(value: int, width: int) -> bytes:
        """Encodes value into exactly width bytes, least significant first."""
        if width < 0:
            raise EncodingOverflow(f"negative field width: {width}", width=width)
        if value < 0:
            raise EncodingOverflow("cannot encode a negative integer", width=width)
        try:
            big_endian = value.to_bytes(width, byteorder='big')
        except OverflowError as exc:
            raise EncodingOverflow(
                f"integer of {FixedWidthIntegerCodec.byte_length(value)} bytes "
                f"does not fit in a {width}-byte field",
                width=width
            ) from exc
        return big_endian[::-1]

    @staticmethod
    def decode(field: bytes) -> int:
        """Decodes a little-endian field back into an integer."""
        return int.from_bytes(bytes(field)[::-1], byteorder='big')

    @staticmethod
    def encode_uint32(value: int) -> bytes:
        """Encodes a scalar header field as 4 little-endian bytes."""
        if not 0 <= value <= UINT32_MAX:
            raise EncodingOverflow(
                f"value {value} does not fit in a 4-byte field", width=4
            )
        return struct.pack('<I', value)

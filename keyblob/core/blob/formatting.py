"""Text renderings of encoded key blobs."""
from typing import Union

from .constants import OutputFormat


def to_hex(blob: bytes) -> str:
    """Returns the blob as lowercase hex without separators."""
    return bytes(blob).hex()


def to_c_array(blob: bytes, per_line: int = 16, indent: int = 4) -> str:
    """
    Render the blob as the body of a C byte array.

    Example:
        >>> print(to_c_array(b"\\x06\\x02\\x00\\x00"))
            0x06, 0x02, 0x00, 0x00
    """
    if per_line < 1:
        raise ValueError("per_line must be at least 1")
    pad = " " * indent
    lines = []
    for start in range(0, len(blob), per_line):
        chunk = blob[start:start + per_line]
        lines.append(pad + ", ".join(f"0x{b:02X}" for b in chunk))
    return ",\n".join(lines)


def render(
    blob: bytes,
    output_format: Union[OutputFormat, str],
    per_line: int = 16
) -> Union[bytes, str]:
    """Renders the blob in the requested format; RAW returns bytes."""
    output_format = OutputFormat(output_format)
    if output_format is OutputFormat.RAW:
        return bytes(blob)
    if output_format is OutputFormat.HEX:
        return to_hex(blob)
    return to_c_array(blob, per_line=per_line)

from typing import Tuple

from hufftext.codec.errors import TreeFormatError


def encode_uvarint(n: int) -> bytes:
    """
    Unsigned varint (LEB128 style), 7 bits per byte, low group first.
    Code points and frequencies below 128 take one byte.
    """
    if n < 0:
        raise ValueError("uvarint cannot be negative")

    out = bytearray()
    while n >= 0x80:
        out.append((n & 0x7F) | 0x80)
        n >>= 7
    out.append(n)
    return bytes(out)


def decode_uvarint(data: bytes, offset: int = 0) -> Tuple[int, int]:
    """
    Returns (value, new_offset). At most 10 bytes (64-bit values).
    """
    result = 0
    for k, i in enumerate(range(offset, min(len(data), offset + 10))):
        b = data[i]
        result |= (b & 0x7F) << (7 * k)
        if not b & 0x80:
            return result, i + 1

    if len(data) - offset >= 10:
        raise TreeFormatError("uvarint too large")
    raise TreeFormatError("uvarint truncated")
